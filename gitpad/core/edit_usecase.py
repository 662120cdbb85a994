"""Edit use case: let a native editor edit a commit message.

The pipeline:
1. Read the message file git handed us
2. Write a transient copy with the editor's native line endings
3. Launch the default editor (falling back to a known editor once)
4. Wait for the editor to exit, or for the user to confirm when the editor
   gave us nothing to wait on
5. Write the edited text back with POSIX line endings
6. Delete the transient copy, whatever happened above
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from gitpad.core.use_case_errors import (
    FAILURE_EXIT_CODE,
    format_error_message,
    log_use_case_error,
)
from gitpad.domain.entities import EditSession
from gitpad.domain.exceptions import EditAborted, EditorNonZeroExit, ProcessLaunchError
from gitpad.domain.line_endings import LineEndingType, decode, encode
from gitpad.ports.editor import EditorLauncher, LaunchResult, Waitable
from gitpad.ports.fs import FileSystem
from gitpad.ports.ui import UserInterface

logger = logging.getLogger(__name__)

TRANSIENT_PREFIX = "COMMIT_EDITMSG-"
TRANSIENT_SUFFIX = ".txt"

CONFIRMATION_PROMPT = (
    "Press enter when you're done editing your commit message, or CTRL+C to abort"
)


@dataclass
class EditRequest:
    """Request to edit one file.

    Attributes:
        source_path: File to edit in place.
    """

    source_path: Path


@dataclass
class EditResult:
    """Result of an edit.

    Attributes:
        exit_code: 0 on success, the editor's status if it failed, -1 otherwise.
        session: Session state at the end of the pipeline.
        error: Diagnostic shown to the user, None on success.
    """

    exit_code: int
    session: EditSession
    error: str | None = None

    @property
    def success(self) -> bool:
        """True if the edited text was written back."""
        return self.exit_code == 0


class EditUseCase:
    """Runs the edit pipeline for a single file.

    Every collaborator that touches the OS is injected, so the pipeline can be
    exercised end to end with fakes.
    """

    def __init__(
        self,
        fs: FileSystem,
        launcher: EditorLauncher,
        fallback_launcher: EditorLauncher,
        ui: UserInterface,
        editor_line_ending: LineEndingType | None = None,
        emit_bom: bool = True,
        transient_dir: Path | None = None,
    ) -> None:
        """Initialize the edit use case.

        Args:
            fs: File system adapter.
            launcher: Opens the file with the platform's default handler.
            fallback_launcher: Explicit editor tried once if launcher fails.
            ui: Console/dialog adapter.
            editor_line_ending: Line ending for the transient file
                (default: native for this platform).
            emit_bom: Prefix the transient file with a UTF-8 byte order mark.
            transient_dir: Directory for the transient file (default: system temp).
        """
        self._fs = fs
        self._launcher = launcher
        self._fallback_launcher = fallback_launcher
        self._ui = ui
        self._editor_line_ending = editor_line_ending or LineEndingType.native()
        self._emit_bom = emit_bom
        self._transient_dir = transient_dir

    def run(self, source_path: Path) -> int:
        """Edit source_path and return the process exit code."""
        return self.execute(EditRequest(source_path=source_path)).exit_code

    def execute(self, request: EditRequest) -> EditResult:
        """Execute the edit pipeline.

        Args:
            request: Edit request with the file to edit.

        Returns:
            EditResult with the exit code and final session state.
        """
        session = EditSession(source_path=request.source_path)
        try:
            self._prepare_transient(session)
            launch = self._launch(session.transient_path)
            self._wait(launch)
            self._write_back(session)
            logger.debug(f"Wrote edited message back to {session.source_path}")
            return EditResult(exit_code=0, session=session)

        except EditorNonZeroExit as e:
            self._ui.report_error(e.message)
            logger.info(f"Editor failed with status {e.exit_code}, message unchanged")
            return EditResult(exit_code=e.exit_code, session=session, error=e.message)

        except (KeyboardInterrupt, SystemExit):
            raise

        except Exception as e:
            log_use_case_error(e, "edit")
            error_msg = format_error_message(e, "edit")
            self._ui.report_error(error_msg)
            return EditResult(exit_code=FAILURE_EXIT_CODE, session=session, error=error_msg)

        finally:
            self._cleanup(session)

    def _prepare_transient(self, session: EditSession) -> None:
        """Read the source file and write the editor-facing copy."""
        session.original_content = decode(self._fs.read(session.source_path))

        session.transient_path = self._fs.create_transient(
            self._transient_dir, TRANSIENT_PREFIX, TRANSIENT_SUFFIX
        )
        logger.debug(f"Transient file: {session.transient_path}")

        self._fs.write(
            session.transient_path,
            encode(session.original_content, self._editor_line_ending, bom=self._emit_bom),
        )

    def _launch(self, path: Path) -> LaunchResult:
        """Launch the default editor, falling back once to the explicit editor."""
        try:
            result = self._launcher.launch(path)
            logger.debug(f"Launched {self._launcher.name}")
            return result
        except ProcessLaunchError as e:
            logger.warning("Default editor launch failed: %s", e.message)
            self._ui.report_error(
                "Could not launch the default text editor, falling back to "
                f"{self._fallback_launcher.name}."
            )

        result = self._fallback_launcher.launch(path)
        logger.debug(f"Launched fallback {self._fallback_launcher.name}")
        return result

    def _wait(self, launch: LaunchResult) -> None:
        """Block until editing is finished.

        Raises:
            EditorNonZeroExit: If the editor process reported failure.
            EditAborted: If the user interrupted the confirmation gate.
        """
        if isinstance(launch, Waitable):
            exit_code = launch.handle.wait()
            logger.debug(f"Editor exited with status {exit_code}")
            if exit_code != 0:
                raise EditorNonZeroExit(exit_code)
            return

        # Editors that reuse a running instance give us no process to block on
        try:
            self._ui.wait_for_confirmation(CONFIRMATION_PROMPT)
        except (KeyboardInterrupt, EOFError):
            raise EditAborted(
                "Edit aborted", hint="The commit message was left unchanged"
            ) from None

    def _write_back(self, session: EditSession) -> None:
        """Read the edited copy and overwrite the source with POSIX endings."""
        session.edited_content = decode(self._fs.read(session.transient_path))
        self._fs.write(
            session.source_path,
            encode(session.edited_content, LineEndingType.POSIX, bom=False),
        )

    def _cleanup(self, session: EditSession) -> None:
        """Delete the transient file if it was created."""
        path = session.transient_path
        if path is None or not self._fs.exists(path):
            return
        try:
            self._fs.delete(path)
            logger.debug(f"Deleted transient file {path}")
        except OSError as e:
            logger.warning("Could not delete transient file %s: %s", path, e)
            self._ui.report_error(f"Could not delete temporary file {path}: {e}")
