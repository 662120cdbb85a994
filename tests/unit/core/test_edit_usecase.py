"""Unit tests for the edit use case."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gitpad.adapters.fs.local import LocalFileSystem
from gitpad.core.edit_usecase import (
    CONFIRMATION_PROMPT,
    TRANSIENT_PREFIX,
    EditRequest,
    EditUseCase,
)
from gitpad.domain.line_endings import UTF8_BOM, LineEndingType
from tests.helpers.fakes import FakeLauncher, FakeUserInterface


def make_usecase(
    transient_dir: Path,
    launcher: FakeLauncher | None = None,
    fallback: FakeLauncher | None = None,
    ui: FakeUserInterface | None = None,
    fs=None,
    emit_bom: bool = True,
    line_ending: LineEndingType = LineEndingType.WINDOWS,
) -> EditUseCase:
    """Build an EditUseCase wired to fakes."""
    return EditUseCase(
        fs=fs or LocalFileSystem(),
        launcher=launcher or FakeLauncher(),
        fallback_launcher=fallback or FakeLauncher(name="fallback"),
        ui=ui or FakeUserInterface(),
        editor_line_ending=line_ending,
        emit_bom=emit_bom,
        transient_dir=transient_dir,
    )


class TestSuccessfulEdit:
    """Tests for the happy path."""

    def test_noop_editor_leaves_posix_normalized_file(
        self, commit_msg: Path, transient_dir: Path
    ) -> None:
        """Should write back the POSIX form and delete the transient file."""
        launcher = FakeLauncher()
        usecase = make_usecase(transient_dir, launcher=launcher)

        exit_code = usecase.run(commit_msg)

        assert exit_code == 0
        assert commit_msg.read_bytes() == b"fix bug\n\nSigned-off-by: x\n"
        assert launcher.handle is not None and launcher.handle.waited
        assert list(transient_dir.iterdir()) == []

    def test_transient_file_uses_editor_line_endings_and_bom(
        self, commit_msg: Path, transient_dir: Path
    ) -> None:
        """Should hand the editor CRLF text with a BOM."""
        launcher = FakeLauncher()
        usecase = make_usecase(transient_dir, launcher=launcher)

        usecase.run(commit_msg)

        assert launcher.seen_content == [UTF8_BOM + b"fix bug\r\n\r\nSigned-off-by: x\r\n"]
        transient = launcher.launched[0]
        assert transient.parent == transient_dir
        assert transient.name.startswith(TRANSIENT_PREFIX)
        assert transient.suffix == ".txt"

    def test_bom_can_be_disabled(self, commit_msg: Path, transient_dir: Path) -> None:
        """Should omit the BOM when emit_bom is False."""
        launcher = FakeLauncher()
        usecase = make_usecase(transient_dir, launcher=launcher, emit_bom=False)

        usecase.run(commit_msg)

        assert not launcher.seen_content[0].startswith(UTF8_BOM)

    def test_edits_are_written_back_with_lf_and_no_bom(
        self, commit_msg: Path, transient_dir: Path
    ) -> None:
        """Should convert the editor's CRLF output back to LF without a BOM."""

        def edit(path: Path) -> None:
            path.write_bytes(UTF8_BOM + b"fix crash\r\n\r\nSigned-off-by: x\r\n")

        usecase = make_usecase(transient_dir, launcher=FakeLauncher(edit=edit))

        result = usecase.execute(EditRequest(source_path=commit_msg))

        assert result.success
        assert commit_msg.read_bytes() == b"fix crash\n\nSigned-off-by: x\n"
        assert result.session.edited_content == "fix crash\r\n\r\nSigned-off-by: x\r\n"
        assert result.session.original_content == "fix bug\n\nSigned-off-by: x\n"

    def test_source_with_crlf_is_normalized(self, tmp_path: Path, transient_dir: Path) -> None:
        """Should leave a CRLF source in POSIX form after a no-op edit."""
        source = tmp_path / "MSG"
        source.write_bytes(b"line1\r\nline2\r\n")

        exit_code = make_usecase(transient_dir).run(source)

        assert exit_code == 0
        assert source.read_bytes() == b"line1\nline2\n"


class TestEditorFailure:
    """Tests for editors that exit non-zero."""

    def test_exit_code_is_forwarded_and_source_untouched(
        self, commit_msg: Path, transient_dir: Path
    ) -> None:
        """Should return the editor's status and skip the write-back."""

        def edit(path: Path) -> None:
            path.write_text("should not be committed")

        ui = FakeUserInterface()
        usecase = make_usecase(
            transient_dir, launcher=FakeLauncher(exit_code=7, edit=edit), ui=ui
        )

        result = usecase.execute(EditRequest(source_path=commit_msg))

        assert result.exit_code == 7
        assert not result.success
        assert commit_msg.read_bytes() == b"fix bug\n\nSigned-off-by: x\n"
        assert list(transient_dir.iterdir()) == []
        assert any("status 7" in msg for msg in ui.reported)


class TestLaunchFallback:
    """Tests for the single fallback to the explicit editor."""

    def test_falls_back_when_default_launch_fails(
        self, commit_msg: Path, transient_dir: Path
    ) -> None:
        """Should use the fallback editor and tell the user."""
        fallback = FakeLauncher(name="notepad.exe")
        ui = FakeUserInterface()
        usecase = make_usecase(
            transient_dir, launcher=FakeLauncher(fail=True), fallback=fallback, ui=ui
        )

        exit_code = usecase.run(commit_msg)

        assert exit_code == 0
        assert len(fallback.launched) == 1
        assert any("falling back to notepad.exe" in msg for msg in ui.reported)

    def test_fails_when_fallback_also_fails(
        self, commit_msg: Path, transient_dir: Path
    ) -> None:
        """Should return -1 and clean up when both launches fail."""
        ui = FakeUserInterface()
        usecase = make_usecase(
            transient_dir,
            launcher=FakeLauncher(fail=True),
            fallback=FakeLauncher(name="vi", fail=True),
            ui=ui,
        )

        exit_code = usecase.run(commit_msg)

        assert exit_code == -1
        assert commit_msg.read_bytes() == b"fix bug\n\nSigned-off-by: x\n"
        assert list(transient_dir.iterdir()) == []
        assert any("vi could not be started" in msg for msg in ui.reported)


class TestManualGate:
    """Tests for editors that give no waitable process."""

    def test_waits_for_confirmation(self, commit_msg: Path, transient_dir: Path) -> None:
        """Should prompt the user and then write back."""
        transient: list[Path] = []

        def edit(path: Path) -> None:
            transient.append(path)

        def finish_editing() -> None:
            transient[0].write_text("edited in running instance\r\n", encoding="utf-8")

        ui = FakeUserInterface(on_wait=finish_editing)
        usecase = make_usecase(
            transient_dir, launcher=FakeLauncher(waitable=False, edit=edit), ui=ui
        )

        exit_code = usecase.run(commit_msg)

        assert exit_code == 0
        assert ui.wait_prompts == [CONFIRMATION_PROMPT]
        assert commit_msg.read_bytes() == b"edited in running instance\n"

    @pytest.mark.parametrize("interrupt", [KeyboardInterrupt, EOFError])
    def test_interrupt_aborts_and_deletes_transient(
        self, commit_msg: Path, transient_dir: Path, interrupt: type[BaseException]
    ) -> None:
        """Should abort without touching the source when interrupted."""

        def raise_interrupt() -> None:
            raise interrupt()

        ui = FakeUserInterface(on_wait=raise_interrupt)
        usecase = make_usecase(transient_dir, launcher=FakeLauncher(waitable=False), ui=ui)

        result = usecase.execute(EditRequest(source_path=commit_msg))

        assert result.exit_code == -1
        assert result.error is not None and "Edit aborted" in result.error
        assert commit_msg.read_bytes() == b"fix bug\n\nSigned-off-by: x\n"
        assert list(transient_dir.iterdir()) == []


class TestIoFailures:
    """Tests for read/write failures."""

    def test_missing_source_returns_minus_one(self, tmp_path: Path, transient_dir: Path) -> None:
        """Should report the missing file and create no transient file."""
        ui = FakeUserInterface()
        launcher = FakeLauncher()
        usecase = make_usecase(transient_dir, launcher=launcher, ui=ui)

        result = usecase.execute(EditRequest(source_path=tmp_path / "missing"))

        assert result.exit_code == -1
        assert result.session.transient_path is None
        assert launcher.launched == []
        assert ui.reported and "I/O error" in ui.reported[0]

    def test_non_utf8_source_returns_minus_one(self, tmp_path: Path, transient_dir: Path) -> None:
        """Should refuse files that are not UTF-8."""
        source = tmp_path / "MSG"
        source.write_bytes(b"\xff\xfe\xfa")
        ui = FakeUserInterface()

        exit_code = make_usecase(transient_dir, ui=ui).run(source)

        assert exit_code == -1
        assert "not valid UTF-8" in ui.reported[0]
        assert source.read_bytes() == b"\xff\xfe\xfa"

    def test_write_back_failure_returns_minus_one_and_cleans_up(
        self, commit_msg: Path, transient_dir: Path
    ) -> None:
        """Should report a failed write-back and still delete the transient file."""
        real_fs = LocalFileSystem()
        fs = MagicMock(wraps=real_fs)

        def write(path: Path, content: bytes) -> None:
            if path == commit_msg:
                raise PermissionError("read-only")
            real_fs.write(path, content)

        fs.write.side_effect = write
        ui = FakeUserInterface()

        exit_code = make_usecase(transient_dir, fs=fs, ui=ui).run(commit_msg)

        assert exit_code == -1
        assert list(transient_dir.iterdir()) == []
        assert any("read-only" in msg for msg in ui.reported)

    def test_cleanup_failure_is_reported_not_raised(
        self, commit_msg: Path, transient_dir: Path
    ) -> None:
        """Should keep the exit code when the transient file cannot be deleted."""
        fs = MagicMock(wraps=LocalFileSystem())
        fs.delete.side_effect = PermissionError("locked")
        ui = FakeUserInterface()

        exit_code = make_usecase(transient_dir, fs=fs, ui=ui).run(commit_msg)

        assert exit_code == 0
        assert any("locked" in msg for msg in ui.reported)

    def test_keyboard_interrupt_while_waiting_propagates_after_cleanup(
        self, commit_msg: Path, transient_dir: Path
    ) -> None:
        """Should re-raise KeyboardInterrupt from a blocking wait but still clean up."""
        launcher = FakeLauncher()

        def interrupted_launch(path: Path):
            result = FakeLauncher.launch(launcher, path)
            launcher.handle.on_wait = _raise_keyboard_interrupt
            return result

        launcher.launch = interrupted_launch  # type: ignore[method-assign]

        with pytest.raises(KeyboardInterrupt):
            make_usecase(transient_dir, launcher=launcher).run(commit_msg)

        assert list(transient_dir.iterdir()) == []


def _raise_keyboard_interrupt() -> None:
    raise KeyboardInterrupt()
