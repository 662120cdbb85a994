"""Line ending conversion for commit messages.

Converts text between Windows (CR+LF), POSIX (LF) and classic Mac OS (CR)
line endings. The conversion never adds a trailing line break that the input
did not have, so a commit message survives a round trip through a native
editor unchanged apart from its separators.
"""

import codecs
import sys
from enum import Enum

from gitpad.domain.exceptions import ConfigurationError

UTF8_BOM = codecs.BOM_UTF8


class LineEndingType(Enum):
    """Line ending convention.

    UNSURE is a sentinel for "no explicit choice was made". It is never a
    valid conversion target.
    """

    WINDOWS = "\r\n"
    POSIX = "\n"
    MACOS9 = "\r"
    UNSURE = ""

    @property
    def separator(self) -> str:
        """Separator string for this convention.

        Raises:
            ConfigurationError: If called on UNSURE.
        """
        if self is LineEndingType.UNSURE:
            raise ConfigurationError(
                "Specify an explicit line ending type",
                hint="Use windows, posix or macos9",
            )
        return self.value

    @staticmethod
    def native() -> "LineEndingType":
        """Return the line ending a native editor on this platform expects."""
        if sys.platform == "win32":
            return LineEndingType.WINDOWS
        return LineEndingType.POSIX

    @staticmethod
    def parse(name: str) -> "LineEndingType":
        """Parse a config value into a line ending type.

        Args:
            name: One of windows/crlf, posix/lf/unix, macos9/cr or native.

        Returns:
            Matching LineEndingType.

        Raises:
            ConfigurationError: If the name is not recognised.
        """
        key = name.strip().lower()
        if key == "native":
            return LineEndingType.native()
        try:
            return _NAMES[key]
        except KeyError:
            raise ConfigurationError(
                f"Unknown line ending '{name}'",
                hint="Use one of: windows, posix, macos9, native",
            ) from None


_NAMES: dict[str, LineEndingType] = {
    "windows": LineEndingType.WINDOWS,
    "crlf": LineEndingType.WINDOWS,
    "posix": LineEndingType.POSIX,
    "unix": LineEndingType.POSIX,
    "lf": LineEndingType.POSIX,
    "macos9": LineEndingType.MACOS9,
    "cr": LineEndingType.MACOS9,
}


def normalize(text: str, target: LineEndingType) -> str:
    """Force every line break in text to the target convention.

    Lines are split on LF and any CR left in a line is dropped, so CR+LF, LF
    and lone CR breaks may be mixed freely in the input. The separator is
    appended to every line and exactly one trailing separator is then removed,
    which keeps the number of trailing breaks the input had.

    Args:
        text: Input text with any mixture of line endings.
        target: Desired line ending. Must not be UNSURE.

    Returns:
        Text using only the target separator.

    Raises:
        ConfigurationError: If target is UNSURE or not a LineEndingType.
    """
    if not isinstance(target, LineEndingType):
        raise ConfigurationError(f"Not a line ending type: {target!r}")
    ending = target.separator

    # A CR not followed by LF is a classic Mac OS break
    canonical = text.replace("\r\n", "\n").replace("\r", "\n")

    joined = "".join(line + ending for line in canonical.split("\n"))
    # Drop the separator appended after the last segment
    return joined[: -len(ending)]


def encode(text: str, target: LineEndingType, *, bom: bool = False) -> bytes:
    """Normalize text and encode it as UTF-8.

    Args:
        text: Text to write.
        target: Line ending to force.
        bom: Prefix the output with a UTF-8 byte order mark.

    Returns:
        Encoded bytes ready to be written to disk.
    """
    data = normalize(text, target).encode("utf-8")
    if bom:
        return UTF8_BOM + data
    return data


def decode(data: bytes) -> str:
    """Decode UTF-8 bytes, dropping a leading byte order mark if present.

    Raises:
        UnicodeDecodeError: If data is not valid UTF-8.
    """
    return data.decode("utf-8-sig")
