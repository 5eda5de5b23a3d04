"""Exception hierarchy for fontprofile.

Every error carries the process exit code the CLI maps it to.
"""

from pathlib import Path

EXIT_OK = 0
EXIT_CONFIGURATION = 1
EXIT_NO_FONTS = 2
EXIT_IO = 3


class FontProfileError(Exception):
    """Base exception for all fontprofile errors."""

    exit_code: int = EXIT_CONFIGURATION


class ConfigurationError(FontProfileError):
    """A required input is missing, invalid, or not a directory."""

    exit_code = EXIT_CONFIGURATION

    def __init__(self, message: str, details: str | None = None) -> None:
        self.details = details
        super().__init__(message)


class NoFontsFoundError(FontProfileError):
    """Discovery finished without finding a single font file."""

    exit_code = EXIT_NO_FONTS

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(f"No .ttf or .otf fonts found in '{directory}'")


class ProfileIOError(FontProfileError):
    """Errors reading fonts or writing the profile."""

    exit_code = EXIT_IO


class FontReadError(ProfileIOError):
    """Error reading a discovered font file."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read font '{path}': {reason}")


class ProfileWriteError(ProfileIOError):
    """Error writing the profile document."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write profile '{path}': {reason}")
