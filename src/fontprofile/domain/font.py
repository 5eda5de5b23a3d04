"""Font file representation.

This module defines the FontFile domain model, a font discovered on disk
that will be embedded into the profile.
"""

from dataclasses import dataclass
from pathlib import Path

FONT_EXTENSIONS: tuple[str, ...] = (".ttf", ".otf")


def is_font_file_name(name: str) -> bool:
    """Return True if the file name has a recognized font extension.

    The comparison is case-insensitive, so ``Inter.TTF`` matches.
    """
    return name.lower().endswith(FONT_EXTENSIONS)


@dataclass(frozen=True)
class FontFile:
    """A font file discovered during a directory scan.

    Attributes:
        path: Filesystem location of the font
    """

    path: Path

    @property
    def file_name(self) -> str:
        """Basename with extension (e.g., "Inter-Bold.ttf")."""
        return self.path.name

    @property
    def stem(self) -> str:
        """Basename without extension (e.g., "Inter-Bold")."""
        return self.path.stem

    def read_bytes(self) -> bytes:
        """Read the full binary content of the font."""
        with open(self.path, "rb") as f:
            return f.read()
