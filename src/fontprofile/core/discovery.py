"""Font discovery.

Walks a directory tree with an explicit stack and collects every file whose
name ends in a recognized font extension.
"""

import os
from pathlib import Path

from fontprofile.domain.font import FontFile, is_font_file_name


def find_font_files(directory: Path) -> list[FontFile]:
    """Find all .ttf/.otf files under a directory, at any depth.

    Symlinked directories are followed. A directory whose real path is
    already on the chain of directories above it is not entered again, so
    link cycles terminate while aliases of sibling directories are still
    scanned.

    Args:
        directory: Root directory to scan

    Returns:
        FontFile records sorted by full path string, ascending

    Raises:
        OSError: If a directory cannot be listed
    """
    fonts: list[FontFile] = []
    # Each entry carries the real paths of its ancestors
    stack: list[tuple[Path, frozenset[str]]] = [(directory, frozenset())]

    while stack:
        current, ancestors = stack.pop()
        real = os.path.realpath(current)
        if real in ancestors:
            continue
        chain = ancestors | {real}

        with os.scandir(current) as entries:
            for entry in entries:
                entry_path = current / entry.name
                if entry.is_dir():
                    stack.append((entry_path, chain))
                elif entry.is_file() and is_font_file_name(entry.name):
                    fonts.append(FontFile(path=entry_path))

    fonts.sort(key=lambda font: str(font.path))
    return fonts
