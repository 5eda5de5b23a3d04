"""Profile writer.

This module provides the ProfileWriter class for rendering a profile
document and writing it to disk without ever leaving a partial file behind.
"""

import os
import tempfile
from pathlib import Path

from fontprofile.config import ProfileSettings
from fontprofile.domain import ProfileDocument
from fontprofile.exceptions import ProfileWriteError
from fontprofile.io.renderer import render_profile

PROFILE_EXTENSION = ".mobileconfig"


class ProfileWriter:
    """Writes profile documents atomically.

    The document is written to a temporary file next to the target and
    moved into place only after it was fully flushed to disk.

    Example:
        writer = ProfileWriter(settings)
        path = writer.write(document)
    """

    def __init__(self, settings: ProfileSettings) -> None:
        """Initialize the profile writer.

        Args:
            settings: Build settings (output location and optional fields)
        """
        self._settings = settings

    def render(self, document: ProfileDocument) -> str:
        """Render the document using the configured optional fields."""
        return render_profile(
            document,
            include_font_uuids=self._settings.output.include_font_uuids,
            include_profile_uuid=self._settings.output.include_profile_uuid,
        )

    def write(self, document: ProfileDocument, output_path: Path | None = None) -> Path:
        """Render and write the document.

        Args:
            document: Document to write
            output_path: Target path (default: derived from settings)

        Returns:
            Path of the written file

        Raises:
            ProfileWriteError: If the file cannot be written
        """
        if output_path is None:
            output_path = self.get_profile_path(self._settings)

        text = self.render(document)
        atomic_write_text(output_path, text)
        return output_path

    @staticmethod
    def get_profile_path(settings: ProfileSettings) -> Path:
        """Generate the output path for a build.

        Produces <product>.mobileconfig, or <product>-<version>.mobileconfig
        when versioned file names are enabled and a version is set.

        Args:
            settings: Build settings

        Returns:
            Path inside the configured output directory
        """
        name = settings.product_name
        if settings.output.versioned_filename and settings.has_version:
            name = f"{name}-{settings.version}"
        return settings.output.output_dir / f"{name}{PROFILE_EXTENSION}"


def atomic_write_text(path: Path, text: str) -> None:
    """Write UTF-8 text to path via a temporary file and rename.

    Raises:
        ProfileWriteError: If any step fails; the temporary file is removed
    """
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            delete=False,
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ProfileWriteError(path, e.strerror or str(e)) from e
