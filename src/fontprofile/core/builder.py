"""Profile build orchestration.

This module coordinates the full pipeline: validate inputs, discover fonts,
embed each one as a payload, assemble the profile and write it to disk.

Key components:
- ProfileBuilder: Main orchestrator class
- BuildResult: What a finished build produced
- generate_profile: One-call convenience wrapper
"""

import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import structlog

from fontprofile.config import OutputConfig, ProfileSettings, resolve_settings
from fontprofile.core.discovery import find_font_files
from fontprofile.core.payloads import build_content_block
from fontprofile.domain import FontFile, ProfileDocument
from fontprofile.exceptions import (
    ConfigurationError,
    FontProfileError,
    FontReadError,
    NoFontsFoundError,
)
from fontprofile.io import ProfileWriter
from fontprofile.utils import BuildLogger, BuildStats, configure_logging


def random_uuid() -> str:
    """Return a new random (version 4) UUID string."""
    return str(uuid.uuid4())


def profile_display_name(settings: ProfileSettings) -> str:
    """Display name, e.g. "Example Fonts 2.0" or "Example Fonts"."""
    name = f"{settings.product_name} Fonts"
    if settings.has_version:
        name = f"{name} {settings.version}"
    return name


def profile_identifier(settings: ProfileSettings) -> str:
    """Top-level payload identifier, e.g. "me.garbee.fonts.example.2.0"."""
    identifier = f"{settings.identity.identifier_prefix}.fonts.{settings.product_slug}"
    if settings.has_version:
        identifier = f"{identifier}.{settings.version}"
    return identifier


def profile_description(settings: ProfileSettings) -> str:
    """Human-readable description of the profile."""
    return f"Installs {settings.product_name} fonts"


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a successful build.

    Attributes:
        document: The assembled profile
        output_path: Where the profile was written
        stats: Counts and timing for the run
    """

    document: ProfileDocument
    output_path: Path
    stats: BuildStats


class ProfileBuilder:
    """Builds a font configuration profile from a directory of fonts.

    Manages the complete workflow:
    1. Validate the configured directory
    2. Discover .ttf/.otf files, sorted by path
    3. Embed each font as a payload with a fresh identifier
    4. Assemble the profile document
    5. Write it atomically

    Example:
        settings = resolve_settings(Path("fonts"), "Example", "2.0")
        builder = ProfileBuilder(settings)
        result = builder.run()
    """

    def __init__(
        self,
        settings: ProfileSettings,
        uuid_factory: Callable[[], str] | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the profile builder.

        Args:
            settings: Immutable build settings
            uuid_factory: Generator for unique identifiers (default: random UUID4)
            logger: Logger to use (default: configured from settings)
        """
        self.settings = settings
        self.uuid_factory = uuid_factory or random_uuid
        if logger is None:
            logger = configure_logging(
                log_file=settings.logging.log_file,
                console_level=settings.logging.log_level,
                file_level=settings.logging.file_log_level,
                console=settings.logging.console,
            )
        self.logger = logger
        self.build_logger = BuildLogger(logger)

    @property
    def stats(self) -> BuildStats:
        """Statistics of the current run."""
        return self.build_logger.stats

    def validate(self) -> Path:
        """Check the configured directory before any discovery work.

        Returns:
            The directory to scan

        Raises:
            ConfigurationError: If the directory is missing, absent or not a directory
        """
        directory = self.settings.directory
        if directory is None:
            raise ConfigurationError(
                "No directory provided",
                details="Specify the directory containing fonts with --dir.",
            )
        if not directory.exists():
            raise ConfigurationError(
                f"Font directory not found: {directory}",
                details=f"The directory '{directory}' does not exist or is not accessible.",
            )
        if not directory.is_dir():
            raise ConfigurationError(
                f"Font path is not a directory: {directory}",
                details="Please provide a directory containing .ttf or .otf files.",
            )
        return directory

    def discover(self) -> list[FontFile]:
        """Validate inputs and find fonts.

        Returns:
            Fonts sorted by path

        Raises:
            ConfigurationError: If the directory is invalid
            NoFontsFoundError: If no fonts were found
            FontReadError: If a directory cannot be listed
        """
        directory = self.validate()
        self.build_logger.log_build_start(
            directory, self.settings.product_name, self.settings.version
        )

        try:
            fonts = find_font_files(directory)
        except OSError as e:
            raise FontReadError(Path(e.filename or directory), e.strerror or str(e)) from e

        self.build_logger.log_fonts_discovered([font.path for font in fonts])
        if not fonts:
            raise NoFontsFoundError(directory)
        return fonts

    def assemble(self, fonts: list[FontFile]) -> ProfileDocument:
        """Embed fonts and assemble the profile document.

        Args:
            fonts: Fonts in output order

        Returns:
            Profile document with one payload per font

        Raises:
            NoFontsFoundError: If fonts is empty
            FontReadError: If a font cannot be read
        """
        if not fonts:
            raise NoFontsFoundError(self.settings.directory or Path("."))

        blocks = []
        for font in fonts:
            block = build_content_block(font, self.settings, self.uuid_factory)
            self.build_logger.log_block_encoded(block.name, block.size, block.payload_identifier)
            blocks.append(block)

        document = ProfileDocument(
            content=tuple(blocks),
            description=profile_description(self.settings),
            display_name=profile_display_name(self.settings),
            uuid=self.uuid_factory(),
            payload_identifier=profile_identifier(self.settings),
            organization=self.settings.identity.organization,
        )

        uuids = document.uuids
        if len(set(uuids)) != len(uuids):
            raise ValueError("UUID factory returned duplicate identifiers")
        return document

    def build(self) -> ProfileDocument:
        """Discover fonts and assemble the document without writing it."""
        return self.assemble(self.discover())

    def write(self, document: ProfileDocument, output_path: Path | None = None) -> Path:
        """Write the document atomically.

        Raises:
            ProfileWriteError: If the file cannot be written
        """
        path = ProfileWriter(self.settings).write(document, output_path)
        self.build_logger.log_profile_written(path)
        return path

    def run(
        self,
        output_path: Path | None = None,
        fonts: list[FontFile] | None = None,
    ) -> BuildResult:
        """Run the full pipeline and write the profile.

        Args:
            output_path: Target path (default: <product>.mobileconfig in the output dir)
            fonts: Already discovered fonts (discovery runs when None)

        Returns:
            BuildResult with the document, written path and statistics

        Raises:
            ConfigurationError: If inputs are invalid
            NoFontsFoundError: If no fonts were found
            ProfileIOError: If a font cannot be read or the profile cannot be written
        """
        self.build_logger.reset()
        stats = self.stats
        stats.start_time = time.time()
        try:
            if fonts is None:
                fonts = self.discover()
            else:
                stats.fonts_found = len(fonts)
            document = self.assemble(fonts)
            path = self.write(document, output_path)
        except FontProfileError as e:
            self.build_logger.log_build_error(e)
            raise
        finally:
            stats.end_time = time.time()

        return BuildResult(document=document, output_path=path, stats=stats)


def generate_profile(
    directory: Path | str | None,
    product_name: str | None,
    version: str | None = None,
    output_dir: Path | None = None,
    uuid_factory: Callable[[], str] | None = None,
) -> BuildResult:
    """Build and write a profile in one call.

    Example:
        result = generate_profile("fonts", "Example", "2.0")
        print(result.output_path)  # Example.mobileconfig
    """
    output = OutputConfig(output_dir=output_dir) if output_dir is not None else None
    settings = resolve_settings(directory, product_name, version, output=output)
    return ProfileBuilder(settings, uuid_factory=uuid_factory).run()
