"""Logging utilities for fontprofile."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on every call
_installed_handlers: list[logging.Handler] = []


@dataclass
class BuildStats:
    """Statistics from a profile build."""

    fonts_found: int = 0
    fonts_embedded: int = 0
    total_bytes: int = 0
    output_path: Path | None = None
    fonts: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate build duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
    console: bool = True,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors
        console: If False, attach no console handler at all

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("fontprofile")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class BuildLogger:
    """Logger for tracking build progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = BuildStats()

    def reset(self) -> None:
        """Start a fresh set of statistics for a new run."""
        self._stats = BuildStats()

    def log_build_start(self, directory: Path, product_name: str, version: str) -> None:
        """Log start of a build."""
        self._logger.info(
            "Starting profile build",
            directory=str(directory),
            product=product_name,
            version=version or None,
        )

    def log_fonts_discovered(self, paths: list[Path]) -> None:
        """Log discovery results."""
        for path in paths:
            self._logger.debug("Found font", path=str(path))
        self._logger.info("Fonts discovered", count=len(paths))
        self._stats.fonts_found = len(paths)

    def log_block_encoded(self, file_name: str, size: int, identifier: str) -> None:
        """Log a font embedded as a payload."""
        self._logger.debug(
            "Font embedded",
            font=file_name,
            bytes=size,
            identifier=identifier,
        )
        self._stats.fonts_embedded += 1
        self._stats.total_bytes += size
        self._stats.fonts.append(file_name)

    def log_profile_written(self, path: Path) -> None:
        """Log the written profile."""
        self._logger.info(
            "Profile written",
            path=str(path),
            fonts=self._stats.fonts_embedded,
            bytes=self._stats.total_bytes,
        )
        self._stats.output_path = path

    def log_build_error(self, error: Exception) -> None:
        """Log a build failure."""
        self._logger.error(
            "Profile build failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> BuildStats:
        """Get current build statistics."""
        return self._stats
