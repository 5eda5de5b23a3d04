"""Configuration settings for fontprofile."""

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from fontprofile.exceptions import ConfigurationError

ENV_DIRECTORY = "FONTPROFILE_DIR"
ENV_PRODUCT_NAME = "FONTPROFILE_NAME"
ENV_VERSION = "FONTPROFILE_VERSION"

DEFAULT_FONT_DIRECTORY = "fonts"
DEFAULT_PRODUCT_NAME = "Fonts"


class FontIdentifierStyle(str, Enum):
    """How per-font payload identifiers are namespaced."""

    SHARED = "shared"  # <prefix>.font.<stem>
    PRODUCT = "product"  # <prefix>.fonts.<product-slug>.<stem>


class IdentityConfig(BaseModel):
    """Identifier namespace and organization written into the profile."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    identifier_prefix: str = Field(
        default="me.garbee",
        min_length=1,
        description="Reverse-DNS prefix for all payload identifiers",
    )
    organization: str = Field(
        default="Jonathan Garbee",
        description="PayloadOrganization of the profile",
    )
    font_identifier_style: FontIdentifierStyle = Field(
        default=FontIdentifierStyle.SHARED,
        description="Namespace segment used for per-font identifiers",
    )


class OutputConfig(BaseModel):
    """Where and how the profile is written."""

    model_config = ConfigDict(frozen=True)

    output_dir: Path = Field(
        default=Path("."),
        description="Directory the .mobileconfig file is written to",
    )
    versioned_filename: bool = Field(
        default=False,
        description="Name the file <product>-<version>.mobileconfig when a version is set",
    )
    include_font_uuids: bool = Field(
        default=True,
        description="Emit PayloadUUID on every font payload",
    )
    include_profile_uuid: bool = Field(
        default=True,
        description="Emit PayloadUUID on the top-level profile",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    console: bool = Field(
        default=True,
        description="Mirror log records to the console",
    )


def _has_path_separator(value: str) -> bool:
    return "/" in value or "\\" in value


class ProfileSettings(BaseModel):
    """Immutable inputs for a single profile build."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    directory: Path | None = Field(
        default=None,
        description="Directory scanned recursively for fonts",
    )
    product_name: str = Field(
        min_length=1,
        description="Display name used in the profile and the output filename",
    )
    version: str = Field(
        default="",
        description="Optional version label; empty means no version",
    )
    identity: IdentityConfig = Field(default_factory=IdentityConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("product_name")
    @classmethod
    def _reject_path_separators(cls, value: str) -> str:
        if _has_path_separator(value):
            raise ValueError("must not contain path separators")
        return value

    @model_validator(mode="after")
    def _check_versioned_filename(self) -> "ProfileSettings":
        # The version only reaches the file name when versioned names are on
        if self.output.versioned_filename and _has_path_separator(self.version):
            raise ValueError("version must not contain path separators in versioned file names")
        return self

    @property
    def has_version(self) -> bool:
        """Whether a non-empty version label was supplied."""
        return bool(self.version)

    @property
    def product_slug(self) -> str:
        """Lowercase product name with spaces replaced by hyphens."""
        return self.product_name.lower().replace(" ", "-")


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "settings"
        parts.append(f"{field}: {item['msg']}")
    return "; ".join(parts)


def resolve_settings(
    directory: Path | str | None,
    product_name: str | None,
    version: str | None = None,
    identity: IdentityConfig | None = None,
    output: OutputConfig | None = None,
    logging: LoggingConfig | None = None,
) -> ProfileSettings:
    """Build settings from explicitly supplied parameters.

    Args:
        directory: Directory to scan (None is reported when the build starts)
        product_name: Product display name (required)
        version: Optional version label
        identity: Identifier namespace overrides
        output: Output overrides
        logging: Logging overrides

    Returns:
        Validated, immutable settings

    Raises:
        ConfigurationError: If a value is missing or invalid
    """
    if product_name is None or not product_name.strip():
        raise ConfigurationError(
            "No product name provided",
            details="Specify the name used in the profile with --fontname.",
        )

    values: dict[str, object] = {
        "directory": Path(directory) if directory else None,
        "product_name": product_name,
        "version": version or "",
    }
    if identity is not None:
        values["identity"] = identity
    if output is not None:
        values["output"] = output
    if logging is not None:
        values["logging"] = logging

    try:
        return ProfileSettings(**values)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            details=_format_validation_error(e),
        ) from e


def settings_from_env(
    environ: Mapping[str, str] | None = None,
    identity: IdentityConfig | None = None,
    output: OutputConfig | None = None,
    logging: LoggingConfig | None = None,
    directory: Path | str | None = None,
    product_name: str | None = None,
    version: str | None = None,
) -> ProfileSettings:
    """Build settings from environment variables with conventional defaults.

    The directory defaults to ``fonts`` and the product name to ``Fonts``.
    Unless an explicit OutputConfig is passed, the file name includes the
    version; unless an explicit IdentityConfig is passed, per-font
    identifiers are namespaced under the product.

    Args:
        environ: Environment to read (default: os.environ)
        identity: Identifier namespace overrides
        output: Output overrides
        logging: Logging overrides
        directory: Overrides FONTPROFILE_DIR
        product_name: Overrides FONTPROFILE_NAME
        version: Overrides FONTPROFILE_VERSION

    Raises:
        ConfigurationError: If a value is invalid
    """
    env = os.environ if environ is None else environ
    if output is None:
        output = OutputConfig(versioned_filename=True)
    if identity is None:
        identity = IdentityConfig(font_identifier_style=FontIdentifierStyle.PRODUCT)

    return resolve_settings(
        directory=directory or env.get(ENV_DIRECTORY) or DEFAULT_FONT_DIRECTORY,
        product_name=product_name or env.get(ENV_PRODUCT_NAME) or DEFAULT_PRODUCT_NAME,
        version=version if version is not None else env.get(ENV_VERSION, ""),
        identity=identity,
        output=output,
        logging=logging,
    )
