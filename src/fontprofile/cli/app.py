"""CLI application entry point for fontprofile.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from fontprofile import __version__
from fontprofile.cli.output import (
    console,
    format_file_size,
    print_error,
    print_fonts_found,
    print_header,
    print_profile_info,
    print_step,
    print_success,
)
from fontprofile.config import (
    DEFAULT_FONT_DIRECTORY,
    DEFAULT_PRODUCT_NAME,
    ENV_DIRECTORY,
    ENV_PRODUCT_NAME,
    ENV_VERSION,
    FontIdentifierStyle,
    IdentityConfig,
    LoggingConfig,
    OutputConfig,
    ProfileSettings,
    resolve_settings,
    settings_from_env,
)
from fontprofile.core import ProfileBuilder, profile_display_name, profile_identifier
from fontprofile.exceptions import (
    EXIT_CONFIGURATION,
    ConfigurationError,
    FontProfileError,
)

# Create the Typer app
app = typer.Typer(
    name="fontprofile",
    help="Bundle .ttf/.otf fonts into an Apple configuration profile (.mobileconfig).",
    add_completion=False,
    no_args_is_help=True,
)

DirectoryOption = Annotated[
    Path | None,
    typer.Option(
        "--dir",
        "-d",
        help="Directory containing font files (scanned recursively)",
        envvar=ENV_DIRECTORY,
        show_default=False,
    ),
]
LogLevelOption = Annotated[
    str | None,
    typer.Option(
        "--log-level",
        help="Mirror log records at this level to the console (DEBUG|INFO|WARNING|ERROR)",
        show_default=False,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]fontprofile[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--app-version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Bundle fonts into a configuration profile."""


def _fail(error: FontProfileError) -> typer.Exit:
    details = error.details if isinstance(error, ConfigurationError) else None
    print_error(str(error), details=details)
    return typer.Exit(code=error.exit_code)


def _logging_config(
    log_level: str | None, log_file: Path | None = None, quiet: bool = False
) -> LoggingConfig:
    # Rich reports errors to the user; log records reach the console only on request
    if log_level is None:
        return LoggingConfig(log_file=log_file, console=False)
    return LoggingConfig(log_file=log_file, log_level="ERROR" if quiet else log_level)


def _relative_names(paths: list[Path], root: Path) -> list[str]:
    names = []
    for path in paths:
        try:
            names.append(str(path.relative_to(root)))
        except ValueError:
            names.append(str(path))
    return names


@app.command()
def build(
    directory: DirectoryOption = None,
    font_name: Annotated[
        str | None,
        typer.Option(
            "--fontname",
            "-n",
            help="Name used in the profile display name, identifiers and file name",
            envvar=ENV_PRODUCT_NAME,
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        str | None,
        typer.Option(
            "--version",
            "-v",
            help="Version label for identifiers and display name (optional)",
            envvar=ENV_VERSION,
            show_default=False,
        ),
    ] = None,
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory the profile is written to",
        ),
    ] = Path("."),
    env_defaults: Annotated[
        bool,
        typer.Option(
            "--env-defaults",
            help=(
                f"Fill missing inputs from the environment-driven defaults "
                f"(--dir {DEFAULT_FONT_DIRECTORY}, --fontname {DEFAULT_PRODUCT_NAME}, "
                f"versioned file name, product-style identifiers)"
            ),
        ),
    ] = False,
    identifier_prefix: Annotated[
        str,
        typer.Option(
            "--identifier-prefix",
            help="Reverse-DNS prefix for payload identifiers",
        ),
    ] = "me.garbee",
    organization: Annotated[
        str,
        typer.Option(
            "--organization",
            help="PayloadOrganization written into the profile",
        ),
    ] = "Jonathan Garbee",
    font_identifier_style: Annotated[
        FontIdentifierStyle | None,
        typer.Option(
            "--font-identifier-style",
            help="Per-font identifiers: <prefix>.font.<stem> (shared) "
            "or <prefix>.fonts.<product>.<stem> (product). "
            "Default: shared, or product with --env-defaults",
            case_sensitive=False,
            show_default=False,
        ),
    ] = None,
    versioned_filename: Annotated[
        bool | None,
        typer.Option(
            "--versioned-filename/--plain-filename",
            help="Name the output <fontname>-<version>.mobileconfig "
            "(default: on with --env-defaults)",
            show_default=False,
        ),
    ] = None,
    font_uuids: Annotated[
        bool,
        typer.Option(
            "--font-uuids/--no-font-uuids",
            help="Emit PayloadUUID on every font payload",
        ),
    ] = True,
    profile_uuid: Annotated[
        bool,
        typer.Option(
            "--profile-uuid/--no-profile-uuid",
            help="Emit PayloadUUID on the profile",
        ),
    ] = True,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: LogLevelOption = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="List every embedded font",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Build <fontname>.mobileconfig from all fonts found under --dir.

    Example:
        fontprofile build --dir fonts --fontname "Example" --version 2.0

    This will create Example.mobileconfig containing one font payload
    per .ttf/.otf file, ordered by path.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=EXIT_CONFIGURATION)

    if font_identifier_style is None:
        font_identifier_style = (
            FontIdentifierStyle.PRODUCT if env_defaults else FontIdentifierStyle.SHARED
        )
    if versioned_filename is None:
        versioned_filename = env_defaults

    try:
        identity = IdentityConfig(
            identifier_prefix=identifier_prefix,
            organization=organization,
            font_identifier_style=font_identifier_style,
        )
        output = OutputConfig(
            output_dir=output_dir,
            versioned_filename=versioned_filename,
            include_font_uuids=font_uuids,
            include_profile_uuid=profile_uuid,
        )
        logging = _logging_config(log_level, log_file=log_file, quiet=quiet)

        if env_defaults:
            settings = settings_from_env(
                directory=directory,
                product_name=font_name,
                version=version,
                identity=identity,
                output=output,
                logging=logging,
            )
        else:
            settings = resolve_settings(
                directory=directory,
                product_name=font_name,
                version=version,
                identity=identity,
                output=output,
                logging=logging,
            )
    except FontProfileError as e:
        raise _fail(e) from None
    except ValidationError as e:
        raise _fail(ConfigurationError("Invalid configuration", details=str(e))) from None

    if not quiet:
        print_header(__version__)

    try:
        _run_build(settings, verbose=verbose, quiet=quiet)
    except FontProfileError as e:
        raise _fail(e) from None


def _run_build(settings: ProfileSettings, verbose: bool, quiet: bool) -> None:
    builder = ProfileBuilder(settings)
    directory = builder.validate()

    if not quiet:
        print_step("Scanning fonts")

    fonts = builder.discover()

    if not quiet:
        print_profile_info(
            display_name=profile_display_name(settings),
            identifier=profile_identifier(settings),
            directory=directory,
        )
        print_fonts_found(_relative_names([f.path for f in fonts], directory), verbose)
        print_step("Writing profile")

    result = builder.run(fonts=fonts)

    if not quiet:
        print_success(
            output_path=str(result.output_path),
            file_size=format_file_size(result.output_path.stat().st_size),
            fonts=len(result.document.content),
            total_time_s=result.stats.duration_seconds,
        )


@app.command("list")
def list_fonts(
    directory: DirectoryOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """List the fonts that would be bundled, without writing a profile."""
    try:
        settings = resolve_settings(
            directory=directory,
            product_name=DEFAULT_PRODUCT_NAME,
            logging=_logging_config(log_level),
        )
        builder = ProfileBuilder(settings)
        root = builder.validate()
        fonts = builder.discover()
    except FontProfileError as e:
        raise _fail(e) from None

    for name in _relative_names([f.path for f in fonts], root):
        typer.echo(name)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
