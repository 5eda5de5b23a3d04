"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with step markers, font listings and formatted messages.
"""

from pathlib import Path

from rich.console import Console
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]fontprofile[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_profile_info(display_name: str, identifier: str, directory: Path) -> None:
    """Print what is being built.

    Args:
        display_name: Profile display name
        identifier: Profile payload identifier
        directory: Directory being scanned
    """
    # Use Text to safely handle names with markup characters
    line1 = Text("  ")
    line1.append(display_name, style="bold")
    line1.append(f" ({identifier})")
    console.print(line1)
    line2 = Text("  from ")
    line2.append(str(directory))
    console.print(line2)


def print_fonts_found(font_names: list[str], verbose: bool) -> None:
    """Print discovery result.

    Args:
        font_names: Relative paths or names of discovered fonts
        verbose: Whether to list every font
    """
    console.print(f"  [green]{len(font_names)}[/green] fonts found")
    if verbose:
        for name in font_names:
            console.print(Text(f"  {SYM_DOT} {name}"))


def format_file_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form (e.g., "428 KB")."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(output_path: str, file_size: str, fonts: int, total_time_s: float) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        fonts: Number of fonts embedded
        total_time_s: Total build time in seconds
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}"
    )
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)
    plural = "font" if fonts == 1 else "fonts"
    console.print(f"  {fonts} {plural} embedded")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    err_console.print(Text(message))
    if details:
        err_console.print(Text(f"  {details}"))
