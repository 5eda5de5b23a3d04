"""Command-line interface for fontprofile.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- build: write a .mobileconfig from a font directory
- list: show which fonts would be bundled
- Inputs from options or FONTPROFILE_* environment variables
- Distinct exit codes for bad input, no fonts and I/O failures
"""

from fontprofile.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
