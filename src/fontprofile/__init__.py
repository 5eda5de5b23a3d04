"""fontprofile - Bundle font files into an Apple configuration profile.

fontprofile is a CLI tool that scans a directory tree for TrueType/OpenType
fonts and writes a single ``.mobileconfig`` property list that installs all of
them on a managed device.

Example:
    $ fontprofile build --dir fonts --fontname "Example" --version 2.0

This will create Example.mobileconfig with one com.apple.font payload per
.ttf/.otf file found under ./fonts.
"""

__version__ = "0.1.0"
__author__ = "Jonathan Garbee"

__all__ = ["__author__", "__version__"]
