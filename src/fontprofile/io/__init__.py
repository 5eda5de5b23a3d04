"""Profile I/O layer for fontprofile.

This module renders profile documents as XML property lists and writes
them to disk.

Key responsibilities:
- Base64 encoding of font bytes with fixed-width wrapping
- Escape text values and render the plist prolog, DOCTYPE and elements
- Atomic writes with the .mobileconfig naming convention

Key classes:
- ProfileWriter: Render and save profile documents
"""

from fontprofile.io.codec import LINE_WIDTH, decode_font_data, encode_font_data
from fontprofile.io.renderer import escape_text, render_profile
from fontprofile.io.writer import PROFILE_EXTENSION, ProfileWriter, atomic_write_text

__all__ = [
    "LINE_WIDTH",
    "PROFILE_EXTENSION",
    "ProfileWriter",
    "atomic_write_text",
    "decode_font_data",
    "encode_font_data",
    "escape_text",
    "render_profile",
]
