"""Domain models for fontprofile.

This module contains the models representing discovered fonts and the
profile document built from them. All models are frozen dataclasses and
independent of how the document is rendered.

Key classes:
- FontFile: A font discovered on disk
- ContentBlock: One embedded font payload
- ProfileDocument: The top-level configuration profile
"""

from fontprofile.domain.font import FONT_EXTENSIONS, FontFile, is_font_file_name
from fontprofile.domain.profile import (
    FONT_PAYLOAD_TYPE,
    PAYLOAD_VERSION,
    PROFILE_PAYLOAD_TYPE,
    ContentBlock,
    ProfileDocument,
)

__all__: list[str] = [
    # Constants
    "FONT_EXTENSIONS",
    "FONT_PAYLOAD_TYPE",
    "PAYLOAD_VERSION",
    "PROFILE_PAYLOAD_TYPE",
    # Core types
    "FontFile",
    "ContentBlock",
    "ProfileDocument",
    # Helpers
    "is_font_file_name",
]
