"""Core build pipeline for fontprofile.

This module contains the pipeline stages:

- Discovery (stack-based directory walk, extension filter, path ordering)
- Payload construction (one ContentBlock per font)
- Profile assembly and writing (ProfileBuilder)

Key functions:
- find_font_files: Collect .ttf/.otf files under a directory
- build_content_block: Read a font into a payload
- generate_profile: Build and write a profile in one call

Key classes:
- ProfileBuilder: Orchestrates a single build
- BuildResult: Outcome of a successful build
"""

from fontprofile.core.builder import (
    BuildResult,
    ProfileBuilder,
    generate_profile,
    profile_description,
    profile_display_name,
    profile_identifier,
    random_uuid,
)
from fontprofile.core.discovery import find_font_files
from fontprofile.core.payloads import build_content_block, font_payload_identifier

__all__ = [
    # Builder classes
    "BuildResult",
    "ProfileBuilder",
    # Pipeline functions
    "build_content_block",
    "find_font_files",
    "font_payload_identifier",
    "generate_profile",
    "profile_description",
    "profile_display_name",
    "profile_identifier",
    "random_uuid",
]
