"""Property-list rendering for profile documents.

Renders a ProfileDocument into the XML plist text of a ``.mobileconfig``
file. Every string value is escaped at this point, and binary payloads are
emitted as base64 wrapped at a fixed width.
"""

from typing import Any

from fontprofile.domain import ProfileDocument
from fontprofile.io.codec import encode_font_data

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'
PLIST_DOCTYPE = (
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">'
)
INDENT = "\t"

_ESCAPES = (
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_text(value: str) -> str:
    """Replace the five reserved XML characters with entity references.

    Args:
        value: Raw text

    Returns:
        Text safe to place inside an element or attribute
    """
    for char, entity in _ESCAPES:
        value = value.replace(char, entity)
    return value


def _render_value(value: Any, depth: int, lines: list[str]) -> None:
    pad = INDENT * depth
    if isinstance(value, dict):
        lines.append(f"{pad}<dict>")
        for key, item in value.items():
            lines.append(f"{pad}{INDENT}<key>{escape_text(key)}</key>")
            _render_value(item, depth + 1, lines)
        lines.append(f"{pad}</dict>")
    elif isinstance(value, (list, tuple)):
        lines.append(f"{pad}<array>")
        for item in value:
            _render_value(item, depth + 1, lines)
        lines.append(f"{pad}</array>")
    elif isinstance(value, bytes):
        lines.append(f"{pad}<data>")
        for chunk in encode_font_data(value).splitlines():
            lines.append(f"{pad}{chunk}")
        lines.append(f"{pad}</data>")
    elif isinstance(value, bool):
        lines.append(f"{pad}<{'true' if value else 'false'}/>")
    elif isinstance(value, int):
        lines.append(f"{pad}<integer>{value}</integer>")
    elif isinstance(value, str):
        lines.append(f"{pad}<string>{escape_text(value)}</string>")
    else:
        raise TypeError(f"Cannot render {type(value).__name__} in a property list")


def render_profile(
    document: ProfileDocument,
    include_font_uuids: bool = True,
    include_profile_uuid: bool = True,
) -> str:
    """Render a profile document as XML plist text.

    Args:
        document: Document to render
        include_font_uuids: Emit PayloadUUID on each font payload
        include_profile_uuid: Emit PayloadUUID on the profile itself

    Returns:
        Complete document text, terminated by a newline
    """
    tree = document.to_dict()
    if not include_profile_uuid:
        del tree["PayloadUUID"]
    if not include_font_uuids:
        for payload in tree["PayloadContent"]:
            del payload["PayloadUUID"]

    lines = [XML_PROLOG, PLIST_DOCTYPE, '<plist version="1.0">']
    _render_value(tree, 0, lines)
    lines.append("</plist>")
    return "\n".join(lines) + "\n"
