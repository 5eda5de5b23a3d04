"""Base64 codec for binary plist payloads.

Font bytes are stored in ``<data>`` elements as base64 text, hard-wrapped
at a fixed width so the document stays readable. The wrapping carries no
meaning: decoding ignores all whitespace.
"""

import base64
import binascii

LINE_WIDTH = 68


def wrap_lines(text: str, width: int = LINE_WIDTH) -> list[str]:
    """Split text into fixed-width lines (the last one may be shorter)."""
    return [text[i : i + width] for i in range(0, len(text), width)]


def encode_font_data(data: bytes, width: int = LINE_WIDTH) -> str:
    """Base64-encode bytes and hard-wrap the result.

    Args:
        data: Raw bytes
        width: Characters per line

    Returns:
        Base64 text with a newline every ``width`` characters
    """
    encoded = base64.b64encode(data).decode("ascii")
    return "\n".join(wrap_lines(encoded, width))


def decode_font_data(text: str) -> bytes:
    """Decode wrapped base64 text back to bytes.

    Whitespace (line breaks and indentation) is ignored.

    Raises:
        ValueError: If the text is not valid base64
    """
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
