"""Font payload construction.

Turns discovered fonts into ContentBlock payloads with their identifiers.
"""

from collections.abc import Callable

from fontprofile.config import FontIdentifierStyle, ProfileSettings
from fontprofile.domain import ContentBlock, FontFile
from fontprofile.exceptions import FontReadError


def font_payload_identifier(settings: ProfileSettings, stem: str) -> str:
    """Build the payload identifier for a single font.

    The stem is used verbatim; escaping happens when the document is rendered.
    """
    prefix = settings.identity.identifier_prefix
    if settings.identity.font_identifier_style == FontIdentifierStyle.PRODUCT:
        return f"{prefix}.fonts.{settings.product_slug}.{stem}"
    return f"{prefix}.font.{stem}"


def build_content_block(
    font: FontFile,
    settings: ProfileSettings,
    uuid_factory: Callable[[], str],
) -> ContentBlock:
    """Read a font and turn it into a payload.

    Args:
        font: Discovered font file
        settings: Build settings (identifier namespace)
        uuid_factory: Produces a fresh unique identifier per call

    Returns:
        ContentBlock for the font

    Raises:
        FontReadError: If the font cannot be read
    """
    try:
        data = font.read_bytes()
    except OSError as e:
        raise FontReadError(font.path, e.strerror or str(e)) from e

    return ContentBlock(
        data=data,
        name=font.file_name,
        uuid=uuid_factory(),
        payload_identifier=font_payload_identifier(settings, font.stem),
    )
