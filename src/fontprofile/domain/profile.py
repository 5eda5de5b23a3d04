"""Profile document types.

This module defines the payload domain models that make up a configuration
profile: one ContentBlock per embedded font, wrapped by a ProfileDocument.
"""

from dataclasses import dataclass
from typing import Any

FONT_PAYLOAD_TYPE = "com.apple.font"
PROFILE_PAYLOAD_TYPE = "Configuration"
PAYLOAD_VERSION = 1


@dataclass(frozen=True)
class ContentBlock:
    """A single font payload embedded in the profile.

    Attributes:
        data: Raw font bytes
        name: Font file name shown on the device
        uuid: Freshly generated unique identifier
        payload_identifier: Reverse-DNS identifier for this payload
        payload_type: Always com.apple.font
        payload_version: Always 1
    """

    data: bytes
    name: str
    uuid: str
    payload_identifier: str
    payload_type: str = FONT_PAYLOAD_TYPE
    payload_version: int = PAYLOAD_VERSION

    @property
    def size(self) -> int:
        """Size of the embedded font in bytes."""
        return len(self.data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plist-style dictionary keyed by payload field name."""
        return {
            "Font": self.data,
            "Name": self.name,
            "PayloadIdentifier": self.payload_identifier,
            "PayloadType": self.payload_type,
            "PayloadVersion": self.payload_version,
            "PayloadUUID": self.uuid,
        }


@dataclass(frozen=True)
class ProfileDocument:
    """Top-level configuration profile.

    Attributes:
        content: Font payloads, ordered by font path
        description: Human-readable description
        display_name: Name shown when installing the profile
        uuid: Freshly generated unique identifier
        payload_identifier: Reverse-DNS identifier of the profile
        organization: PayloadOrganization value
        payload_type: Always Configuration
        payload_version: Always 1
    """

    content: tuple[ContentBlock, ...]
    description: str
    display_name: str
    uuid: str
    payload_identifier: str
    organization: str
    payload_type: str = PROFILE_PAYLOAD_TYPE
    payload_version: int = PAYLOAD_VERSION

    def __post_init__(self) -> None:
        if not self.content:
            raise ValueError("A profile document needs at least one content block")

    @property
    def uuids(self) -> list[str]:
        """All identifiers in the document, profile first."""
        return [self.uuid, *(block.uuid for block in self.content)]

    @property
    def total_font_bytes(self) -> int:
        """Combined size of all embedded fonts."""
        return sum(block.size for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plist-style dictionary keyed by payload field name."""
        return {
            "PayloadContent": [block.to_dict() for block in self.content],
            "PayloadDescription": self.description,
            "PayloadDisplayName": self.display_name,
            "PayloadIdentifier": self.payload_identifier,
            "PayloadOrganization": self.organization,
            "PayloadType": self.payload_type,
            "PayloadUUID": self.uuid,
            "PayloadVersion": self.payload_version,
        }
