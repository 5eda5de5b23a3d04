"""Unit tests for the profile I/O layer.

Tests for the base64 codec, text escaping, plist rendering and ProfileWriter.
"""

import base64
import os
import plistlib
from pathlib import Path
from unittest.mock import patch

import pytest

from fontprofile.config import OutputConfig, ProfileSettings
from fontprofile.domain import ContentBlock, ProfileDocument
from fontprofile.exceptions import ProfileWriteError
from fontprofile.io import (
    LINE_WIDTH,
    ProfileWriter,
    atomic_write_text,
    decode_font_data,
    encode_font_data,
    escape_text,
    render_profile,
)


@pytest.fixture
def document() -> ProfileDocument:
    """A document with a single three-byte font."""
    block = ContentBlock(
        data=b"abc",
        name="one.ttf",
        uuid="FONT-UUID",
        payload_identifier="me.garbee.font.one",
    )
    return ProfileDocument(
        content=(block,),
        description="Installs Example fonts",
        display_name="Example Fonts 2.0",
        uuid="PROFILE-UUID",
        payload_identifier="me.garbee.fonts.example.2.0",
        organization="Jonathan Garbee",
    )


class TestCodec:
    """Tests for base64 encoding and wrapping."""

    def test_line_width(self):
        """Every line but the last is exactly LINE_WIDTH characters."""
        data = bytes(range(256)) * 3
        lines = encode_font_data(data).split("\n")
        assert LINE_WIDTH == 68
        assert all(len(line) == 68 for line in lines[:-1])
        assert 0 < len(lines[-1]) <= 68

    def test_roundtrip(self):
        """Unwrapping and decoding reproduces the bytes exactly."""
        data = os.urandom(5000)
        assert decode_font_data(encode_font_data(data)) == data

    def test_unwrapped_matches_plain_base64(self):
        data = os.urandom(333)
        wrapped = encode_font_data(data)
        assert wrapped.replace("\n", "") == base64.b64encode(data).decode("ascii")

    def test_decode_ignores_indentation(self):
        text = "\t\tYWJj\n\t\tZGVm\n"
        assert decode_font_data(text) == b"abcdef"

    def test_empty(self):
        assert encode_font_data(b"") == ""
        assert decode_font_data("") == b""

    def test_decode_invalid(self):
        with pytest.raises(ValueError, match="Invalid base64"):
            decode_font_data("not base64!")


class TestEscapeText:
    """Tests for escape_text."""

    def test_all_reserved_characters(self):
        assert escape_text("&<>\"'") == "&amp;&lt;&gt;&quot;&apos;"

    def test_ampersand_not_double_escaped(self):
        """Entities produced for other characters are not escaped again."""
        assert escape_text("<&>") == "&lt;&amp;&gt;"

    def test_plain_text_unchanged(self):
        assert escape_text("Inter Bold 2.0") == "Inter Bold 2.0"


class TestRenderProfile:
    """Tests for render_profile."""

    def test_exact_output(self, document: ProfileDocument):
        """Test the complete rendered document."""
        expected = "\n".join(
            [
                '<?xml version="1.0" encoding="UTF-8"?>',
                '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
                '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">',
                '<plist version="1.0">',
                "<dict>",
                "\t<key>PayloadContent</key>",
                "\t<array>",
                "\t\t<dict>",
                "\t\t\t<key>Font</key>",
                "\t\t\t<data>",
                "\t\t\tYWJj",
                "\t\t\t</data>",
                "\t\t\t<key>Name</key>",
                "\t\t\t<string>one.ttf</string>",
                "\t\t\t<key>PayloadIdentifier</key>",
                "\t\t\t<string>me.garbee.font.one</string>",
                "\t\t\t<key>PayloadType</key>",
                "\t\t\t<string>com.apple.font</string>",
                "\t\t\t<key>PayloadVersion</key>",
                "\t\t\t<integer>1</integer>",
                "\t\t\t<key>PayloadUUID</key>",
                "\t\t\t<string>FONT-UUID</string>",
                "\t\t</dict>",
                "\t</array>",
                "\t<key>PayloadDescription</key>",
                "\t<string>Installs Example fonts</string>",
                "\t<key>PayloadDisplayName</key>",
                "\t<string>Example Fonts 2.0</string>",
                "\t<key>PayloadIdentifier</key>",
                "\t<string>me.garbee.fonts.example.2.0</string>",
                "\t<key>PayloadOrganization</key>",
                "\t<string>Jonathan Garbee</string>",
                "\t<key>PayloadType</key>",
                "\t<string>Configuration</string>",
                "\t<key>PayloadUUID</key>",
                "\t<string>PROFILE-UUID</string>",
                "\t<key>PayloadVersion</key>",
                "\t<integer>1</integer>",
                "</dict>",
                "</plist>",
                "",
            ]
        )
        assert render_profile(document) == expected

    def test_parses_as_plist(self, document: ProfileDocument):
        """The rendered text is a valid property list."""
        parsed = plistlib.loads(render_profile(document).encode("utf-8"))
        assert parsed["PayloadType"] == "Configuration"
        assert parsed["PayloadContent"][0]["Font"] == b"abc"
        assert parsed["PayloadContent"][0]["PayloadVersion"] == 1

    def test_optional_uuids(self, document: ProfileDocument):
        """PayloadUUID can be dropped at either level."""
        text = render_profile(document, include_font_uuids=False)
        parsed = plistlib.loads(text.encode("utf-8"))
        assert "PayloadUUID" not in parsed["PayloadContent"][0]
        assert parsed["PayloadUUID"] == "PROFILE-UUID"

        text = render_profile(document, include_profile_uuid=False)
        parsed = plistlib.loads(text.encode("utf-8"))
        assert "PayloadUUID" not in parsed
        assert parsed["PayloadContent"][0]["PayloadUUID"] == "FONT-UUID"

    def test_escapes_string_values(self):
        """Reserved characters in names and identifiers stay well-formed."""
        name = "A&B <\"x'>.ttf"
        block = ContentBlock(
            data=b"\x00",
            name=name,
            uuid="U",
            payload_identifier="me.garbee.font.A&B <\"x'>",
        )
        document = ProfileDocument(
            content=(block,),
            description="Installs R&D fonts",
            display_name="R&D Fonts",
            uuid="P",
            payload_identifier="me.garbee.fonts.r&d",
            organization="Jonathan Garbee",
        )

        text = render_profile(document)
        assert "<string>A&amp;B &lt;&quot;x&apos;&gt;.ttf</string>" in text
        assert "<string>R&amp;D Fonts</string>" in text

        parsed = plistlib.loads(text.encode("utf-8"))
        assert parsed["PayloadContent"][0]["Name"] == name
        assert parsed["PayloadContent"][0]["PayloadIdentifier"] == "me.garbee.font.A&B <\"x'>"
        assert parsed["PayloadDisplayName"] == "R&D Fonts"

    def test_long_data_is_wrapped(self, document: ProfileDocument):
        block = ContentBlock(
            data=bytes(range(256)),
            name="big.ttf",
            uuid="U",
            payload_identifier="me.garbee.font.big",
        )
        big = ProfileDocument(
            content=(block,),
            description=document.description,
            display_name=document.display_name,
            uuid="P",
            payload_identifier=document.payload_identifier,
            organization=document.organization,
        )
        lines = render_profile(big).splitlines()
        start = lines.index("\t\t\t<data>") + 1
        end = lines.index("\t\t\t</data>")
        data_lines = [line.strip() for line in lines[start:end]]
        assert len(data_lines) == 6  # 344 base64 chars
        assert all(len(line) == 68 for line in data_lines[:-1])


class TestProfileWriter:
    """Tests for ProfileWriter class."""

    def test_get_profile_path(self, tmp_path: Path):
        """Output is named after the product."""
        settings = ProfileSettings(
            product_name="Example",
            version="2.0",
            output=OutputConfig(output_dir=tmp_path),
        )
        assert ProfileWriter.get_profile_path(settings) == tmp_path / "Example.mobileconfig"

    def test_get_profile_path_versioned(self, tmp_path: Path):
        settings = ProfileSettings(
            product_name="Example",
            version="2.0",
            output=OutputConfig(output_dir=tmp_path, versioned_filename=True),
        )
        assert ProfileWriter.get_profile_path(settings) == tmp_path / "Example-2.0.mobileconfig"

    def test_get_profile_path_versioned_without_version(self, tmp_path: Path):
        """Without a version the version segment is omitted."""
        settings = ProfileSettings(
            product_name="Example",
            output=OutputConfig(output_dir=tmp_path, versioned_filename=True),
        )
        assert ProfileWriter.get_profile_path(settings) == tmp_path / "Example.mobileconfig"

    def test_write(self, tmp_path: Path, document: ProfileDocument):
        """Test writing a document to the derived path."""
        settings = ProfileSettings(
            product_name="Example", output=OutputConfig(output_dir=tmp_path)
        )
        path = ProfileWriter(settings).write(document)

        assert path == tmp_path / "Example.mobileconfig"
        assert path.read_text(encoding="utf-8") == render_profile(document)
        assert [p.name for p in tmp_path.iterdir()] == ["Example.mobileconfig"]

    def test_write_respects_uuid_switches(self, tmp_path: Path, document: ProfileDocument):
        settings = ProfileSettings(
            product_name="Example",
            output=OutputConfig(output_dir=tmp_path, include_profile_uuid=False),
        )
        path = ProfileWriter(settings).write(document)
        assert "PROFILE-UUID" not in path.read_text(encoding="utf-8")

    def test_write_missing_directory(self, tmp_path: Path, document: ProfileDocument):
        """Writing into a nonexistent directory raises ProfileWriteError."""
        settings = ProfileSettings(
            product_name="Example",
            output=OutputConfig(output_dir=tmp_path / "missing"),
        )
        with pytest.raises(ProfileWriteError) as exc_info:
            ProfileWriter(settings).write(document)
        assert exc_info.value.exit_code == 3


class TestAtomicWriteText:
    """Tests for atomic_write_text."""

    def test_replaces_existing_file(self, tmp_path: Path):
        target = tmp_path / "out.mobileconfig"
        target.write_text("old")
        atomic_write_text(target, "new")
        assert target.read_text() == "new"

    def test_failed_replace_leaves_no_partial_file(self, tmp_path: Path):
        """A failure keeps the previous file and removes the temporary one."""
        target = tmp_path / "out.mobileconfig"
        target.write_text("complete")

        with patch("fontprofile.io.writer.os.replace", side_effect=OSError(28, "No space left")):
            with pytest.raises(ProfileWriteError, match="No space left"):
                atomic_write_text(target, "partial")

        assert target.read_text() == "complete"
        assert [p.name for p in tmp_path.iterdir()] == ["out.mobileconfig"]
