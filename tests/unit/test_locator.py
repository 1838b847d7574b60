"""Tests for locating font files on disk and in the embedded bundle."""

import sys
from pathlib import Path

import pytest

from fontinstaller.core.exceptions import (
    MissingSourceDirectoryError,
    NoEmbeddedFontsFoundError,
    NoFontFilesFoundError,
)
from fontinstaller.fonts.locator import (
    EmbeddedFontSource,
    get_embedded_fonts_dir,
    locate_font_files,
)


class TestLocateFontFiles:
    """Test directory mode discovery."""

    def test_finds_supported_fonts_only(self, source_dir, make_file):
        for name in ["a.ttf", "b.otf", "c.ttc", "d.doc", "e.txt"]:
            make_file(source_dir, name)

        font_files = locate_font_files(source_dir)

        assert [f.filename for f in font_files] == ["a.ttf", "b.otf", "c.ttc"]

    def test_extension_match_is_case_insensitive(self, source_dir, make_file):
        make_file(source_dir, "Upper.TTF")
        make_file(source_dir, "Mixed.OtF")

        font_files = locate_font_files(source_dir)

        assert {f.filename for f in font_files} == {"Upper.TTF", "Mixed.OtF"}

    def test_does_not_recurse(self, source_dir, make_file):
        make_file(source_dir, "top.ttf")
        make_file(source_dir / "nested", "deep.ttf")

        font_files = locate_font_files(source_dir)

        assert [f.filename for f in font_files] == ["top.ttf"]

    def test_empty_directory_raises(self, source_dir):
        with pytest.raises(NoFontFilesFoundError, match="No font files found"):
            locate_font_files(source_dir)

    @pytest.mark.parametrize("extension", [".txt", ".doc", ".pdf", ".jpg"])
    def test_non_font_files_raise_same_error(self, source_dir, make_file, extension):
        make_file(source_dir, f"test-file{extension}")

        with pytest.raises(NoFontFilesFoundError, match="No font files found"):
            locate_font_files(source_dir)

    def test_missing_directory_raises(self, temp_dir):
        with pytest.raises(MissingSourceDirectoryError, match="Source directory does not exist"):
            locate_font_files(temp_dir / "missing")

    def test_custom_extensions(self, source_dir, make_file):
        make_file(source_dir, "a.ttf")
        make_file(source_dir, "b.woff2")

        font_files = locate_font_files(source_dir, [".woff2"])

        assert [f.filename for f in font_files] == ["b.woff2"]

    def test_empty_extension_list_accepts_nothing(self, source_dir, make_file):
        make_file(source_dir, "a.ttf")

        with pytest.raises(NoFontFilesFoundError):
            locate_font_files(source_dir, [])


class TestEmbeddedFontSource:
    """Test embedded font enumeration."""

    def test_lists_font_resources(self, embedded_dir, make_file):
        make_file(embedded_dir, "Inter.ttf")
        make_file(embedded_dir / "Fonts", "Lora.otf")
        make_file(embedded_dir, "README.md")

        source = EmbeddedFontSource(embedded_dir)

        assert source.resource_names() == ["Fonts/Lora.otf", "Inter.ttf"]

    def test_read_bytes(self, embedded_dir, make_file):
        make_file(embedded_dir / "Fonts", "Lora.otf", content="lora bytes")

        source = EmbeddedFontSource(embedded_dir)

        assert source.read_bytes("Fonts/Lora.otf") == b"lora bytes"

    def test_empty_extension_list_lists_nothing(self, embedded_dir, make_file):
        make_file(embedded_dir, "Inter.ttf")

        source = EmbeddedFontSource(embedded_dir, [])

        assert source.resource_names() == []

    def test_missing_root_has_no_resources(self, temp_dir):
        source = EmbeddedFontSource(temp_dir / "missing")

        assert source.resource_names() == []
        with pytest.raises(NoEmbeddedFontsFoundError):
            source.require_resources()

    def test_require_resources_without_fonts(self, embedded_dir, make_file):
        make_file(embedded_dir, "notes.txt")

        with pytest.raises(NoEmbeddedFontsFoundError, match="No embedded font resources"):
            EmbeddedFontSource(embedded_dir).require_resources()

    def test_default_root_is_package_directory(self):
        source = EmbeddedFontSource()

        assert source.root == get_embedded_fonts_dir()
        assert source.root.name == "embedded"
        assert source.root.parent.name == "fontinstaller"


class TestEmbeddedFontsDir:
    """Test bundle root detection."""

    def test_frozen_build_uses_meipass(self, monkeypatch, temp_dir):
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "_MEIPASS", str(temp_dir), raising=False)

        assert get_embedded_fonts_dir() == Path(temp_dir) / "fontinstaller" / "embedded"

    def test_source_tree(self, monkeypatch):
        monkeypatch.delattr(sys, "frozen", raising=False)

        fonts_dir = get_embedded_fonts_dir()

        assert fonts_dir.is_dir()
        assert (fonts_dir.parent / "__init__.py").exists()
