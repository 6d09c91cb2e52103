"""Tests for mobilizer.tools.theme_zip."""

from __future__ import annotations

import struct

import pytest

from mobilizer.tools.theme_zip import INVALID_ARCHIVE_MSG, ThemeArchiveError, read_theme_archive


def _filenames(archive):
    return [f.filename for f in archive.files]


def _patch_central_header(data: bytes, offset: int, value: int) -> bytes:
    # offset 8: general purpose flags, offset 10: compression method
    at = data.index(b"PK\x01\x02") + offset
    return data[:at] + struct.pack("<H", value) + data[at + 2 :]


class TestReadThemeArchive:
    def test_reads_text_files(self, make_zip, sample_theme_files):
        archive = read_theme_archive(make_zip(sample_theme_files))

        assert archive.name == "dawn"
        assert sorted(_filenames(archive)) == sorted(sample_theme_files)
        header = next(f for f in archive.files if f.filename == "sections/header.liquid")
        assert header.content == sample_theme_files["sections/header.liquid"]

    def test_binaries_listed_but_not_read(self, make_zip):
        path = make_zip(
            {
                "assets/logo.png": b"\x89PNG\r\n",
                "assets/font.woff2": b"\x00\x01",
                "assets/theme.js": "console.log(1)",
                "README.md": "hello",
            }
        )
        archive = read_theme_archive(path)

        assert _filenames(archive) == ["assets/theme.js"]
        assert archive.asset_entries == ["assets/logo.png", "assets/font.woff2", "assets/theme.js"]

    def test_only_config_json_is_read(self, make_zip):
        archive = read_theme_archive(
            make_zip({"config/settings_data.json": "{}", "locales/en.default.json": "{}"})
        )
        assert _filenames(archive) == ["config/settings_data.json"]

    def test_macosx_entries_ignored(self, make_zip):
        archive = read_theme_archive(
            make_zip({"__MACOSX/sections/._header.liquid": "junk", "sections/header.liquid": "<header/>"})
        )

        assert _filenames(archive) == ["sections/header.liquid"]
        assert archive.entries == ["sections/header.liquid"]

    def test_oversized_entry_skipped(self, make_zip):
        archive = read_theme_archive(
            make_zip({"sections/big.liquid": "x" * 100, "sections/small.liquid": "y"}),
            max_entry_bytes=10,
        )
        assert _filenames(archive) == ["sections/small.liquid"]

    def test_undecodable_bytes_replaced(self, make_zip):
        archive = read_theme_archive(make_zip({"sections/a.liquid": b"ok \xff"}))
        assert archive.files[0].content == "ok \ufffd"

    def test_bytes_source(self, make_zip):
        data = make_zip({"sections/header.liquid": "<header/>"}).read_bytes()
        archive = read_theme_archive(data, name="Dawn.zip")

        assert archive.name == "Dawn"
        assert _filenames(archive) == ["sections/header.liquid"]

    def test_bytes_source_default_name(self, make_zip):
        data = make_zip({"sections/header.liquid": "<header/>"}).read_bytes()
        assert read_theme_archive(data).name == "theme"


class TestInvalidArchive:
    def test_not_a_zip(self):
        with pytest.raises(ThemeArchiveError, match=INVALID_ARCHIVE_MSG):
            read_theme_archive(b"definitely not a zip")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ThemeArchiveError):
            read_theme_archive(tmp_path / "missing.zip")

    def test_encrypted_entry(self, make_zip):
        data = make_zip({"sections/header.liquid": "<header/>"}).read_bytes()
        with pytest.raises(ThemeArchiveError, match=INVALID_ARCHIVE_MSG):
            read_theme_archive(_patch_central_header(data, 8, 0x1))

    def test_unsupported_compression(self, make_zip):
        data = make_zip({"sections/header.liquid": "<header/>"}).read_bytes()
        with pytest.raises(ThemeArchiveError, match=INVALID_ARCHIVE_MSG):
            read_theme_archive(_patch_central_header(data, 10, 99))

    def test_unreadable_binary_entry_is_not_opened(self, make_zip):
        data = make_zip({"assets/logo.png": b"\x89PNG", "sections/header.liquid": "<header/>"}).read_bytes()
        archive = read_theme_archive(_patch_central_header(data, 8, 0x1))

        assert _filenames(archive) == ["sections/header.liquid"]
