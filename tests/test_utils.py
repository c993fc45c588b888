"""Tests for villagerdb/utils/assets.py."""

from __future__ import annotations

import re
from hashlib import md5
from pathlib import Path

import pytest

from villagerdb.utils.assets import add_hash_to_url, create_file_hash, public_path

HEX7 = re.compile(r"^[0-9a-f]{7}$")


class TestCreateFileHash:
    """Short MD5 content hash of a file."""

    def test_existing_file_returns_seven_hex_chars(self, tmp_path):
        css = tmp_path / "site.css"
        css.write_text("body { color: red; }")

        result = create_file_hash(css)

        assert result is not None
        assert HEX7.match(result)

    def test_matches_md5_prefix(self, tmp_path):
        js = tmp_path / "app.js"
        js.write_text("console.log('hi');", encoding="utf-8")

        expected = md5(b"console.log('hi');").hexdigest()[:7]
        assert create_file_hash(js) == expected

    def test_deterministic_for_same_content(self, tmp_path):
        first = tmp_path / "a.css"
        second = tmp_path / "b.css"
        first.write_bytes(b"same bytes")
        second.write_bytes(b"same bytes")

        assert create_file_hash(first) == create_file_hash(second)

    def test_content_change_changes_hash(self, tmp_path):
        css = tmp_path / "site.css"
        css.write_text("a")
        before = create_file_hash(css)
        css.write_text("b")

        assert create_file_hash(css) != before

    def test_binary_content_hashes(self, tmp_path):
        """Non-UTF-8 bytes are hashed without decoding."""
        png = tmp_path / "1.png"
        png.write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")

        assert create_file_hash(png) == md5(b"\x89PNG\r\n\x1a\n\xff\xfe").hexdigest()[:7]

    def test_missing_file_returns_none(self):
        assert create_file_hash(Path("/nonexistent/missing.css")) is None

    def test_directory_error_propagates(self, tmp_path):
        """Only a missing file maps to None; other OS errors reach the caller."""
        (tmp_path / "site.css").mkdir()

        with pytest.raises(IsADirectoryError):
            create_file_hash(tmp_path / "site.css")


class TestAddHashToUrl:
    """Splicing a hash before the extension."""

    def test_inserts_before_extension(self):
        assert add_hash_to_url("a/b/name.ext", "h1234ab") == "a/b/name.h1234ab.ext"

    def test_keeps_earlier_dots(self):
        assert (
            add_hash_to_url("/js/vendor.min.js", "abcdef0")
            == "/js/vendor.min.abcdef0.js"
        )

    def test_reapplying_with_other_hash_adds_second_segment(self):
        once = add_hash_to_url("/css/site.css", "1111111")
        twice = add_hash_to_url(once, "2222222")

        assert twice == "/css/site.1111111.2222222.css"

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("/images/logo", "/images/logo.abc1234"),
            ("/v1.2/assets/README", "/v1.2/assets/README.abc1234"),
        ],
    )
    def test_no_extension_appends_hash(self, url, expected):
        assert add_hash_to_url(url, "abc1234") == expected


class TestPublicPath:
    def test_strips_leading_slash(self, tmp_path):
        assert public_path(tmp_path, "/css/site.css") == tmp_path / "css" / "site.css"

    def test_relative_url(self, tmp_path):
        assert public_path(tmp_path, "css/site.css") == tmp_path / "css" / "site.css"
