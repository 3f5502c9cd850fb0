#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the .properties reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from fxbuild.exceptions import PropertiesError
from fxbuild.i18n import load_properties, parse_properties


class TestParseProperties:
    """Test parsing of .properties content."""

    def test_separators(self) -> None:
        text = "equals=1\ncolon:2\nspace 3\npadded  =  4\ntabbed\t:\t5\n"
        assert parse_properties(text) == {
            "equals": "1",
            "colon": "2",
            "space": "3",
            "padded": "4",
            "tabbed": "5",
        }

    def test_comments_and_blank_lines(self) -> None:
        text = "# comment\n! also a comment\n\n   \n  # indented comment\nkey=value\n"
        assert parse_properties(text) == {"key": "value"}

    def test_value_keeps_inner_separators(self) -> None:
        assert parse_properties("url=https://example.com/a=b\n") == {"url": "https://example.com/a=b"}

    def test_line_continuation(self) -> None:
        text = "message=first \\\n    second \\\n    third\nnext=ok\n"
        assert parse_properties(text) == {"message": "first second third", "next": "ok"}

    def test_comment_marker_inside_continuation_is_value(self) -> None:
        text = "key=a\\\n# not a comment\n"
        assert parse_properties(text) == {"key": "a# not a comment"}

    def test_even_backslashes_do_not_continue(self) -> None:
        text = "path=C:\\\\\nother=1\n"
        assert parse_properties(text) == {"path": "C:\\", "other": "1"}

    def test_escapes(self) -> None:
        text = "tab=a\\tb\nnewline=line1\\nline2\nunicode=\\u542f\\u52a8\nescaped\\ key=v\\=1\n"
        assert parse_properties(text) == {
            "tab": "a\tb",
            "newline": "line1\nline2",
            "unicode": "启动",
            "escaped key": "v=1",
        }

    def test_windows_line_endings(self) -> None:
        assert parse_properties("a=1\r\nb=2\r\n") == {"a": "1", "b": "2"}

    def test_key_without_value(self) -> None:
        assert parse_properties("empty\nempty.eq=\n") == {"empty": "", "empty.eq": ""}

    def test_duplicate_keys_last_wins(self) -> None:
        assert parse_properties("key=first\nkey=second\n") == {"key": "second"}

    def test_empty_key_skipped(self) -> None:
        assert parse_properties("=orphan\nkey=value\n") == {"key": "value"}

    def test_malformed_unicode_escape(self) -> None:
        with pytest.raises(PropertiesError, match="Malformed"):
            parse_properties("bad=\\u12G4\n")

    def test_continuation_at_end_of_input(self) -> None:
        assert parse_properties("key=value\\") == {"key": "value"}


class TestLoadProperties:
    """Test reading .properties files from disk."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "I18N_zh_CN.properties"
        path.write_text("launch=启动\n", encoding="utf-8")
        assert load_properties(path) == {"launch": "启动"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(PropertiesError, match="not found"):
            load_properties(tmp_path / "I18N.properties")

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "I18N.properties"
        path.write_bytes(b"key=\xff\xfe\n")
        with pytest.raises(PropertiesError, match="Failed to read"):
            load_properties(path)


# 🌶️📦🔚
