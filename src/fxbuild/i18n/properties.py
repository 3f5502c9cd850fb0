#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reader for Java-style ``.properties`` resource files.

Supports ``#`` and ``!`` comments, ``=``/``:``/whitespace separators,
backslash line continuations and the ``\\t \\n \\r \\f \\uXXXX`` escapes.
When a key occurs more than once, the last occurrence wins.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import re

from provide.foundation import logger

from fxbuild.exceptions import PropertiesError

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _has_continuation(line: str) -> bool:
    """A line continues when it ends in an odd number of backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    pending: str | None = None
    for raw in _LINE_BREAK.split(text):
        stripped = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not stripped or stripped[0] in _COMMENT_MARKERS:
                continue
            current = stripped
        else:
            current = pending + stripped

        if _has_continuation(current):
            pending = current[:-1]
            continue
        pending = None
        yield current

    if pending is not None:
        yield pending


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key_end = min(index, length)
    value_start = key_end
    while value_start < length and line[value_start] in _WHITESPACE:
        value_start += 1
    if value_start < length and line[value_start] in _SEPARATORS:
        value_start += 1
    while value_start < length and line[value_start] in _WHITESPACE:
        value_start += 1

    return line[:key_end], line[value_start:]


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text

    out: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char != "\\":
            out.append(char)
            index += 1
            continue

        index += 1
        if index >= length:
            break
        escaped = text[index]
        if escaped == "u":
            digits = text[index + 1 : index + 5]
            if len(digits) != 4 or not all(d in "0123456789abcdefABCDEF" for d in digits):
                raise PropertiesError(f"Malformed \\uxxxx encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            index += 5
            continue
        out.append(_ESCAPES.get(escaped, escaped))
        index += 1

    return "".join(out)


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``.properties`` content into a key/value mapping."""
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key)
        if not key:
            logger.debug("Skipping property with empty key", line=line)
            continue
        entries[key] = _unescape(raw_value)
    return entries


def load_properties(path: Path) -> dict[str, str]:
    """Read and parse a UTF-8 ``.properties`` file."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise PropertiesError(f"Resource file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise PropertiesError(f"Failed to read resource file {path}: {e}") from e
    return parse_properties(text)


# 🌶️📦🔚
