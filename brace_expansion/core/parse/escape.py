"""Sentinel substitution for backslash-escaped metacharacters.

Escaped characters are swapped for NUL-delimited markers before expansion so
the locator, splitter and sequence grammar never see them, and swapped back on
every result afterwards. The markers carry a random token chosen once per
process; input that already contains one of them is not supported.
"""

from __future__ import annotations

import re
import secrets

_TOKEN = secrets.token_hex(8)

ESC_SLASH = f"\0SLASH{_TOKEN}\0"
ESC_OPEN = f"\0OPEN{_TOKEN}\0"
ESC_CLOSE = f"\0CLOSE{_TOKEN}\0"
ESC_COMMA = f"\0COMMA{_TOKEN}\0"
ESC_PERIOD = f"\0PERIOD{_TOKEN}\0"

# Order matters: "\\" must be consumed before "\{" so "\\{" stays an opener.
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\\\", ESC_SLASH),
    ("\\{", ESC_OPEN),
    ("\\}", ESC_CLOSE),
    ("\\,", ESC_COMMA),
    ("\\.", ESC_PERIOD),
)

_UNESCAPES: tuple[tuple[str, str], ...] = (
    (ESC_SLASH, "\\"),
    (ESC_OPEN, "{"),
    (ESC_CLOSE, "}"),
    (ESC_COMMA, ","),
    (ESC_PERIOD, "."),
)

_HAS_ESCAPES = re.compile(r"\\[\\{},.]|^\{\}")


def escape_braces(s: str) -> str:
    if not _HAS_ESCAPES.search(s):
        return s
    for raw, sentinel in _ESCAPES:
        s = s.replace(raw, sentinel)
    return s


def unescape_braces(s: str) -> str:
    for sentinel, raw in _UNESCAPES:
        s = s.replace(sentinel, raw)
    return s
