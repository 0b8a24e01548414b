"""Glyphs and small text helpers shared by the stages."""

from __future__ import annotations
import re

BOX_DASH = "─"

DIVIDER = BOX_DASH * 14
CODE_FOOTER = BOX_DASH * 30
CODE_HEADER_RULE = BOX_DASH * 8

BULLET = "・"
CHECKED = "☑"
UNCHECKED = "☐"

# Line boundaries. \r, \u2028 and \u2029 end a line as well as \n, so CRLF
# pastes anchor the same way LF text does. Python's `.`, `^` and `$` only
# know about \n.
LINE_CHAR = r"[^\r\n\u2028\u2029]"
LINE_START = r"(?<![^\r\n\u2028\u2029])"
LINE_END = r"(?![^\r\n\u2028\u2029])"

_MULTI_SPACE_RE = re.compile(r"\s{2,}")

def box_rule(width: int) -> str:
    """A run of `width` box-drawing dashes."""
    return BOX_DASH * width

def collapse_spaces(text: str) -> str:
    """Collapse runs of two or more whitespace characters to a single space."""
    return _MULTI_SPACE_RE.sub(" ", text)
