"""Inline stages: code spans, emphasis, links and images, HTML tags, footnotes."""

from __future__ import annotations
import re
from ..utils.text import LINE_CHAR as C
from .base import Stage

CODE_SPAN_RE = re.compile(r"`([^`]+)`")

class InlineCodeStage(Stage):
    """Wrap code spans as `x``.

    The trailing backtick is doubled, so running this stage over its own
    output keeps growing the span. Apply once per document.
    """
    name = "inline_code"
    layer = "inline"

    def apply(self, text: str) -> str:
        return CODE_SPAN_RE.sub(r"`\1``", text)

BOLD_RE = re.compile(rf"\*\*({C}*?)\*\*")
ITALIC_RE = re.compile(rf"\*({C}*?)\*")
STRIKE_RE = re.compile(rf"~~({C}*?)~~")

class EmphasisStage(Stage):
    """Bold, then italic, then strikethrough.

    Bold has to go first: once `**` pairs are gone the italic rule only sees
    single asterisks.
    """
    name = "emphasis"
    layer = "inline"

    def apply(self, text: str) -> str:
        text = BOLD_RE.sub(r"【\1】", text)
        text = ITALIC_RE.sub(r"[\1]", text)
        return STRIKE_RE.sub(r"~\1~", text)

IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)\s]+)(?:\s"([^"]+)")?\)')
LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

class LinkImageStage(Stage):
    name = "link_image"
    layer = "inline"

    def apply(self, text: str) -> str:
        # Images first, otherwise the link rule eats `[alt](url)` and leaves a stray `!`.
        # The alt text is dropped; a missing title leaves empty parentheses.
        text = IMAGE_RE.sub(r"\2 (\3)", text)
        return LINK_RE.sub(r"\2 (\1)", text)

# Unterminated tags run to the end of the document.
TAG_RE = re.compile(r"</?[^>]+(?:>|\Z)")

class HtmlStripStage(Stage):
    name = "html_strip"
    layer = "inline"

    def apply(self, text: str) -> str:
        return TAG_RE.sub("", text)

FOOTNOTE_DEF_RE = re.compile(rf"\[\^([0-9]+)\]: ({C}*)")
FOOTNOTE_REF_RE = re.compile(r"\[\^([0-9]+)\]")

class FootnoteStage(Stage):
    name = "footnote"
    layer = "inline"

    def apply(self, text: str) -> str:
        text = FOOTNOTE_DEF_RE.sub(r"[^\1] \2", text)
        return FOOTNOTE_REF_RE.sub(r"[^\1]", text)
