"""Final whitespace normalization."""

from __future__ import annotations
import re
from ..utils.text import LINE_END
from .base import Stage

TRAILING_SPACE_RE = re.compile(rf"[ \t]+{LINE_END}")
BLANK_RUN_RE = re.compile(r"\n{3,}")
TRAILING_NEWLINES_RE = re.compile(r"\n+\Z")

class WhitespaceNormalizationStage(Stage):
    """Trim line ends, cap blank runs at one empty line, trim the document.

    Line ends are trimmed before blank runs are collapsed so that a line of
    spaces between blank lines cannot leave a fresh run behind. That keeps
    the stage idempotent.
    """
    name = "whitespace"
    layer = "cleanup"

    def apply(self, text: str) -> str:
        text = TRAILING_SPACE_RE.sub("", text)
        text = BLANK_RUN_RE.sub("\n\n", text)
        text = TRAILING_NEWLINES_RE.sub("", text)
        return text.strip()
