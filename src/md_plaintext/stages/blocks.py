"""Block-level stages.

These rewrite whole lines: fenced code, headings, quotes, lists, tables and
horizontal rules. Every pattern is re-run over the full document, so text
produced by an earlier stage (including the inside of a code block) is fair
game for a later one.
"""

from __future__ import annotations
import re
from typing import List, Tuple
from ..utils.text import (
    BULLET,
    CHECKED,
    CODE_FOOTER,
    CODE_HEADER_RULE,
    DIVIDER,
    LINE_CHAR as C,
    LINE_END as E,
    LINE_START as S,
    UNCHECKED,
    box_rule,
    collapse_spaces,
)
from .base import Stage

# S / E: start / end of a line, C: any character inside a line.

FENCE_RE = re.compile(r"```([A-Za-z0-9_]+)?\n([\s\S]*?)```")

class FencedCodeStage(Stage):
    name = "fenced_code"
    layer = "block"

    def apply(self, text: str) -> str:
        return FENCE_RE.sub(self._render, text)

    @staticmethod
    def _render(m: "re.Match[str]") -> str:
        lang, body = m.group(1), m.group(2)
        label = f"（{lang}）" if lang else ""
        header = f"{CODE_HEADER_RULE} ```{label} ``` {CODE_HEADER_RULE}"
        return f"\n{header}\n{body.strip()}\n{CODE_FOOTER}\n"

def _heading_rules() -> List[Tuple["re.Pattern[str]", str]]:
    # Most specific level first. Each pattern pins the exact hash count.
    rules = []
    for level in range(6, 2, -1):
        prefix = f"{box_rule(level - 1)} ● "
        rules.append((re.compile(rf"{S}#{{{level}}} ({C}*){E}"), prefix + r"\1"))
    rules.append((re.compile(rf"{S}## ({C}*){E}"), r"■ \1"))
    rules.append((re.compile(rf"{S}# ({C}*){E}"), f"{DIVIDER}\n ■ \\1\n{DIVIDER}"))
    return rules

class HeadingStage(Stage):
    name = "heading"
    layer = "block"

    def __init__(self):
        self.rules = _heading_rules()

    def apply(self, text: str) -> str:
        for pattern, repl in self.rules:
            text = pattern.sub(repl, text)
        return text

QUOTE_RE = re.compile(rf"{S}> ?({C}*){E}")

class BlockquoteStage(Stage):
    name = "blockquote"
    layer = "block"

    def apply(self, text: str) -> str:
        return QUOTE_RE.sub(r"> \1", text)

# Not line-anchored: a task marker is converted wherever it sits in a line.
CHECKED_RE = re.compile(rf"- \[x\] ({C}*)")
UNCHECKED_RE = re.compile(rf"- \[ \] ({C}*)")

class ChecklistStage(Stage):
    """Task-list items. Must run before the generic bullet rule."""
    name = "checklist"
    layer = "block"

    def apply(self, text: str) -> str:
        text = CHECKED_RE.sub(f"{CHECKED} \\1", text)
        return UNCHECKED_RE.sub(f"{UNCHECKED} \\1", text)

ORDERED_RE = re.compile(rf"{S}(\s*)([0-9]+\.)\s+({C}*){E}")

class OrderedListStage(Stage):
    name = "ordered_list"
    layer = "block"

    def apply(self, text: str) -> str:
        return ORDERED_RE.sub(r"\1\2 \3", text)

BULLET_RE = re.compile(rf"{S}(\s*)[-*+]\s+({C}*){E}")

class UnorderedListStage(Stage):
    name = "unordered_list"
    layer = "block"

    def apply(self, text: str) -> str:
        return BULLET_RE.sub(f"\\1{BULLET}\\2", text)

TABLE_ROW_RE = re.compile(rf"{S}\|{C}*\|{E}")
TABLE_SEPARATOR_RE = re.compile(r"\|(?:[-:]+\|)+")

class TableStage(Stage):
    """Pipe tables: drop separator rows, re-space the cell borders of the rest.

    No column alignment is attempted; ragged tables come out ragged.
    """
    name = "table"
    layer = "block"

    def apply(self, text: str) -> str:
        return TABLE_ROW_RE.sub(self._reflow, text)

    @staticmethod
    def _reflow(m: "re.Match[str]") -> str:
        line = m.group(0)
        if TABLE_SEPARATOR_RE.fullmatch(line):
            return ""
        return collapse_spaces(line.replace("|", " | ")).strip()

RULE_RE = re.compile(rf"{S}(?:-{{3,}}|\*{{3,}}){E}")

class RuleStage(Stage):
    name = "rule"
    layer = "block"

    def apply(self, text: str) -> str:
        return RULE_RE.sub(DIVIDER, text)
