"""
Pytest configuration for md_plaintext tests.

Shared fixtures for sample documents and on-disk batch inputs.
"""
import json
import sys
from pathlib import Path

import pytest

# Make the src/ layout importable without an editable install
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

DIVIDER = "─" * 14
CODE_FOOTER = "─" * 30


@pytest.fixture
def report_markdown():
    return (
        "# Weekly Report\n"
        "\n"
        "Some **important** notes and *ideas*.\n"
        "\n"
        "- item one\n"
        "- [x] shipped\n"
        "1. first\n"
        "> quote\n"
        "\n"
        "[^1]: footnote\n"
    )


@pytest.fixture
def docs_tree(tmp_path):
    """A small markdown tree plus a JSONL export."""
    docs = tmp_path / "docs"
    (docs / "sub").mkdir(parents=True)
    (docs / "a.md").write_text("## Alpha\n\n**bold**\n", encoding="utf-8")
    (docs / "sub" / "b.md").write_text("- [ ] todo\n", encoding="utf-8")
    (docs / "notes.txt").write_text("not markdown", encoding="utf-8")

    export = tmp_path / "tickets.jsonl"
    lines = [
        json.dumps({"id": "t1", "body": "[Google](https://google.com)"}),
        "{not json",
        json.dumps({"id": "t2", "body": "~~old~~ new"}),
        json.dumps({"id": "t3", "title": "no body"}),
    ]
    export.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return tmp_path
