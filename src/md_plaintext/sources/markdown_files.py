"""Markdown files on local disk, one document per file."""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable
from .base import DataSource, RawDocument, SourceSpec
from .files import resolve_files

log = logging.getLogger("md_plaintext.sources.markdown_files")

MARKDOWN_SUFFIXES = (".md", ".markdown")

class MarkdownFilesSource(DataSource):
    kind = "markdown_files"

    def __init__(self, spec: SourceSpec):
        self.spec = spec
        self.name = spec.name
        self.files = resolve_files(spec.dataset, MARKDOWN_SUFFIXES)

    def metadata(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "files": [f for f, _ in self.files],
            "file_count": len(self.files),
        }

    def stream(self) -> Iterable[RawDocument]:
        for file_path, rel in self.files:
            if not os.path.isfile(file_path):
                log.warning(f"File not found: {file_path}, skipping")
                continue
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    text = f.read()
            except (OSError, UnicodeDecodeError) as e:
                log.error(f"Error reading file {file_path}: {e}")
                continue
            yield RawDocument(
                raw_id=Path(rel).with_suffix("").as_posix(),
                text=text,
                source=self.name,
                path=file_path,
                rel_path=rel,
            )
