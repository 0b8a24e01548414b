"""Local JSONL batch source.

Each line should be JSON with at least the configured text field (default
`text`) holding Markdown. Optional `id`. The whole record is kept in
`RawDocument.extra` so the writer can emit it back with the plain text added.
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable
from .base import DataSource, RawDocument, SourceSpec
from .files import resolve_files

log = logging.getLogger("md_plaintext.sources.local_jsonl")

class LocalJSONLSource(DataSource):
    kind = "local_jsonl"

    def __init__(self, spec: SourceSpec):
        self.spec = spec
        self.name = spec.name
        self.files = [f for f, _ in resolve_files(spec.dataset, (".jsonl",))]

    def metadata(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "files": self.files,
            "file_count": len(self.files),
            "total_size_bytes": sum(os.path.getsize(f) for f in self.files if os.path.exists(f)),
        }

    def stream(self) -> Iterable[RawDocument]:
        """Stream records from all configured JSONL files."""
        for file_path in self.files:
            if not os.path.exists(file_path):
                log.warning(f"File not found: {file_path}, skipping")
                continue
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    for line_num, line in enumerate(f, start=1):
                        line = line.strip()
                        if not line:
                            continue
                        try:
                            ex = json.loads(line)
                        except json.JSONDecodeError as e:
                            log.warning(f"Invalid JSON in {file_path}:{line_num}: {e}")
                            continue
                        if not isinstance(ex, dict):
                            log.warning(f"Skipping non-object record in {file_path}:{line_num}")
                            continue
                        text = ex.get(self.spec.text_field)
                        if not isinstance(text, str):
                            log.warning(f"Record {file_path}:{line_num} has no string field '{self.spec.text_field}', skipping")
                            continue
                        yield RawDocument(
                            raw_id=str(ex.get(self.spec.id_field, f"{Path(file_path).stem}_{line_num}")),
                            text=text,
                            source=self.name,
                            path=file_path,
                            extra={**ex, "source_line": line_num},
                        )
            except (OSError, UnicodeDecodeError) as e:
                log.error(f"Error reading file {file_path}: {e}")
                continue
