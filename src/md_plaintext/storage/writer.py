"""Output writers for batch runs."""

from __future__ import annotations
import json
import os
from pathlib import Path
from typing import Any, Dict, Iterable

def text_output_path(out_dir: str, rel_path: str, keep_suffix: bool = False) -> str:
    """`docs/a.md` -> `<out_dir>/docs/a.txt`, or `<out_dir>/docs/a.md.txt` with keep_suffix."""
    rel = Path(rel_path)
    name = rel.name + ".txt" if keep_suffix else rel.with_suffix(".txt").name
    return os.path.normpath(os.path.join(out_dir, str(rel.parent), name))

def write_text(path: str, text: str) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path

def write_jsonl(path: str, rows: Iterable[Dict[str, Any]]) -> int:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    n = 0
    with open(path, "w", encoding="utf-8") as f:
        for row in rows:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")
            n += 1
    return n

def write_manifest(out_dir: str, manifest: Dict[str, Any]) -> str:
    path = os.path.join(out_dir, "manifest.json")
    os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, ensure_ascii=False, indent=2)
    return path
