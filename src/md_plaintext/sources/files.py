"""Dataset path resolution shared by the file-backed sources.

A dataset may be:
- Single file: "docs/readme.md"
- Multiple files: ["a.md", "b.md"]
- Directory: "docs/" (recursive)
- Glob pattern: "docs/**/*.md"
"""

from __future__ import annotations
import glob
import os
from pathlib import Path
from typing import List, Sequence, Tuple, Union

def _is_glob(s: str) -> bool:
    return "*" in s or "?" in s or "[" in s

def resolve_files(dataset: Union[str, List[str]], suffixes: Sequence[str]) -> List[Tuple[str, str]]:
    """Resolve a dataset spec to (path, path relative to its root) pairs.

    Missing paths are returned as-is so the source can log them when streaming.
    """
    if isinstance(dataset, list):
        out = []
        for item in dataset:
            out.extend(resolve_files(item, suffixes))
        return out

    dataset = str(dataset)
    if _is_glob(dataset):
        root = _glob_root(dataset)
        matched = sorted(f for f in glob.glob(dataset, recursive=True) if os.path.isfile(f) and f.endswith(tuple(suffixes)))
        return [(f, os.path.relpath(f, root)) for f in matched]

    path = Path(dataset)
    if path.is_dir():
        matched = sorted({str(f) for suffix in suffixes for f in path.glob(f"**/*{suffix}") if f.is_file()})
        return [(f, os.path.relpath(f, dataset)) for f in matched]

    return [(dataset, path.name)]

def _glob_root(pattern: str) -> str:
    """Longest leading directory of a glob pattern that holds no wildcard."""
    parts = Path(pattern).parts
    fixed = []
    for p in parts:
        if _is_glob(p):
            break
        fixed.append(p)
    if len(fixed) == len(parts):
        fixed = fixed[:-1]
    return os.path.join(*fixed) if fixed else "."
