"""Source registry.

Adding a new source:
1) implement a DataSource subclass in `md_plaintext.sources.*`
2) register it here under a new `kind` key
3) reference it in the build config
"""

from __future__ import annotations
from typing import Callable, Dict
from .base import DataSource, SourceSpec
from .local_jsonl import LocalJSONLSource
from .markdown_files import MarkdownFilesSource

_REGISTRY: Dict[str, Callable[[SourceSpec], DataSource]] = {
    "markdown_files": MarkdownFilesSource,
    "local_jsonl": LocalJSONLSource,
}

def make_source(spec: SourceSpec) -> DataSource:
    if spec.kind not in _REGISTRY:
        raise ValueError(f"Unknown source kind: {spec.kind}. Available: {list(_REGISTRY)}")
    return _REGISTRY[spec.kind](spec)
