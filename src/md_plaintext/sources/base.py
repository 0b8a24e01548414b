"""Batch source plugin interface.

All sources expose a `stream()` generator yielding RawDocument, so the build
runner never needs to know where the Markdown came from.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

@dataclass
class RawDocument:
    raw_id: str
    text: str
    source: str
    path: Optional[str] = None
    # relative location under the source root, used to mirror directory layout
    rel_path: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

@dataclass
class SourceSpec:
    name: str
    kind: str               # markdown_files | local_jsonl
    dataset: Union[str, List[str]]  # file, directory, glob pattern, or list of them
    text_field: str = "text"
    id_field: str = "id"
    output_field: str = "plain_text"

class DataSource:
    """Base interface for all sources."""
    name: str
    kind: str = "base"

    def metadata(self) -> Dict[str, Any]:
        return {}

    def stream(self) -> Iterable[RawDocument]:
        raise NotImplementedError
