"""Records produced around the pipeline.

The document itself is a plain `str` and never gets wrapped. These records
only exist for diagnostics (`StageTrace`) and batch runs (`ConversionResult`).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class StageTrace:
    stage: str
    before: str
    after: str

    @property
    def changed(self) -> bool:
        return self.before != self.after

@dataclass
class ConversionResult:
    item_id: str
    source: str
    chars_in: int
    chars_out: int
    source_path: Optional[str] = None
    output_path: Optional[str] = None
