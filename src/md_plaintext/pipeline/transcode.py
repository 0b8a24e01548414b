"""The Markdown -> plain text pipeline.

`transcode()` is the whole public contract: a total, pure `str -> str`
function. It threads the document through every registered stage once, in
registry order. Calling it again on its own output is not a no-op (inline
code spans keep growing), so callers convert each document exactly once.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Sequence
from ..stages.base import Stage
from ..stages.registry import STAGES, make_stages
from .context import StageTrace

log = logging.getLogger("md_plaintext.pipeline")

class Pipeline:
    def __init__(self, stages: Sequence[Stage] = STAGES):
        self._stages = tuple(stages)

    @property
    def stages(self) -> tuple:
        return self._stages

    def run(self, text: str) -> str:
        for st in self._stages:
            text = st.apply(text)
        return text

    def trace(self, text: str) -> List[StageTrace]:
        out = []
        for st in self._stages:
            after = st.apply(text)
            rec = StageTrace(st.name, text, after)
            if rec.changed:
                log.debug(f"stage={st.name} chars {len(text)} -> {len(after)}")
            out.append(rec)
            text = after
        return out

    __call__ = run

DEFAULT_PIPELINE = Pipeline()

def transcode(markdown_text: str) -> str:
    """Convert Markdown source to its plain-text rendition."""
    return DEFAULT_PIPELINE.run(markdown_text)

def trace(markdown_text: str, stages: Optional[Iterable[str]] = None) -> List[StageTrace]:
    """
    Run the pipeline (or a subset of it) and record every stage's input and output.

    Args:
        markdown_text: Markdown source.
        stages: Optional stage names. The subset still runs in pipeline order.

    Raises:
        ValueError: if a stage name is unknown.
    """
    pipeline = DEFAULT_PIPELINE if stages is None else Pipeline(make_stages(stages))
    return pipeline.trace(markdown_text)
