"""Stage registry.

The pipeline order lives here as a literal tuple. It is not configurable:
bold must precede italic, task items must precede bullets, images must
precede links, and the whitespace pass must come last.

`make_stages()` resolves names for diagnostics (e.g. `md-plaintext trace
--stage emphasis`) but always hands stages back in pipeline order.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple
from .base import Stage
from .blocks import (
    BlockquoteStage,
    ChecklistStage,
    FencedCodeStage,
    HeadingStage,
    OrderedListStage,
    RuleStage,
    TableStage,
    UnorderedListStage,
)
from .cleanup import WhitespaceNormalizationStage
from .inline import (
    EmphasisStage,
    FootnoteStage,
    HtmlStripStage,
    InlineCodeStage,
    LinkImageStage,
)

STAGES: Tuple[Stage, ...] = (
    FencedCodeStage(),
    InlineCodeStage(),
    HeadingStage(),
    EmphasisStage(),
    BlockquoteStage(),
    ChecklistStage(),
    OrderedListStage(),
    UnorderedListStage(),
    TableStage(),
    RuleStage(),
    LinkImageStage(),
    HtmlStripStage(),
    FootnoteStage(),
    WhitespaceNormalizationStage(),
)

PIPELINE_ORDER: Tuple[str, ...] = tuple(st.name for st in STAGES)

_BY_NAME: Dict[str, Stage] = {st.name: st for st in STAGES}

def get_stage(name: str) -> Stage:
    if name not in _BY_NAME:
        raise ValueError(f"Unknown stage: {name}. Available: {list(PIPELINE_ORDER)}")
    return _BY_NAME[name]

def list_stages() -> List[Dict[str, str]]:
    """Describe the registered stages in pipeline order."""
    return [
        {"position": str(i), "name": st.name, "layer": st.layer, "class": type(st).__name__}
        for i, st in enumerate(STAGES, start=1)
    ]

def make_stages(stage_names: Optional[Iterable[str]] = None) -> Tuple[Stage, ...]:
    """
    Resolve stage names to stage instances.

    Args:
        stage_names: Names to include. None means every stage.

    Returns:
        The selected stages, in pipeline order regardless of the order given.
    """
    if stage_names is None:
        return STAGES
    wanted = set()
    for n in stage_names:
        get_stage(n)
        wanted.add(n)
    return tuple(st for st in STAGES if st.name in wanted)
