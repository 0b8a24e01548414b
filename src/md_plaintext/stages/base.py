"""Stage plugin interface.

Stages must:
- accept a document (plain `str`)
- return the rewritten document
- never raise, whatever the input
- return the input unchanged when none of their patterns match

Stages hold nothing but compiled patterns, so a single instance is shared by
every pipeline run.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

class Stage(ABC):
    name: str = "stage"
    layer: str = "block"

    @abstractmethod
    def apply(self, text: str) -> str:
        ...

    def __call__(self, text: str) -> str:
        return self.apply(text)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
