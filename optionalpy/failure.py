from __future__ import annotations
from typing import Generic, List, Optional, TypeVar

E = TypeVar("E")


class Failure(Exception, Generic[E]):
    """Raised for an error value that is not itself an exception."""

    def __init__(self, error: E, annotations: Optional[List[str]] = None):
        super().__init__(str(error)); self.error = error; self.annotations = list(annotations or [])

    def annotate(self, note: str) -> "Failure[E]":
        self.annotations.append(note)
        return self

    def render(self) -> str:
        notes = "".join(f"@ {n}\n" for n in self.annotations)
        return notes + f"Fail({self.error!r})\n"
