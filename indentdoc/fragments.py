from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from .builder import IndentedDocumentBuilder


@runtime_checkable
class DocumentItem(Protocol):
    """Anything that can be rendered into a document at an ambient depth."""

    def render(self, ambient_depth: int = 0) -> str: ...


@dataclass(frozen=True)
class Line:
    """A committed line; `depth` is the owning builder's depth at commit time."""

    text: str
    depth: int


@dataclass(frozen=True)
class Nested:
    child: "IndentedDocumentBuilder"


Fragment = Union[Line, Nested]
