"""Graph records consumed by the reachability operations.

Two representations:
- Pointer form: :class:`Vertex` objects holding data and an ordered
  neighbor list. Graphs may be cyclic and share nodes freely.
- Map form: :data:`AdjacencyMap`, integer identifier -> neighbor identifiers.

Vertices and professionals compare by identity, never by field values.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")

AdjacencyMap: TypeAlias = Mapping[int, Collection[int]]


class GraphContractError(ValueError):
    """Raised when a caller passes a graph outside the supported domain."""


@dataclass(eq=False)
class Vertex(Generic[T]):
    """A node of a pointer-form directed graph."""

    data: T
    neighbors: list[Vertex[T]] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class Professional:
    """A person in a professional network, linked to their connections."""

    company: str
    connections: list[Professional] = field(default_factory=list, repr=False)
    name: str = ""  # display only
