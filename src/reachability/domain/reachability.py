"""Reachability operations over pointer graphs, adjacency maps, and networks.

Pure functions, no infrastructure dependencies. Every "absent" case is a
normal return value (0, empty list, False); only caller contract
violations raise :class:`GraphContractError`.

Visited-set policy differs per operation and is part of each contract:

===========================  ==========================
operation                    visited set keyed by
===========================  ==========================
count_reachable_odd          vertex data (value)
sorted_reachable             vertex identity
sorted_reachable_ids         integer identifier
reaches / mutually_reachable vertex identity
constrained_path_exists      integer identifier
has_extended_connection_at   professional identity
===========================  ==========================
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import Any, TypeVar

from reachability.domain.graphs import AdjacencyMap, GraphContractError, Professional, Vertex
from reachability.domain.traversal import depth_first, traverse

T = TypeVar("T")


def _vertex_neighbors(vertex: Vertex[T]) -> list[Vertex[T]]:
    return vertex.neighbors


def _connections(person: Professional) -> list[Professional]:
    return person.connections


def _map_neighbors(graph: AdjacencyMap) -> Callable[[int], Collection[int]]:
    """Build a neighbor lookup for *graph* that rejects ``None`` neighbor sets."""

    def lookup(vertex_id: int) -> Collection[int]:
        successors = graph[vertex_id]
        if successors is None:
            msg = f"Vertex {vertex_id!r} maps to None instead of a neighbor collection"
            raise GraphContractError(msg)
        return successors

    return lookup


def _require_graph(graph: AdjacencyMap | None) -> AdjacencyMap:
    if graph is None:
        msg = "Adjacency map is required, got None"
        raise GraphContractError(msg)
    return graph


# ---------------------------------------------------------------------------
# Pointer graphs
# ---------------------------------------------------------------------------


def count_reachable_odd(start: Vertex[int] | None) -> int:
    """Count distinct odd values reachable from *start*, itself included.

    Distinctness is by value: two vertices carrying the same odd number
    count once. Negative odd values count (``-3 % 2 == 1``).
    """
    odd: list[int] = []

    def tally(vertex: Vertex[int]) -> None:
        if vertex.data % 2 == 1:
            odd.append(vertex.data)

    traverse(start, _vertex_neighbors, tally, key=lambda v: v.data)
    return len(odd)


def sorted_reachable(start: Vertex[Any] | None) -> list[Any]:
    """Return the values of all vertices reachable from *start*, ascending.

    Each vertex contributes its value once, so distinct vertices with equal
    values both appear.
    """
    return sorted(vertex.data for vertex in depth_first(start, _vertex_neighbors))


def reaches(source: Vertex[T] | None, target: Vertex[T] | None) -> bool:
    """Return True if *target* is reachable from *source* (zero-length paths count)."""
    if source is None or target is None:
        return False
    return any(vertex is target for vertex in depth_first(source, _vertex_neighbors))


def mutually_reachable(v1: Vertex[T] | None, v2: Vertex[T] | None) -> bool:
    """Return True if *v1* reaches *v2* and *v2* reaches *v1*.

    Each direction runs its own search. A vertex is mutually reachable
    with itself.
    """
    return reaches(v1, v2) and reaches(v2, v1)


# ---------------------------------------------------------------------------
# Adjacency maps
# ---------------------------------------------------------------------------


def sorted_reachable_ids(graph: AdjacencyMap, start: int) -> list[int]:
    """Return every identifier reachable from *start* in *graph*, ascending.

    Only keys of *graph* are vertices. An identifier that appears solely as
    a neighbor is a dead end; a *start* that is not a key yields ``[]``.
    """
    graph = _require_graph(graph)
    walk = depth_first(start, _map_neighbors(graph), enter=lambda vid: vid in graph)
    return sorted(walk)


def constrained_path_exists(graph: AdjacencyMap, start: int, end: int, *, floor: int = 0) -> bool:
    """Return True if a path from *start* to *end* uses only vertices ``>= floor``.

    Both endpoints must be keys of *graph* and satisfy the floor. With the
    default floor of 0, zero is an admitted vertex; pass ``floor=1`` to
    require strictly positive identifiers. ``start == end`` succeeds
    whenever the endpoint conditions hold.
    """
    graph = _require_graph(graph)

    def admitted(vertex_id: int) -> bool:
        return vertex_id in graph and vertex_id >= floor

    if not (admitted(start) and admitted(end)):
        return False
    walk = depth_first(start, _map_neighbors(graph), enter=admitted)
    return any(vertex_id == end for vertex_id in walk)


# ---------------------------------------------------------------------------
# Professional networks
# ---------------------------------------------------------------------------


def find_connection_at(
    person: Professional | None,
    company: str,
    *,
    casefold: bool = False,
) -> Professional | None:
    """Return the first professional in *person*'s extended network at *company*.

    The search includes *person* and follows connections depth-first.
    Company names compare by value; with *casefold* the comparison ignores
    case. Returns None when nobody matches.
    """
    wanted = company.casefold() if casefold else company
    for member in depth_first(person, _connections):
        employer = member.company.casefold() if casefold else member.company
        if employer == wanted:
            return member
    return None


def has_extended_connection_at(
    person: Professional | None,
    company: str,
    *,
    casefold: bool = False,
) -> bool:
    """Return True if anyone reachable from *person*, or *person*, works at *company*."""
    return find_connection_at(person, company, casefold=casefold) is not None
