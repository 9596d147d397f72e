"""Depth-first traversal kernel shared by every reachability operation.

Explicit-stack DFS, so graph depth is bounded by memory rather than the
interpreter recursion limit. Neighbors are pushed in reverse so nodes are
produced in the same preorder as the recursive formulation.

INVARIANT: a marker enters the visited set at most once per call, and it
is checked before a node is expanded. This alone guarantees termination on
cyclic graphs.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TypeVar

N = TypeVar("N")


def depth_first(
    start: N | None,
    neighbors: Callable[[N], Iterable[N | None]],
    *,
    key: Callable[[N], Hashable] | None = None,
    enter: Callable[[N], bool] | None = None,
) -> Iterator[N]:
    """Yield every node reachable from *start* in depth-first preorder.

    Args:
        start: First node to visit. ``None`` yields nothing.
        neighbors: Returns the ordered successors of a node. ``None``
            entries are skipped.
        key: Maps a node to its visited-set marker. Defaults to the node
            itself, so identity-hashed nodes are tracked by identity.
        enter: Optional gate. Nodes for which it returns False are dead
            ends: neither visited nor expanded.

    The visited set is local to the generator; abandoning iteration early
    (``any()``, ``break``) discards it.
    """
    if start is None:
        return

    visited: set[Hashable] = set()
    stack: list[N | None] = [start]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if enter is not None and not enter(node):
            continue
        marker = node if key is None else key(node)
        if marker in visited:
            continue
        visited.add(marker)
        yield node
        successors = list(neighbors(node))
        successors.reverse()
        stack.extend(successors)


def traverse(
    start: N | None,
    neighbors: Callable[[N], Iterable[N | None]],
    visit: Callable[[N], object],
    *,
    key: Callable[[N], Hashable] | None = None,
    enter: Callable[[N], bool] | None = None,
) -> None:
    """Walk the graph from *start*, calling *visit* once per visited node."""
    for node in depth_first(start, neighbors, key=key, enter=enter):
        visit(node)
