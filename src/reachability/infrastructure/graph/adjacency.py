"""Adjacency adapters — present supported graph objects as adjacency maps.

The map-form operations read a graph through two calls only: key
membership (``vid in graph``) and neighbor lookup (``graph[vid]``).
Plain mappings already satisfy that; NetworkX graphs do through their
``adj`` view, whose per-node atlas iterates over neighbor keys.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any, TypeAlias

import networkx as nx

_Adjacency: TypeAlias = Mapping[Any, Collection[Any]]


class UnsupportedGraphError(TypeError):
    """Raised for objects that cannot be read as an adjacency map."""


def as_adjacency(graph: object) -> _Adjacency:
    """Return *graph* as a read-only adjacency mapping.

    Accepts any ``Mapping`` (returned unchanged) or a NetworkX graph
    (``DiGraph``, ``Graph`` and their multi variants). Nothing is copied.
    """
    if isinstance(graph, nx.Graph):
        return graph.adj
    if isinstance(graph, Mapping):
        return graph
    msg = f"Expected a mapping or a networkx graph, got {type(graph).__name__}"
    raise UnsupportedGraphError(msg)


def describe(graph: _Adjacency) -> dict[str, int]:
    """Return vertex and edge counts for a log line or telemetry annotation."""
    vertices = len(graph)
    edges = sum(len(successors) for successors in graph.values() if successors is not None)
    return {"vertices": vertices, "edges": edges}
