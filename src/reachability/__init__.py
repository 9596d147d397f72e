"""Graph reachability over pointer graphs, adjacency maps, and professional networks."""

from reachability.domain.graphs import AdjacencyMap, GraphContractError, Professional, Vertex
from reachability.domain.reachability import (
    constrained_path_exists,
    count_reachable_odd,
    find_connection_at,
    has_extended_connection_at,
    mutually_reachable,
    reaches,
    sorted_reachable,
    sorted_reachable_ids,
)
from reachability.domain.traversal import depth_first, traverse

__version__ = "0.1.0"

__all__ = [
    "AdjacencyMap",
    "GraphContractError",
    "Professional",
    "Vertex",
    "constrained_path_exists",
    "count_reachable_odd",
    "depth_first",
    "find_connection_at",
    "has_extended_connection_at",
    "mutually_reachable",
    "reaches",
    "sorted_reachable",
    "sorted_reachable_ids",
    "traverse",
]
