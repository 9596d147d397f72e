"""ReachabilityService — reachability queries wrapped in ServiceResult.

Six read-only operations delegating to :mod:`reachability.domain.reachability`.
Map-form operations accept plain mappings or NetworkX graphs (normalised
by :func:`as_adjacency`). Absent start vertices are warnings, never
errors; malformed graphs become ``INVALID_GRAPH`` failures.

Each method runs inside :func:`operation_context`, so its log lines carry
``op`` and ``start``.
"""

from __future__ import annotations

import logging
from typing import Any

from reachability.config.logging import operation_context
from reachability.domain.graphs import GraphContractError, Professional, Vertex
from reachability.domain.reachability import (
    constrained_path_exists,
    count_reachable_odd,
    find_connection_at,
    reaches,
    sorted_reachable,
    sorted_reachable_ids,
)
from reachability.infrastructure.graph.adjacency import (
    UnsupportedGraphError,
    as_adjacency,
    describe,
)
from reachability.services.base import BaseService
from reachability.services.result import ServiceResult
from reachability.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

_GRAPH_ERRORS = (GraphContractError, UnsupportedGraphError)


class ReachabilityService(BaseService):
    """Handles reachability queries over pointer graphs, maps, and networks."""

    # ------------------------------------------------------------------
    # Pointer graphs
    # ------------------------------------------------------------------

    @traced
    def odd_count(self, start: Vertex[int] | None) -> ServiceResult:
        """Count distinct odd values reachable from *start*."""
        op = "odd_count"
        with operation_context(op, start):
            with trace_span("depth_first"):
                count = count_reachable_odd(start)
            logger.debug("%d distinct odd values reachable", count)

        warnings = ["Start vertex is None"] if start is None else []
        return ServiceResult(ok=True, op=op, data={"count": count}, warnings=warnings)

    @traced
    def sorted_values(self, start: Vertex[Any] | None) -> ServiceResult:
        """Collect the values of every vertex reachable from *start*, ascending."""
        op = "sorted_values"
        with operation_context(op, start):
            with trace_span("depth_first") as span:
                values = sorted_reachable(start)
                if span:
                    span.annotate("visited", len(values))
            logger.debug("%d vertices reachable", len(values))

        warnings = ["Start vertex is None"] if start is None else []
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(values), "values": values},
            warnings=warnings,
        )

    @traced
    def mutual(self, v1: Vertex[Any] | None, v2: Vertex[Any] | None) -> ServiceResult:
        """Check two-way reachability, reporting each direction separately."""
        op = "mutual"
        with operation_context(op, v1):
            with trace_span("forward"):
                forward = reaches(v1, v2)
            with trace_span("backward"):
                backward = reaches(v2, v1)
            logger.debug("forward=%s backward=%s", forward, backward)

        warnings = [f"{label} is None" for label, v in (("v1", v1), ("v2", v2)) if v is None]
        return ServiceResult(
            ok=True,
            op=op,
            data={"mutual": forward and backward, "forward": forward, "backward": backward},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Adjacency maps
    # ------------------------------------------------------------------

    @traced
    def sorted_ids(self, graph: object, start: int) -> ServiceResult:
        """Collect every identifier reachable from *start* in *graph*, ascending."""
        op = "sorted_ids"
        with operation_context(op, start):
            try:
                adjacency = as_adjacency(graph)
                with trace_span("depth_first") as span:
                    ids = sorted_reachable_ids(adjacency, start)
                    if span:
                        span.annotate("visited", len(ids))
                        for name, value in describe(adjacency).items():
                            span.annotate(name, value)
            except _GRAPH_ERRORS as exc:
                return self._invalid_graph(op, exc)
            logger.debug("%d vertices reachable", len(ids))

        warnings: list[str] = []
        if start not in adjacency:
            warnings.append(f"Vertex {start} is not a key of the graph")
        return ServiceResult(
            ok=True,
            op=op,
            data={"start": start, "count": len(ids), "ids": ids},
            warnings=warnings,
        )

    @traced
    def constrained_path(self, graph: object, start: int, end: int) -> ServiceResult:
        """Check for a path whose vertices all meet the configured floor."""
        op = "constrained_path"
        floor = self._settings.paths.floor
        with operation_context(op, start):
            try:
                adjacency = as_adjacency(graph)
                with trace_span("depth_first"):
                    exists = constrained_path_exists(adjacency, start, end, floor=floor)
            except _GRAPH_ERRORS as exc:
                return self._invalid_graph(op, exc)
            logger.debug("path to %s with floor %d: %s", end, floor, exists)

        warnings: list[str] = []
        for label, vid in (("start", start), ("end", end)):
            if vid not in adjacency:
                warnings.append(f"{label} vertex {vid} is not a key of the graph")
            elif vid < floor:
                warnings.append(f"{label} vertex {vid} is below floor {floor}")

        return ServiceResult(
            ok=True,
            op=op,
            data={"start": start, "end": end, "floor": floor, "exists": exists},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Professional networks
    # ------------------------------------------------------------------

    @traced
    def extended_network(self, person: Professional | None, company: str) -> ServiceResult:
        """Look for *company* anywhere in *person*'s extended network."""
        op = "extended_network"
        casefold = self._settings.network.casefold
        with operation_context(op, person):
            with trace_span("depth_first"):
                match = find_connection_at(person, company, casefold=casefold)
            logger.debug("company %r found: %s", company, match is not None)

        warnings = ["Start professional is None"] if person is None else []
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "company": company,
                "found": match is not None,
                "match": match.name if match is not None else None,
            },
            warnings=warnings,
        )
