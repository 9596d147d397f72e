"""Shared pytest fixtures and graph builders for reachability tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from reachability.config.settings import ReachSettings
from reachability.domain.graphs import Professional, Vertex
from reachability.services.reachability import ReachabilityService
from reachability.services.telemetry import _current_span, disable_telemetry

# ---------------------------------------------------------------------------
# Graph builders
# ---------------------------------------------------------------------------


def link(source: Vertex[int], *targets: Vertex[int]) -> None:
    """Append *targets* to *source*'s neighbors, in order."""
    source.neighbors.extend(targets)


def vertices(*values: int) -> dict[int, Vertex[int]]:
    """Create one vertex per value, keyed by value."""
    return {value: Vertex(value) for value in values}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def diamond() -> dict[str, Vertex[int]]:
    """5 -> 8a, 5 -> 8b, 8a -> 2, 8b -> 2, 4 -> 2 (4 unreachable from 5).

    Two distinct vertices carry the value 8.
    """
    v5, v8a, v8b, v2, v4 = Vertex(5), Vertex(8), Vertex(8), Vertex(2), Vertex(4)
    link(v5, v8a, v8b)
    link(v8a, v2)
    link(v8b, v2)
    link(v4, v2)
    return {"5": v5, "8a": v8a, "8b": v8b, "2": v2, "4": v4}


@pytest.fixture
def odd_graph() -> dict[int, Vertex[int]]:
    """5 -> 4, 5 -> 8, 4 -> 7, 8 -> 7, 8 -> 9, 1 -> 7, 9 -> 5 (back edge).

    1 points into the graph but is unreachable from 5.
    """
    v = vertices(5, 4, 8, 7, 9, 1)
    link(v[5], v[4], v[8])
    link(v[4], v[7])
    link(v[8], v[7], v[9])
    link(v[1], v[7])
    link(v[9], v[5])
    return v


@pytest.fixture
def triangle() -> list[Vertex[int]]:
    """A 3-cycle: 1 -> 2 -> 3 -> 1."""
    a, b, c = Vertex(1), Vertex(2), Vertex(3)
    link(a, b)
    link(b, c)
    link(c, a)
    return [a, b, c]


@pytest.fixture
def network() -> dict[str, Professional]:
    """A -> B -> C (C at Acme), C -> A (cycle), D isolated at Globex."""
    c = Professional("Acme", name="C")
    b = Professional("Initech", [c], name="B")
    a = Professional("Initech", [b], name="A")
    c.connections.append(a)
    d = Professional("Globex", name="D")
    return {"A": a, "B": b, "C": c, "D": d}


@pytest.fixture
def settings() -> ReachSettings:
    """Settings with code defaults only (no TOML file, no env overrides)."""
    return ReachSettings()


@pytest.fixture
def service(settings: ReachSettings) -> ReachabilityService:
    return ReachabilityService(settings)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)
