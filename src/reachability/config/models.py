"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, reachability.toml only
contains overrides. An empty file is a valid configuration. The sections
are composed into :class:`reachability.config.settings.ReachSettings`.
"""

from __future__ import annotations

from pydantic import BaseModel


class PathsConfig(BaseModel):
    """[paths] section — constrained path search."""

    model_config = {"frozen": True}

    # Lowest identifier admitted on a constrained path. 0 admits zero
    # (non-negative paths); 1 requires strictly positive identifiers.
    floor: int = 0


class NetworkConfig(BaseModel):
    """[network] section — professional network lookups."""

    model_config = {"frozen": True}

    casefold: bool = False

