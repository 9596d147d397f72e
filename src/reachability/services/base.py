"""BaseService — shared foundation for reachability services.

Every service receives resolved :class:`ReachSettings` at construction
time and reads its per-operation policy (path floor, company matching)
from them rather than from call arguments. Without explicit settings,
``reachability.toml`` is discovered by walking up from the cwd.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reachability.services.result import ServiceResult

if TYPE_CHECKING:
    from reachability.config.settings import ReachSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ReachabilityService(BaseService):
            def sorted_ids(self, graph, start) -> ServiceResult:
                floor = self._settings.paths.floor
                ...
    """

    def __init__(self, settings: ReachSettings | None = None) -> None:
        if settings is None:
            from reachability.config.settings import ReachSettings

            settings = ReachSettings.load()
        self._settings = settings

    @property
    def settings(self) -> ReachSettings:
        return self._settings

    @staticmethod
    def _invalid_graph(op: str, exc: Exception) -> ServiceResult:
        """Log a rejected graph and return the matching failure result."""
        logger.warning("Rejected graph for %s: %s", op, exc)
        return ServiceResult.failure(
            op,
            "INVALID_GRAPH",
            str(exc),
            exception=type(exc).__name__,
        )
