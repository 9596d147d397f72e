"""ReachContext — one-shot runtime bootstrap for embedding applications.

Resolves settings, configures structured logging, enables telemetry when
verbose, and hands out a lazily constructed :class:`ReachabilityService`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from reachability.config.logging import configure_logging
from reachability.config.settings import ReachSettings

if TYPE_CHECKING:
    from reachability.services.reachability import ReachabilityService


class ReachContext:
    """Holds resolved settings and the service built from them."""

    def __init__(self, settings: ReachSettings) -> None:
        self.settings = settings
        self._service: ReachabilityService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from reachability.services.telemetry import enable_telemetry

            enable_telemetry()

    @classmethod
    def from_config(cls, **kwargs: Any) -> ReachContext:
        """Build a context from :meth:`ReachSettings.load` arguments."""
        return cls(ReachSettings.load(**kwargs))

    @property
    def service(self) -> ReachabilityService:
        """The service instance (created lazily on first access)."""
        if self._service is None:
            from reachability.services.reachability import ReachabilityService

            self._service = ReachabilityService(self.settings)
        return self._service
