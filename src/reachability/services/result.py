"""ServiceResult and ServiceError — the service-layer return contract.

INVARIANT: All ReachabilityService methods return ServiceResult.
Pure domain functions return plain values; the service wraps them with
warnings, structured errors, and optional telemetry.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation completed with a definitive answer.
        op: Name of the operation (e.g. ``"sorted_ids"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal observations (e.g. a start vertex that is not a key).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build an ``ok=False`` result carrying a single ServiceError."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
