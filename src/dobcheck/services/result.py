"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: service methods return ServiceResult; they do not raise for
bad input. Malformed input becomes ``ok=False`` with a coded error.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Self

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Error codes carried in :class:`ServiceError`."""

    INVALID_INPUT = "INVALID_INPUT"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    OUT_OF_RANGE = "OUT_OF_RANGE"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"verify"``, ``"new_year"``, ``"bench_compare"`` ...).
            Renderers are dispatched on it.
        data: Operation-specific payload on success.
        warnings: Non-fatal notes for the user.
        error: Structured error when ``ok`` is False.
        meta: Optional extra information (timings, sample sizes).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> Self:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
