"""ServiceResult: what every service method returns.

The CLI formats it; library callers can inspect it directly. Failures carry
a ``ServiceError`` whose ``code`` is the ``code`` of the avowed error behind
it, so callers can branch without parsing messages.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from avowed.domain.errors import AvowedError


class ServiceError(BaseModel):
    """Machine-readable failure: stable code, message, structured detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: AvowedError) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=exc.detail())


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when the operation failed or found invalid input.
        op: Operation name (``"check"``, ``"parse"``, ``"directives"``).
        data: Operation payload; failed checks still include it.
        warnings: Non-fatal notes for the user.
        error: Set exactly when ``ok`` is False.
        meta: Inputs the operation ran against (file paths).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: AvowedError, **fields: Any) -> ServiceResult:
        """Failed result for *op* built from an avowed error."""
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc), **fields)
