"""ServiceResult and ServiceError: what every service operation returns.

The CLI renders a result; library callers inspect ``ok``/``data`` directly.
Failures carry a machine-readable ``code`` plus free-form ``detail``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes
MALFORMED_LAYOUT = "MALFORMED_LAYOUT"


class ServiceError(BaseModel):
    """Why an operation failed."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when ``error`` is set.
        op: Operation name, used to pick a renderer (``"build"``,
            ``"list_areas"``, ``"resolve"``).
        data: Operation payload.
        warnings: Non-fatal findings such as keyword collisions or
            class names outside the utility surface.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
