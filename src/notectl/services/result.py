"""ServiceResult and ServiceError — the contract between core and front end.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any editor integration consume this type; neither ever
sees a store exception for an item the user named explicitly.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes
NOT_FOUND = "NOT_FOUND"
ALREADY_EXISTS = "ALREADY_EXISTS"
MALFORMED_FILENAME = "MALFORMED_FILENAME"
VALIDATION_FAILED = "VALIDATION_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``detail`` carries the identifier that failed (``id``, ``filename``).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_note"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Shorthand for a failed result."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
