"""Result envelope shared by the collect and validate services.

INVARIANT: Services never raise for expected failures. An unreadable
file or a prompt in a non-interactive session comes back as a failed
result carrying an :class:`ErrorCode`; the CLI maps ``ok`` to the exit
status.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class Op(StrEnum):
    """Operations that produce a result; keys the renderer dispatch."""

    COLLECT_USERS = "collect_users"
    VALIDATE_FILE = "validate_file"


class ErrorCode(StrEnum):
    """Machine-readable failure reasons."""

    FILE_READ_ERROR = "FILE_READ_ERROR"
    INTERACTIVE_REQUIRED = "INTERACTIVE_REQUIRED"


class ServiceError(BaseModel):
    """Why an operation failed; ``detail`` names the file or source involved."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of collecting or validating users.

    Attributes:
        ok: False when no users could be produced at all (read error,
            interactive input refused). An empty but readable file is ok.
        op: An :class:`Op` value.
        data: ``collect_users``: ``source``, ``count``, ``users`` (rows in
            output order) and, for files, ``rejected``.
            ``validate_file``: ``path``, ``accepted``, ``rejected``.
        warnings: Non-fatal notes, e.g. a file with no valid lines.
        error: Set exactly when ``ok`` is False.
        meta: ``duration_ms`` and the applied ``sort_by`` for collections.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any],
        *,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [], meta=meta)

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

    @classmethod
    def read_error(cls, op: str, reason: str | None, **detail: Any) -> ServiceResult:
        """A ``FILE_READ_ERROR`` failure worded like the file strategy's message."""
        return cls.failure(op, ErrorCode.FILE_READ_ERROR, f"Error reading file: {reason}", **detail)

    @property
    def users(self) -> list[dict[str, Any]]:
        """Collected user rows; empty for failures and non-collect ops."""
        return list(self.data.get("users", []))

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
