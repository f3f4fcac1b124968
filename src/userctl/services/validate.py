"""ValidateService — dry-run a user file without collecting it."""

from __future__ import annotations

from pathlib import Path

from userctl.infrastructure.parser import parse_user_file
from userctl.services.result import Op, ServiceResult


class ValidateService:
    """Report how many lines of a user file would be accepted."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def validate_file(self, path: str | Path) -> ServiceResult:
        parsed = parse_user_file(path, encoding=self._encoding)
        if parsed.read_failed:
            return ServiceResult.read_error(Op.VALIDATE_FILE, parsed.error, path=str(path))

        warnings: list[str] = []
        if not parsed.users:
            warnings.append("File contains no valid data")
        return ServiceResult.success(
            Op.VALIDATE_FILE,
            {
                "path": str(path),
                "accepted": len(parsed.users),
                "rejected": parsed.invalid,
            },
            warnings=warnings,
        )
