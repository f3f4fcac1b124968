"""CollectService — run an input strategy and package the records.

The strategy does the acquisition and validation; this service adds
ordering, counts and the failure mapping the CLI needs.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

from userctl.services.result import Op, ServiceResult
from userctl.strategies.base import ParseReporter

if TYPE_CHECKING:
    from userctl.domain.user import User
    from userctl.strategies.base import InputStrategy

log = structlog.get_logger(__name__)

SORT_FIELDS: tuple[str, ...] = ("name", "email", "password")


def sort_users(users: list[User], field: str | None) -> list[User]:
    """Return *users* ordered case-insensitively by *field*.

    ``None`` keeps the source order. The sort is stable.

    Raises:
        ValueError: If *field* is not one of :data:`SORT_FIELDS`.
    """
    if field is None:
        return list(users)
    if field not in SORT_FIELDS:
        msg = f"Cannot sort by {field!r}; expected one of {', '.join(SORT_FIELDS)}"
        raise ValueError(msg)
    return sorted(users, key=lambda u: getattr(u, field).casefold())


class CollectService:
    """Collect users from one strategy.

    Args:
        sort_by: Optional field to order the collected users by.
    """

    def __init__(self, *, sort_by: str | None = None) -> None:
        self._sort_by = sort_by

    def collect(self, strategy: InputStrategy) -> ServiceResult:
        op = Op.COLLECT_USERS
        started = time.perf_counter()
        users = strategy.get_users()
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        warnings: list[str] = []
        data: dict[str, object] = {"source": strategy.name}

        parsed = strategy.last_result if isinstance(strategy, ParseReporter) else None
        if parsed is not None:
            if parsed.read_failed:
                log.warning("collect_failed", source=strategy.name, reason=parsed.error)
                return ServiceResult.read_error(op, parsed.error, source=strategy.name)
            data["rejected"] = parsed.invalid
            if not users:
                warnings.append("File contains no valid data")

        ordered = sort_users(users, self._sort_by)
        data["count"] = len(ordered)
        data["users"] = [u.to_row() for u in ordered]

        log.info("collected", source=strategy.name, count=len(ordered))
        return ServiceResult.success(
            op,
            data,
            warnings=warnings,
            meta={"duration_ms": duration_ms, "sort_by": self._sort_by},
        )
