"""The input-strategy contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from userctl.domain.user import User
    from userctl.infrastructure.parser import ParseResult


@runtime_checkable
class InputStrategy(Protocol):
    """A source of validated user records.

    INVARIANT: Every record returned by ``get_users`` has already passed
    the field validators.
    """

    name: str

    def get_users(self) -> list[User]: ...


@runtime_checkable
class ParseReporter(Protocol):
    """A strategy that parses a file and keeps the outcome of its last run.

    ``last_result`` is None until ``get_users`` has read something.
    """

    last_result: ParseResult | None
