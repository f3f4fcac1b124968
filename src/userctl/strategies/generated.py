"""Synthetic records from the random generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from userctl.domain.generator import UserDataGenerator
    from userctl.domain.user import User

DEFAULT_COUNT = 10


class RandomInputStrategy:
    """Wrap a :class:`UserDataGenerator`; needs no external input."""

    name = "random"

    def __init__(
        self,
        generator: UserDataGenerator,
        count: int = DEFAULT_COUNT,
        *,
        variety: bool = True,
    ) -> None:
        self._generator = generator
        self._count = count
        self._variety = variety

    def get_users(self) -> list[User]:
        if self._variety:
            return self._generator.generate_users_with_variety(self._count)
        return self._generator.generate_users(self._count)
