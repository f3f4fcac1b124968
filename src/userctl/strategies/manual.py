"""Manual console entry, one field at a time.

Flow: ask for a count, then for each record ask name -> password -> email.
Each field prompt repeats until its validator accepts the answer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from userctl.domain.user import User
from userctl.domain.validators import is_valid_email, is_valid_name, is_valid_password
from userctl.infrastructure.console import read_valid

if TYPE_CHECKING:
    from userctl.infrastructure.console import Console

logger = logging.getLogger(__name__)

COUNT_PROMPT = "How many users to enter? "
NAME_PROMPT = "Enter name: "
PASSWORD_PROMPT = "Enter password (min. 6 characters): "
EMAIL_PROMPT = "Enter email: "

NAME_ERROR = "Error: invalid name!"
PASSWORD_ERROR = "Error: invalid password!"
EMAIL_ERROR = "Error: invalid email!"


class ManualInputStrategy:
    """Collect records typed in by the user."""

    name = "manual"

    def __init__(self, console: Console) -> None:
        self._console = console

    def get_users(self) -> list[User]:
        count = self._console.read_int(COUNT_PROMPT)
        users: list[User] = []
        for _ in range(count):
            user = self._read_user()
            users.append(user)
            self._console.echo(f"✓ User added: {user.name}")
        logger.debug("Manual entry finished with %d users", len(users))
        return users

    def _read_user(self) -> User:
        name = read_valid(self._console, NAME_PROMPT, is_valid_name, NAME_ERROR)
        password = read_valid(self._console, PASSWORD_PROMPT, is_valid_password, PASSWORD_ERROR)
        email = read_valid(self._console, EMAIL_PROMPT, is_valid_email, EMAIL_ERROR)
        return User(name=name.strip(), password=password.strip(), email=email)
