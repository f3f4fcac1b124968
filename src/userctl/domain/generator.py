"""Random user data generation.

Produces syntactically valid names, passwords, emails and whole records.
Not cryptographically secure. The generator owns a plain
:class:`random.Random` so runs are reproducible from a seed.

INVARIANT: Every generated value passes the matching validator in
:mod:`userctl.domain.validators`. Passwords over-satisfy the validator
(they always carry an uppercase letter and a digit).
"""

from __future__ import annotations

import random
import re
import string
from collections.abc import Callable

from userctl.domain.user import User
from userctl.domain.validators import is_valid_email

FIRST_NAMES: tuple[str, ...] = (
    "Alice",
    "Boris",
    "Clara",
    "Dmitry",
    "Elena",
    "Felix",
    "Greta",
    "Hugo",
    "Irina",
    "Jonas",
    "Kira",
    "Leon",
    "Maria",
    "Nikita",
    "Olga",
    "Pavel",
)

LAST_NAMES: tuple[str, ...] = (
    "Ivanova",
    "Smith",
    "Novak",
    "Berger",
    "Petrov",
    "Lindqvist",
    "Moreau",
    "Kowalski",
    "Garcia",
    "Sato",
)

MAIL_HOSTS: tuple[str, ...] = ("gmail", "mail", "yandex", "outlook", "proton", "example")
TLDS: tuple[str, ...] = ("com", "net", "org", "ru", "io")
PREFIXES: tuple[str, ...] = ("user", "guest", "tester", "admin", "demo")

PASSWORD_LENGTH = (6, 12)
STRONG_PASSWORD_LENGTH = (8, 16)
# No ';' (file delimiter) and no whitespace.
SYMBOLS = "!#$%&*+-=?@^_"
TOKEN_LENGTH = 6

VARIETY_STYLES: tuple[str, ...] = ("standard", "strong", "prefixed", "full_name")

_LOCAL_UNSAFE = re.compile(r"[^a-z0-9._+-]")


class UserDataGenerator:
    """Seedable source of synthetic, validator-satisfying user records.

    Args:
        seed: Seed for a fresh ``random.Random``. Ignored when *rng* is given.
        rng: Explicit random source to draw from.
    """

    def __init__(self, seed: int | None = None, *, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    # --- Fields ---

    def generate_name(self) -> str:
        """A first name, sometimes followed by a last name."""
        first = self._rng.choice(FIRST_NAMES)
        if self._rng.random() < 0.5:
            return first
        return f"{first} {self._rng.choice(LAST_NAMES)}"

    def generate_email(self) -> str:
        """``local@host.tld`` built from the name pools."""
        local = self._local_part(self._rng.choice(FIRST_NAMES))
        return f"{local}{self._rng.randint(1, 999)}@{self._domain()}"

    def generate_password(self) -> str:
        """6–12 characters with at least one uppercase letter and one digit."""
        return self._password(PASSWORD_LENGTH, symbols=False)

    def generate_strong_password(self) -> str:
        """8–16 characters with upper, lower, digit and a symbol."""
        return self._password(STRONG_PASSWORD_LENGTH, symbols=True)

    # --- Records ---

    def generate_user(self, prefix: str, domain: str) -> User:
        """A record named ``{prefix}_{token}`` with an email on *domain*.

        Raises:
            ValueError: If *domain* cannot form a valid email address.
        """
        if not is_valid_email(f"user@{domain}"):
            msg = f"Invalid email domain: {domain!r}"
            raise ValueError(msg)
        token = self._token()
        local = self._local_part(prefix) or "user"
        return User(
            name=f"{prefix}_{token}",
            password=self.generate_password(),
            email=f"{local}.{token}@{domain}",
        )

    def generate_users(self, count: int) -> list[User]:
        """Exactly *count* independent records (empty when ``count <= 0``)."""
        return [self._standard_user() for _ in range(count)]

    def generate_users_with_variety(self, count: int) -> list[User]:
        """Exactly *count* records, rotating through :data:`VARIETY_STYLES`.

        Consecutive records always come from different styles, so any
        batch of two or more is never uniform in shape.
        """
        builders: dict[str, Callable[[], User]] = {
            "standard": self._standard_user,
            "strong": self._strong_user,
            "prefixed": self._prefixed_user,
            "full_name": self._full_name_user,
        }
        return [builders[VARIETY_STYLES[i % len(VARIETY_STYLES)]]() for i in range(count)]

    # --- Styles ---

    def _standard_user(self) -> User:
        return User(
            name=self.generate_name(),
            password=self.generate_password(),
            email=self.generate_email(),
        )

    def _strong_user(self) -> User:
        return User(
            name=self.generate_name(),
            password=self.generate_strong_password(),
            email=self.generate_email(),
        )

    def _prefixed_user(self) -> User:
        return self.generate_user(self._rng.choice(PREFIXES), self._domain())

    def _full_name_user(self) -> User:
        first = self._rng.choice(FIRST_NAMES)
        last = self._rng.choice(LAST_NAMES)
        return User(
            name=f"{first} {last}",
            password=self.generate_strong_password(),
            email=f"{self._local_part(first)}.{self._local_part(last)}@{self._domain()}",
        )

    # --- Helpers ---

    def _domain(self) -> str:
        return f"{self._rng.choice(MAIL_HOSTS)}.{self._rng.choice(TLDS)}"

    def _local_part(self, seed_text: str) -> str:
        return _LOCAL_UNSAFE.sub("", seed_text.lower())

    def _token(self) -> str:
        alphabet = string.ascii_lowercase + string.digits
        return "".join(self._rng.choice(alphabet) for _ in range(TOKEN_LENGTH))

    def _password(self, length_range: tuple[int, int], *, symbols: bool) -> str:
        length = self._rng.randint(*length_range)
        required = [
            self._rng.choice(string.ascii_uppercase),
            self._rng.choice(string.ascii_lowercase),
            self._rng.choice(string.digits),
        ]
        pool = string.ascii_letters + string.digits
        if symbols:
            required.append(self._rng.choice(SYMBOLS))
            pool += SYMBOLS
        chars = required + [self._rng.choice(pool) for _ in range(length - len(required))]
        self._rng.shuffle(chars)
        return "".join(chars)
