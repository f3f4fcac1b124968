"""Delimited user-file parsing.

File format: one record per line, ``name;password;email``, no header,
no escaping. A ``;`` inside a field corrupts that line and it is dropped.

INVARIANT: Parsing never raises past this module. A missing or
unreadable file yields an empty :class:`ParseResult` with ``error`` set.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from userctl.domain.user import User
from userctl.domain.validators import validate_user

logger = logging.getLogger(__name__)
line_logger = logging.getLogger(f"{__name__}.lines")

DELIMITER = ";"
FIELD_COUNT = 3


class ParseResult(BaseModel):
    """Outcome of parsing one user file.

    Attributes:
        users: Accepted records, in file line order.
        invalid: Number of non-blank lines that were dropped.
        error: Read failure reason; ``None`` when the file was read.
    """

    model_config = {"frozen": True}

    users: list[User] = Field(default_factory=list)
    invalid: int = 0
    error: str | None = None

    @property
    def read_failed(self) -> bool:
        return self.error is not None


def split_line(line: str) -> list[str]:
    """Split a raw line into stripped fields.

    Examples:
        >>> split_line("John;secret1;john@mail.com\\n")
        ['John', 'secret1', 'john@mail.com']
        >>> split_line("a;b")
        ['a', 'b']
    """
    return [part.strip() for part in line.rstrip("\r\n").split(DELIMITER)]


def parse_user_file(path: str | Path, *, encoding: str = "utf-8") -> ParseResult:
    """Read *path* and return the records that pass validation.

    Whitespace-only lines are skipped without being counted.
    """
    users: list[User] = []
    invalid = 0
    try:
        with Path(path).open(encoding=encoding) as fh:
            for lineno, line in enumerate(fh, start=1):
                if not line.strip():
                    continue
                fields = split_line(line)
                if len(fields) != FIELD_COUNT:
                    line_logger.debug(
                        "Line %d: expected %d fields, got %d",
                        lineno,
                        FIELD_COUNT,
                        len(fields),
                        extra={"path": str(path), "line": lineno},
                    )
                    invalid += 1
                    continue
                failed = validate_user(*fields)
                if failed:
                    line_logger.debug(
                        "Line %d: invalid %s",
                        lineno,
                        ", ".join(failed),
                        extra={"path": str(path), "line": lineno, "fields": failed},
                    )
                    invalid += 1
                    continue
                name, password, email = fields
                users.append(User(name=name, password=password, email=email))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read user file %s: %s", path, exc)
        return ParseResult(error=str(exc))

    logger.debug(
        "Parsed %s: %d accepted, %d dropped",
        path,
        len(users),
        invalid,
        extra={"path": str(path), "accepted": len(users), "rejected": invalid},
    )
    return ParseResult(users=users, invalid=invalid)
