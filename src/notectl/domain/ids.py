"""Timestamp identifiers for notes.

An ID is the creation time down to the second, ``YYYYMMDD_HHMMSS``.
Fixed width, so lexicographic order is chronological order.

INVARIANT: IDs are permanent. Once a note is created its ID never changes.
Two notes created within the same clock second would share an ID; the
create service resolves that with :func:`next_free_id`.
"""

from __future__ import annotations

import re
from collections.abc import Container
from datetime import datetime, timedelta

ID_FORMAT = "%Y%m%d_%H%M%S"
ID_LENGTH = 15
ID_PATTERN = re.compile(r"^\d{8}_\d{6}$")


def generate_id(now: datetime | None = None) -> str:
    """Return the identifier for *now* (default: the local clock)."""
    return (now or datetime.now()).strftime(ID_FORMAT)


def validate_id(token: str) -> bool:
    """Check whether *token* is a well-formed identifier."""
    return ID_PATTERN.match(token) is not None


def parse_id(token: str) -> datetime:
    """Return the timestamp encoded in *token*.

    Raises:
        ValueError: If *token* is not a valid identifier.
    """
    if not validate_id(token):
        msg = f"Invalid note id: {token!r}"
        raise ValueError(msg)
    return datetime.strptime(token, ID_FORMAT)


def next_free_id(candidate: str, taken: Container[str]) -> str:
    """Advance *candidate* one second at a time until it is not in *taken*.

    Examples:
        >>> next_free_id("20201008_093000", {"20201008_093000"})
        '20201008_093001'
        >>> next_free_id("20201008_093000", set())
        '20201008_093000'
    """
    current = candidate
    while current in taken:
        current = (parse_id(current) + timedelta(seconds=1)).strftime(ID_FORMAT)
    return current
