"""Filename codec — the canonical encoding of a note's identity.

Format::

    <id>--<category>-<category>--<slug>.txt

The category segment may be empty (``<id>----<slug>.txt``).

INVARIANT: Every filename produced by :func:`encode_filename` decodes back
to the same ``(id, categories, slug)`` and re-encodes to the same string.
Names that do not follow the three-part structure, or whose category
segment is not lowercase, decode to ``None``; scanners treat them as
opaque and skip them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

EXTENSION = ".txt"
FIELD_DELIMITER = "--"
CATEGORY_SEPARATOR = "-"

# One hyphen-free, whitespace-free, separator-free token.
_TOKEN = r"[^\s/\\-]+"

_FILENAME_PATTERN = re.compile(
    rf"^(?P<id>\d{{8}}_\d{{6}})"
    rf"--(?P<categories>(?:{_TOKEN}(?:-{_TOKEN})*)?)"
    rf"--(?P<slug>{_TOKEN}(?:-{_TOKEN})*)"
    rf"\.txt$"
)


class MalformedFilenameError(ValueError):
    """A filename does not follow the ``id--categories--slug.txt`` structure."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Malformed note filename: {filename!r}")
        self.filename = filename


@dataclass(frozen=True)
class NoteName:
    """The decoded parts of a note filename."""

    id: str
    categories: tuple[str, ...]
    slug: str

    @property
    def filename(self) -> str:
        return encode_filename(self.id, self.categories, self.slug)


def encode_filename(note_id: str, categories: Iterable[str], slug: str) -> str:
    """Build the filename for a note.

    Examples:
        >>> encode_filename("20201008_093000", ["Economics", "politics"], "my-note")
        '20201008_093000--economics-politics--my-note.txt'
        >>> encode_filename("20201008_093000", [], "my-note")
        '20201008_093000----my-note.txt'
    """
    segment = CATEGORY_SEPARATOR.join(c.lower() for c in categories)
    return f"{note_id}{FIELD_DELIMITER}{segment}{FIELD_DELIMITER}{slug}{EXTENSION}"


def decode_filename(filename: str) -> NoteName | None:
    """Split a bare filename into its parts, or return None if it is not a note."""
    match = _FILENAME_PATTERN.match(filename)
    if match is None:
        return None
    segment = match.group("categories")
    if segment != segment.lower():
        # Would re-encode to a different name.
        return None
    categories = tuple(segment.split(CATEGORY_SEPARATOR)) if segment else ()
    return NoteName(id=match.group("id"), categories=categories, slug=match.group("slug"))


def require_filename(filename: str) -> NoteName:
    """Like :func:`decode_filename`, but raise for a name the caller asked for explicitly.

    Raises:
        MalformedFilenameError: If *filename* is not a note filename.
    """
    decoded = decode_filename(filename)
    if decoded is None:
        raise MalformedFilenameError(filename)
    return decoded
