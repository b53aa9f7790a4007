"""Note content — header block, seeded body, and inline markers.

Pure functions, no I/O. The header repeats the filename's information for
display; it is written once at creation and never rewritten::

    title: My First Note!
    date: 2020-10-08
    category: Economics, Politics
    orig_name: 20201008_093000--economics-politics--my-first-note.txt
    orig_id: 20201008_093000
    ------------------------
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from notectl.domain.links import split_reference_block

HEADER_DELIMITER = "-" * 24
HEADER_FIELDS = ("title", "date", "category", "orig_name", "orig_id")
DEFAULT_SEED_SEPARATOR = "* * *"
MARKER_PREFIX = "^"
QUOTE_PREFIX = "> "


@dataclass(frozen=True)
class NoteHeader:
    """The metadata block at the top of every note."""

    title: str
    date: str
    categories: tuple[str, ...]
    orig_name: str
    orig_id: str


def format_categories(categories: Sequence[str]) -> str:
    """Display form of categories: ``Economics, Politics``."""
    return ", ".join(c.capitalize() for c in categories)


def render_header(header: NoteHeader) -> str:
    """Render the header block, ending with the delimiter line and a blank line."""
    lines = [
        f"title: {header.title}",
        f"date: {header.date}",
        f"category: {format_categories(header.categories)}",
        f"orig_name: {header.orig_name}",
        f"orig_id: {header.orig_id}",
        HEADER_DELIMITER,
        "",
    ]
    return "\n".join(lines) + "\n"


def parse_header(text: str) -> NoteHeader | None:
    """Read the header block back, or return None if the text has none.

    Only the lines before the delimiter are inspected. Categories are
    lowercased again so they compare equal to the filename's.
    """
    fields: dict[str, str] = {}
    for line in text.splitlines():
        if line == HEADER_DELIMITER:
            break
        key, sep, value = line.partition(":")
        if sep and key in HEADER_FIELDS:
            fields[key] = value.strip()
    else:
        return None

    if any(name not in fields for name in HEADER_FIELDS):
        return None
    raw_categories = fields["category"]
    categories = tuple(c.strip().lower() for c in raw_categories.split(",") if c.strip())
    return NoteHeader(
        title=fields["title"],
        date=fields["date"],
        categories=categories,
        orig_name=fields["orig_name"],
        orig_id=fields["orig_id"],
    )


def render_seed(selection: str, *, separator: str = DEFAULT_SEED_SEPARATOR) -> str:
    """Render a quoted selection to start a new note's body.

    Examples:
        >>> render_seed("one\\ntwo")
        '* * *\\n\\n> one\\n> two\\n'
    """
    quoted = [f"{QUOTE_PREFIX}{line}".rstrip() for line in selection.strip("\n").splitlines()]
    return f"{separator}\n\n" + "\n".join(quoted) + "\n"


def render_note(
    header: NoteHeader,
    seed: str | None = None,
    *,
    separator: str = DEFAULT_SEED_SEPARATOR,
) -> str:
    """Full initial text of a new note."""
    text = render_header(header)
    if seed and seed.strip():
        text += "\n" + render_seed(seed, separator=separator)
    return text


def format_marker(note_id: str) -> str:
    """Inline marker pointing at another note."""
    return f"{MARKER_PREFIX}{note_id}"


def insert_marker(text: str, note_id: str, position: int | None = None) -> str:
    """Insert the inline marker for *note_id* into *text*.

    *position* is a character offset (clamped to the text). When omitted
    the marker goes at the end of the body, before any trailing block of
    reference lines, separated from preceding text by a space, or on a
    line of its own when the note has no body yet.
    """
    marker = format_marker(note_id)
    if position is not None:
        offset = max(0, min(position, len(text)))
        return text[:offset] + marker + text[offset:]

    body, block = split_reference_block(text)
    stripped = body.rstrip()
    trailing = body[len(stripped) :]
    if stripped.rpartition("\n")[2] == HEADER_DELIMITER:
        # Header only: the marker opens the body.
        marker = "\n\n" + marker
    elif stripped:
        marker = " " + marker
    return stripped + marker + (trailing or "\n") + block
