"""Reference lines — the on-disk half of a link between two notes.

A link from A to B is recorded as::

    ^^ <B filename>     (in A, outgoing)
    @@ <A filename>     (in B, incoming)

Pure functions, no I/O. Consumed by the link service when a link is
inserted and by the check service when link symmetry is verified.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Which way a reference line points."""

    OUTGOING = "^^"
    INCOMING = "@@"


_REFERENCE_PATTERN = re.compile(r"^(?P<delimiter>\^\^|@@)[ \t]+(?P<filename>\S.*?)\s*$")


@dataclass(frozen=True)
class ReferenceLine:
    """A single reference line."""

    direction: Direction
    filename: str

    def render(self) -> str:
        return f"{self.direction.value} {self.filename}"


def parse_reference_line(line: str) -> ReferenceLine | None:
    """Parse one line, returning None if it is not a reference line."""
    match = _REFERENCE_PATTERN.match(line)
    if match is None:
        return None
    return ReferenceLine(
        direction=Direction(match.group("delimiter")),
        filename=match.group("filename"),
    )


def iter_references(text: str) -> list[ReferenceLine]:
    """All reference lines in *text*, in order, duplicates included."""
    results: list[ReferenceLine] = []
    for line in text.splitlines():
        ref = parse_reference_line(line)
        if ref is not None:
            results.append(ref)
    return results


def gather_references(text: str, direction: Direction | None = Direction.INCOMING) -> list[str]:
    """Filenames referenced by *text*, first occurrence order, no duplicates.

    Only lines of *direction* are considered; ``None`` means both.
    """
    filenames: list[str] = []
    for ref in iter_references(text):
        if direction is not None and ref.direction is not direction:
            continue
        if ref.filename not in filenames:
            filenames.append(ref.filename)
    return filenames


def dedupe_references(text: str) -> str:
    """Drop repeated reference lines, keeping the first of each.

    Lines that are not reference lines are left exactly as they are.
    """
    seen: set[ReferenceLine] = set()
    kept: list[str] = []
    for line in text.splitlines(keepends=True):
        ref = parse_reference_line(line)
        if ref is not None:
            if ref in seen:
                continue
            seen.add(ref)
        kept.append(line)
    return "".join(kept)


def append_reference(text: str, direction: Direction, filename: str) -> str:
    """Append a reference line to the end of *text*, then deduplicate.

    The first reference line of a note is separated from the body by a
    blank line; later ones go directly below the previous one.
    """
    last = next((line for line in reversed(text.splitlines()) if line.strip()), None)
    if last is not None and parse_reference_line(last) is None:
        text = text.rstrip("\n") + "\n\n"
    elif text and not text.endswith("\n"):
        text += "\n"
    text += ReferenceLine(direction, filename).render() + "\n"
    return dedupe_references(text)


def split_reference_block(text: str) -> tuple[str, str]:
    """Split *text* into ``(body, block)``, *block* being the trailing run of reference lines.

    Blank lines inside the run belong to the block; blank lines before it
    belong to the body. ``body + block == text`` always holds.
    """
    lines = text.splitlines(keepends=True)
    start = len(lines)
    for i in range(len(lines) - 1, -1, -1):
        line = lines[i]
        if parse_reference_line(line) is not None:
            start = i
        elif line.strip():
            break
    return "".join(lines[:start]), "".join(lines[start:])
