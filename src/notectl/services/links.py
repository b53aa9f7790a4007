"""LinkService — bidirectional links between two notes.

insert_link runs, per invocation:

    SelectTarget → ComposeReferences → ApplyToSource → ApplyToTarget → Done

Each Apply step appends a reference line, deduplicates the note's
reference lines and writes the file. The two writes are sequential and
not atomic: if the process dies between them, the source holds a
one-sided link. ``notectl check --fix`` repairs that.
"""

from __future__ import annotations

import logging
from pathlib import Path

from notectl.domain.content import format_marker, insert_marker
from notectl.domain.filenames import MalformedFilenameError, require_filename
from notectl.domain.links import Direction, append_reference, gather_references
from notectl.infrastructure.errors import NoteNotFoundError
from notectl.services._helpers import bare_name
from notectl.services.base import BaseService
from notectl.services.result import (
    MALFORMED_FILENAME,
    NOT_FOUND,
    VALIDATION_FAILED,
    ServiceResult,
)

logger = logging.getLogger(__name__)

_DIRECTIONS: dict[str, Direction | None] = {
    "incoming": Direction.INCOMING,
    "outgoing": Direction.OUTGOING,
    "all": None,
}


class LinkService(BaseService):
    """Inserts, lists and follows links between notes."""

    def insert_link(
        self,
        source: str | Path,
        target_id: str,
        *,
        position: int | None = None,
    ) -> ServiceResult:
        """Link *source* to the note whose id is *target_id*.

        Args:
            source: The current note, as a bare filename or a path.
            target_id: Identifier of the note to link to.
            position: Character offset in the source for the inline
                marker; None puts it at the end of the body.

        Repeating the call for the same pair leaves exactly one reference
        line in each note. A target that does not resolve fails with
        NOT_FOUND before anything is written.
        """
        op = "insert_link"
        warnings: list[str] = []
        source_name = bare_name(source)

        # ── SELECT TARGET ─────────────────────────────────────────
        try:
            require_filename(source_name)
            source_text = self._store.read(source_name)
        except MalformedFilenameError as exc:
            return ServiceResult.failure(op, MALFORMED_FILENAME, str(exc), filename=exc.filename)
        except NoteNotFoundError as exc:
            return ServiceResult.failure(op, NOT_FOUND, str(exc), filename=exc.identifier)

        try:
            target_name = self._store.find_by_id(target_id, exclude=source_name)
            target_text = self._store.read(target_name)
        except NoteNotFoundError:
            return ServiceResult.failure(
                op,
                NOT_FOUND,
                f"No other note has id {target_id!r}",
                id=target_id,
            )

        # ── COMPOSE REFERENCES ────────────────────────────────────
        new_source = insert_marker(source_text, target_id, position)
        new_source = append_reference(new_source, Direction.OUTGOING, target_name)
        new_target = append_reference(target_text, Direction.INCOMING, source_name)

        # ── APPLY TO SOURCE ───────────────────────────────────────
        source_path = self._store.write(source_name, new_source)
        logger.debug("Linked %s -> %s (source written)", source_name, target_name)

        # ── APPLY TO TARGET ───────────────────────────────────────
        target_path = self._store.write(target_name, new_target)
        logger.debug("Linked %s -> %s (target written)", source_name, target_name)

        self._dispatch_event(
            "post_link",
            {
                "source": source_name,
                "target": target_name,
                "paths": [str(source_path), str(target_path)],
            },
            warnings,
        )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": source_name,
                "target": target_name,
                "marker": format_marker(target_id),
                "source_path": str(source_path),
                "target_path": str(target_path),
            },
            warnings=warnings,
        )

    def list_links(self, source: str | Path, *, direction: str = "incoming") -> ServiceResult:
        """Filenames referenced by *source*'s reference lines.

        Read-only. *direction* is ``incoming`` (``@@`` lines),
        ``outgoing`` (``^^`` lines) or ``all``.
        """
        op = "list_links"
        source_name = bare_name(source)
        if direction not in _DIRECTIONS:
            return ServiceResult.failure(
                op,
                VALIDATION_FAILED,
                f"Unknown direction {direction!r}; expected one of {sorted(_DIRECTIONS)}",
            )
        try:
            text = self._store.read(source_name)
        except NoteNotFoundError as exc:
            return ServiceResult.failure(op, NOT_FOUND, str(exc), filename=exc.identifier)

        items = gather_references(text, _DIRECTIONS[direction])
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": source_name,
                "direction": direction,
                "items": items,
                "count": len(items),
            },
        )

    def follow_link(self, source: str | Path, filename: str) -> ServiceResult:
        """Resolve *filename*, referenced from *source*, to a path."""
        op = "follow_link"
        source_name = bare_name(source)
        try:
            text = self._store.read(source_name)
        except NoteNotFoundError as exc:
            return ServiceResult.failure(op, NOT_FOUND, str(exc), filename=exc.identifier)

        if filename not in gather_references(text, None):
            return ServiceResult.failure(
                op,
                NOT_FOUND,
                f"{source_name} does not reference {filename}",
                filename=filename,
            )
        try:
            path = self._store.resolve(filename)
        except NoteNotFoundError as exc:
            return ServiceResult.failure(
                op,
                NOT_FOUND,
                f"Dangling reference: {filename} is not in the store",
                filename=exc.identifier,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"source": source_name, "filename": filename, "path": str(path)},
        )
