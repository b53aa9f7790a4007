"""QueryService — read-only views of the note store."""

from __future__ import annotations

from typing import Any

from notectl.domain.content import parse_header
from notectl.domain.filenames import NoteName
from notectl.domain.ids import validate_id
from notectl.domain.slugs import normalize_category
from notectl.infrastructure.errors import NoteNotFoundError
from notectl.services.base import BaseService
from notectl.services.result import NOT_FOUND, VALIDATION_FAILED, ServiceResult


def _note_item(note: NoteName) -> dict[str, Any]:
    return {
        "id": note.id,
        "categories": list(note.categories),
        "slug": note.slug,
        "filename": note.filename,
    }


class QueryService(BaseService):
    """Lists and looks up notes. Never writes."""

    def list_notes(self, *, category: str | None = None) -> ServiceResult:
        """All notes, oldest first, optionally only those in *category*."""
        notes = sorted(self._store.notes(), key=lambda n: n.filename)
        if category is not None:
            wanted = normalize_category(category)
            notes = [n for n in notes if wanted in n.categories]
        items = [_note_item(n) for n in notes]
        return ServiceResult(
            ok=True,
            op="list_notes",
            data={"items": items, "count": len(items)},
        )

    def find_note(self, note_id: str) -> ServiceResult:
        """Resolve an identifier to its filename, path and title."""
        op = "find_note"
        if not validate_id(note_id):
            return ServiceResult.failure(
                op,
                VALIDATION_FAILED,
                f"Not a note id: {note_id!r} (expected YYYYMMDD_HHMMSS)",
                id=note_id,
            )
        try:
            filename = self._store.find_by_id(note_id)
            path = self._store.resolve(filename)
        except NoteNotFoundError as exc:
            return ServiceResult.failure(op, NOT_FOUND, str(exc), id=exc.identifier)

        warnings: list[str] = []
        header = parse_header(self._store.read(filename))
        if header is None:
            warnings.append(f"{filename} has no header block")
        data: dict[str, Any] = {
            "id": note_id,
            "filename": filename,
            "path": str(path),
            "title": header.title if header else None,
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
