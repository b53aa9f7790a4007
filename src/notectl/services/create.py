"""CreateService — new note pipeline.

Pipeline: VALIDATE → GENERATE → PERSIST → EVENT → RESPOND
"""

from __future__ import annotations

import logging
from datetime import datetime

from notectl.domain.ids import generate_id, next_free_id
from notectl.domain.slugs import FALLBACK_SLUG, normalize_categories, slugify
from notectl.infrastructure.errors import NoteExistsError
from notectl.services.base import BaseService
from notectl.services.result import ALREADY_EXISTS, VALIDATION_FAILED, ServiceResult

logger = logging.getLogger(__name__)


class CreateService(BaseService):
    """Creates notes. The only service that adds files to the store."""

    def create_note(
        self,
        title: str,
        *,
        categories: list[str] | None = None,
        seed: str | None = None,
        now: datetime | None = None,
    ) -> ServiceResult:
        """Create a new note, optionally seeded with a quoted selection.

        Args:
            title: Free-text title; the slug is derived from it.
            categories: Categories in entry order. Normalized to single
                lowercase tokens; empties and duplicates are dropped.
            seed: Text to quote at the top of the body.
            now: Creation time (default: the local clock).
        """
        op = "create_note"
        warnings: list[str] = []

        # ── VALIDATE ──────────────────────────────────────────────
        title = title.strip()
        if not title:
            return ServiceResult.failure(op, VALIDATION_FAILED, "Title must not be empty")

        raw_categories = [c for c in (categories or []) if c.strip()]
        normalized = normalize_categories(raw_categories)
        if [c.strip().lower() for c in raw_categories] != normalized:
            warnings.append(
                f"Categories normalized to {normalized!r} "
                "(lowercase single words, duplicates removed)"
            )

        # ── GENERATE ──────────────────────────────────────────────
        candidate = generate_id(now)
        note_id = next_free_id(candidate, self._store.ids())
        if note_id != candidate:
            logger.info("Identifier %s already in use, using %s", candidate, note_id)
            warnings.append(f"Identifier {candidate} already in use; assigned {note_id}")

        slug = slugify(title)
        if not slugify(title, fallback=""):
            warnings.append(f"Title has no usable characters; slug set to {FALLBACK_SLUG!r}")

        # ── PERSIST ───────────────────────────────────────────────
        try:
            path = self._store.create(
                note_id,
                normalized,
                slug,
                title=title,
                seed_body=seed,
            )
        except NoteExistsError as exc:
            return ServiceResult.failure(
                op,
                ALREADY_EXISTS,
                str(exc),
                filename=exc.filename,
                id=note_id,
            )

        # ── EVENT ─────────────────────────────────────────────────
        self._dispatch_event(
            "post_create",
            {
                "note_id": note_id,
                "filename": path.name,
                "path": str(path),
                "categories": normalized,
            },
            warnings,
        )

        # ── RESPOND ───────────────────────────────────────────────
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": note_id,
                "filename": path.name,
                "path": str(path),
                "title": title,
                "categories": normalized,
                "slug": slug,
            },
            warnings=warnings,
        )
