"""CategoryService — the category set, recomputed on every request."""

from __future__ import annotations

from notectl.domain.categories import merge_categories
from notectl.services.base import BaseService
from notectl.services.result import ServiceResult


class CategoryService(BaseService):
    """Reports the categories in use plus the configured ones."""

    def list_categories(self, known: list[str] | None = None) -> ServiceResult:
        """Categories inferred from filenames, then *known* (default: the store's configured list).

        Read-only apart from creating a missing store directory.
        """
        configured = self._store.known_categories if known is None else known
        items = merge_categories(self._store.list(), configured)
        return ServiceResult(
            ok=True,
            op="list_categories",
            data={"items": items, "count": len(items)},
        )
