"""BaseService — foundation for all notectl services.

Every service receives a :class:`NoteStore` at construction time and
does all of its file access through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from notectl.infrastructure.store import NoteStore

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CreateService(BaseService):
            def create_note(self, title: str, ...) -> ServiceResult:
                path = self._store.create(...)
                ...
    """

    def __init__(self, store: NoteStore) -> None:
        self._store = store

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call a plugin hook synchronously. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        pm = self._store.plugin_manager
        if pm is None:
            return
        try:
            getattr(pm.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
