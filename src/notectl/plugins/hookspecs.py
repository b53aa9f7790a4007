"""Pluggy hook specifications for notectl lifecycle events.

Hooks run synchronously, in the calling thread, after the files involved
have been written. They let external collaborators (version control,
sync, indexing) react without the core knowing about them.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("notectl")


class NotectlHookSpec:
    """Hook specifications for the notectl plugin system."""

    @hookspec
    def post_create(
        self,
        note_id: str,
        filename: str,
        path: str,
        categories: list[str],
    ) -> None:
        """Called after a note file is created."""

    @hookspec
    def post_link(
        self,
        source: str,
        target: str,
        paths: list[str],
    ) -> None:
        """Called after a link is written to both notes."""

    @hookspec
    def post_check(
        self,
        issues_found: int,
        issues_fixed: int,
    ) -> None:
        """Called after a link check or repair."""
