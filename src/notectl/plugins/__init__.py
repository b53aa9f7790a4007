"""Plugin system for notectl.

Hook markers for plugin authors::

    from notectl.plugins import hookimpl

    class GitCommitPlugin:
        @hookimpl
        def post_create(self, note_id, filename, path, categories):
            ...
"""

from __future__ import annotations

import pluggy

hookimpl = pluggy.HookimplMarker("notectl")
