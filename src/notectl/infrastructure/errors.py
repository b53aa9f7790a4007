"""Typed failures raised by the note store.

Each carries the identifier that failed so services can report it.
Malformed filenames met while *scanning* are never raised; see
:class:`notectl.domain.filenames.MalformedFilenameError` for names a caller
asked for explicitly.
"""

from __future__ import annotations


class NoteError(Exception):
    """Base class for note store failures."""


class NoteNotFoundError(NoteError):
    """An id or filename does not resolve to a note in the store."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"No note matches {identifier!r}")
        self.identifier = identifier


class NoteExistsError(NoteError):
    """A note with the exact filename already exists."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Note already exists: {filename}")
        self.filename = filename
