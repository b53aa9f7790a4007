"""NoteStore — the directory of note files.

INVARIANT: Files are truth. There is no index; every question about the
store is answered by listing the directory and decoding filenames.

The store is the single dependency injected into every service. It never
renames or deletes a note. The only operation that creates files is
:meth:`NoteStore.create`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from notectl.domain.content import DEFAULT_SEED_SEPARATOR, NoteHeader, render_note
from notectl.domain.filenames import NoteName, decode_filename, encode_filename
from notectl.infrastructure.errors import NoteExistsError, NoteNotFoundError
from notectl.infrastructure.listing import ListingStrategy, get_listing

if TYPE_CHECKING:
    from notectl.config.settings import NoteSettings
    from notectl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class NoteStore:
    """Lists, creates, reads and resolves notes in one directory.

    Usage::

        store = NoteStore(Path("~/Documents/notes").expanduser())
        path = store.create("20201008_093000", ["economics"], "my-note", title="My note")
        for filename in store.list():
            ...
    """

    def __init__(
        self,
        directory: Path,
        *,
        listing: str | ListingStrategy = "flat",
        category_subdirs: bool = False,
        seed_separator: str = DEFAULT_SEED_SEPARATOR,
        known_categories: Iterable[str] = (),
    ) -> None:
        self._root = directory
        self._listing = get_listing(listing) if isinstance(listing, str) else listing
        self.category_subdirs = category_subdirs
        self.seed_separator = seed_separator
        self.known_categories = tuple(known_categories)
        self.plugin_manager: PluginManager | None = None

    @classmethod
    def from_settings(cls, settings: NoteSettings) -> NoteStore:
        """Build a store from the ``[notes]`` settings section."""
        notes = settings.notes
        return cls(
            settings.notes_directory,
            listing=notes.listing,
            category_subdirs=notes.category_subdirs,
            seed_separator=notes.seed_separator,
            known_categories=notes.known_categories,
        )

    @property
    def root(self) -> Path:
        """The store directory, created on first access."""
        if not self._root.exists():
            logger.info("Creating note directory %s", self._root)
            self._root.mkdir(parents=True, exist_ok=True)
        return self._root

    def init_plugins(self) -> None:
        """Discover plugins and attach the plugin manager (idempotent)."""
        if self.plugin_manager is not None:
            return
        from notectl.plugins.manager import PluginManager

        pm = PluginManager()
        pm.discover_and_load()
        self.plugin_manager = pm

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def entries(self) -> Iterator[Path]:
        """Full paths of every visible file in the store (lazy)."""
        return self._listing(self.root)

    def list(self) -> Iterator[str]:
        """Bare filenames of every visible file in the store (lazy).

        Includes files that are not notes; decode them to find out.
        """
        return (path.name for path in self.entries())

    def notes(self) -> Iterator[NoteName]:
        """Decoded names of every note, skipping files that are not notes."""
        for name in self.list():
            decoded = decode_filename(name)
            if decoded is None:
                logger.debug("Skipping non-note entry %s", name)
                continue
            yield decoded

    def ids(self) -> set[str]:
        """Identifiers currently in use."""
        return {note.id for note in self.notes()}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, filename: str) -> Path:
        """Absolute path of a bare filename, in flat and recursive mode alike.

        Raises:
            NoteNotFoundError: If no file of that name is in the store.
        """
        if not filename or Path(filename).name != filename:
            raise NoteNotFoundError(filename)
        candidate = self.root / filename
        if candidate.is_file():
            return candidate.resolve()
        for path in self.entries():
            if path.name == filename:
                return path.resolve()
        raise NoteNotFoundError(filename)

    def find_by_id(self, note_id: str, *, exclude: str | None = None) -> str:
        """Bare filename of the note whose id is *note_id*.

        Files that are not notes, and the filename *exclude*, are skipped.

        Raises:
            NoteNotFoundError: If no other note has that id.
        """
        for note in self.notes():
            if note.id != note_id:
                continue
            filename = note.filename
            if filename == exclude:
                continue
            return filename
        raise NoteNotFoundError(note_id)

    # ------------------------------------------------------------------
    # File I/O
    # ------------------------------------------------------------------

    def read(self, filename: str) -> str:
        """Text of the note *filename*."""
        return self.resolve(filename).read_text(encoding="utf-8")

    def write(self, filename: str, text: str) -> Path:
        """Replace the text of an existing note *filename*."""
        path = self.resolve(filename)
        path.write_text(text, encoding="utf-8")
        return path

    def create(
        self,
        note_id: str,
        categories: Sequence[str],
        slug: str,
        *,
        title: str,
        date: str | None = None,
        seed_body: str | None = None,
    ) -> Path:
        """Create a new note file and return its path.

        Writes the header block and, when given, the quoted *seed_body*.
        With ``category_subdirs`` the note goes into a subdirectory named
        after its first category.

        Raises:
            NoteExistsError: If a file with the same name already exists.
        """
        filename = encode_filename(note_id, categories, slug)
        parent = self.root
        if self.category_subdirs and categories:
            parent = parent / categories[0].lower()
            parent.mkdir(parents=True, exist_ok=True)
        path = parent / filename

        header = NoteHeader(
            title=title,
            date=date or f"{note_id[0:4]}-{note_id[4:6]}-{note_id[6:8]}",
            categories=tuple(c.lower() for c in categories),
            orig_name=filename,
            orig_id=note_id,
        )
        text = render_note(header, seed_body, separator=self.seed_separator)
        try:
            with path.open("x", encoding="utf-8") as fh:
                fh.write(text)
        except FileExistsError:
            raise NoteExistsError(filename) from None
        logger.debug("Created note %s", path)
        return path
