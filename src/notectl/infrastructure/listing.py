"""Directory listing strategies for the note store.

A strategy takes the store directory and yields full paths of candidate
files. The flat strategy looks at direct children only; the recursive one
walks subdirectories too. Callers reduce paths to bare names before
decoding them.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

ListingStrategy = Callable[[Path], Iterator[Path]]


def is_hidden(name: str) -> bool:
    """Dotfiles, editor lock files (``#...``) and backups (``...~``)."""
    return name.startswith((".", "#")) or name.endswith("~")


def list_flat(directory: Path) -> Iterator[Path]:
    """Yield visible files directly inside *directory*."""
    for path in sorted(directory.iterdir()):
        if is_hidden(path.name) or not path.is_file():
            continue
        yield path


def list_recursive(directory: Path) -> Iterator[Path]:
    """Yield visible files anywhere below *directory*, skipping hidden directories."""
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames[:] = sorted(d for d in dirnames if not is_hidden(d))
        for name in sorted(filenames):
            if not is_hidden(name):
                yield Path(dirpath) / name


LISTING_STRATEGIES: dict[str, ListingStrategy] = {
    "flat": list_flat,
    "recursive": list_recursive,
}


def get_listing(name: str) -> ListingStrategy:
    """Look up a strategy by its configured name.

    Raises:
        ValueError: If *name* is not a known strategy.
    """
    try:
        return LISTING_STRATEGIES[name]
    except KeyError:
        msg = f"Unknown listing strategy: {name!r}"
        raise ValueError(msg) from None
