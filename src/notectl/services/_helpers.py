"""Shared service-layer helper functions."""

from __future__ import annotations

from pathlib import Path


def bare_name(note: str | Path) -> str:
    """Reduce a path or filename to the bare filename the codec expects.

    Examples:
        >>> bare_name("/home/me/notes/20201008_093000--x--y.txt")
        '20201008_093000--x--y.txt'
        >>> bare_name("20201008_093000--x--y.txt")
        '20201008_093000--x--y.txt'
    """
    return Path(note).name
