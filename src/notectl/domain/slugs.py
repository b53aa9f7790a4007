"""Slug and category normalization.

A slug is the filesystem-safe form of a title: lowercase words joined by
single hyphens. A category is a single lowercase token (no hyphens, since the
hyphen separates categories inside a filename).
"""

from __future__ import annotations

import re
from collections.abc import Iterable

FALLBACK_SLUG = "untitled"

# Stripped outright, not replaced by a hyphen.
_PUNCTUATION = re.compile(r"[\[\]{}!@#$%^&*()_=+'\"?,.|;:~`‘’“”/\\<>]")
_SEPARATORS = re.compile(r"[\s-]+")


def _normalize(text: str) -> str:
    text = _PUNCTUATION.sub("", text)
    text = text.lower()
    text = _SEPARATORS.sub("-", text)
    return text.strip("-")


def slugify(text: str, *, fallback: str = FALLBACK_SLUG) -> str:
    """Turn free text into a slug.

    Never fails and is idempotent. Text that normalizes to nothing
    becomes *fallback* (:data:`FALLBACK_SLUG` unless given).

    Examples:
        >>> slugify("My First Note!")
        'my-first-note'
        >>> slugify("  a -- b  ")
        'a-b'
        >>> slugify("?!")
        'untitled'
    """
    return _normalize(text) or fallback


def normalize_category(text: str) -> str:
    """Normalize a category to one lowercase token. May return ``""``."""
    return _normalize(text).replace("-", "")


def normalize_categories(items: Iterable[str]) -> list[str]:
    """Normalize categories, dropping empties and later duplicates."""
    seen: list[str] = []
    for item in items:
        category = normalize_category(item)
        if category and category not in seen:
            seen.append(category)
    return seen
