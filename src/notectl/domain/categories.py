"""Category inference — the category set is derived, never stored."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from notectl.domain.filenames import decode_filename
from notectl.domain.slugs import normalize_categories

logger = logging.getLogger(__name__)


def infer_categories(filenames: Iterable[str]) -> list[str]:
    """Categories used by *filenames*, in first-seen order.

    Names that are not note filenames are skipped.
    """
    found: list[str] = []
    for name in filenames:
        decoded = decode_filename(name)
        if decoded is None:
            logger.debug("Skipping non-note entry %s", name)
            continue
        for category in decoded.categories:
            if category not in found:
                found.append(category)
    return found


def merge_categories(filenames: Iterable[str], known: Iterable[str] = ()) -> list[str]:
    """Inferred categories first, then the configured *known* ones, without duplicates.

    Examples:
        >>> merge_categories(
        ...     ["20200101_000000--economics-politics--a.txt", "20200102_000000--politics--b.txt"],
        ...     ["philosophy"],
        ... )
        ['economics', 'politics', 'philosophy']
    """
    merged = infer_categories(filenames)
    for category in normalize_categories(known):
        if category not in merged:
            merged.append(category)
    return merged
