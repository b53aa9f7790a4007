"""CheckService — link symmetry and header consistency.

Single command following the linter pattern. Linking two notes writes
two files without a transaction, so an interrupted link leaves a
reference line on one side only. ``check`` reports such one-sided links,
dangling references, repeated reference lines and headers that disagree
with their filename; ``fix`` writes the missing counterpart lines and
removes repeats. Headers are reported only, never rewritten.
"""

from __future__ import annotations

import logging
from typing import Any

from notectl.domain.content import parse_header
from notectl.domain.links import (
    Direction,
    append_reference,
    dedupe_references,
    gather_references,
    iter_references,
)
from notectl.services.base import BaseService
from notectl.services.result import ServiceResult

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Issue severity and category constants
# ---------------------------------------------------------------------------

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

CAT_DANGLING = "dangling_reference"
CAT_ONE_SIDED = "one_sided_link"
CAT_DUPLICATE = "duplicate_reference"
CAT_HEADER = "header_consistency"

_COUNTERPART = {
    Direction.OUTGOING: Direction.INCOMING,
    Direction.INCOMING: Direction.OUTGOING,
}


def _issue(
    category: str,
    severity: str,
    filename: str,
    message: str,
    fix_action: str | None = None,
) -> dict[str, Any]:
    return {
        "category": category,
        "severity": severity,
        "filename": filename,
        "message": message,
        "fix_action": fix_action,
    }


class CheckService(BaseService):
    """Finds and repairs inconsistent links across the store."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self, *, min_severity: str = SEVERITY_WARNING) -> ServiceResult:
        """Report issues without modifying anything."""
        texts = self._load_notes()
        issues = self._find_issues(texts)
        if min_severity == SEVERITY_ERROR:
            issues = [i for i in issues if i["severity"] == SEVERITY_ERROR]

        warnings: list[str] = []
        self._dispatch_event(
            "post_check",
            {"issues_found": len(issues), "issues_fixed": 0},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op="check",
            data={"issues": issues, "count": len(issues)},
            warnings=warnings,
        )

    def fix(self) -> ServiceResult:
        """Add missing counterpart reference lines and drop repeated ones."""
        texts = self._load_notes()
        updated = dict(texts)
        fixes: list[str] = []

        for filename, text in texts.items():
            for ref in iter_references(text):
                if ref.filename == filename or ref.filename not in updated:
                    continue
                counterpart = _COUNTERPART[ref.direction]
                other = updated[ref.filename]
                if filename not in gather_references(other, counterpart):
                    updated[ref.filename] = append_reference(other, counterpart, filename)
                    fixes.append(f"{ref.filename}: added '{counterpart.value} {filename}'")

        for filename, text in updated.items():
            deduped = dedupe_references(text)
            if deduped != text:
                updated[filename] = deduped
                fixes.append(f"{filename}: removed repeated reference lines")

        for filename, text in updated.items():
            if text != texts[filename]:
                self._store.write(filename, text)
                logger.debug("Repaired references in %s", filename)

        warnings: list[str] = []
        self._dispatch_event(
            "post_check",
            {"issues_found": len(fixes), "issues_fixed": len(fixes)},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op="fix",
            data={"fixes": fixes, "count": len(fixes)},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load_notes(self) -> dict[str, str]:
        """Text of every note, keyed by bare filename."""
        texts: dict[str, str] = {}
        for note in self._store.notes():
            filename = note.filename
            texts[filename] = self._store.read(filename)
        return texts

    def _find_issues(self, texts: dict[str, str]) -> list[dict[str, Any]]:
        issues: list[dict[str, Any]] = []
        for filename, text in texts.items():
            issues.extend(self._check_header(filename, text))

            refs = iter_references(text)
            if len(refs) != len(set(refs)):
                issues.append(
                    _issue(
                        CAT_DUPLICATE,
                        SEVERITY_WARNING,
                        filename,
                        "Repeated reference lines",
                        fix_action="remove repeats",
                    )
                )

            for ref in dict.fromkeys(refs):
                if ref.filename == filename:
                    continue
                if ref.filename not in texts:
                    issues.append(
                        _issue(
                            CAT_DANGLING,
                            SEVERITY_ERROR,
                            filename,
                            f"'{ref.render()}' points to a note that is not in the store",
                        )
                    )
                    continue
                counterpart = _COUNTERPART[ref.direction]
                if filename not in gather_references(texts[ref.filename], counterpart):
                    issues.append(
                        _issue(
                            CAT_ONE_SIDED,
                            SEVERITY_ERROR,
                            filename,
                            f"'{ref.render()}' has no '{counterpart.value} {filename}' "
                            f"in {ref.filename}",
                            fix_action=f"add '{counterpart.value} {filename}' to {ref.filename}",
                        )
                    )
        return issues

    @staticmethod
    def _check_header(filename: str, text: str) -> list[dict[str, Any]]:
        header = parse_header(text)
        if header is None:
            return [_issue(CAT_HEADER, SEVERITY_WARNING, filename, "No header block")]
        if header.orig_name != filename:
            return [
                _issue(
                    CAT_HEADER,
                    SEVERITY_WARNING,
                    filename,
                    f"Header orig_name is {header.orig_name!r}",
                )
            ]
        return []
