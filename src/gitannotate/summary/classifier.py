"""Path classification against finished ClassificationTables."""

from __future__ import annotations

from typing import Generator, Iterable, Tuple

from gitannotate.summary.models import Classification, ClassificationTables, Status

_UNCHANGED = Classification(Status.UNCHANGED)
_CREATED = Classification(Status.CREATED)
_DELETED = Classification(Status.DELETED)


def classify(path: str, tables: ClassificationTables) -> Classification:
    """Return the status of *path*; the first matching check wins.

    Order: created, deleted, renamed away, renamed in. A rename only counts
    when a similarity percentage was recorded for the path.
    """
    if path in tables.created:
        return _CREATED
    if path in tables.deleted:
        return _DELETED

    percent = tables.percent_of.get(path)
    if percent is None:
        return _UNCHANGED
    if path in tables.renamed_to:
        return Classification(Status.RENAMED_AWAY, percent)
    if path in tables.renamed_from:
        return Classification(Status.RENAMED_IN, percent)
    return _UNCHANGED


def classify_stream(
    lines: Iterable[str],
    tables: ClassificationTables,
) -> Generator[Tuple[str, Classification], None, None]:
    """Yield ``(trimmed_path, classification)`` for each input line, lazily."""
    for line in lines:
        path = line.strip()
        yield path, classify(path, tables)
