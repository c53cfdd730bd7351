"""Change-summary parser for ``git diff --format= --summary`` output.

Yields FileChange and RenameRecord entries. Example input::

     create mode 100644 docs/usage.md
     delete mode 100644 docs/legacy.md
     rename src/{util.py => helpers.py} (87%)
     rename install/{ => bin}/setup.sh (51%)
     rename jdk/test/{closed => }/CRLFTest.java (53%)
     rename test.txt => test_wow.txt (100%)

Lines that match none of the prefixes, or a rename line with no ``=>``, are
skipped without error.
"""

from __future__ import annotations

import logging
from typing import Callable, Generator, Iterable, Optional, Tuple

from gitannotate.summary.models import (
    ChangeKind,
    ClassificationTables,
    FileChange,
    RenameRecord,
    SummaryEntry,
)

logger = logging.getLogger(__name__)

CREATE_PREFIX = "create mode "
DELETE_PREFIX = "delete mode "
RENAME_PREFIX = "rename "

_ARROW = " => "


def _strip_mode(rest: str) -> Optional[str]:
    """Drop the leading file-mode token; None when nothing follows it."""
    _mode, sep, path = rest.partition(" ")
    if not sep:
        return None
    return path


def split_percent(text: str) -> Tuple[str, Optional[str]]:
    """Split a trailing ``(NN%)`` annotation off a rename body.

    Must run before the path grammar is matched, since the annotation has
    parentheses of its own. Returns ``(remaining_text, percent)``; an empty
    ``()`` yields a None percent.
    """
    start = text.rfind(" (")
    end = text.rfind(")")
    if start == -1 or end == -1 or end < start:
        return text, None
    return text[:start], text[start + 2:end] or None


def split_rename(text: str) -> Optional[Tuple[str, str]]:
    """Resolve a rename body (percent already removed) to ``(origin, dest)``.

    Handles the bracketed shorthand ``prefix{from => to}suffix`` as well as
    the plain ``origin => dest`` form. Inside braces an empty side may drop
    its space, as in ``{=> sub}`` or ``{old =>}``.
    """
    lbrace = text.find("{")
    rbrace = text.find("}")
    if -1 < lbrace < rbrace:
        old, sep, new = text[lbrace + 1:rbrace].partition("=>")
        if sep:
            prefix = text[:lbrace]
            suffix = text[rbrace + 1:]
            old = old.removesuffix(" ")
            new = new.removeprefix(" ")
            # An empty side leaves 'a//b'
            origin = f"{prefix}{old}{suffix}".replace("//", "/")
            dest = f"{prefix}{new}{suffix}".replace("//", "/")
            return origin, dest

    origin, sep, dest = text.partition(_ARROW)
    if not sep:
        return None
    return origin, dest


def parse_line(line: str) -> Optional[SummaryEntry]:
    """Parse one summary line. Returns None for anything unrecognised."""
    ln = line.strip()

    if ln.startswith(CREATE_PREFIX):
        path = _strip_mode(ln[len(CREATE_PREFIX):])
        return FileChange(path=path, kind=ChangeKind.CREATED) if path is not None else None

    if ln.startswith(DELETE_PREFIX):
        path = _strip_mode(ln[len(DELETE_PREFIX):])
        return FileChange(path=path, kind=ChangeKind.DELETED) if path is not None else None

    if ln.startswith(RENAME_PREFIX):
        body, percent = split_percent(ln[len(RENAME_PREFIX):])
        paths = split_rename(body)
        if paths is None:
            return None
        origin, dest = paths
        return RenameRecord(origin=origin, dest=dest, percent=percent)

    return None


class SummaryParser:
    """Parse change-summary lines and yield SummaryEntry objects.

    Usage::

        parser = SummaryParser(lines)
        for entry in parser.parse():
            if isinstance(entry, RenameRecord):
                ...
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = lines
        self.skipped = 0

    def parse(self) -> Generator[SummaryEntry, None, None]:
        for raw_line in self._lines:
            entry = parse_line(raw_line)
            if entry is None:
                if raw_line.strip():
                    self.skipped += 1
                    logger.debug("Skipping summary line: %r", raw_line)
                continue
            yield entry


def build_tables(
    entries: Iterable[SummaryEntry],
    on_rename: Optional[Callable[[RenameRecord], None]] = None,
) -> ClassificationTables:
    """Accumulate *entries* into ClassificationTables.

    *on_rename* is called for every rename as soon as it is added, in input
    order.
    """
    tables = ClassificationTables()
    for entry in entries:
        tables.add(entry)
        if on_rename is not None and isinstance(entry, RenameRecord):
            on_rename(entry)

    logger.info(
        "Summary parsed: %d created, %d deleted, %d renamed",
        len(tables.created),
        len(tables.deleted),
        tables.rename_count,
    )
    return tables
