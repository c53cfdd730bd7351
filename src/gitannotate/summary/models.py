"""Data models for change-summary parsing and path classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Set, Union


class ChangeKind(str, Enum):
    CREATED = "created"
    DELETED = "deleted"


class Status(str, Enum):
    CREATED = "created"
    DELETED = "deleted"
    RENAMED_AWAY = "renamed_away"
    RENAMED_IN = "renamed_in"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class FileChange:
    """A ``create mode`` or ``delete mode`` summary line."""

    path: str
    kind: ChangeKind


@dataclass(frozen=True)
class RenameRecord:
    """A ``rename`` summary line, resolved to full origin and destination paths."""

    origin: str
    dest: str
    percent: Optional[str] = None  # e.g. '73%'

    def to_manifest_line(self) -> str:
        # '::' rather than ':' since a single colon is legal in file names
        return f"{self.origin}::{self.dest}::{self.percent or ''}\n"


SummaryEntry = Union[FileChange, RenameRecord]


@dataclass(frozen=True, slots=True)
class Classification:
    """Status of a single path, with the similarity percentage for renames."""

    status: Status
    percent: Optional[str] = None


@dataclass
class ClassificationTables:
    """Lookup tables built from a change summary, keyed by trimmed path."""

    created: Set[str] = field(default_factory=set)
    deleted: Set[str] = field(default_factory=set)
    renamed_to: Dict[str, str] = field(default_factory=dict)  # origin -> dest
    renamed_from: Dict[str, str] = field(default_factory=dict)  # dest -> origin
    percent_of: Dict[str, str] = field(default_factory=dict)

    def add(self, entry: SummaryEntry) -> None:
        if isinstance(entry, RenameRecord):
            self.add_rename(entry)
        elif entry.kind is ChangeKind.CREATED:
            self.created.add(entry.path)
        else:
            self.deleted.add(entry.path)

    def add_rename(self, record: RenameRecord) -> None:
        """Record both directions of a rename, plus its percentage if known."""
        self.renamed_to[record.origin] = record.dest
        self.renamed_from[record.dest] = record.origin
        if record.percent:
            self.percent_of[record.origin] = record.percent
            self.percent_of[record.dest] = record.percent

    @property
    def rename_count(self) -> int:
        return len(self.renamed_to)
