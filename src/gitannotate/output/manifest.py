"""Rename manifest: one ``origin::dest::percent`` line per parsed rename."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO

from gitannotate.summary.models import RenameRecord


class ManifestError(Exception):
    """Raised when the manifest file cannot be created."""


class ManifestWriter:
    """Streams RenameRecords to a text sink as they are parsed."""

    def __init__(self, handle: TextIO) -> None:
        self._handle = handle
        self.count = 0

    @classmethod
    def create(cls, path: str | Path) -> "ManifestWriter":
        """Create (or truncate) the manifest at *path*."""
        try:
            handle = open(path, "w", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise ManifestError(f"Cannot create manifest {path}: {exc}") from exc
        return cls(handle)

    def write(self, record: RenameRecord) -> None:
        self._handle.write(record.to_manifest_line())
        self.count += 1

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> "ManifestWriter":
        return self

    def __exit__(self, *exc_info: Optional[object]) -> None:
        self.close()
