"""Reading the change-summary report and the path stream."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Generator, Iterable

logger = logging.getLogger(__name__)


class ReportError(Exception):
    """Raised when the change-summary report cannot be opened or read."""


def open_report(path: str | Path) -> BinaryIO:
    """Open the report for reading. Raises ReportError on failure."""
    try:
        return open(path, "rb")
    except OSError as exc:
        raise ReportError(f"Cannot open report {path}: {exc}") from exc


def decode_lines(stream: Iterable[bytes]) -> Generator[str, None, None]:
    """Yield UTF-8 lines without their line ending.

    Lines that are not valid UTF-8 are dropped; the rest of the stream is
    still read.
    """
    for line_no, raw in enumerate(stream, start=1):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Skipping undecodable line %d", line_no)
            continue
        yield text.rstrip("\r\n")


def read_report(report: BinaryIO) -> Generator[str, None, None]:
    """Yield decoded report lines. A failing read raises ReportError."""
    try:
        yield from decode_lines(report)
    except OSError as exc:
        raise ReportError(f"Cannot read report: {exc}") from exc
