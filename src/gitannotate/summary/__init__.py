"""Change-summary parsing, lookup tables, and path classification."""

from gitannotate.summary.classifier import classify, classify_stream
from gitannotate.summary.models import (
    ChangeKind,
    Classification,
    ClassificationTables,
    FileChange,
    RenameRecord,
    Status,
    SummaryEntry,
)
from gitannotate.summary.parser import SummaryParser, build_tables, parse_line
from gitannotate.summary.report import ReportError, decode_lines, open_report, read_report

__all__ = [
    "ChangeKind",
    "Classification",
    "ClassificationTables",
    "FileChange",
    "RenameRecord",
    "ReportError",
    "Status",
    "SummaryEntry",
    "SummaryParser",
    "build_tables",
    "classify",
    "classify_stream",
    "decode_lines",
    "open_report",
    "parse_line",
    "read_report",
]
