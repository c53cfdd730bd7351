"""Terminal renderer: status glyph, styled path, and similarity percentage.

Line format::

    <glyph> <styled path>[<separator>(<percent>)]

Glyph and percentage are colored with standard 16-color SGR codes via Rich,
so ``green`` renders as ``ESC[32m...ESC[0m``.
"""

from __future__ import annotations

import re
from typing import Dict, Generator, Iterable, TextIO

from rich.color import ColorSystem
from rich.style import Style

from gitannotate.config.schema import GitAnnotateConfig
from gitannotate.output.lscolors import PathStyler
from gitannotate.summary.classifier import classify_stream
from gitannotate.summary.models import Classification, ClassificationTables, Status

_COLOR_SYSTEM = ColorSystem.STANDARD

_ANSI_RE = re.compile(r"\x1b\[[;?0-9]*[a-zA-Z]")


class Theme:
    """Glyphs and styles per status, resolved once from config."""

    def __init__(
        self,
        glyphs: Dict[Status, str],
        styles: Dict[Status, Style],
        percent_style: Style,
        separator: str = "\t\t",
    ) -> None:
        self._glyphs = glyphs
        self._styles = styles
        self.percent_style = percent_style
        self.separator = separator

    @classmethod
    def from_config(cls, cfg: GitAnnotateConfig) -> "Theme":
        glyphs = {status: getattr(cfg.glyphs, status.value) for status in Status}
        styles = {status: Style.parse(getattr(cfg.colors, status.value)) for status in Status}
        return cls(
            glyphs,
            styles,
            Style.parse(cfg.colors.percent),
            separator=cfg.output.percent_separator,
        )

    def glyph(self, status: Status) -> str:
        return self._styles[status].render(self._glyphs[status], color_system=_COLOR_SYSTEM)

    def percent(self, percent: str) -> str:
        return self.percent_style.render(f"({percent})", color_system=_COLOR_SYSTEM)


def render_line(
    path: str,
    classification: Classification,
    theme: Theme,
    styler: PathStyler,
) -> str:
    line = f"{theme.glyph(classification.status)} {styler.paint(path)}"
    if classification.percent is not None:
        line += theme.separator + theme.percent(classification.percent)
    return line


def annotate(
    lines: Iterable[str],
    tables: ClassificationTables,
    theme: Theme,
    styler: PathStyler,
) -> Generator[str, None, None]:
    """Yield one rendered line per input line. Reads *tables* only."""
    for path, classification in classify_stream(lines, tables):
        yield render_line(path, classification, theme, styler)


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def write_lines(lines: Iterable[str], stream: TextIO, *, color: bool = True) -> None:
    """Write each line to *stream*, flushing once at the end."""
    for line in lines:
        stream.write((line if color else strip_ansi(line)) + "\n")
    stream.flush()
