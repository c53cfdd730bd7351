"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

ColorMode = Literal["always", "never", "auto"]

COLOR_MODES: tuple[str, ...] = ("always", "never", "auto")


@dataclass
class GlyphConfig:
    created: str = "●"
    deleted: str = "●"
    renamed_away: str = "←"
    renamed_in: str = "→"
    unchanged: str = "▪"


@dataclass
class ColorConfig:
    """Rich style strings, e.g. ``"green"`` or ``"bold red"``."""

    created: str = "green"
    deleted: str = "red"
    renamed_away: str = "red"
    renamed_in: str = "green"
    unchanged: str = "blue"
    percent: str = "yellow"


@dataclass
class OutputConfig:
    color: ColorMode = "always"
    percent_separator: str = "\t\t"

    def use_color(self, is_tty: bool) -> bool:
        if self.color == "auto":
            return is_tty
        return self.color == "always"


@dataclass
class PathsConfig:
    ls_colors: bool = True


@dataclass
class GitAnnotateConfig:
    glyphs: GlyphConfig = field(default_factory=GlyphConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
