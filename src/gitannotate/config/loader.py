"""Load configuration from .gitannotate.toml and environment variables."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from rich.errors import StyleSyntaxError
from rich.style import Style

from gitannotate.config.schema import (
    COLOR_MODES,
    ColorConfig,
    GitAnnotateConfig,
    GlyphConfig,
    OutputConfig,
    PathsConfig,
)

CONFIG_FILENAME = ".gitannotate.toml"
CONFIG_ENV = "GITANNOTATE_CONFIG"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(cwd: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence, then $GITANNOTATE_CONFIG."""
    explicit = override or os.environ.get(CONFIG_ENV)
    if explicit:
        p = Path(explicit)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return p
    candidate = cwd / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: GitAnnotateConfig) -> None:
    for f in dataclasses.fields(ColorConfig):
        value = getattr(cfg.colors, f.name)
        if not isinstance(value, str):
            raise ConfigError(f"colors.{f.name} must be a string")
        try:
            Style.parse(value)
        except StyleSyntaxError as exc:
            raise ConfigError(f"colors.{f.name}: invalid style {value!r}") from exc
    for f in dataclasses.fields(GlyphConfig):
        if not isinstance(getattr(cfg.glyphs, f.name), str):
            raise ConfigError(f"glyphs.{f.name} must be a string")
    if not isinstance(cfg.output.percent_separator, str):
        raise ConfigError("output.percent_separator must be a string")
    if not isinstance(cfg.paths.ls_colors, bool):
        raise ConfigError("paths.ls_colors must be true or false")
    if cfg.output.color not in COLOR_MODES:
        raise ConfigError(
            f"output.color must be one of {', '.join(COLOR_MODES)}, got {cfg.output.color!r}"
        )


def _merge_env_overrides(cfg: GitAnnotateConfig) -> None:
    """Apply GITANNOTATE_COLOR and NO_COLOR overrides."""
    if val := os.environ.get("GITANNOTATE_COLOR"):
        if val in COLOR_MODES:
            cfg.output.color = val  # type: ignore[assignment]
    if os.environ.get("NO_COLOR"):
        cfg.output.color = "never"


def load_config(
    cwd: Optional[Path] = None,
    config_override: Optional[str] = None,
) -> GitAnnotateConfig:
    """Load, validate, and return a GitAnnotateConfig."""
    config_path = find_config_file(cwd or Path.cwd(), config_override)

    if config_path is None:
        cfg = GitAnnotateConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = GitAnnotateConfig(
                glyphs=_build_section(raw, GlyphConfig, "glyphs"),
                colors=_build_section(raw, ColorConfig, "colors"),
                output=_build_section(raw, OutputConfig, "output"),
                paths=_build_section(raw, PathsConfig, "paths"),
            )
        except AttributeError as exc:
            # a section given as a plain value instead of a table
            raise ConfigError(f"Malformed section in {config_path}: {exc}") from exc
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
