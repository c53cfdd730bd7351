"""Path stylers: paint path components with their $LS_COLORS codes.

``LS_COLORS`` is a colon-separated list of ``key=SGR`` pairs, where *key* is
either a file-type code (``di``, ``ln``, ``ex``, ``fi``) or a ``*suffix``
pattern such as ``*.tar``. Codes are forwarded verbatim into the escape
sequence; they are never interpreted here.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, Tuple

# Used when $LS_COLORS is unset or empty
DEFAULT_LS_COLORS = (
    "di=01;34:ln=01;36:ex=01;32:"
    "*.tar=01;31:*.tgz=01;31:*.zip=01;31:*.gz=01;31:*.bz2=01;31:*.xz=01;31:"
    "*.jpg=01;35:*.jpeg=01;35:*.gif=01;35:*.png=01;35:*.svg=01;35:"
    "*.mp3=00;36:*.wav=00;36:*.flac=00;36"
)


class PathStyler(Protocol):
    def paint(self, path: str) -> str: ...


class PlainStyler:
    """Leaves paths untouched."""

    def paint(self, path: str) -> str:
        return path


def paint(text: str, code: Optional[str]) -> str:
    if not code:
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


class LsColors:
    """Component-wise path styler driven by an LS_COLORS specification."""

    def __init__(self, types: Dict[str, str], suffixes: Dict[str, str]) -> None:
        self._types = types
        # longest suffix wins
        self._suffixes: List[Tuple[str, str]] = sorted(
            suffixes.items(), key=lambda item: len(item[0]), reverse=True
        )

    @classmethod
    def parse(cls, value: str) -> "LsColors":
        types: Dict[str, str] = {}
        suffixes: Dict[str, str] = {}
        for item in value.split(":"):
            key, sep, code = item.partition("=")
            if not sep or not key:
                continue
            if key.startswith("*"):
                suffixes[key[1:].lower()] = code
            else:
                types[key] = code
        return cls(types, suffixes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LsColors":
        env = os.environ if environ is None else environ
        return cls.parse(env.get("LS_COLORS") or DEFAULT_LS_COLORS)

    def code_for_name(self, name: str) -> Optional[str]:
        """Code for a regular file, by suffix pattern then ``fi``."""
        lowered = name.lower()
        for suffix, code in self._suffixes:
            if lowered.endswith(suffix):
                return code
        return self._types.get("fi")

    def _code_for_leaf(self, path: str, name: str) -> Optional[str]:
        p = Path(path)
        try:
            if p.is_symlink() and self._types.get("ln", "target") != "target":
                return self._types["ln"]
            if p.is_dir():
                return self._types.get("di")
            if p.is_file() and os.access(p, os.X_OK) and "ex" in self._types:
                return self._types["ex"]
        except OSError:
            # e.g. name too long or permission denied; style by name only
            pass
        return self.code_for_name(name)

    def style_for_path_components(self, path: str) -> List[Tuple[str, Optional[str]]]:
        """Split *path* into ``(component, code)`` pairs.

        Every component but the last is a directory and keeps its trailing
        ``/``. Deleted paths do not exist on disk, so the leaf falls back to
        suffix matching.
        """
        parts = path.split("/")
        components: List[Tuple[str, Optional[str]]] = [
            (f"{part}/", self._types.get("di")) for part in parts[:-1]
        ]
        leaf = parts[-1]
        if leaf:
            components.append((leaf, self._code_for_leaf(path, leaf)))
        return components

    def paint(self, path: str) -> str:
        return "".join(paint(text, code) for text, code in self.style_for_path_components(path))
