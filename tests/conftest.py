"""Shared test fixtures: sample change summaries and a clean environment."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's shell settings out of the tests."""
    for var in ("GITANNOTATE_CONFIG", "GITANNOTATE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(var, raising=False)
    # Non-empty so the built-in default is not used; no codes, so paths stay plain
    monkeypatch.setenv("LS_COLORS", "rs=0")


@pytest.fixture
def sample_summary() -> str:
    """Summary covering every line grammar, as printed by git."""
    return textwrap.dedent("""\
         create mode 100644 jdk/test/security/cert/CAInterop.java
         delete mode 100644 jdk/test/security/cert/ComodoCA.java
         rename jdk/test/security/cert/{CertignaRoots.java => CertignaCA.java} (73%)
         rename install/src/macosx/au/Sparkle/{ => Autoupdate}/SUInstaller.m (51%)
         rename jdk/test/{closed => }/java/awt/CRLFTest.java (53%)
         rename test.txt => test_wow.txt (100%)
    """)


@pytest.fixture
def small_summary() -> str:
    return textwrap.dedent("""\
         create mode 100644 docs/new.md
         delete mode 100644 docs/old.md
         rename src/{util.py => helpers.py} (87%)
         rename notes.txt => notes.md
    """)


@pytest.fixture
def report_file(tmp_path: Path, small_summary: str) -> Path:
    path = tmp_path / "summary.txt"
    path.write_text(small_summary, encoding="utf-8")
    return path
