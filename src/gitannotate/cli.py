"""gitannotate CLI: mark paths read from stdin with their status in a change summary.

Typical use, feeding a picker with the files of a commit::

    git diff --format= --summary HEAD~1 > /tmp/summary
    git ls-files | gitannotate /tmp/summary /tmp/renames

Setup failures (wrong argument count, unreadable report, manifest that
cannot be created) exit with code 2 and print nothing.
"""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from gitannotate import __version__

app = typer.Typer(
    name="gitannotate",
    help="Annotate paths on stdin as created, deleted, renamed, or unchanged.",
    add_completion=False,
)

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, debug: bool) -> None:
    if not (verbose or debug):
        return
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitannotate {__version__}")
        raise typer.Exit()


def _print_config_callback(value: bool) -> None:
    if value:
        from gitannotate.config.defaults import DEFAULT_TOML

        print(DEFAULT_TOML, end="")
        raise typer.Exit()


@app.command()
def main(
    paths: Optional[List[str]] = typer.Argument(
        None,
        metavar="REPORT MANIFEST",
        help="Change-summary report to read, then rename manifest to write.",
        show_default=False,
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitannotate.toml"),
    no_color: bool = typer.Option(False, "--no-color", help="Strip all color escapes from output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging with timing"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    print_config: bool = typer.Option(
        False, "--print-config", callback=_print_config_callback,
        is_eager=True, help="Print the default config file and exit",
    ),
) -> None:
    """Classify each path on stdin against REPORT and write renames to MANIFEST."""
    from gitannotate.config.loader import ConfigError, load_config
    from gitannotate.output.lscolors import LsColors, PlainStyler
    from gitannotate.output.manifest import ManifestError, ManifestWriter
    from gitannotate.output.terminal import Theme, annotate, write_lines
    from gitannotate.summary.parser import SummaryParser, build_tables
    from gitannotate.summary.report import ReportError, decode_lines, open_report, read_report

    _configure_logging(verbose, debug)
    start = time.perf_counter()

    if not paths or len(paths) != 2:
        logger.debug("Expected REPORT and MANIFEST, got %d argument(s)", len(paths or []))
        raise typer.Exit(code=2)
    report_path, manifest_path = paths

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    if no_color:
        cfg.output.color = "never"

    # --- Phase one: parse the summary, stream renames to the manifest ---
    # Report first, so a missing report leaves no empty manifest behind
    try:
        report = open_report(report_path)
    except ReportError as exc:
        logger.debug("%s", exc)
        raise typer.Exit(code=2) from exc

    with report:
        try:
            manifest = ManifestWriter.create(manifest_path)
        except ManifestError as exc:
            logger.debug("%s", exc)
            raise typer.Exit(code=2) from exc

        with manifest:
            parser = SummaryParser(read_report(report))
            try:
                tables = build_tables(parser.parse(), on_rename=manifest.write)
            except ReportError as exc:
                logger.debug("%s", exc)
                raise typer.Exit(code=2) from exc

    logger.debug("Wrote %d rename(s) to %s, skipped %d line(s)", manifest.count, manifest_path, parser.skipped)

    # --- Phase two: classify stdin against the finished tables ---
    styler = LsColors.from_env() if cfg.paths.ls_colors else PlainStyler()
    theme = Theme.from_config(cfg)
    stdin = typer.get_binary_stream("stdin")
    stdout = typer.get_text_stream("stdout")
    color = cfg.output.use_color(stdout.isatty())
    write_lines(annotate(decode_lines(stdin), tables, theme, styler), stdout, color=color)

    if debug:
        console.print(f"[dim]Duration: {(time.perf_counter() - start) * 1000:.0f}ms[/dim]")
