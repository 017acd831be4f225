"""CLI entry point for swiftcheck."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from colorama import init as colorama_init

from swiftcheck import __version__
from swiftcheck.backends.browser import open_browser
from swiftcheck.core.models import MODES
from swiftcheck.core.runner import TestRunner, settle_strategies
from swiftcheck.core.settle import SETTLE_STRATEGIES
from swiftcheck.reporting import JsonReporter, ReportManager, TerminalReporter
from swiftcheck.suite import SuiteOptions, load_suite, select_cases


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"], "auto_envvar_prefix": "SWIFTCHECK"}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"swiftcheck {__version__}")
    raise click.exceptions.Exit()


def _suite_option(func):
    return click.option(
        "--suite",
        "suite_path",
        type=click.Path(exists=True, dir_okay=False),
        help="YAML suite file (defaults to the packaged swifttranslator suite).",
    )(func)


def _filter_options(func):
    func = click.option("--mode", type=click.Choice(MODES), help="Only run positive or negative cases.")(func)
    func = click.option("--skip-tags", "skip_tag_filters", type=str, help="Comma-separated tags to skip.")(func)
    func = click.option("--tags", "tag_filters", type=str, help="Comma-separated tags to include.")(func)
    func = click.option("--cases", "case_filters", type=str, help="Comma-separated case id filters (supports globs).")(func)
    return func


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Print extraction tiers and realtime update steps.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the swiftcheck version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Black-box checks for a Singlish to Sinhala transliteration page."""

    colorama_init()
    ctx.obj = CliState(verbose=verbose)


@cli.command("list")
@_suite_option
@_filter_options
def list_cases(
    suite_path: Optional[str],
    case_filters: Optional[str],
    tag_filters: Optional[str],
    skip_tag_filters: Optional[str],
    mode: Optional[str],
) -> None:
    """List the cases a run would execute."""

    try:
        suite = load_suite(suite_path)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    for case in select_cases(suite, _suite_options(case_filters, tag_filters, skip_tag_filters, mode)):
        kind = "realtime" if case.realtime else case.mode
        click.echo(f"{case.id:<14} {kind:<9} {case.title}")


@cli.command()
@_suite_option
@_filter_options
@click.option("--base-url", type=str, help="Page under test (overrides the suite).")
@click.option("--headless/--headed", default=None, help="Run Chromium without a visible window.")
@click.option("--settle", type=click.Choice(SETTLE_STRATEGIES), help="How to wait for the translation to settle.")
@click.option("--settle-ms", type=click.IntRange(min=0), help="Fixed settle delay, or poll timeout, in ms.")
@click.option("--hold-ms", type=click.IntRange(min=0), help="Pause after each case so a headed browser stays visible.")
@click.option("--results-dir", type=click.Path(file_okay=False), help="Directory for screenshots.")
@click.option("--no-screenshots", is_flag=True, help="Skip per-case screenshots.")
@click.option("--fail-fast", is_flag=True, default=None, help="Stop after the first case that does not pass.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def run(
    state: CliState,
    suite_path: Optional[str],
    case_filters: Optional[str],
    tag_filters: Optional[str],
    skip_tag_filters: Optional[str],
    mode: Optional[str],
    base_url: Optional[str],
    headless: Optional[bool],
    settle: Optional[str],
    settle_ms: Optional[int],
    hold_ms: Optional[int],
    results_dir: Optional[str],
    no_screenshots: bool,
    fail_fast: Optional[bool],
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """Execute the selected cases against the page, one at a time."""

    try:
        suite = load_suite(suite_path)
        settings = suite.settings.merged(
            {
                "base_url": base_url,
                "headless": headless,
                "settle": settle,
                "settle_ms": settle_ms,
                "hold_ms": hold_ms,
                "results_dir": Path(results_dir) if results_dir else None,
                "screenshots": False if no_screenshots else None,
                "fail_fast": fail_fast or None,
            }
        )
        settle_strategies(settings)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    cases = select_cases(suite, _suite_options(case_filters, tag_filters, skip_tag_filters, mode))
    if not cases:
        click.echo("No cases matched the provided filters.")
        raise click.exceptions.Exit(1)
    if report_format == "json":
        reporters = [JsonReporter(path=report_path)]
    else:
        reporters = [TerminalReporter(use_color=not no_color, verbose=state.verbose)]
    manager = ReportManager(reporters)
    with open_browser(settings) as session_factory:
        TestRunner(session_factory, settings).run(cases, reporter=manager)
    raise click.exceptions.Exit(0 if manager.summary.ok else 1)


def _suite_options(
    case_filters: Optional[str],
    tag_filters: Optional[str],
    skip_tag_filters: Optional[str],
    mode: Optional[str],
) -> SuiteOptions:
    return SuiteOptions(
        cases=_split_csv(case_filters),
        tags=_split_csv(tag_filters),
        skip_tags=_split_csv(skip_tag_filters),
        mode=mode,
    )


def _split_csv(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return tuple()
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return tuple(parts)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="swiftcheck", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
