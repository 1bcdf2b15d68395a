#!/usr/bin/env python3
"""
unitbench Command Line Interface

Entry point for running micro-benchmarks from a shell. Invoked without a
subcommand it runs the bundled comparison between the structured and the
object-oriented sample units.

Usage:
    unitbench --help
    unitbench [command] [options]

Examples:
    unitbench
    unitbench run Fast=units/fast.py Slow=units/slow.py
    unitbench run --plan plan.yaml --json-output results.json
    unitbench version

Environment Variables:
    UNITBENCH_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    UNITBENCH_PAUSE_MS: Pause between consecutive runs in milliseconds
    UNITBENCH_RUN_NAME: Value of ``__name__`` while a unit runs
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Any, List, Optional, Sequence, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler

from unitbench import __version__
from unitbench.benchmarking.runner import BenchmarkRunner, RunOutcome, run_benchmarks
from unitbench.config.plan import BenchmarkSpec, load_plan, parse_pair
from unitbench.config.settings import BenchSettings
from unitbench.core.exceptions import ConfigurationError, MemoryStatsUnavailable
from unitbench.execution.executor import UnitExecutor
from unitbench.monitoring.memory import MemoryProbe
from unitbench.reporting.console import ConsoleReporter
from unitbench.reporting.export import save_results
from unitbench.workloads import default_benchmarks

console = Console(soft_wrap=True)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="unitbench",
    help="Micro-benchmark harness comparing units of Python code by speed and memory.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# State dictionary to hold shared objects like settings
state: dict[str, Any] = {"settings": None}


def configure_logging(level: str, verbose: bool = False) -> None:
    """Route log records through rich on stderr, keeping stdout for reports."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )
    logging.getLogger("unitbench").setLevel(logging.DEBUG if verbose else level)
    if verbose:
        logger.debug("Verbose logging enabled")


def execute_benchmarks(
    pairs: Sequence[Tuple[str, Path]],
    settings: BenchSettings,
    *,
    pause_ms: Optional[int] = None,
    json_output: Optional[Path] = None,
    reporter: Optional[ConsoleReporter] = None,
) -> RunOutcome:
    """Run ``pairs`` with a fresh session and print their summary."""
    reporter = reporter or ConsoleReporter(console)
    pause_seconds = settings.pause_seconds if pause_ms is None else pause_ms / 1000.0

    with MemoryProbe() as probe:
        runner = BenchmarkRunner(
            executor=UnitExecutor(probe=probe, run_name=settings.run_name),
            reporter=reporter,
        )
        outcome = run_benchmarks(pairs, runner=runner, reporter=reporter, pause_seconds=pause_seconds)

    if json_output is not None:
        save_results(json_output, outcome.session.results, outcome.report)
    return outcome


def _current_settings() -> BenchSettings:
    return state["settings"] or BenchSettings.from_env()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output.")] = False,
) -> None:
    """
    Compare units of Python code by execution time and memory usage.
    """
    try:
        settings = BenchSettings.from_env()
    except ConfigurationError as e:
        configure_logging("INFO", verbose)
        logger.error(f"Configuration error: {e.message}")
        raise typer.Exit(code=1)

    configure_logging(settings.log_level, verbose)
    state["settings"] = settings

    if ctx.invoked_subcommand is not None:
        return

    console.print("[bold]Starting comparison between programming paradigms...[/]")
    try:
        execute_benchmarks(default_benchmarks(), settings)
    except MemoryStatsUnavailable as e:
        logger.error(f"Cannot measure memory on this host: {e.message}")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.exception(f"Benchmark run failed: {str(e)}")
        raise typer.Exit(code=1)

    console.print("\n[bold green]Analysis complete![/]")


@app.command()
def run(
    benchmarks: Annotated[
        Optional[List[str]],
        typer.Argument(metavar="NAME=PATH", help="Benchmarks to run, in order."),
    ] = None,
    plan: Annotated[
        Optional[Path],
        typer.Option("--plan", "-p", help="YAML or JSON file listing benchmarks (run before NAME=PATH pairs)."),
    ] = None,
    pause_ms: Annotated[
        Optional[int],
        typer.Option("--pause-ms", min=0, help="Pause between runs in milliseconds."),
    ] = None,
    json_output: Annotated[
        Optional[Path],
        typer.Option("--json-output", "-o", help="Write results and summary to this JSON file."),
    ] = None,
) -> None:
    """
    Run the given benchmarks in order and print a comparative summary.
    """
    settings = _current_settings()

    try:
        specs: List[BenchmarkSpec] = load_plan(plan) if plan else []
        specs.extend(parse_pair(value) for value in benchmarks or [])
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        raise typer.Exit(code=1)

    if not specs:
        logger.error("No benchmarks given. Pass NAME=PATH pairs or --plan.")
        raise typer.Exit(code=1)

    try:
        execute_benchmarks(
            [spec.as_pair() for spec in specs],
            settings,
            pause_ms=pause_ms,
            json_output=json_output,
        )
    except MemoryStatsUnavailable as e:
        logger.error(f"Cannot measure memory on this host: {e.message}")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.exception(f"Benchmark run failed: {str(e)}")
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Display the current version of unitbench."""
    console.print(f"unitbench v[bold cyan]{__version__}[/bold cyan]")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        app()
    except Exception as e:
        logger.error(f"Unhandled exception: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
