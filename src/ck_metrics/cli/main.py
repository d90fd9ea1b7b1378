"""Typer application for ck-metrics."""

import json
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from .. import __version__
from ..analysis import MetricsFilter, analyze_classes, load_facts
from ..analysis.reporters import ConsoleReporter, format_text_report
from ..config import MetricsConfig
from ..core.exceptions import CKMetricsError

console = Console()

app = typer.Typer(
    name="ck-metrics",
    help="📐 Chidamber-Kemerer design metrics for compiled classes",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"ck-metrics {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """📐 Chidamber-Kemerer design metrics for compiled classes."""


@app.command()
def analyze(
    facts: Path = typer.Argument(
        ...,
        help="JSON file with class facts produced by a class-file reader",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    include_platform: bool | None = typer.Option(
        None,
        "--include-platform/--exclude-platform",
        help="Count platform (JDK) classes in coupling, DIT and RFC",
        rich_help_panel="📊 Measurement Options",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML configuration file",
        rich_help_panel="🔧 Global Options",
    ),
    workers: int | None = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Worker threads (default: from config or executor default)",
        rich_help_panel="⚡ Performance Options",
    ),
    public_only: bool = typer.Option(
        False,
        "--public-only",
        help="Report only public classes",
        rich_help_panel="📊 Display Options",
    ),
    text_output: bool = typer.Option(
        False,
        "--text",
        help="One plain line per class instead of a table",
        rich_help_panel="📊 Display Options",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results in JSON format",
        rich_help_panel="📊 Display Options",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Trace per-class working sets to stderr",
    ),
) -> None:
    """📈 Compute CK metrics for every class in a facts file.

    [bold cyan]Examples:[/bold cyan]

    [green]Table output:[/green]
        $ ck-metrics analyze facts.json

    [green]Count JDK classes too:[/green]
        $ ck-metrics analyze facts.json --include-platform

    [green]Export to JSON:[/green]
        $ ck-metrics analyze facts.json --json > metrics.json
    """
    _configure_logging(verbose)

    try:
        config = MetricsConfig.load(config_file)
        if include_platform is not None:
            config.include_platform = include_platform
        if workers is not None:
            config.max_workers = workers

        classes = load_facts(facts)
        registry = analyze_classes(
            classes,
            metrics_filter=MetricsFilter.from_config(config),
            max_workers=config.max_workers,
        )
    except CKMetricsError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1) from e

    records = registry.analyzed()
    if public_only:
        records = [r for r in records if r.measurements.is_public]

    if json_output:
        print(json.dumps([record.to_dict() for record in records], indent=2))
    elif text_output:
        report = format_text_report(registry, public_only=public_only)
        if report:
            print(report)
    else:
        reporter = ConsoleReporter(console)
        reporter.print_summary(registry)
        reporter.print_metrics(registry, public_only=public_only)


if __name__ == "__main__":
    app()
