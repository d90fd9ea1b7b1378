"""Console reporter for CK metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from ..registry import ClassRegistry

COLUMNS = (
    "WMC",
    "DIT",
    "NOC",
    "CBO",
    "DICBO",
    "RFC",
    "LCOM",
    "CA",
    "NPM",
    "SRFC",
    "DRFC",
)


class ConsoleReporter:
    """Console reporter for displaying class metrics in the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print_summary(self, registry: ClassRegistry) -> None:
        """Print counts of analyzed and referenced-only classes.

        Args:
            registry: Registry after a run
        """
        analyzed = registry.analyzed()
        self.console.print("\n[bold blue]📈 CK Metrics[/bold blue]")
        self.console.print("━" * 60)
        self.console.print(f"  Classes Analyzed: {len(analyzed)}")
        self.console.print(f"  Referenced Only: {len(registry) - len(analyzed)}")
        self.console.print()

    def print_metrics(self, registry: ClassRegistry, public_only: bool = False) -> None:
        """Print one table row per analyzed class.

        Args:
            registry: Registry after a run
            public_only: Show only public classes
        """
        records = registry.analyzed()
        if public_only:
            records = [r for r in records if r.measurements.is_public]

        if not records:
            self.console.print("  No classes analyzed")
            self.console.print()
            return

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Class", style="cyan")
        for column in COLUMNS:
            table.add_column(column, justify="right")

        for record in records:
            summary = record.summary()
            table.add_row(
                record.name,
                f"{summary.wmc:.2f}",
                *(str(value) for value in summary[1:]),
            )

        self.console.print(table)
        self.console.print()
