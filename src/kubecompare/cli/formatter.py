# src/kubecompare/cli/formatter.py
from typing import Any, Dict

from rich.console import Console
from rich.table import Table
from rich.text import Text

from kubecompare.core.models import (
    AddedOnRight,
    ComparisonReport,
    LineKind,
    RemovedOnLeft,
    ReportEntry,
)

LINE_STYLES = {
    LineKind.ADDED: "bold green",
    LineKind.REMOVED: "bold red",
}


class ReportFormatter:
    """
    ReportFormatter: renders a ComparisonReport on the console it is given.
    The engine never touches it; the CLI builds one and passes it along.
    """

    def __init__(self, console: Console):
        self.console = console

    def render(self, report: ComparisonReport, left_name: str, right_name: str):
        """
        Prints every entry in report order: right-stream manifests first,
        then the ones only found on the left.
        """
        for entry in report.entries:
            self.render_entry(entry, left_name, right_name)

    def render_entry(self, entry: ReportEntry, left_name: str, right_name: str):
        # Text objects, not markup: manifest content may contain [brackets]
        self.console.print(Text(f"\n--- {entry.identity}"))

        if isinstance(entry.entry, AddedOnRight):
            self.console.print(Text(f"> Present only in file: {right_name}", style="bold cyan"))
            return
        if isinstance(entry.entry, RemovedOnLeft):
            self.console.print(Text(f"< Present only in file: {left_name}", style="bold cyan"))
            return

        if entry.diff.equivalent:
            self.console.print(Text("Manifests match", style="bold green"))
            return

        for line in entry.diff.lines:
            self.console.print(Text(str(line), style=LINE_STYLES[line.kind]))

    def print_error(self, message: str):
        self.console.print(Text(message, style="bold red"))

    def print_summary(self, summary: Dict[str, Any]):
        """
        Builds the summary table shown after the listing (--summary).
        """
        table = Table(title="KubeCompare Summary", show_header=True, header_style="bold magenta")
        table.add_column("Outcome")
        table.add_column("Manifests", justify="right")

        table.add_row("[yellow]Changed[/yellow]", str(summary["changed"]))
        table.add_row("[green]Unchanged[/green]", str(summary["unchanged"]))
        table.add_row("[cyan]Added[/cyan]", str(summary["added"]))
        table.add_row("[cyan]Removed[/cyan]", str(summary["removed"]))

        dropped = summary["dropped_left"] + summary["dropped_right"]
        if dropped:
            table.add_row("[dim]Skipped (undecodable)[/dim]", str(dropped))

        self.console.print()
        self.console.print(table)
