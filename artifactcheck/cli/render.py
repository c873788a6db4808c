"""Rich terminal rendering of check results and hash tables."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from artifactcheck.models.artifacts import CheckReport
from artifactcheck.models.hashes import HashTable


class ReportRenderer:
    """Renders reports as Rich tables.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_report(self, report: CheckReport) -> Table:
        table = Table(title=f"Artifacts ({report.namespace})")
        table.add_column("Artifact", style="cyan")
        table.add_column("Fingerprint")
        table.add_column("Exists", justify="center")
        for r in report.records:
            exists = "[green]yes[/green]" if r.exists else "[yellow]no[/yellow]"
            table.add_row(escape(r.artifact_name), escape(r.fingerprint), exists)
        return table

    def print_report(self, report: CheckReport) -> None:
        if not report.records:
            self.console.print("[dim]No artifacts declared.[/dim]")
            return
        self.console.print(self.render_report(report))
        present = len(report.records) - report.missing_count
        self.console.print(
            f"[bold]{present}[/bold] present, [bold]{report.missing_count}[/bold] missing"
        )

    def print_hashes(self, hashes: HashTable) -> None:
        if not len(hashes):
            self.console.print("[dim]No hash files found.[/dim]")
            return
        table = Table(title="Hashes")
        table.add_column("Filter", style="cyan")
        table.add_column("Hash")
        for name in hashes.filter_names():
            lookup = hashes.lookup(name)
            value = escape(lookup.value) if lookup.value else "[red](empty)[/red]"
            table.add_row(escape(name), value)
        self.console.print(table)
