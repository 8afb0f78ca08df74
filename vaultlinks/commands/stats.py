"""Stats command: note, link and target counts."""

from pathlib import Path

from rich.console import Console
from rich.table import Table

from . import load_or_report


def run_stats(vault_path: Path, jobs: int | None = None) -> int:
    console = Console()
    vault = load_or_report(vault_path, jobs, Console(stderr=True))
    if vault is None:
        return 1

    table = Table(title="Vault Summary", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")

    table.add_row("Notes", str(len(vault.documents)))
    table.add_row("Links", str(len(vault.links())))
    table.add_row("Targets", str(len(vault.targets())))
    table.add_row("Skipped", str(len(vault.failures)))

    console.print(table)

    if vault.failures:
        skipped = Table(title="Skipped Notes")
        skipped.add_column("Kind", style="yellow")
        skipped.add_column("File")
        skipped.add_column("Reason", style="dim")
        for failure in vault.failures:
            skipped.add_row(failure.kind, str(failure.path.relative_to(vault.path)), failure.message)
        console.print(skipped)

    return 0
