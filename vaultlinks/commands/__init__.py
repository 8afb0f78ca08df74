"""Command implementations behind the CLI."""

from pathlib import Path

from rich.console import Console

from ..errors import VaultLinksError
from ..vault.loader import Vault, load_vault


def load_or_report(vault_path: Path, jobs: int | None, console: Console) -> Vault | None:
    """Load the vault, printing run-level faults instead of raising.

    Returns:
        The vault, or None if loading hit a fatal error.
    """
    try:
        vault = load_vault(vault_path, jobs=jobs)
    except VaultLinksError as e:
        console.print(f"✗ {e}", style="bold red")
        return None

    if vault.failures:
        console.print(f"Skipped {len(vault.failures)} unreadable or invalid note(s)", style="yellow")
    return vault
