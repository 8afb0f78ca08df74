"""Targets commands: the vault-wide target set and a single note's targets."""

import json
from pathlib import Path

from rich.console import Console

from . import load_or_report


def run_targets(vault_path: Path, jobs: int | None = None, output_json: bool = False) -> int:
    """Print every target in the vault, deduplicated and sorted.

    Sorting by code point gives the same order as sorting the UTF-8 bytes.

    Returns:
        Exit code (0 = success, 1 = fatal error)
    """
    console = Console(stderr=True)
    vault = load_or_report(vault_path, jobs, console)
    if vault is None:
        return 1

    targets = sorted(vault.targets())
    if output_json:
        print(json.dumps(targets, indent=2, ensure_ascii=False))
    else:
        for target in targets:
            print(target)
    return 0


def run_note(vault_path: Path, name: str, jobs: int | None = None, output_json: bool = False) -> int:
    """Print the targets of one note in extraction order."""
    console = Console(stderr=True)
    vault = load_or_report(vault_path, jobs, console)
    if vault is None:
        return 1

    document = vault.get(name)
    if document is None:
        console.print(f"Unknown note: {name}", style="bold red")
        return 1

    if output_json:
        print(json.dumps(document.targets, indent=2, ensure_ascii=False))
    else:
        for target in document.targets:
            print(target)
    return 0
