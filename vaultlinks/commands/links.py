"""Links command: every extracted link in vault order."""

import json
from dataclasses import asdict
from pathlib import Path

from rich.console import Console

from . import load_or_report


def run_links(vault_path: Path, jobs: int | None = None, output_json: bool = False) -> int:
    """Print each link as ``text -> destination``.

    Returns:
        Exit code (0 = success, 1 = fatal error)
    """
    console = Console(stderr=True)
    vault = load_or_report(vault_path, jobs, console)
    if vault is None:
        return 1

    links = vault.links()
    if output_json:
        print(json.dumps([asdict(link) for link in links], indent=2, ensure_ascii=False))
    else:
        for link in links:
            print(link)
    return 0
