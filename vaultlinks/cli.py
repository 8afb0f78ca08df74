"""CLI entrypoint for vaultlinks."""

import sys
from pathlib import Path

import click

from . import __version__
from ._logging import configure_logging
from .config import DEFAULT_LOG_LEVEL, JOBS_ENV, LOG_LEVEL_ENV, LOG_LEVELS, VAULT_ENV


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="vaultlinks")
@click.option(
    "--vault",
    "-v",
    required=True,
    envvar=VAULT_ENV,
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    help="Path to the vault root directory",
)
@click.option(
    "--jobs",
    "-j",
    type=click.IntRange(min=1),
    default=None,
    envvar=JOBS_ENV,
    help="Worker threads for parsing notes (default: executor default)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar=LOG_LEVEL_ENV,
    show_default=True,
    help="Diagnostics written to stderr at this level or above",
)
@click.pass_context
def cli(ctx: click.Context, vault: Path, jobs: int | None, log_level: str) -> None:
    """vaultlinks - list every link target in a markdown vault.

    Targets are note names, "name|alias" pairs from frontmatter aliases, and
    every link destination found in note bodies or quoted frontmatter values.

    Without a subcommand, prints the sorted target set.
    """
    configure_logging(log_level)

    ctx.ensure_object(dict)
    ctx.obj["vault"] = vault.resolve()
    ctx.obj["jobs"] = jobs

    if ctx.invoked_subcommand is None:
        ctx.invoke(targets)


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="Output as a JSON array")
@click.pass_context
def targets(ctx: click.Context, output_json: bool) -> None:
    """Print all targets, deduplicated and sorted, one per line.

    Examples:

        vaultlinks --vault ~/notes

        vaultlinks -v ~/notes targets --json
    """
    from .commands.targets import run_targets

    exit_code = run_targets(ctx.obj["vault"], ctx.obj["jobs"], output_json)
    sys.exit(exit_code)


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="Output as JSON objects")
@click.pass_context
def links(ctx: click.Context, output_json: bool) -> None:
    """Print every link as "text -> destination"."""
    from .commands.links import run_links

    exit_code = run_links(ctx.obj["vault"], ctx.obj["jobs"], output_json)
    sys.exit(exit_code)


@cli.command()
@click.argument("name")
@click.option("--json", "output_json", is_flag=True, help="Output as a JSON array")
@click.pass_context
def note(ctx: click.Context, name: str, output_json: bool) -> None:
    """Print the targets contributed by a single note.

    NAME is the note's filename without extension.
    """
    from .commands.targets import run_note

    exit_code = run_note(ctx.obj["vault"], name, ctx.obj["jobs"], output_json)
    sys.exit(exit_code)


@cli.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Show note, link and target counts."""
    from .commands.stats import run_stats

    exit_code = run_stats(ctx.obj["vault"], ctx.obj["jobs"])
    sys.exit(exit_code)


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
