"""``configcell affected ACCOUNTS_FILE``: which preserved-account cells change.

Given the accounts about to be added to the preserved list, shows the shard
each one falls into and prints the type tags of the cells that must be
redeployed, one per line on stdout.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from configcell.cli._common import console, load_settings, resolve_profile, type_tag_hex
from configcell.core.errors import GenerationError
from configcell.core.inputs import InputReader
from configcell.core.orchestrator import Orchestrator
from configcell.models.payloads import preserved_account_type_tag


def affected_cmd(
    accounts_file: Path = typer.Argument(
        ..., help="File with one account name per line."
    ),
    profile: str = typer.Option(
        None, "--profile", "-p", help="Parameter profile (mainnet or testnet)."
    ),
) -> None:
    """Show which preserved-account shards the given accounts fall into."""
    settings = load_settings(profile)
    orchestrator = Orchestrator(resolve_profile(settings), settings.data_dir)

    reader = InputReader(accounts_file.parent, settings.decode_policy)
    try:
        accounts = reader.read_lines(accounts_file.name)
    except GenerationError as exc:
        console.print(f"[bold red]Cannot read accounts:[/bold red] {exc}")
        raise typer.Exit(code=1) from None

    groups = orchestrator.affected_shards(accounts)

    table = Table(title="Affected preserved-account cells")
    table.add_column("Shard", justify="right", style="cyan")
    table.add_column("Type tag", style="green")
    table.add_column("Accounts")
    for index, members in groups.items():
        tag = type_tag_hex(preserved_account_type_tag(index))
        table.add_row(str(index), tag, ", ".join(members))
    console.print(table)

    for index in groups:
        typer.echo(type_tag_hex(preserved_account_type_tag(index)))
