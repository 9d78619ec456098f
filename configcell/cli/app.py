"""Main Typer application: imports and registers all CLI commands.

Entry point: ``configcell`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import typer
from rich.table import Table

from configcell.cli._common import console
from configcell.cli.commands.affected import affected_cmd
from configcell.cli.commands.bloom_check import bloom_check_cmd
from configcell.cli.commands.generate import generate_cmd
from configcell.models.profiles import PROFILES

app = typer.Typer(
    name="configcell",
    help="configcell: deterministic config cell payload generator.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="generate", help="Build all config cells and print the manifest line.")(generate_cmd)
app.command(name="affected", help="Show preserved-account cells touched by new accounts.")(affected_cmd)
app.command(name="bloom-check", help="Probe the curated bloom filter.")(bloom_check_cmd)


@app.command(name="profiles", help="List the known parameter profiles.")
def profiles_cmd() -> None:
    """List parameter profiles and their size and capacity constants."""
    table = Table(title="Parameter profiles")
    table.add_column("Name", style="cyan")
    table.add_column("Witness limit", justify="right")
    table.add_column("Shards", justify="right")
    table.add_column("Per shard", justify="right")
    table.add_column("Account id", justify="right")
    table.add_column("Bloom m/k", justify="right")

    for profile in PROFILES.values():
        table.add_row(
            profile.name,
            str(profile.witness_size_limit),
            str(profile.preserved_account_cell_count),
            str(profile.preserved_account_limit_per_cell),
            str(profile.account_id_length),
            f"{profile.bloom_filter_bits}/{profile.bloom_filter_probes}",
        )

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
