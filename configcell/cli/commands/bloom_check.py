"""``configcell bloom-check ITEM...``: probe the generated bloom filter."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from configcell.cli._common import console, load_settings, resolve_profile
from configcell.core.errors import GenerationError
from configcell.core.inputs import InputReader
from configcell.sections.bloom import BLOOM_FILTER_FILE, build_bloom_filter


def bloom_check_cmd(
    items: list[str] = typer.Argument(..., help="Names to test for membership."),
    profile: str = typer.Option(
        None, "--profile", "-p", help="Parameter profile (mainnet or testnet)."
    ),
    data_dir: Path = typer.Option(
        None, "--data-dir", "-d", help="Directory holding the input files."
    ),
) -> None:
    """Report whether each ITEM may be in the curated bloom filter set."""
    settings = load_settings(profile, data_dir)
    active = resolve_profile(settings)

    try:
        members = InputReader(settings.data_dir, settings.decode_policy).read_lines(
            BLOOM_FILTER_FILE
        )
    except GenerationError as exc:
        console.print(f"[bold red]Cannot build bloom filter:[/bold red] {exc}")
        raise typer.Exit(code=1) from None

    bf = build_bloom_filter(active, members)

    table = Table(
        title=(
            f"Bloom filter ({active.bloom_filter_bits} bits, "
            f"{active.bloom_filter_probes} probes, "
            f"~{bf.estimated_false_positive_rate():.2%} false positives)"
        )
    )
    table.add_column("Item", style="cyan")
    table.add_column("Result", justify="center")
    for item in items:
        found = bf.contains(item)
        table.add_row(item, "[green]maybe present[/green]" if found else "[red]absent[/red]")
        typer.echo(f"{item}\t{'present' if found else 'absent'}")
    console.print(table)
