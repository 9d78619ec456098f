"""``configcell generate``: build every config cell and print the manifest.

The manifest is one line on stdout: comma-separated records, each four
space-separated ``0x`` hex fields (type tag, cell data, action witness,
entity witness).  Any fatal condition exits with code 1 and prints nothing
to stdout.
"""

from __future__ import annotations

from pathlib import Path

import typer

from configcell.cli._common import console, load_settings, resolve_profile
from configcell.core.errors import GenerationError
from configcell.core.orchestrator import Orchestrator


def generate_cmd(
    profile: str = typer.Option(
        None,
        "--profile",
        "-p",
        help="Parameter profile (mainnet or testnet). Env: CONFIGCELL_PROFILE.",
    ),
    data_dir: Path = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Directory holding the input files. Env: CONFIGCELL_DATA_DIR.",
    ),
    section: list[str] = typer.Option(
        None,
        "--section",
        "-s",
        help="Only build this section (repeatable). Default: all sections.",
    ),
    skip_undecodable: bool = typer.Option(
        False,
        "--skip-undecodable",
        help="Drop undecodable input lines with a warning instead of aborting.",
    ),
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level. Env: CONFIGCELL_LOG_LEVEL."
    ),
) -> None:
    """Generate the config cell manifest line."""
    settings = load_settings(profile, data_dir, log_level, skip_undecodable)
    orchestrator = Orchestrator(
        resolve_profile(settings),
        settings.data_dir,
        decode_policy=settings.decode_policy,
    )

    try:
        manifest = orchestrator.generate(section or None)
    except KeyError as exc:
        console.print(f"[bold red]{exc.args[0]}[/bold red]")
        raise typer.Exit(code=2) from None
    except GenerationError as exc:
        console.print(f"[bold red]Generation aborted:[/bold red] {exc}")
        raise typer.Exit(code=1) from None

    typer.echo(manifest)
