"""Helpers shared by CLI commands: settings, logging, console."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from configcell.config import GeneratorSettings
from configcell.models.profiles import Profile

# Diagnostics go to stderr; stdout carries only the manifest.
console = Console(stderr=True)


def load_settings(
    profile: str | None = None,
    data_dir: Path | None = None,
    log_level: str | None = None,
    skip_undecodable: bool = False,
) -> GeneratorSettings:
    """Settings from env/.env, with explicitly passed CLI options on top."""
    overrides: dict[str, Any] = {
        "profile": profile,
        "data_dir": data_dir,
        "log_level": log_level,
    }
    if skip_undecodable:
        overrides["skip_undecodable"] = True
    settings = GeneratorSettings(
        **{key: value for key, value in overrides.items() if value is not None}
    )
    configure_logging(settings.log_level)
    return settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def resolve_profile(settings: GeneratorSettings) -> Profile:
    try:
        return settings.resolve_profile()
    except KeyError as exc:
        console.print(f"[bold red]{exc.args[0]}[/bold red]")
        raise typer.Exit(code=2) from None


def type_tag_hex(type_tag: int) -> str:
    """The type tag as it appears in the manifest (``0x`` + u32 LE)."""
    return "0x" + type_tag.to_bytes(4, "little").hex()
