"""Shared test fixtures for configcell."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from configcell.core.orchestrator import Orchestrator
from configcell.core.witness import WitnessWrapper
from configcell.models.profiles import TESTNET, Profile

SAMPLE_FILES: dict[str, list[str]] = {
    "record_key_namespace.txt": [
        "profile.twitter",
        "address.eth",
        "address.btc",
        "dweb.ipfs",
    ],
    "preserved_accounts.txt": [
        "google",
        "apple",
        "microsoft",
        "amazon",
        "facebook",
        "bitcoin",
        "ethereum",
    ],
    "unavailable_account_hashes.txt": [
        "99d3342016968cefc6a64d4f98cd1a80de55152c84da86cf3a22357688b97152",
        "5341d12b2fdf4b854e8c4ec617d01edca87e264b009166af8e02e13d95909126",
        "bb675fa97c0a7bd23bf25e419223b814ff0d0b9158a8a5ab64814ad328636596",
    ],
    "char_set_emoji.txt": ["😂", "👍", "✨"],
    "char_set_digit.txt": list("0123456789"),
    "char_set_en.txt": list("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"),
    "bloom_filter.txt": ["google", "apple", "microsoft", "qq", "das"],
}


def write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Provide a data directory populated with every input file."""
    directory = tmp_path / "data"
    directory.mkdir()
    for name, lines in SAMPLE_FILES.items():
        write_lines(directory / name, lines)
    return directory


@pytest.fixture
def profile() -> Profile:
    """The testnet profile."""
    return TESTNET


@pytest.fixture
def wrapper(profile: Profile) -> WitnessWrapper:
    """Provide a WitnessWrapper with the testnet witness limit."""
    return WitnessWrapper(profile.witness_size_limit)


@pytest.fixture
def orchestrator(profile: Profile, data_dir: Path) -> Orchestrator:
    """Provide an Orchestrator over the sample data directory."""
    return Orchestrator(profile, data_dir)


@pytest.fixture
def make_fingerprint() -> Callable[..., bytes]:
    """Factory fixture: a 20-byte fingerprint with a chosen first byte."""

    def _factory(first: int, fill: int = 0) -> bytes:
        return bytes([first]) + bytes([fill]) * 19

    return _factory
