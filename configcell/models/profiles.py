"""Named parameter profiles selected at runtime.

A profile bundles the size and capacity constants the generator enforces with
the few business tables that differ between networks (prices and release
rules).  Select one with ``--profile`` or ``CONFIGCELL_PROFILE``.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

U64_MAX = 2**64 - 1


def timestamp(value: str) -> int:
    """Seconds since the epoch of a ``YYYY-MM-DD HH:MM:SS`` UTC string."""
    parsed = datetime.strptime(value, "%Y-%m-%d %H:%M:%S")
    return int(parsed.replace(tzinfo=timezone.utc).timestamp())


class PriceRule(BaseModel):
    """Register and renew price for accounts of a given length."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(ge=0, le=0xFF)
    new: int = Field(ge=0, le=U64_MAX)
    renew: int = Field(ge=0, le=U64_MAX)


class ReleaseRule(BaseModel):
    """Release window for accounts of a given length (0 means any length)."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(ge=0, le=0xFFFFFFFF)
    release_start: int = Field(ge=0)
    release_end: int = Field(ge=0)


class Profile(BaseModel):
    """Constants for one generation run."""

    model_config = ConfigDict(frozen=True)

    name: str
    witness_size_limit: int = Field(default=32 * 1024, gt=0)
    preserved_account_cell_count: int = Field(default=20, ge=1, le=256)
    preserved_account_limit_per_cell: int = Field(default=1600, ge=1)
    account_id_length: int = Field(default=20, ge=16, le=32)
    bloom_filter_bits: int = Field(default=1438, gt=0)
    bloom_filter_probes: int = Field(default=10, gt=0)
    prices: tuple[PriceRule, ...] = ()
    release_rules: tuple[ReleaseRule, ...] = ()


MAINNET = Profile(
    name="mainnet",
    prices=(
        PriceRule(length=1, new=1024_000_000, renew=1024_000_000),
        PriceRule(length=2, new=1024_000_000, renew=1024_000_000),
        PriceRule(length=3, new=1024_000_000, renew=1024_000_000),
        PriceRule(length=4, new=1024_000_000, renew=1024_000_000),
        PriceRule(length=5, new=5_000_000, renew=5_000_000),
        PriceRule(length=6, new=5_000_000, renew=5_000_000),
        PriceRule(length=7, new=5_000_000, renew=5_000_000),
        PriceRule(length=8, new=5_000_000, renew=5_000_000),
    ),
    release_rules=(
        ReleaseRule(
            length=0,
            release_start=timestamp("2021-07-01 00:00:00"),
            release_end=timestamp("2021-07-01 00:00:00"),
        ),
    ),
)

TESTNET = Profile(
    name="testnet",
    prices=(
        PriceRule(length=1, new=U64_MAX, renew=U64_MAX),
        PriceRule(length=2, new=30_000_000, renew=30_000_000),
        PriceRule(length=3, new=20_000_000, renew=20_000_000),
        PriceRule(length=4, new=10_000_000, renew=10_000_000),
        PriceRule(length=5, new=5_000_000, renew=5_000_000),
        PriceRule(length=6, new=5_000_000, renew=5_000_000),
        PriceRule(length=7, new=5_000_000, renew=5_000_000),
        PriceRule(length=8, new=5_000_000, renew=5_000_000),
    ),
    release_rules=(
        ReleaseRule(
            length=2,
            release_start=timestamp("2021-07-01 00:00:00"),
            release_end=timestamp("2021-07-31 00:00:00"),
        ),
        ReleaseRule(
            length=0,
            release_start=timestamp("2021-06-1 00:00:00"),
            release_end=timestamp("2021-06-1 00:00:00"),
        ),
    ),
)

PROFILES: dict[str, Profile] = {p.name: p for p in (MAINNET, TESTNET)}


def get_profile(name: str) -> Profile:
    """Return the registered profile called *name*.

    Raises ``KeyError`` listing the known profiles if *name* is unknown.
    """
    try:
        return PROFILES[name]
    except KeyError:
        raise KeyError(
            f"Unknown profile {name!r}. Known profiles: {sorted(PROFILES)}"
        ) from None
