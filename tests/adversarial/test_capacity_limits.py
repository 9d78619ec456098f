"""Adversarial tests: oversized witnesses and over-capacity shards.

These tests verify that:
1. A section whose witness outgrows the limit aborts the whole run
2. An over-capacity preserved-account shard aborts the whole run
3. Nothing is emitted once a fatal condition is hit
"""

from __future__ import annotations

from pathlib import Path

import pytest

from configcell.core.errors import (
    GenerationError,
    OversizedWitness,
    ShardCapacityExceeded,
)
from configcell.core.hasher import account_fingerprint
from configcell.core.orchestrator import Orchestrator
from configcell.models.payloads import WITNESS_PREFIX_SIZE, DataType
from configcell.models.profiles import TESTNET

from conftest import write_lines


def _accounts_in_shard(shard: int, count: int, shard_count: int = 20) -> list[str]:
    """Find *count* account names whose fingerprints land in *shard*."""
    found: list[str] = []
    i = 0
    while len(found) < count:
        name = f"acct{i}"
        if account_fingerprint(name)[0] % shard_count == shard:
            found.append(name)
        i += 1
    return found


class TestOversizedWitness:
    def test_record_keys_over_limit_abort(self, data_dir: Path):
        profile = TESTNET.model_copy(update={"witness_size_limit": 64})
        write_lines(data_dir / "record_key_namespace.txt", ["k" * 100])
        with pytest.raises(OversizedWitness) as info:
            Orchestrator(profile, data_dir).build_section("record_key_namespace")
        assert info.value.type_tag == DataType.ConfigCellRecordKeyNamespace

    def test_record_keys_exactly_at_limit_pass(self, data_dir: Path):
        key = "k" * 40
        # framing header + key + terminator
        witness_size = WITNESS_PREFIX_SIZE + 4 + len(key) + 1
        profile = TESTNET.model_copy(update={"witness_size_limit": witness_size})
        write_lines(data_dir / "record_key_namespace.txt", [key])
        (payload,) = Orchestrator(profile, data_dir).build_section("record_key_namespace")
        assert len(payload.entity_witness) == witness_size

    def test_tiny_limit_fails_on_first_section(self, data_dir: Path):
        profile = TESTNET.model_copy(update={"witness_size_limit": 8})
        with pytest.raises(OversizedWitness) as info:
            Orchestrator(profile, data_dir).generate()
        assert info.value.type_tag == DataType.ConfigCellAccount

    def test_is_a_generation_error(self):
        assert issubclass(OversizedWitness, GenerationError)


class TestShardCapacity:
    def test_over_capacity_shard_aborts(self, data_dir: Path):
        profile = TESTNET.model_copy(update={"preserved_account_limit_per_cell": 3})
        write_lines(data_dir / "preserved_accounts.txt", _accounts_in_shard(7, 4))
        with pytest.raises(ShardCapacityExceeded) as info:
            Orchestrator(profile, data_dir).generate()
        assert info.value.shard_index == 7
        assert info.value.size == 4

    def test_shard_at_capacity_passes(self, data_dir: Path):
        profile = TESTNET.model_copy(update={"preserved_account_limit_per_cell": 3})
        write_lines(data_dir / "preserved_accounts.txt", _accounts_in_shard(7, 3))
        payloads = Orchestrator(profile, data_dir).build_section("preserved_account")
        assert len(payloads[7].payload) == 4 + 3 * 20

    def test_duplicates_count_against_capacity(self, data_dir: Path):
        profile = TESTNET.model_copy(update={"preserved_account_limit_per_cell": 1})
        (name,) = _accounts_in_shard(0, 1)
        write_lines(data_dir / "preserved_accounts.txt", [name, name])
        with pytest.raises(ShardCapacityExceeded):
            Orchestrator(profile, data_dir).build_section("preserved_account")
