"""Deterministic sharding of account fingerprints across config cells.

A fingerprint always lands in shard ``fingerprint[0] % shard_count``, and each
shard is sorted byte-wise before serialization.  The same set of fingerprints
therefore yields byte-identical shard buffers regardless of input order.

An over-capacity shard is a data problem discovered at generation time: the
on-chain representation would be invalid, so the whole run aborts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from configcell.core.errors import ShardCapacityExceeded
from configcell.core.framing import prepend_length
from configcell.core.witness import WitnessWrapper
from configcell.models.payloads import ConfigPayload, preserved_account_type_tag

logger = logging.getLogger(__name__)


class ShardAssigner:
    """Distributes fingerprints into a fixed number of bounded shards.

    Parameters
    ----------
    shard_count:
        Number of shards (K).  Each shard becomes one config cell.
    per_shard_limit:
        Largest number of fingerprints one shard may hold (inclusive).
    """

    def __init__(self, shard_count: int, per_shard_limit: int) -> None:
        if shard_count < 1:
            raise ValueError(f"shard_count must be at least 1, got {shard_count}")
        if per_shard_limit < 1:
            raise ValueError(
                f"per_shard_limit must be at least 1, got {per_shard_limit}"
            )
        self.shard_count = shard_count
        self.per_shard_limit = per_shard_limit

    def shard_index(self, fingerprint: bytes) -> int:
        if not fingerprint:
            raise ValueError("Cannot shard an empty fingerprint")
        return fingerprint[0] % self.shard_count

    def assign(self, fingerprints: Iterable[bytes]) -> list[list[bytes]]:
        """Group *fingerprints* into sorted shards.

        Raises :class:`ShardCapacityExceeded` for the first shard holding more
        than ``per_shard_limit`` entries.
        """
        shards: list[list[bytes]] = [[] for _ in range(self.shard_count)]
        for fingerprint in fingerprints:
            shards[self.shard_index(fingerprint)].append(bytes(fingerprint))

        for index, shard in enumerate(shards):
            logger.debug("Shard %d holds %d entries", index, len(shard))
            if len(shard) > self.per_shard_limit:
                raise ShardCapacityExceeded(index, len(shard), self.per_shard_limit)
            shard.sort()

        return shards

    def serialize(self, shards: list[list[bytes]]) -> list[bytes]:
        """Concatenate and length-prefix each shard."""
        return [prepend_length(b"".join(shard)) for shard in shards]

    def build_payloads(
        self, fingerprints: Iterable[bytes], wrapper: WitnessWrapper
    ) -> list[ConfigPayload]:
        """Shard, serialize, and wrap each shard under its own type tag."""
        buffers = self.serialize(self.assign(fingerprints))
        return [
            wrapper.wrap_raw(preserved_account_type_tag(index), raw)
            for index, raw in enumerate(buffers)
        ]

    def affected_shards(self, fingerprints: Iterable[bytes]) -> list[int]:
        """Sorted indices of the shards that *fingerprints* fall into."""
        return sorted({self.shard_index(fp) for fp in fingerprints})
