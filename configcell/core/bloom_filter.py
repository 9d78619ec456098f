"""Append-only bloom filter with a reproducible byte export.

Probe positions use double hashing over the CKB blake2b digest of the item:

    h1 = digest[0:8]  as u64 LE
    h2 = digest[8:16] as u64 LE
    pos_i = (h1 + i * h2) mod m        for i in [0, k)

Bits are packed least-significant-bit first: bit ``p`` lives in byte
``p // 8`` under mask ``1 << (p % 8)``.  Bits are only ever set, so the
exported vector does not depend on insertion order.
"""

from __future__ import annotations

import math
import struct

from configcell.core.hasher import blake2b_256


def _as_bytes(item: bytes | str) -> bytes:
    return item.encode("utf-8") if isinstance(item, str) else bytes(item)


class BloomFilter:
    """Fixed-size bit vector for approximate set membership.

    Parameters
    ----------
    bits:
        Size of the bit vector (m).
    probes:
        Number of probe positions per item (k).
    """

    def __init__(self, bits: int, probes: int) -> None:
        if bits < 1:
            raise ValueError(f"bits must be positive, got {bits}")
        if probes < 1:
            raise ValueError(f"probes must be positive, got {probes}")
        self.bits = bits
        self.probes = probes
        self._vector = bytearray(self.byte_length)
        self._count = 0

    @property
    def byte_length(self) -> int:
        return (self.bits + 7) // 8

    def __len__(self) -> int:
        """Number of insert calls, including repeated items."""
        return self._count

    def positions(self, item: bytes | str) -> list[int]:
        digest = blake2b_256(_as_bytes(item))
        h1, h2 = struct.unpack_from("<QQ", digest)
        return [(h1 + i * h2) % self.bits for i in range(self.probes)]

    def insert(self, item: bytes | str) -> None:
        for pos in self.positions(item):
            self._vector[pos >> 3] |= 1 << (pos & 7)
        self._count += 1

    def contains(self, item: bytes | str) -> bool:
        return all(
            self._vector[pos >> 3] & (1 << (pos & 7)) for pos in self.positions(item)
        )

    __contains__ = contains

    def export(self) -> bytes:
        return bytes(self._vector)

    @classmethod
    def from_bytes(cls, data: bytes, bits: int, probes: int) -> BloomFilter:
        """Reload an exported vector for membership tests."""
        bf = cls(bits, probes)
        if len(data) != bf.byte_length:
            raise ValueError(
                f"A {bits}-bit filter exports {bf.byte_length} bytes, got {len(data)}"
            )
        bf._vector[:] = data
        return bf

    def estimated_false_positive_rate(self, items: int | None = None) -> float:
        """``(1 - e^(-k*n/m))^k`` for *items* insertions (default: so far)."""
        n = self._count if items is None else items
        return (1.0 - math.exp(-self.probes * n / self.bits)) ** self.probes
