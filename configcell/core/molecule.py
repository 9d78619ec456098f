"""Minimal molecule encoder for typed configuration records.

Molecule is the canonical binary layout the chain contracts parse.  Only the
encoding direction is needed here:

- fixed-size primitives (``Uint8``/``Uint32``/``Uint64``) are little-endian;
- a ``struct`` is the plain concatenation of fixed-size fields;
- a ``fixvec`` is an item count followed by fixed-size items;
- a ``dynvec`` and a ``table`` share one layout: total size, one offset per
  item (measured from the start of the buffer), then the items;
- an ``option`` is empty for ``None`` and the inner bytes otherwise.

The entity schemas themselves belong to an external schema library; records
in :mod:`configcell.models.entities` describe their layout with the helpers
below and the :class:`MoleculeCodec` drives them.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

_HEADER = struct.Struct("<I")


def uint8(value: int) -> bytes:
    return struct.pack("<B", value)


def uint32(value: int) -> bytes:
    return struct.pack("<I", value)


def uint64(value: int) -> bytes:
    return struct.pack("<Q", value)


def byte_array(value: bytes, size: int) -> bytes:
    """Encode a fixed-size ``byte[size]`` array, zero-filling short input."""
    if len(value) > size:
        raise ValueError(f"byte[{size}] cannot hold {len(value)} bytes")
    return bytes(value).ljust(size, b"\x00")


def struct_(*fields: bytes) -> bytes:
    return b"".join(fields)


def fixvec(items: Sequence[bytes]) -> bytes:
    """Encode a vector of fixed-size items (``Bytes`` is ``fixvec<byte>``)."""
    return _HEADER.pack(len(items)) + b"".join(items)


def bytes_(value: bytes) -> bytes:
    return _HEADER.pack(len(value)) + bytes(value)


def dynvec(items: Sequence[bytes]) -> bytes:
    """Encode a vector of variable-size items."""
    return _offset_layout(items)


def table(*fields: bytes) -> bytes:
    """Encode a table from its already-encoded fields, in schema order."""
    return _offset_layout(fields)


def option(inner: bytes | None) -> bytes:
    return b"" if inner is None else inner


def _offset_layout(items: Iterable[bytes]) -> bytes:
    items = list(items)
    header_size = _HEADER.size * (1 + len(items))
    offsets: list[int] = []
    cursor = header_size
    for item in items:
        offsets.append(cursor)
        cursor += len(item)
    header = _HEADER.pack(cursor) + b"".join(_HEADER.pack(o) for o in offsets)
    return header + b"".join(items)


@runtime_checkable
class MoleculeEntity(Protocol):
    """A record that knows its own molecule layout."""

    def to_molecule(self) -> bytes: ...


@runtime_checkable
class EntityCodec(Protocol):
    """Serializes a typed record into the bytes that get hashed and wrapped."""

    def serialize(self, entity: object) -> bytes: ...


class MoleculeCodec:
    """Default codec: asks each record for its molecule encoding."""

    def serialize(self, entity: object) -> bytes:
        if not isinstance(entity, MoleculeEntity):
            raise TypeError(
                f"{type(entity).__name__} does not provide a molecule encoding"
            )
        return entity.to_molecule()
