"""Witness wrapping: one function for entity and raw payloads.

Every config cell is emitted as four fields:

    type_tag        u32 LE type tag of the cell
    cell_data       blake2b-256 of the payload bytes
    action_witness  ``das`` + ActionData tag + ActionData{action="config"}
    entity_witness  ``das`` + type tag + payload bytes

A witness larger than the profile limit cannot fit the downstream transaction
format, so it aborts generation instead of being emitted.
"""

from __future__ import annotations

import logging
import struct

from configcell.core import molecule as mol
from configcell.core.errors import OversizedWitness
from configcell.core.hasher import blake2b_256
from configcell.core.molecule import EntityCodec, MoleculeCodec
from configcell.models.payloads import (
    WITNESS_HEADER,
    ConfigPayload,
    DataType,
    EntitySource,
    PayloadSource,
    RawSource,
)

logger = logging.getLogger(__name__)

CONFIG_ACTION = "config"


def wrap_witness(type_tag: int, data: bytes) -> bytes:
    """Prefix *data* with the witness marker and the u32 LE type tag."""
    return WITNESS_HEADER + struct.pack("<I", type_tag) + data


def wrap_action_witness(action: str, params: bytes | None = None) -> bytes:
    """Build the witness that tags a transaction with *action*."""
    action_data = mol.table(
        mol.bytes_(action.encode("utf-8")),
        mol.bytes_(params or b""),
    )
    return wrap_witness(DataType.ActionData, action_data)


class WitnessWrapper:
    """Turns payload sources into size-checked :class:`ConfigPayload` records.

    Parameters
    ----------
    witness_size_limit:
        Largest allowed ``entity_witness`` in bytes (inclusive).
    codec:
        Serializer for :class:`EntitySource` payloads.  Defaults to the
        in-process molecule codec.
    """

    def __init__(
        self, witness_size_limit: int, codec: EntityCodec | None = None
    ) -> None:
        self.witness_size_limit = witness_size_limit
        self.codec = codec or MoleculeCodec()
        self._action_witness = wrap_action_witness(CONFIG_ACTION)

    def payload_bytes(self, source: PayloadSource) -> bytes:
        if isinstance(source, EntitySource):
            return self.codec.serialize(source.entity)
        if isinstance(source, RawSource):
            return source.raw
        raise TypeError(f"Unsupported payload source: {type(source).__name__}")

    def wrap(self, type_tag: int, source: PayloadSource) -> ConfigPayload:
        """Hash, wrap, and size-check one payload.

        Raises :class:`OversizedWitness` if the entity witness is larger than
        ``witness_size_limit``.
        """
        payload = self.payload_bytes(source)
        entity_witness = wrap_witness(type_tag, payload)

        size = len(entity_witness)
        if size > self.witness_size_limit:
            raise OversizedWitness(int(type_tag), size, self.witness_size_limit)

        logger.debug(
            "Wrapped %s payload for type %d: witness=%d bytes",
            source.kind,
            type_tag,
            size,
        )
        return ConfigPayload(
            type_tag=int(type_tag),
            content_hash=blake2b_256(payload),
            action_witness=self._action_witness,
            entity_witness=entity_witness,
        )

    def wrap_entity(self, type_tag: int, entity: object) -> ConfigPayload:
        return self.wrap(type_tag, EntitySource(entity=entity))

    def wrap_raw(self, type_tag: int, raw: bytes) -> ConfigPayload:
        return self.wrap(type_tag, RawSource(raw=raw))
