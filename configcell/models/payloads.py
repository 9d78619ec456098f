"""Config payload models: type tags, payload sources, and the output record."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Every witness starts with this marker, then the u32 LE type tag.
WITNESS_HEADER = b"das"
WITNESS_PREFIX_SIZE = len(WITNESS_HEADER) + 4


class DataType(IntEnum):
    """Type tags of witnesses and config cells."""

    ActionData = 0
    ConfigCellAccount = 100
    ConfigCellApply = 101
    ConfigCellBloomFilter = 102
    ConfigCellIncome = 103
    ConfigCellMain = 104
    ConfigCellPrice = 105
    ConfigCellProposal = 106
    ConfigCellProfitRate = 107
    ConfigCellRecordKeyNamespace = 108
    ConfigCellRelease = 109
    ConfigCellUnAvailableAccount = 110
    ConfigCellPreservedAccount00 = 10000
    ConfigCellCharSetEmoji = 100000
    ConfigCellCharSetDigit = 100001
    ConfigCellCharSetEn = 100002


def preserved_account_type_tag(shard_index: int) -> int:
    """Type tag of the preserved-account cell holding shard *shard_index*."""
    if shard_index < 0:
        raise ValueError(f"Shard index must be non-negative, got {shard_index}")
    return int(DataType.ConfigCellPreservedAccount00) + shard_index


class EntitySource(BaseModel):
    """A typed record, serialized by the entity codec at wrap time."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["entity"] = "entity"
    entity: Any


class RawSource(BaseModel):
    """A pre-built byte buffer, already framed by the caller if needed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["raw"] = "raw"
    raw: bytes


PayloadSource = Union[EntitySource, RawSource]


class ConfigPayload(BaseModel):
    """One config cell: type tag, data hash, and its two witnesses.

    ``content_hash`` is the blake2b-256 of the payload bytes, which are the
    tail of ``entity_witness`` after the ``das`` marker and the type tag.
    """

    model_config = ConfigDict(frozen=True)

    type_tag: int = Field(ge=0, le=0xFFFFFFFF)
    content_hash: bytes
    action_witness: bytes
    entity_witness: bytes

    @property
    def payload(self) -> bytes:
        return self.entity_witness[WITNESS_PREFIX_SIZE:]

    @property
    def type_tag_bytes(self) -> bytes:
        return self.type_tag.to_bytes(4, "little")

    def render(self) -> str:
        """Format as ``type_tag cell_data action_witness entity_witness``."""
        return " ".join(
            f"0x{field.hex()}"
            for field in (
                self.type_tag_bytes,
                self.content_hash,
                self.action_witness,
                self.entity_witness,
            )
        )
