"""Unavailable accounts: pre-hashed account ids that may never be registered."""

from __future__ import annotations

from collections.abc import Callable

from configcell.core.framing import prepend_length
from configcell.models.payloads import ConfigPayload, DataType
from configcell.sections.base import BaseSection, SectionContext

UNAVAILABLE_ACCOUNT_HASHES_FILE = "unavailable_account_hashes.txt"


def hex_account_id(length: int) -> Callable[[str], bytes]:
    """Parser turning a hex-encoded account hash into a *length*-byte id."""

    def parse(token: str) -> bytes:
        token = token.strip()
        if token.startswith(("0x", "0X")):
            token = token[2:]
        account_hash = bytes.fromhex(token)
        if len(account_hash) < length:
            raise ValueError(
                f"account hash has {len(account_hash)} bytes, need at least {length}"
            )
        return account_hash[:length]

    return parse


class UnavailableAccountSection(BaseSection):
    """Sorted, concatenated account ids, length-prefixed."""

    @property
    def section_id(self) -> str:
        return "unavailable_account"

    @property
    def display_name(self) -> str:
        return "Unavailable Accounts"

    def build(self, context: SectionContext) -> list[ConfigPayload]:
        account_ids = context.reader.read_tokens(
            UNAVAILABLE_ACCOUNT_HASHES_FILE,
            hex_account_id(context.profile.account_id_length),
        )
        raw = prepend_length(b"".join(sorted(account_ids)))
        return [context.wrapper.wrap_raw(DataType.ConfigCellUnAvailableAccount, raw)]
