"""Character sets accounts may be composed of.

Each set becomes one cell: a global status byte, then every character
null-terminated, length-prefixed.  Characters keep file order.
"""

from __future__ import annotations

from typing import NamedTuple

from configcell.core.framing import prepend_length
from configcell.models.payloads import ConfigPayload, DataType
from configcell.sections.base import BaseSection, SectionContext
from configcell.sections.record_keys import join_null_terminated


class CharSetSetting(NamedTuple):
    data_type: DataType
    file_name: str
    status: int


CHAR_SET_SETTINGS: tuple[CharSetSetting, ...] = (
    CharSetSetting(DataType.ConfigCellCharSetEmoji, "char_set_emoji.txt", 1),
    CharSetSetting(DataType.ConfigCellCharSetDigit, "char_set_digit.txt", 1),
    CharSetSetting(DataType.ConfigCellCharSetEn, "char_set_en.txt", 0),
)


def char_set_body(status: int, chars: list[str]) -> bytes:
    return bytes([status]) + join_null_terminated(chars)


class CharSetSection(BaseSection):
    @property
    def section_id(self) -> str:
        return "char_set"

    @property
    def display_name(self) -> str:
        return "Character Sets"

    def build(self, context: SectionContext) -> list[ConfigPayload]:
        payloads: list[ConfigPayload] = []
        for setting in CHAR_SET_SETTINGS:
            chars = context.reader.read_lines(setting.file_name)
            raw = prepend_length(char_set_body(setting.status, chars))
            payloads.append(context.wrapper.wrap_raw(setting.data_type, raw))
        return payloads
