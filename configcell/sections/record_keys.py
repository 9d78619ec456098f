"""Record key namespace: the record keys an account may carry."""

from __future__ import annotations

from configcell.core.framing import prepend_length
from configcell.models.payloads import ConfigPayload, DataType
from configcell.sections.base import BaseSection, SectionContext

RECORD_KEY_NAMESPACE_FILE = "record_key_namespace.txt"


def join_null_terminated(tokens: list[str]) -> bytes:
    """UTF-8 encode each token and terminate it with a ``0x00`` byte."""
    return b"".join(token.encode("utf-8") + b"\x00" for token in tokens)


class RecordKeyNamespaceSection(BaseSection):
    """Sorted record keys, each null-terminated, length-prefixed."""

    @property
    def section_id(self) -> str:
        return "record_key_namespace"

    @property
    def display_name(self) -> str:
        return "Record Key Namespace"

    def build(self, context: SectionContext) -> list[ConfigPayload]:
        keys = sorted(context.reader.read_lines(RECORD_KEY_NAMESPACE_FILE))
        raw = prepend_length(join_null_terminated(keys))
        return [context.wrapper.wrap_raw(DataType.ConfigCellRecordKeyNamespace, raw)]
