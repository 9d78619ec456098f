"""Bloom filter of curated account names."""

from __future__ import annotations

from configcell.core.bloom_filter import BloomFilter
from configcell.models.payloads import ConfigPayload, DataType
from configcell.models.profiles import Profile
from configcell.sections.base import BaseSection, SectionContext

BLOOM_FILTER_FILE = "bloom_filter.txt"


def build_bloom_filter(profile: Profile, items: list[str]) -> BloomFilter:
    bf = BloomFilter(profile.bloom_filter_bits, profile.bloom_filter_probes)
    for item in items:
        bf.insert(item)
    return bf


class BloomFilterSection(BaseSection):
    """The exported bit vector is the payload, unframed."""

    @property
    def section_id(self) -> str:
        return "bloom_filter"

    @property
    def display_name(self) -> str:
        return "Bloom Filter"

    def build(self, context: SectionContext) -> list[ConfigPayload]:
        items = context.reader.read_lines(BLOOM_FILTER_FILE)
        bf = build_bloom_filter(context.profile, items)
        return [context.wrapper.wrap_raw(DataType.ConfigCellBloomFilter, bf.export())]
