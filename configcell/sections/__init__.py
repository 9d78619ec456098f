"""configcell sections: registry mapping section_id to section class.

Usage::

    from configcell.sections import SECTION_ORDER, get_section

    section = get_section("preserved_account")
    payloads = section.run_section(context)
"""

from __future__ import annotations

from configcell.sections.base import BaseSection, SectionContext
from configcell.sections.bloom import BloomFilterSection
from configcell.sections.char_sets import CharSetSection
from configcell.sections.entity_sections import (
    AccountSection,
    ApplySection,
    IncomeSection,
    MainSection,
    PriceSection,
    ProfitRateSection,
    ProposalSection,
    ReleaseSection,
)
from configcell.sections.preserved_accounts import PreservedAccountSection
from configcell.sections.record_keys import RecordKeyNamespaceSection
from configcell.sections.unavailable_accounts import UnavailableAccountSection

# ---------------------------------------------------------------------------
# Section registry: section_id -> section class
# ---------------------------------------------------------------------------

SECTION_REGISTRY: dict[str, type[BaseSection]] = {
    "account": AccountSection,
    "apply": ApplySection,
    "income": IncomeSection,
    "main": MainSection,
    "price": PriceSection,
    "proposal": ProposalSection,
    "profit_rate": ProfitRateSection,
    "record_key_namespace": RecordKeyNamespaceSection,
    "release": ReleaseSection,
    "preserved_account": PreservedAccountSection,
    "unavailable_account": UnavailableAccountSection,
    "char_set": CharSetSection,
    "bloom_filter": BloomFilterSection,
}

# Output order of the manifest line.
SECTION_ORDER: list[str] = list(SECTION_REGISTRY)


def get_section(section_id: str) -> BaseSection:
    """Instantiate and return a section by its ``section_id``.

    Raises ``KeyError`` if the section_id is not registered.
    """
    try:
        cls = SECTION_REGISTRY[section_id]
    except KeyError:
        raise KeyError(
            f"Unknown section_id {section_id!r}. "
            f"Registered sections: {sorted(SECTION_REGISTRY.keys())}"
        ) from None
    return cls()


__all__ = [
    "BaseSection",
    "SectionContext",
    "SECTION_REGISTRY",
    "SECTION_ORDER",
    "get_section",
    "AccountSection",
    "ApplySection",
    "IncomeSection",
    "MainSection",
    "PriceSection",
    "ProposalSection",
    "ProfitRateSection",
    "RecordKeyNamespaceSection",
    "ReleaseSection",
    "PreservedAccountSection",
    "UnavailableAccountSection",
    "CharSetSection",
    "BloomFilterSection",
]
