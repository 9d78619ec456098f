"""Sections whose payload is a single typed record."""

from __future__ import annotations

from configcell.models.entities import (
    ConfigCellAccount,
    ConfigCellApply,
    ConfigCellIncome,
    ConfigCellMain,
    ConfigCellPrice,
    ConfigCellProfitRate,
    ConfigCellProposal,
    ConfigCellRelease,
)
from configcell.models.payloads import ConfigPayload, DataType
from configcell.sections.base import BaseSection, SectionContext


class EntitySection(BaseSection):
    """One record wrapped under one type tag."""

    data_type: DataType

    def entity(self, context: SectionContext) -> object:
        raise NotImplementedError

    def build(self, context: SectionContext) -> list[ConfigPayload]:
        return [context.wrapper.wrap_entity(self.data_type, self.entity(context))]


class AccountSection(EntitySection):
    data_type = DataType.ConfigCellAccount

    @property
    def section_id(self) -> str:
        return "account"

    @property
    def display_name(self) -> str:
        return "Account"

    def entity(self, context: SectionContext) -> object:
        return ConfigCellAccount()


class ApplySection(EntitySection):
    data_type = DataType.ConfigCellApply

    @property
    def section_id(self) -> str:
        return "apply"

    @property
    def display_name(self) -> str:
        return "Apply"

    def entity(self, context: SectionContext) -> object:
        return ConfigCellApply()


class IncomeSection(EntitySection):
    data_type = DataType.ConfigCellIncome

    @property
    def section_id(self) -> str:
        return "income"

    @property
    def display_name(self) -> str:
        return "Income"

    def entity(self, context: SectionContext) -> object:
        return ConfigCellIncome()


class MainSection(EntitySection):
    data_type = DataType.ConfigCellMain

    @property
    def section_id(self) -> str:
        return "main"

    @property
    def display_name(self) -> str:
        return "Main"

    def entity(self, context: SectionContext) -> object:
        return ConfigCellMain()


class PriceSection(EntitySection):
    """Prices differ per network and come from the profile."""

    data_type = DataType.ConfigCellPrice

    @property
    def section_id(self) -> str:
        return "price"

    @property
    def display_name(self) -> str:
        return "Price"

    def entity(self, context: SectionContext) -> object:
        return ConfigCellPrice(prices=context.profile.prices)


class ProposalSection(EntitySection):
    data_type = DataType.ConfigCellProposal

    @property
    def section_id(self) -> str:
        return "proposal"

    @property
    def display_name(self) -> str:
        return "Proposal"

    def entity(self, context: SectionContext) -> object:
        return ConfigCellProposal()


class ProfitRateSection(EntitySection):
    data_type = DataType.ConfigCellProfitRate

    @property
    def section_id(self) -> str:
        return "profit_rate"

    @property
    def display_name(self) -> str:
        return "Profit Rate"

    def entity(self, context: SectionContext) -> object:
        return ConfigCellProfitRate()


class ReleaseSection(EntitySection):
    """Release windows differ per network and come from the profile."""

    data_type = DataType.ConfigCellRelease

    @property
    def section_id(self) -> str:
        return "release"

    @property
    def display_name(self) -> str:
        return "Release"

    def entity(self, context: SectionContext) -> object:
        return ConfigCellRelease(release_rules=context.profile.release_rules)
