"""Preserved accounts: fingerprints sharded across K config cells."""

from __future__ import annotations

from configcell.core.hasher import account_fingerprint
from configcell.core.sharding import ShardAssigner
from configcell.models.payloads import ConfigPayload
from configcell.models.profiles import Profile
from configcell.sections.base import BaseSection, SectionContext

PRESERVED_ACCOUNTS_FILE = "preserved_accounts.txt"


def shard_assigner_for(profile: Profile) -> ShardAssigner:
    return ShardAssigner(
        profile.preserved_account_cell_count,
        profile.preserved_account_limit_per_cell,
    )


class PreservedAccountSection(BaseSection):
    """One cell per shard, under type tags 10000 + shard index."""

    @property
    def section_id(self) -> str:
        return "preserved_account"

    @property
    def display_name(self) -> str:
        return "Preserved Accounts"

    def build(self, context: SectionContext) -> list[ConfigPayload]:
        length = context.profile.account_id_length
        fingerprints = context.reader.read_tokens(
            PRESERVED_ACCOUNTS_FILE, lambda account: account_fingerprint(account, length)
        )
        assigner = shard_assigner_for(context.profile)
        return assigner.build_payloads(fingerprints, context.wrapper)
