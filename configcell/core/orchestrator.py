"""Generation orchestrator: the central coordinator for a manifest run.

The Orchestrator wires together the InputReader, WitnessWrapper and the
section registry, runs every section in the fixed manifest order, and joins
the rendered records into the single output line.

There is no recovery across sections: the first GenerationError raised by a
section propagates to the caller and nothing is emitted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from configcell.core.hasher import account_fingerprint
from configcell.core.inputs import DecodePolicy, InputReader
from configcell.core.molecule import EntityCodec
from configcell.core.witness import WitnessWrapper
from configcell.models.payloads import ConfigPayload
from configcell.models.profiles import Profile
from configcell.sections import SECTION_ORDER, SectionContext, get_section
from configcell.sections.preserved_accounts import shard_assigner_for

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = ","


class Orchestrator:
    """Builds every config cell of a release.

    Parameters
    ----------
    profile:
        Constants and network-specific tables for this run.
    data_dir:
        Directory holding the input files.
    codec:
        Entity codec for typed records.  Defaults to the molecule codec.
    decode_policy:
        Handling of undecodable input lines.  Defaults to ``STRICT``.
    """

    def __init__(
        self,
        profile: Profile,
        data_dir: Path,
        *,
        codec: EntityCodec | None = None,
        decode_policy: DecodePolicy = DecodePolicy.STRICT,
    ) -> None:
        self.profile = profile
        self.reader = InputReader(data_dir, decode_policy)
        self.wrapper = WitnessWrapper(profile.witness_size_limit, codec)
        self.context = SectionContext(
            profile=profile, reader=self.reader, wrapper=self.wrapper
        )

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def build_section(self, section_id: str) -> list[ConfigPayload]:
        """Build the payloads of one section.  Raises ``KeyError`` if unknown."""
        return get_section(section_id).run_section(self.context)

    def build_all(
        self, sections: Sequence[str] | None = None
    ) -> list[ConfigPayload]:
        """Build the requested sections (all by default) in manifest order."""
        wanted = SECTION_ORDER if sections is None else sections
        for section_id in wanted:
            get_section(section_id)  # fail on unknown ids before any work

        payloads: list[ConfigPayload] = []
        for section_id in SECTION_ORDER:
            if section_id in wanted:
                payloads.extend(self.build_section(section_id))

        logger.info(
            "Generated %d config cells with profile %s",
            len(payloads),
            self.profile.name,
        )
        return payloads

    def generate(self, sections: Sequence[str] | None = None) -> str:
        """Render the manifest line: records joined by commas."""
        return render_manifest(self.build_all(sections))

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def affected_shards(self, accounts: Iterable[str]) -> dict[int, list[str]]:
        """Map shard index to the given accounts that fall into it.

        Adding any of these accounts to the preserved list changes exactly
        these shards, so only their cells need redeploying.
        """
        assigner = shard_assigner_for(self.profile)
        length = self.profile.account_id_length
        groups: dict[int, list[str]] = {}
        for account in accounts:
            index = assigner.shard_index(account_fingerprint(account, length))
            groups.setdefault(index, []).append(account)
        return dict(sorted(groups.items()))


def render_manifest(payloads: Iterable[ConfigPayload]) -> str:
    return RECORD_SEPARATOR.join(p.render() for p in payloads)
