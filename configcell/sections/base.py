"""Abstract base section with a fixed build lifecycle.

Every concrete section inherits from BaseSection and implements only
``build()``.  The ``run_section()`` wrapper is **not overridable**: it logs the
section, calls ``build()``, and reports what was produced.  Errors are not
caught here; a fatal condition in one section aborts the whole run.
"""

from __future__ import annotations

import abc
import logging
from typing import final

from pydantic import BaseModel, ConfigDict

from configcell.core.inputs import InputReader
from configcell.core.witness import WitnessWrapper
from configcell.models.payloads import ConfigPayload
from configcell.models.profiles import Profile

logger = logging.getLogger(__name__)


class SectionContext(BaseModel):
    """Everything a section needs for one generation run."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    profile: Profile
    reader: InputReader
    wrapper: WitnessWrapper


class BaseSection(abc.ABC):
    """Abstract base for all config cell sections.

    Subclasses **must** implement:
        * ``section_id``: unique identifier (e.g. ``"account"``).
        * ``display_name``: human-readable name used in logs and tables.
        * ``build(context)``: produce this section's payloads.
    """

    @property
    @abc.abstractmethod
    def section_id(self) -> str:
        ...

    @property
    @abc.abstractmethod
    def display_name(self) -> str:
        ...

    @abc.abstractmethod
    def build(self, context: SectionContext) -> list[ConfigPayload]:
        """Return one payload per config cell this section owns."""
        ...

    @final
    def run_section(self, context: SectionContext) -> list[ConfigPayload]:
        logger.debug("%s [%s] building", self.display_name, self.section_id)
        payloads = self.build(context)
        logger.info(
            "%s [%s] produced %d cell(s), largest witness %d bytes",
            self.display_name,
            self.section_id,
            len(payloads),
            max((len(p.entity_witness) for p in payloads), default=0),
        )
        return payloads

    def __repr__(self) -> str:
        return f"<{type(self).__name__} section_id={self.section_id!r}>"
