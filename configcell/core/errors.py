"""Fatal generation errors.

Every condition in this module makes the generated configuration unsafe to
deploy.  None of them is retried: the operator fixes the input data or the
profile and reruns.  They propagate out of the orchestrator unchanged so that
callers (tests, deployment tooling, the CLI) can observe which invariant broke.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(RuntimeError):
    """Base class for every fatal condition raised during generation."""


class OversizedWitness(GenerationError):
    """Raised when an entity witness exceeds the profile's size limit."""

    def __init__(self, type_tag: int, size: int, limit: int) -> None:
        self.type_tag = type_tag
        self.size = size
        self.limit = limit
        super().__init__(
            f"The witness of type {type_tag} is {size} bytes, more than the "
            f"{limit} bytes limit; the contracts must be modified to support it."
        )


class ShardCapacityExceeded(GenerationError):
    """Raised when a shard holds more fingerprints than one cell may carry."""

    def __init__(self, shard_index: int, size: int, limit: int) -> None:
        self.shard_index = shard_index
        self.size = size
        self.limit = limit
        super().__init__(
            f"Shard {shard_index} holds {size} entries, more than the "
            f"per-shard limit of {limit}."
        )


class MissingInputFile(GenerationError):
    """Raised when a required input file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Expect file {self.path} exist.")


class DecodeError(GenerationError):
    """Raised when a line of an input file cannot be decoded."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        self.path = Path(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{self.path}:{line_number}: {reason}")
