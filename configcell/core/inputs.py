"""Newline-delimited input files with an explicit decode policy.

Input files hold one token per line (an account name, a character, a record
key, or a hex-encoded hash).  Line terminators are stripped and empty lines
are ignored.  What happens to a line that cannot be decoded is a policy, not an
accident:

- ``DecodePolicy.STRICT`` raises :class:`DecodeError` naming file and line.
- ``DecodePolicy.SKIP`` drops the line and logs a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import TypeVar

from configcell.core.errors import DecodeError, MissingInputFile

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DecodePolicy(str, Enum):
    """What to do with a line that fails to decode."""

    STRICT = "strict"
    SKIP = "skip"


class InputReader:
    """Loads input files from a data directory.

    Parameters
    ----------
    data_dir:
        Directory holding the input files.
    policy:
        Handling of undecodable lines.  Defaults to ``STRICT``.
    """

    def __init__(
        self, data_dir: Path, policy: DecodePolicy = DecodePolicy.STRICT
    ) -> None:
        self.data_dir = Path(data_dir)
        self.policy = DecodePolicy(policy)

    def path(self, name: str) -> Path:
        return self.data_dir / name

    def read_lines(self, name: str) -> list[str]:
        """Return the decoded, non-empty lines of *name* in file order."""
        return self.read_tokens(name, lambda line: line)

    def read_tokens(self, name: str, parse: Callable[[str], T]) -> list[T]:
        """Decode each non-empty line of *name* and convert it with *parse*.

        *parse* signals a malformed token by raising ``ValueError``; it is
        handled under the same policy as invalid UTF-8.
        """
        path = self.path(name)
        if not path.is_file():
            raise MissingInputFile(path)

        tokens: list[T] = []
        skipped = 0
        for number, raw in enumerate(path.read_bytes().split(b"\n"), start=1):
            raw = raw.rstrip(b"\r")
            if not raw:
                continue
            try:
                tokens.append(parse(raw.decode("utf-8")))
            except ValueError as exc:
                # UnicodeDecodeError is a ValueError too
                if self.policy is DecodePolicy.STRICT:
                    raise DecodeError(path, number, str(exc)) from exc
                logger.warning("Skipping %s:%d: %s", path, number, exc)
                skipped += 1

        logger.debug("Read %d tokens from %s (%d skipped)", len(tokens), path, skipped)
        return tokens
