"""Runtime configuration: env-driven.

Centralized settings using pydantic-settings.  Reads from a .env file and
CONFIGCELL_* environment variables; CLI options override both.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from configcell.core.inputs import DecodePolicy
from configcell.models.profiles import Profile, get_profile


class GeneratorSettings(BaseSettings):
    """Generator settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export CONFIGCELL_PROFILE=mainnet
        export CONFIGCELL_DATA_DIR=/srv/release/data
        export CONFIGCELL_LOG_LEVEL=DEBUG

    Or via .env file::

        CONFIGCELL_PROFILE=mainnet
        CONFIGCELL_SKIP_UNDECODABLE=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CONFIGCELL_",
        env_file_encoding="utf-8",
    )

    profile: str = "testnet"
    data_dir: Path = Path("data")
    log_level: str = "WARNING"

    # Drop undecodable input lines with a warning instead of aborting
    skip_undecodable: bool = False

    @property
    def decode_policy(self) -> DecodePolicy:
        return DecodePolicy.SKIP if self.skip_undecodable else DecodePolicy.STRICT

    def resolve_profile(self) -> Profile:
        """The selected :class:`Profile`.  Raises ``KeyError`` if unknown."""
        return get_profile(self.profile)
