"""configcell data models: all Pydantic v2, all frozen (immutable)."""

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
from configcell.models.payloads import (
    ConfigPayload,
    DataType,
    EntitySource,
    PayloadSource,
    RawSource,
    preserved_account_type_tag,
)
from configcell.models.profiles import (
    MAINNET,
    PROFILES,
    TESTNET,
    PriceRule,
    Profile,
    ReleaseRule,
    get_profile,
)

__all__ = [
    # payloads
    "ConfigPayload",
    "DataType",
    "EntitySource",
    "PayloadSource",
    "RawSource",
    "preserved_account_type_tag",
    # profiles
    "MAINNET",
    "PROFILES",
    "TESTNET",
    "PriceRule",
    "Profile",
    "ReleaseRule",
    "get_profile",
    # entities
    "ConfigCellAccount",
    "ConfigCellApply",
    "ConfigCellIncome",
    "ConfigCellMain",
    "ConfigCellPrice",
    "ConfigCellProfitRate",
    "ConfigCellProposal",
    "ConfigCellRelease",
]
