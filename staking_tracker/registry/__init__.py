# staking_tracker/registry/__init__.py

from .tokens import TokenRegistry, LogoLookup
from .defaults import (
    DEFAULT_CHAIN_LABEL,
    DEFAULT_TOKENS,
    STABLECOIN_SYMBOLS,
    STAKING_CATEGORY,
    STABLECOIN_CATEGORY,
    TVL_DECIMALS,
)
