# staking_tracker/utils/amounts.py
"""
Utility functions for normalizing raw on-chain amounts
"""

from decimal import Decimal
from typing import Union


def amount_to_int(amount: Union[str, int, None]) -> int:
    """Convert a raw contract return value to int"""
    if amount is None:
        return 0
    if isinstance(amount, str):
        if amount.strip() == "":
            return 0
        return int(amount, 0)
    if isinstance(amount, bool):
        raise TypeError("Boolean is not a valid amount")
    return int(amount)


def format_units(raw_amount: Union[str, int, None], decimals: int) -> Decimal:
    """Scale a raw integer amount down by 10**decimals"""
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return Decimal(amount_to_int(raw_amount)).scaleb(-decimals)


def to_display_float(raw_amount: Union[str, int, None], decimals: int) -> float:
    return float(format_units(raw_amount, decimals))
