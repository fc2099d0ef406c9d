# staking_tracker/types/sync.py

from typing import Optional, Literal

from msgspec import Struct


SyncStatus = Literal["updated", "failed"]


class SyncResult(Struct):
    """Outcome of refreshing one token's staking record"""
    symbol: str
    token_address: str
    status: SyncStatus
    apy: Optional[int] = None
    tvl: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "updated"
