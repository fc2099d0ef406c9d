# staking_tracker/services/sync_service.py

import asyncio
from typing import Any, Dict, List

from ..clients.interfaces import ChainReaderInterface
from ..core.errors import ChainQueryError, StorageError
from ..core.logging import LoggingMixin
from ..database.store import StakingStore
from ..registry import (
    TokenRegistry,
    LogoLookup,
    DEFAULT_CHAIN_LABEL,
    STABLECOIN_SYMBOLS,
    STAKING_CATEGORY,
    STABLECOIN_CATEGORY,
    TVL_DECIMALS,
)
from ..types import SyncResult, TokenDescriptor
from ..utils.amounts import to_display_float


def is_stablecoin(symbol: str) -> bool:
    return symbol in STABLECOIN_SYMBOLS


def derive_categories(symbol: str) -> List[str]:
    categories = [STAKING_CATEGORY]
    if is_stablecoin(symbol):
        categories.append(STABLECOIN_CATEGORY)
    return categories


class StakingSyncService(LoggingMixin):
    """
    Refreshes persisted staking records from on-chain contract state.

    sync_token() handles one registry symbol and never raises for chain or
    storage failures: they are logged and reported in the returned
    SyncResult. sync_all() runs every registered symbol concurrently and
    returns one result per token.
    """

    def __init__(self,
                 registry: TokenRegistry,
                 chain_reader: ChainReaderInterface,
                 store: StakingStore,
                 logos: LogoLookup = None,
                 chain_label: str = DEFAULT_CHAIN_LABEL):
        self.registry = registry
        self.chain_reader = chain_reader
        self.store = store
        self.logos = logos or LogoLookup(registry)
        self.chain_label = chain_label

    def build_record_fields(self, token: TokenDescriptor, apy: int, tvl: float) -> Dict[str, Any]:
        """Full desired state of a staking record, excluding the token_address key"""
        return {
            'protocol_id': token.protocol_id,
            'staking_address': token.staking_address,
            'token_symbol': token.symbol,
            'project_name': token.project_name,
            'chain': self.chain_label,
            'apy': apy,
            'tvl': tvl,
            'is_stablecoin': is_stablecoin(token.symbol),
            'categories': derive_categories(token.symbol),
            'logo_url': self.logos.get(token.token_address),
        }

    async def read_contract_state(self, token: TokenDescriptor):
        raw_apy, raw_staked = await asyncio.gather(
            self.chain_reader.fixed_apy(token.staking_address),
            self.chain_reader.total_amount_staked(token.staking_address),
        )
        return int(raw_apy), to_display_float(raw_staked, TVL_DECIMALS)

    async def sync_token(self, symbol: str) -> SyncResult:
        # Unknown symbols are a caller bug and propagate as UnknownTokenError
        token = self.registry.get(symbol)

        try:
            apy, tvl = await self.read_contract_state(token)

            fields = self.build_record_fields(token, apy, tvl)
            await self.store.upsert(token.token_address, create_fields=fields, update_fields=fields)

        except (ChainQueryError, StorageError) as e:
            self.log_error(f"Error updating staking data for {symbol}",
                           token_symbol=symbol,
                           token_address=token.token_address,
                           error=str(e))
            return SyncResult(symbol=symbol, token_address=token.token_address,
                              status="failed", error=str(e))
        except Exception as e:
            self.log_error(f"Unexpected error updating staking data for {symbol}",
                           token_symbol=symbol,
                           token_address=token.token_address,
                           error=f"{type(e).__name__}: {e}")
            return SyncResult(symbol=symbol, token_address=token.token_address,
                              status="failed", error=str(e))

        self.log_info("Staking data updated",
                      token_symbol=symbol,
                      protocol_id=token.protocol_id,
                      apy=apy,
                      tvl=tvl)
        return SyncResult(symbol=symbol, token_address=token.token_address,
                          status="updated", apy=apy, tvl=tvl)

    async def sync_all(self) -> List[SyncResult]:
        results = await asyncio.gather(*(self.sync_token(symbol) for symbol in self.registry.symbols))

        failed = [r.symbol for r in results if not r.ok]
        self.log_info("Staking sync batch completed",
                      count=len(results),
                      status="partial" if failed else "complete",
                      failed=failed)
        return list(results)
