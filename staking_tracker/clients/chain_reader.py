# staking_tracker/clients/chain_reader.py

from typing import Any, Dict, List

from web3 import AsyncWeb3, AsyncHTTPProvider
from web3.contract import AsyncContract

from ..core.errors import ChainQueryError
from ..core.logging import LoggingMixin
from ..types import RpcConfig
from .interfaces import ChainReaderInterface


STAKING_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": "fixedAPY",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
    },
    {
        "type": "function",
        "name": "totalAmountStaked",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
]


class ChainReader(ChainReaderInterface, LoggingMixin):
    """
    Read-only client for staking contracts over a single shared node connection.
    """

    def __init__(self, config: RpcConfig, w3: AsyncWeb3 = None):
        self.endpoint_url = config.endpoint_url
        self.w3 = w3 or AsyncWeb3(AsyncHTTPProvider(config.endpoint_url))
        self.contract_cache: Dict[str, AsyncContract] = {}

    def get_contract(self, staking_address: str) -> AsyncContract:
        """Get or create the contract instance for a staking address"""
        key = staking_address.lower()

        if key in self.contract_cache:
            return self.contract_cache[key]

        checksum = AsyncWeb3.to_checksum_address(staking_address)
        contract = self.w3.eth.contract(address=checksum, abi=STAKING_ABI)
        self.contract_cache[key] = contract
        return contract

    async def call_function(self, staking_address: str, function_name: str) -> Any:
        """Call a view function; every failure surfaces as ChainQueryError"""
        try:
            contract = self.get_contract(staking_address)
            func = getattr(contract.functions, function_name)
            result = await func().call()
        except Exception as e:
            self.log_warning("Contract call failed",
                             staking_address=staking_address,
                             function_name=function_name,
                             error=str(e))
            raise ChainQueryError(staking_address, function_name, e) from e

        self.log_debug("Contract call completed",
                       staking_address=staking_address,
                       function_name=function_name)
        return result

    async def fixed_apy(self, staking_address: str) -> int:
        return int(await self.call_function(staking_address, "fixedAPY"))

    async def total_amount_staked(self, staking_address: str) -> int:
        return int(await self.call_function(staking_address, "totalAmountStaked"))

    async def is_connected(self) -> bool:
        try:
            return await self.w3.is_connected()
        except Exception as e:
            self.log_warning("Node connectivity check failed", error=str(e))
            return False

    async def close(self) -> None:
        disconnect = getattr(self.w3.provider, "disconnect", None)
        if disconnect is not None:
            await disconnect()
        self.contract_cache.clear()
