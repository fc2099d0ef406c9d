"""
Interfaces for on-chain staking data sources.
"""
from abc import ABC, abstractmethod


class ChainReaderInterface(ABC):
    """Read-only access to a staking contract exposing fixedAPY() and totalAmountStaked()."""

    @abstractmethod
    async def fixed_apy(self, staking_address: str) -> int:
        """
        Get the contract's declared APY.

        Args:
            staking_address: Staking contract address

        Returns:
            APY as an integer percentage (uint8 on-chain)

        Raises:
            ChainQueryError: If the query could not be completed
        """
        pass

    @abstractmethod
    async def total_amount_staked(self, staking_address: str) -> int:
        """
        Get the raw total amount staked in the contract.

        Args:
            staking_address: Staking contract address

        Returns:
            Raw uint256 amount, scaled by 10**6

        Raises:
            ChainQueryError: If the query could not be completed
        """
        pass

    async def is_connected(self) -> bool:
        return True

    async def close(self) -> None:
        pass
