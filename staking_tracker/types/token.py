# staking_tracker/types/token.py

from msgspec import Struct

from .new import EvmAddress, to_evm_address


class TokenDescriptor(Struct, frozen=True):
    symbol: str
    token_address: EvmAddress
    staking_address: EvmAddress
    project_name: str
    logo_url: str = ""

    def validate(self):
        if not self.symbol:
            raise ValueError("Token symbol must not be empty")
        if not self.project_name:
            raise ValueError(f"Project name missing for {self.symbol}")
        to_evm_address(self.token_address)
        to_evm_address(self.staking_address)

    @property
    def protocol_id(self) -> str:
        return f"{self.project_name}_{self.symbol}"
