# staking_tracker/types/new.py

from typing import NewType

from web3 import Web3


EvmAddress = NewType('EvmAddress', str)


def is_evm_address(value: str) -> bool:
    """True for any 20-byte hex address; checksum casing is not enforced"""
    return isinstance(value, str) and Web3.is_address(value.lower())


def to_evm_address(value: str) -> EvmAddress:
    """Validate an EVM address and return its canonical lower-case form"""
    if not is_evm_address(value):
        raise ValueError(f"Invalid EVM address: {value!r}")
    return EvmAddress(value.lower())
