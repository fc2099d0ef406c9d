# staking_tracker/types/__init__.py

from .new import (
    EvmAddress,
    to_evm_address,
    is_evm_address,
)

# Configuration Types
from .config import (
    DatabaseConfig,
    RpcConfig,
    ServerConfig,
    LoggingConfig,
)

from .token import TokenDescriptor
from .sync import SyncResult, SyncStatus


__all__ = [
    'EvmAddress', 'to_evm_address', 'is_evm_address',
    'DatabaseConfig', 'RpcConfig', 'ServerConfig', 'LoggingConfig',
    'TokenDescriptor', 'SyncResult', 'SyncStatus',
]
