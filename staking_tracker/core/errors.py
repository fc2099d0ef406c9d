# staking_tracker/core/errors.py

from typing import Optional


class StakingTrackerError(Exception):
    """Base class for all staking tracker errors"""


class ConfigurationError(StakingTrackerError):
    pass


class UnknownTokenError(StakingTrackerError, KeyError):
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Token not in registry: {symbol}")

    def __str__(self) -> str:
        return self.args[0]


class ChainQueryError(StakingTrackerError):
    """A read against a staking contract failed (node unreachable, bad address, bad output)"""

    def __init__(self, address: str, function_name: str, cause: Optional[BaseException] = None):
        self.address = address
        self.function_name = function_name
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Query {function_name}() failed for {address}{detail}")


class StorageError(StakingTrackerError):
    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Storage operation '{operation}' failed{detail}")
