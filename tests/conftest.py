# tests/conftest.py
"""
pytest configuration and fixtures for the staking tracker.

Storage runs against a temporary SQLite database; the chain is replaced by
FakeChainReader, which serves per-contract values and can be told to fail.
"""

from pathlib import Path
from typing import Dict, Set

import pytest

from staking_tracker import create_tracker, start_tracker
from staking_tracker.clients.interfaces import ChainReaderInterface
from staking_tracker.core.config import TrackerConfig
from staking_tracker.core.errors import ChainQueryError
from staking_tracker.core.logging import TrackerLogger
from staking_tracker.database.connection import DatabaseManager
from staking_tracker.database.store import StakingStore
from staking_tracker.registry import TokenRegistry
from staking_tracker.services.sync_service import StakingSyncService
from staking_tracker.types import DatabaseConfig, RpcConfig, ServerConfig, LoggingConfig


class FakeChainReader(ChainReaderInterface):
    """In-memory stand-in for the node, keyed by lower-case staking address"""

    def __init__(self):
        self.apy: Dict[str, int] = {}
        self.staked: Dict[str, int] = {}
        self.failing: Set[str] = set()
        self.calls = []
        self.closed = False

    def seed(self, staking_address: str, apy: int, staked: int) -> None:
        self.apy[staking_address.lower()] = apy
        self.staked[staking_address.lower()] = staked

    def fail(self, staking_address: str) -> None:
        self.failing.add(staking_address.lower())

    def _lookup(self, table: Dict[str, int], staking_address: str, function_name: str) -> int:
        key = staking_address.lower()
        self.calls.append((function_name, key))
        if key in self.failing or key not in table:
            raise ChainQueryError(staking_address, function_name, ConnectionError("node unavailable"))
        return table[key]

    async def fixed_apy(self, staking_address: str) -> int:
        return self._lookup(self.apy, staking_address, "fixedAPY")

    async def total_amount_staked(self, staking_address: str) -> int:
        return self._lookup(self.staked, staking_address, "totalAmountStaked")

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def reset_logging():
    TrackerLogger.reset()
    yield
    TrackerLogger.reset()


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'staking.db'}"


@pytest.fixture
def tracker_config(database_url) -> TrackerConfig:
    return TrackerConfig(
        database=DatabaseConfig(url=database_url),
        rpc=RpcConfig(endpoint_url="http://localhost:8545"),
        server=ServerConfig(),
        logging=LoggingConfig(log_level="DEBUG", file_enabled=False),
        auto_create_tables=True,
    )


@pytest.fixture
def registry() -> TokenRegistry:
    return TokenRegistry.default()


@pytest.fixture
def chain_reader(registry) -> FakeChainReader:
    reader = FakeChainReader()
    for token in registry:
        reader.seed(token.staking_address, apy=5, staked=1_000_000)
    return reader


@pytest.fixture
def container(tracker_config, chain_reader):
    tracker = create_tracker(tracker_config)
    tracker.register_instance(ChainReaderInterface, chain_reader)
    start_tracker(tracker)
    yield tracker
    tracker.get(DatabaseManager).shutdown()


@pytest.fixture
def store(container) -> StakingStore:
    return container.get(StakingStore)


@pytest.fixture
def sync_service(container) -> StakingSyncService:
    return container.get(StakingSyncService)
