# staking_tracker/__init__.py

from typing import Mapping, Optional

from .core.config import TrackerConfig, load_environment
from .core.container import TrackerContainer
from .core.logging import TrackerLogger, log_with_context, INFO
from .clients.interfaces import ChainReaderInterface
from .clients.chain_reader import ChainReader
from .database.connection import DatabaseManager
from .database.store import StakingStore
from .registry import TokenRegistry, LogoLookup
from .services.sync_service import StakingSyncService
from .types import LoggingConfig


__version__ = "1.0.0"


def create_tracker(config: Optional[TrackerConfig] = None,
                   env_vars: Optional[Mapping[str, str]] = None) -> TrackerContainer:
    """Build the service container; nothing connects until start_tracker()"""
    if config is None:
        env = load_environment(env_vars)
        _configure_logging_early(env)
        config = TrackerConfig.from_env(env)
    else:
        configure_logging(config.logging)

    logger = TrackerLogger.get_logger('core.init')

    container = TrackerContainer(config)
    _register_services(container)

    log_with_context(logger, INFO, "Staking tracker created",
                    chain_label=config.chain_label,
                    tokens_file=str(config.tokens_file) if config.tokens_file else None)

    return container


def _configure_logging_early(env: Mapping[str, str]) -> None:
    configure_logging(TrackerConfig._create_logging_config(env))


def configure_logging(logging_config: LoggingConfig) -> None:
    """Apply logging_config, replacing whatever configuration was active"""
    TrackerLogger.reset()
    TrackerLogger.configure(
        log_dir=logging_config.log_dir,
        log_level=logging_config.log_level,
        console_enabled=logging_config.console_enabled,
        file_enabled=logging_config.file_enabled,
        structured_format=logging_config.structured_format,
    )


def _register_services(container: TrackerContainer) -> None:
    container.register_factory(TokenRegistry, _create_token_registry)
    container.register_singleton(LogoLookup, LogoLookup)
    container.register_factory(DatabaseManager, _create_database_manager)
    container.register_singleton(StakingStore, StakingStore)
    container.register_factory(ChainReaderInterface, _create_chain_reader)
    container.register_factory(StakingSyncService, _create_sync_service)


def _create_token_registry(container: TrackerContainer) -> TokenRegistry:
    tokens_file = container.config.tokens_file
    if tokens_file:
        return TokenRegistry.from_file(tokens_file)
    return TokenRegistry.default()


def _create_database_manager(container: TrackerContainer) -> DatabaseManager:
    return DatabaseManager(container.config.database)


def _create_chain_reader(container: TrackerContainer) -> ChainReaderInterface:
    return ChainReader(container.config.rpc)


def _create_sync_service(container: TrackerContainer) -> StakingSyncService:
    return StakingSyncService(
        registry=container.get(TokenRegistry),
        chain_reader=container.get(ChainReaderInterface),
        store=container.get(StakingStore),
        logos=container.get(LogoLookup),
        chain_label=container.config.chain_label,
    )


def start_tracker(container: TrackerContainer) -> None:
    """Open the shared database connection pool"""
    db_manager = container.get(DatabaseManager)
    db_manager.initialize()
    if container.config.auto_create_tables:
        db_manager.create_tables()


async def shutdown_tracker(container: TrackerContainer) -> None:
    instances = container.instances()

    chain_reader = instances.get(ChainReaderInterface)
    if chain_reader is not None:
        await chain_reader.close()

    db_manager = instances.get(DatabaseManager)
    if db_manager is not None:
        db_manager.shutdown()
