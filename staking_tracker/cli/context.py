# staking_tracker/cli/context.py

"""
CLI Context

Lazily builds the service container so commands that only need static data
(e.g. listing tokens) work without node or database configuration.
"""

from typing import Optional

import msgspec

from .. import create_tracker, shutdown_tracker
from ..core.config import TrackerConfig
from ..core.container import TrackerContainer
from ..core.logging import TrackerLogger, log_with_context, DEBUG
from ..database.connection import DatabaseManager


class CLIContext:

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self._container: Optional[TrackerContainer] = None

    @property
    def logger(self):
        return TrackerLogger.get_logger('cli.context')

    def load_config(self) -> TrackerConfig:
        """Environment configuration; --verbose overrides the configured log level"""
        config = TrackerConfig.from_env()
        if self.verbose:
            logging_config = msgspec.structs.replace(config.logging, log_level="DEBUG")
            config = msgspec.structs.replace(config, logging=logging_config)
        return config

    @property
    def container(self) -> TrackerContainer:
        if self._container is None:
            self._container = create_tracker(self.load_config())
            log_with_context(self.logger, DEBUG, "CLI container created")
        return self._container

    @property
    def has_container(self) -> bool:
        return self._container is not None

    async def shutdown(self) -> None:
        if self._container is not None:
            await shutdown_tracker(self._container)
            self._container = None

    def shutdown_database(self) -> None:
        if self._container is not None:
            db_manager = self._container.instances().get(DatabaseManager)
            if db_manager is not None:
                db_manager.shutdown()
