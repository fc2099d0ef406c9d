# api/dependencies.py

from fastapi import HTTPException

from staking_tracker.core.container import TrackerContainer
from staking_tracker.core.logging import TrackerLogger
from staking_tracker.database.store import StakingStore
from staking_tracker.services.sync_service import StakingSyncService

# Global variables - these get set during app startup
_container: TrackerContainer = None
_logger = None

def set_dependencies(container: TrackerContainer):
    """Called during app startup to set global dependencies"""
    global _container, _logger
    _container = container
    _logger = TrackerLogger.get_logger('api.dependencies')

def clear_dependencies():
    global _container
    _container = None

def get_container() -> TrackerContainer:
    """Dependency to get the service container"""
    if _container is None:
        raise HTTPException(status_code=500, detail="Service container not initialized")
    return _container

def get_staking_store() -> StakingStore:
    return get_container().get(StakingStore)

def get_sync_service() -> StakingSyncService:
    return get_container().get(StakingSyncService)

def get_logger():
    """Dependency to get logger"""
    if _logger is None:
        return TrackerLogger.get_logger('api.default')
    return _logger
