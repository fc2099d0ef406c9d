# staking_tracker/database/store.py

import asyncio
from typing import Any, Callable, Dict, List, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from ..core.errors import StorageError
from ..core.logging import LoggingMixin
from .connection import DatabaseManager
from .repositories import StakingRepository
from .tables import DBStaking


R = TypeVar('R')


class StakingStore(LoggingMixin):
    """
    Async persistence API for staking records.

    Each operation runs one repository call inside its own transaction on a
    worker thread, so a pending database round-trip suspends only the calling
    coroutine. SQLAlchemy failures are re-raised as StorageError; "not found"
    is an ordinary None or empty list.
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
        self.repository = StakingRepository(db_manager)

    def _run(self, operation: str, func: Callable[..., R], *args) -> R:
        try:
            with self.db_manager.session_scope() as session:
                return func(session, *args)
        except SQLAlchemyError as e:
            self.log_error("Staking store operation failed",
                           operation=operation,
                           error=str(e))
            raise StorageError(operation, e) from e

    async def _execute(self, operation: str, func: Callable[..., R], *args) -> R:
        return await asyncio.to_thread(self._run, operation, func, *args)

    async def upsert(self, token_address: str,
                     create_fields: Dict[str, Any],
                     update_fields: Dict[str, Any]) -> DBStaking:
        return await self._execute('upsert', self.repository.upsert,
                                   token_address, create_fields, update_fields)

    async def find_all(self) -> List[DBStaking]:
        return await self._execute('find_all', self.repository.get_all)

    async def find_by_protocol_id(self, protocol_id: str) -> List[DBStaking]:
        return await self._execute('find_by_protocol_id', self.repository.get_by_protocol_id,
                                   protocol_id)

    async def find_by_address(self, token_address: str) -> Optional[DBStaking]:
        return await self._execute('find_by_address', self.repository.get_by_address,
                                   token_address)

    async def health_check(self) -> bool:
        return await asyncio.to_thread(self.db_manager.health_check)
