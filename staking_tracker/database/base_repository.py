# staking_tracker/database/base_repository.py

from typing import TypeVar, Generic, Type, List
from sqlalchemy.orm import Session

from ..core.logging import TrackerLogger, log_with_context, DEBUG, ERROR


T = TypeVar('T')

class BaseRepository(Generic[T]):
    """Session-scoped queries shared by all tables; callers own the transaction"""

    def __init__(self, db_manager, model_class: Type[T]):
        self.db_manager = db_manager
        self.model_class = model_class
        self.logger = TrackerLogger.get_logger(f'database.repository.{model_class.__tablename__}')

    def get_all(self, session: Session) -> List[T]:
        return session.query(self.model_class).all()

    def create(self, session: Session, **fields) -> T:
        instance = self.model_class(**fields)
        session.add(instance)
        try:
            session.flush()
        except Exception as e:
            log_with_context(self.logger, ERROR, "Insert failed",
                            table=self.model_class.__tablename__,
                            error=f"{type(e).__name__}: {e}")
            raise

        log_with_context(self.logger, DEBUG, "Row inserted",
                        table=self.model_class.__tablename__,
                        id=str(instance.id))
        return instance
