# staking_tracker/database/connection.py

from typing import Generator, Optional
from contextlib import contextmanager

from sqlalchemy import create_engine, Engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool

from ..core.logging import TrackerLogger, log_with_context, INFO, DEBUG, ERROR
from ..types import DatabaseConfig
from .base import Base


class DatabaseManager:
    """
    Owns the engine and connection pool shared by every request.

    initialize() must run before sessions are handed out; shutdown() disposes
    the pool and may be called more than once.
    """

    def __init__(self, config: DatabaseConfig):
        if not config:
            raise ValueError("DatabaseConfig is required")

        self.config = config
        self.logger = TrackerLogger.get_logger('database.manager')
        self._engine: Optional[Engine] = None
        self._sessions: Optional[sessionmaker] = None

    @property
    def safe_url(self) -> str:
        return make_url(self.config.url).render_as_string(hide_password=True)

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.config.url).get_backend_name() == "sqlite"

    def _engine_kwargs(self) -> dict:
        if self.is_sqlite:
            # Sessions are opened from worker threads
            return {"connect_args": {"check_same_thread": False}}

        return {
            "poolclass": QueuePool,
            "pool_size": self.config.pool_size,
            "max_overflow": self.config.max_overflow,
            "pool_timeout": 30,
            "pool_recycle": 3600,
            "pool_pre_ping": True,
        }

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    def initialize(self) -> None:
        if self.is_initialized:
            log_with_context(self.logger, DEBUG, "Database engine already open")
            return

        engine = create_engine(self.config.url, echo=False, **self._engine_kwargs())
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            log_with_context(self.logger, ERROR, "Database unreachable at startup",
                            url=self.safe_url,
                            error=f"{type(e).__name__}: {e}")
            engine.dispose()
            raise

        self._engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)

        log_with_context(self.logger, INFO, "Database engine opened",
                        url=self.safe_url,
                        pool_size=self.config.pool_size)

    def create_tables(self) -> None:
        """Create any missing tables (development and tests; managed deployments use alembic)"""
        Base.metadata.create_all(self.engine)
        log_with_context(self.logger, INFO, "Database tables ensured",
                        tables=sorted(Base.metadata.tables))

    def shutdown(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessions = None
        self.logger.info("Database engine disposed")

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self._engine

    @contextmanager
    def session_scope(self, commit: bool = True) -> Generator[Session, None, None]:
        """One unit of work: committed on success, rolled back on any exception"""
        if self._sessions is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        session = self._sessions()
        try:
            yield session
            if commit:
                session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def health_check(self) -> bool:
        try:
            with self.session_scope(commit=False) as session:
                session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            log_with_context(self.logger, ERROR, "Database health check failed",
                            error=f"{type(e).__name__}: {e}")
            return False
