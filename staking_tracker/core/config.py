# staking_tracker/core/config.py

from msgspec import Struct
from typing import Mapping, Optional
from pathlib import Path
import os

from dotenv import load_dotenv

from ..types import DatabaseConfig, RpcConfig, ServerConfig, LoggingConfig
from ..registry import DEFAULT_CHAIN_LABEL
from .errors import ConfigurationError
from .logging import TrackerLogger, log_with_context, DEBUG


ENV_PREFIX = "STAKING_"


def _get(env: Mapping[str, str], name: str, default: Optional[str] = None,
         fallback: Optional[str] = None) -> Optional[str]:
    value = env.get(f"{ENV_PREFIX}{name}")
    if value is None and fallback:
        value = env.get(fallback)
    return default if value in (None, "") else value


def _get_int(env: Mapping[str, str], name: str, default: int, fallback: Optional[str] = None) -> int:
    raw = _get(env, name, fallback=fallback)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def _get_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _get(env, name)
    if raw is None:
        return default
    return raw.lower() in ("1", "true", "yes", "on")


def load_environment(env_vars: Optional[Mapping[str, str]] = None,
                     load_env_file: bool = True) -> Mapping[str, str]:
    """The given mapping, or os.environ after reading a .env file"""
    if env_vars is not None:
        return env_vars
    if load_env_file:
        load_dotenv()
    return os.environ


class TrackerConfig(Struct):
    database: DatabaseConfig
    rpc: RpcConfig
    server: ServerConfig
    logging: LoggingConfig
    chain_label: str = DEFAULT_CHAIN_LABEL
    tokens_file: Optional[Path] = None
    auto_create_tables: bool = False

    @classmethod
    def from_env(cls, env_vars: Optional[Mapping[str, str]] = None,
                 load_env_file: bool = True) -> 'TrackerConfig':
        env_vars = load_environment(env_vars, load_env_file)

        tokens_file = _get(env_vars, "TOKENS_FILE")

        config = cls(
            database=cls._create_database_config(env_vars),
            rpc=cls._create_rpc_config(env_vars),
            server=cls._create_server_config(env_vars),
            logging=cls._create_logging_config(env_vars),
            chain_label=_get(env_vars, "CHAIN_LABEL", DEFAULT_CHAIN_LABEL),
            tokens_file=Path(tokens_file) if tokens_file else None,
            auto_create_tables=_get_bool(env_vars, "DB_AUTO_CREATE", False),
        )

        logger = TrackerLogger.get_logger('core.config')
        log_with_context(logger, DEBUG, "TrackerConfig created",
                        chain_label=config.chain_label,
                        port=config.server.port)
        return config

    @staticmethod
    def _create_database_config(env: Mapping[str, str]) -> DatabaseConfig:
        pool_size = _get_int(env, "DB_POOL_SIZE", 5)
        max_overflow = _get_int(env, "DB_MAX_OVERFLOW", 10)

        db_url = _get(env, "DATABASE_URL", fallback="DATABASE_URL")
        if db_url:
            return DatabaseConfig(url=db_url, pool_size=pool_size, max_overflow=max_overflow)

        db_user = _get(env, "DB_USER")
        db_password = _get(env, "DB_PASSWORD")
        db_host = _get(env, "DB_HOST", "127.0.0.1")
        db_port = _get(env, "DB_PORT", "5432")
        db_name = _get(env, "DB_NAME", "staking")

        if not db_user or not db_password:
            raise ConfigurationError(
                f"Set {ENV_PREFIX}DATABASE_URL or both {ENV_PREFIX}DB_USER and {ENV_PREFIX}DB_PASSWORD"
            )

        db_url = f"postgresql+psycopg://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"
        return DatabaseConfig(url=db_url, pool_size=pool_size, max_overflow=max_overflow)

    @staticmethod
    def _create_rpc_config(env: Mapping[str, str]) -> RpcConfig:
        endpoint_url = _get(env, "RPC_URL", fallback="RPC_URL")
        if not endpoint_url:
            raise ConfigurationError(f"{ENV_PREFIX}RPC_URL environment variable required")
        return RpcConfig(endpoint_url=endpoint_url)

    @staticmethod
    def _create_server_config(env: Mapping[str, str]) -> ServerConfig:
        return ServerConfig(
            host=_get(env, "HOST", "0.0.0.0"),
            port=_get_int(env, "PORT", 3000, fallback="PORT"),
        )

    @staticmethod
    def _create_logging_config(env: Mapping[str, str]) -> LoggingConfig:
        log_dir = _get(env, "LOG_DIR")
        return LoggingConfig(
            log_level=_get(env, "LOG_LEVEL", "INFO").upper(),
            log_dir=Path(log_dir) if log_dir else Path.cwd() / "logs",
            console_enabled=_get_bool(env, "LOG_CONSOLE", True),
            file_enabled=_get_bool(env, "LOG_FILE", False),
            structured_format=_get_bool(env, "LOG_STRUCTURED", True),
        )
