# staking_tracker/types/config.py

from typing import Optional
from pathlib import Path

from msgspec import Struct


class DatabaseConfig(Struct):
    url: str
    pool_size: int = 5
    max_overflow: int = 10

class RpcConfig(Struct):
    endpoint_url: str

class ServerConfig(Struct):
    host: str = "0.0.0.0"
    port: int = 3000

class LoggingConfig(Struct):
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    console_enabled: bool = True
    file_enabled: bool = False
    structured_format: bool = True
