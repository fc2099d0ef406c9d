# staking_tracker/core/logging.py
"""
Centralized logging for the staking tracker.

Every logger lives under the ``staking_tracker`` root. Structured context is
attached to records as attributes (see log_with_context) and rendered as
``key=value`` pairs after the message for the keys listed in CONTEXT_ATTRS.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from logging import DEBUG, INFO, WARNING, ERROR, CRITICAL


ROOT_LOGGER_NAME = 'staking_tracker'

CONTEXT_ATTRS = ('token_symbol', 'token_address', 'staking_address', 'protocol_id',
                 'function_name', 'operation', 'status', 'count', 'error')

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class TrackerFormatter(logging.Formatter):
    def __init__(self, include_context: bool = True):
        super().__init__(PLAIN_FORMAT)
        self.include_context = include_context

    def formatTime(self, record, datefmt=None):
        return super().formatTime(record, '%Y-%m-%d %H:%M:%S') + f'.{int(record.msecs):03d}'

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if not self.include_context:
            return line

        pairs = [f"{key}={getattr(record, key)}" for key in CONTEXT_ATTRS if hasattr(record, key)]
        return f"{line} | {' '.join(pairs)}" if pairs else line


class TrackerLogger:
    """Process-wide logging setup; the first configure() call wins until reset()"""

    _configured = False
    _log_level = INFO

    @classmethod
    def configure(cls,
                  log_dir: Optional[Path] = None,
                  log_level: str = "INFO",
                  console_enabled: bool = True,
                  file_enabled: bool = False,
                  structured_format: bool = True) -> None:
        if cls._configured:
            return

        cls._log_level = logging.getLevelName(log_level.upper())
        if not isinstance(cls._log_level, int):
            cls._log_level = INFO

        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(cls._log_level)
        root.handlers.clear()

        for handler in cls._build_handlers(log_dir, console_enabled, file_enabled, structured_format):
            root.addHandler(handler)

        cls._configured = True

    @classmethod
    def _build_handlers(cls, log_dir: Optional[Path], console_enabled: bool,
                        file_enabled: bool, structured_format: bool) -> List[logging.Handler]:
        handlers = []

        if console_enabled:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(TrackerFormatter(include_context=True) if structured_format
                                 else logging.Formatter(PLAIN_FORMAT))
            handlers.append(console)

        if file_enabled and log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)
            for filename, level in (('staking_tracker.log', cls._log_level),
                                    ('staking_tracker_errors.log', ERROR)):
                handler = logging.FileHandler(log_dir / filename)
                handler.setLevel(level)
                handler.setFormatter(TrackerFormatter(include_context=True))
                handlers.append(handler)

        return handlers

    @classmethod
    def reset(cls) -> None:
        """Drop handlers so the next configure() call applies (tests, CLI re-entry)"""
        root = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root.handlers:
            handler.close()
        root.handlers.clear()
        cls._configured = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if not cls._configured:
            cls.configure()

        if name != ROOT_LOGGER_NAME and not name.startswith(f'{ROOT_LOGGER_NAME}.'):
            name = f'{ROOT_LOGGER_NAME}.{name}'
        return logging.getLogger(name)


def get_class_logger(instance) -> logging.Logger:
    module = instance.__class__.__module__
    module = module.removeprefix(f'{ROOT_LOGGER_NAME}.')
    return TrackerLogger.get_logger(f"{module}.{instance.__class__.__name__}")


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """Log message with context keyword arguments attached as record attributes"""
    if logger.isEnabledFor(level):
        record = logger.makeRecord(logger.name, level, "", 0, message, (), None)
        record.__dict__.update(context)
        logger.handle(record)


class LoggingMixin:
    """Lazily created per-class logger plus context-aware level helpers"""

    @property
    def logger(self) -> logging.Logger:
        if not hasattr(self, '_logger'):
            self._logger = get_class_logger(self)
        return self._logger

    def log_debug(self, message: str, **context) -> None:
        log_with_context(self.logger, DEBUG, message, **context)

    def log_info(self, message: str, **context) -> None:
        log_with_context(self.logger, INFO, message, **context)

    def log_warning(self, message: str, **context) -> None:
        log_with_context(self.logger, WARNING, message, **context)

    def log_error(self, message: str, **context) -> None:
        log_with_context(self.logger, ERROR, message, **context)


__all__ = [
    'TrackerLogger', 'TrackerFormatter', 'LoggingMixin', 'get_class_logger',
    'log_with_context', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL',
]
