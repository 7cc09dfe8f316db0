"""BotApiLogger: process-wide JSON logging for the ``botapi`` logger tree.

Every module in :mod:`botapi` logs through a child of the ``botapi`` logger
(``botapi.encoder``, ``botapi.transport``, …).  Calling
:meth:`BotApiLogger.get_logger` once attaches a JSON console handler to the
parent, and a rotating file handler when a log file is configured.  The
library itself never calls it; applications opt in.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional

ROOT_LOGGER_NAME = "botapi"


class _JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    ``timestamp``, ``level``, ``logger``, ``message``, ``module`` and
    ``func_name`` are always present.  Keys passed through ``extra`` are
    merged in, which is how the client attaches ``api_endpoint``, ``state``,
    ``status_code`` and similar context::

        logger.warning("Call failed", extra={"api_endpoint": "sendPhoto", "error_type": "RemoteError"})
    """

    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in log_entry:
                log_entry[key] = value
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class BotApiLogger:
    """Singleton that owns the handlers of the ``botapi`` logger.

    Usage::

        from core.logger import BotApiLogger

        logger = BotApiLogger.get_logger(logging.DEBUG, log_file="logs/botapi.log")
        logger.info("Client ready")
    """

    _instance: Optional["BotApiLogger"] = None
    _logger: Optional[logging.Logger] = None

    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO, log_file: Optional[str] = None) -> "BotApiLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_file)
        return cls._instance

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_logger(self, level: int, log_file: Optional[str]) -> None:
        self._logger = logging.getLogger(ROOT_LOGGER_NAME)
        self._logger.setLevel(level)

        # Handlers survive a module reload; don't stack a second set.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if not log_file:
            return

        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=self._MAX_BYTES,
            backupCount=self._BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def get_logger(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
        """Return the configured ``botapi`` logger.

        The first call decides the level and file; later calls return the
        same logger and ignore their arguments.
        """
        instance = BotApiLogger(level, log_file)
        assert instance._logger is not None
        return instance._logger

    @classmethod
    def reset(cls) -> None:
        """Detach and close all handlers and forget the singleton."""
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None

    def cleanup(self) -> None:
        """Flush and close all handlers attached to the logger."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
