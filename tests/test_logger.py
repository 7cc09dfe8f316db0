"""Tests for BotApiLogger and its JSON formatter."""

import json
import logging
import os
import pathlib
import sys
from typing import Iterator

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from core.logger import BotApiLogger, _JsonFormatter


@pytest.fixture(autouse=True)
def fresh_logger() -> Iterator[None]:
    BotApiLogger.reset()
    yield
    BotApiLogger.reset()


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="botapi.dispatcher", level=logging.WARNING, pathname=__file__, lineno=1,
        msg="Call failed", args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_standard_keys(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record()))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "botapi.dispatcher"
        assert entry["message"] == "Call failed"
        assert "timestamp" in entry

    def test_extra_merged(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record(api_endpoint="getMe", status_code=401)))
        assert entry["api_endpoint"] == "getMe"
        assert entry["status_code"] == 401


class TestBotApiLogger:
    def test_singleton(self) -> None:
        assert BotApiLogger.get_logger() is BotApiLogger.get_logger(logging.DEBUG)
        assert BotApiLogger() is BotApiLogger()

    def test_configures_botapi_tree(self) -> None:
        logger = BotApiLogger.get_logger(logging.DEBUG)
        assert logger.name == "botapi"
        assert logger.level == logging.DEBUG
        assert logging.getLogger("botapi.encoder").getEffectiveLevel() == logging.DEBUG

    def test_console_only_without_file(self) -> None:
        logger = BotApiLogger.get_logger()
        assert len(logger.handlers) == 1

    def test_rotating_file(self, tmp_path: pathlib.Path) -> None:
        log_file = os.path.join(tmp_path, "logs", "botapi.log")
        logger = BotApiLogger.get_logger(logging.INFO, log_file=log_file)
        logger.info("hello", extra={"api_endpoint": "getMe"})
        for handler in logger.handlers:
            handler.flush()
        with open(log_file, encoding="utf-8") as fh:
            entry = json.loads(fh.readline())
        assert entry["message"] == "hello"
        assert entry["api_endpoint"] == "getMe"

    def test_reset_removes_handlers(self) -> None:
        logger = BotApiLogger.get_logger()
        BotApiLogger.reset()
        assert logger.handlers == []
