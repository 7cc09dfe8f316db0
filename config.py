"""Application configuration: environment variables and derived constants.

Loads ``BOT_TOKEN``, ``API_URL``, ``FILE_URL``, ``REQUEST_TIMEOUT``,
``LOG_LEVEL`` and ``LOG_FILE`` from the environment via ``python-dotenv``.
All values are resolved at import time so other modules can
``from config import …`` without repeated lookups.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import BotApiLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

_DEFAULT_API_URL = "https://api.telegram.org/bot"
_DEFAULT_FILE_URL = "https://api.telegram.org/file/bot"
_DEFAULT_TIMEOUT = 10.0

# Problems found while parsing, reported once the logger exists.
_warnings: list[tuple[str, dict]] = []


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_timeout(raw: str | None) -> float:
    """Parse ``REQUEST_TIMEOUT`` as positive seconds, falling back to the default."""
    if not raw:
        return _DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        _warnings.append(("REQUEST_TIMEOUT is not a number; using default", {"raw": raw}))
        return _DEFAULT_TIMEOUT
    if value <= 0:
        _warnings.append(("REQUEST_TIMEOUT must be positive; using default", {"raw": raw}))
        return _DEFAULT_TIMEOUT
    return value


def _parse_log_level(raw: str | None) -> int:
    """Accept a level name (``"DEBUG"``) or number (``"10"``); default INFO."""
    if not raw:
        return logging.INFO
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    _warnings.append(("LOG_LEVEL not recognised; using INFO", {"raw": raw}))
    return logging.INFO


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_URL: str = os.environ.get("API_URL") or _DEFAULT_API_URL
FILE_URL: str = os.environ.get("FILE_URL") or _DEFAULT_FILE_URL
REQUEST_TIMEOUT: float = _parse_timeout(os.environ.get("REQUEST_TIMEOUT"))
LOG_LEVEL: int = _parse_log_level(os.environ.get("LOG_LEVEL"))
LOG_FILE: str | None = os.environ.get("LOG_FILE") or None

# ── Logger (used for startup diagnostics at the bottom of this module) ───────
logger = BotApiLogger.get_logger(LOG_LEVEL, LOG_FILE)


# ── Startup diagnostics ─────────────────────────────────────────────────────

for _message, _extra in _warnings:
    logger.warning(_message, extra=_extra)

if BOT_TOKEN:
    logger.info("Config loaded: BOT_TOKEN is set", extra={"api_url": API_URL})
else:
    logger.warning("Config loaded: BOT_TOKEN is NOT set")

logger.info("Request timeout resolved", extra={"request_timeout": REQUEST_TIMEOUT})
