"""Ambient infrastructure shared by the client and applications using it.

Only logging lives here.  This package must NEVER import from ``botapi/``.
"""

from core.logger import BotApiLogger

__all__ = [
    "BotApiLogger",
]
