"""Typed Telegram Bot API client: Pydantic models, method table, and async client.

Each Bot API method is described once in :mod:`botapi.descriptors`.  A call
is encoded (JSON, or multipart when files are uploaded), sent through a
:class:`~botapi.transport.Transport`, and the response envelope is decoded
into the method's result model or raised as an error.

Usage::

    from botapi import BotClient, LocalFile, RemoteError
    from botapi.models import Message, Update

    async with BotClient.with_token(token) as bot:
        msg = await bot.send_photo(chat_id=42, photo=LocalFile("cat.jpg"))
"""

from botapi.client import BotClient
from botapi.descriptors import METHODS, MethodCall, get_descriptor
from botapi.dispatcher import Dispatcher
from botapi.exceptions import (
    AttachmentIOError,
    BotAPIError,
    DecodeError,
    InvalidValueError,
    RemoteError,
    TransportError,
)
from botapi.transport import RequestsTransport, Transport, TransportResponse
from botapi.values import (
    BufferedFile,
    ChatId,
    FileId,
    FileUrl,
    InputFile,
    InputMedia,
    InputMediaAnimation,
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
    LocalFile,
)

__all__ = [
    "BotClient",
    "Dispatcher",
    "METHODS",
    "MethodCall",
    "get_descriptor",
    "Transport",
    "TransportResponse",
    "RequestsTransport",
    "ChatId",
    "InputFile",
    "LocalFile",
    "BufferedFile",
    "FileId",
    "FileUrl",
    "InputMedia",
    "InputMediaPhoto",
    "InputMediaVideo",
    "InputMediaAnimation",
    "InputMediaAudio",
    "InputMediaDocument",
    "BotAPIError",
    "InvalidValueError",
    "AttachmentIOError",
    "TransportError",
    "DecodeError",
    "RemoteError",
]
