"""Polymorphic request values and their wire serialization.

The Bot API accepts several parameters in more than one shape:

* a chat is addressed by numeric id or by ``@username`` (:class:`ChatId`);
* a file is a local path, an in-memory buffer, a ``file_id`` already on
  Telegram's servers, or an HTTP URL (:class:`InputFile` and its variants);
* ``reply_markup`` is one of four keyboard/reply objects (:data:`ReplyMarkup`);
* media groups are sequences of :class:`InputMedia` entries.

Each type validates that it actually carries a value and knows the exact
JSON shape Telegram expects for it.  :func:`to_wire` is the single entry
point the encoder uses for every parameter value.
"""

from __future__ import annotations

import abc
import dataclasses
import os
import pathlib
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict

from botapi.exceptions import AttachmentIOError, InvalidValueError
from botapi.models import (
    ForceReply,
    InlineKeyboardMarkup,
    MessageEntity,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
)

ATTACH_PREFIX = "attach://"


# ── Chat identifiers ─────────────────────────────────────────────────────────


@dataclasses.dataclass(frozen=True, slots=True)
class ChatId:
    """Target chat: a numeric id or the ``@username`` of a channel/supergroup."""

    value: Union[int, str, None]

    @classmethod
    def numeric(cls, chat_id: int) -> "ChatId":
        return cls(chat_id)

    @classmethod
    def username(cls, name: str) -> "ChatId":
        return cls(name)

    @classmethod
    def coerce(cls, value: Any, field: str = "chat_id") -> "ChatId":
        """Wrap a plain ``int``/``str`` (or pass through a :class:`ChatId`)."""
        if isinstance(value, ChatId):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise InvalidValueError(field, f"expected int or str chat id, got {type(value).__name__}")
        return cls(value)

    from_wire = coerce

    @property
    def is_numeric(self) -> bool:
        return isinstance(self.value, int) and not isinstance(self.value, bool)

    def validate(self, field: str = "chat_id") -> None:
        if self.value is None or self.value == "":
            raise InvalidValueError(field, "neither a chat id nor a username is set")
        if isinstance(self.value, bool) or not isinstance(self.value, (int, str)):
            raise InvalidValueError(field, f"unsupported chat id type {type(self.value).__name__}")

    def to_wire(self, field: str = "chat_id") -> Union[int, str]:
        self.validate(field)
        return self.value  # type: ignore[return-value]


# ── Files ────────────────────────────────────────────────────────────────────


class InputFile(abc.ABC):
    """A file parameter.  Use one of the concrete variants below."""

    __slots__ = ()

    needs_upload: ClassVar[bool] = False

    @abc.abstractmethod
    def validate(self, field: str) -> None:
        """Raise :class:`InvalidValueError` if the file cannot be sent as *field*."""

    def to_wire(self, field: str) -> str:
        raise InvalidValueError(field, "a local file can only be sent as a multipart attachment")

    @staticmethod
    def coerce(value: Any, field: str) -> "InputFile":
        """Turn a convenience value into an :class:`InputFile`.

        ``str`` values starting with ``http://`` or ``https://`` become
        :class:`FileUrl`, other strings :class:`FileId`; ``pathlib.Path``
        becomes :class:`LocalFile` and ``bytes`` a :class:`BufferedFile`.
        """
        if isinstance(value, InputFile):
            return value
        if isinstance(value, str):
            if value.startswith(("http://", "https://")):
                return FileUrl(value)
            return FileId(value)
        if isinstance(value, pathlib.PurePath):
            return LocalFile(value)
        if isinstance(value, (bytes, bytearray)):
            return BufferedFile("file", bytes(value))
        raise InvalidValueError(field, f"cannot use {type(value).__name__} as a file")


@dataclasses.dataclass(frozen=True, slots=True)
class LocalFile(InputFile):
    """A file on the local disk, uploaded as a multipart part."""

    path: Union[str, "os.PathLike[str]"]

    needs_upload: ClassVar[bool] = True

    @property
    def filename(self) -> str:
        return os.path.basename(os.fspath(self.path))

    def validate(self, field: str) -> None:
        if self.path is None or os.fspath(self.path) == "":
            raise InvalidValueError(field, "local file path is empty")

    def read(self) -> bytes:
        """Read the whole file; the handle is closed before returning."""
        path = os.fspath(self.path)
        try:
            with open(path, "rb") as fh:
                return fh.read()
        except OSError as exc:
            raise AttachmentIOError(path, exc) from exc


@dataclasses.dataclass(frozen=True, slots=True)
class BufferedFile(InputFile):
    """In-memory file content with the name it should be uploaded under."""

    filename: str
    content: bytes

    needs_upload: ClassVar[bool] = True

    def validate(self, field: str) -> None:
        if not self.filename:
            raise InvalidValueError(field, "in-memory file has no name")
        if not isinstance(self.content, (bytes, bytearray)):
            raise InvalidValueError(field, "in-memory file content must be bytes")

    def read(self) -> bytes:
        return bytes(self.content)


@dataclasses.dataclass(frozen=True, slots=True)
class FileId(InputFile):
    """A file already stored on Telegram's servers."""

    file_id: str

    def validate(self, field: str) -> None:
        if not self.file_id:
            raise InvalidValueError(field, "file_id is empty")

    def to_wire(self, field: str) -> str:
        self.validate(field)
        return self.file_id


@dataclasses.dataclass(frozen=True, slots=True)
class FileUrl(InputFile):
    """An HTTP URL Telegram downloads the file from."""

    url: str

    def validate(self, field: str) -> None:
        if not self.url:
            raise InvalidValueError(field, "file URL is empty")

    def to_wire(self, field: str) -> str:
        self.validate(field)
        return self.url


UploadFile = Union[LocalFile, BufferedFile]


# ── Reply markup ─────────────────────────────────────────────────────────────

ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]

REPLY_MARKUP_TYPES: Tuple[type, ...] = (
    InlineKeyboardMarkup,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ForceReply,
)


def validate_reply_markup(value: Any, field: str = "reply_markup") -> ReplyMarkup:
    """Ensure *value* is exactly one of the four reply-markup shapes."""
    if not isinstance(value, REPLY_MARKUP_TYPES):
        allowed = ", ".join(t.__name__ for t in REPLY_MARKUP_TYPES)
        raise InvalidValueError(field, f"expected one of {allowed}, got {type(value).__name__}")
    return value


# ── Input media ──────────────────────────────────────────────────────────────


def _coerce_media(value: Any) -> InputFile:
    return InputFile.coerce(value, "media")


def _coerce_thumb(value: Any) -> Optional[InputFile]:
    if value is None:
        return None
    return InputFile.coerce(value, "thumb")


MediaFile = Annotated[InputFile, BeforeValidator(_coerce_media)]
ThumbFile = Annotated[Optional[InputFile], BeforeValidator(_coerce_thumb)]


class InputMedia(BaseModel):
    """Base for media-group entries and ``editMessageMedia`` content.

    ``type`` is the discriminator Telegram reads; it is fixed per subclass.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    type: str
    media: MediaFile
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None

    def input_files(self) -> List[Tuple[str, InputFile]]:
        """``(field, file)`` pairs for every file this entry carries, media first."""
        files: List[Tuple[str, InputFile]] = [("media", self.media)]
        thumb = getattr(self, "thumb", None)
        if thumb is not None:
            files.append(("thumb", thumb))
        return files

    @property
    def needs_upload(self) -> bool:
        return any(f.needs_upload for _, f in self.input_files())

    def to_wire(self, field: str = "media", attachments: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Serialize to the JSON object Telegram expects.

        *attachments* maps a file field (``"media"``/``"thumb"``) to the
        multipart part name carrying it; such fields are written as
        ``attach://<name>``.
        """
        attachments = attachments or {}
        data: Dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            if name in attachments:
                data[name] = ATTACH_PREFIX + attachments[name]
            else:
                data[name] = to_wire(value, f"{field}.{name}")
        return data


class InputMediaPhoto(InputMedia):
    type: Literal["photo"] = "photo"
    has_spoiler: Optional[bool] = None


class InputMediaVideo(InputMedia):
    type: Literal["video"] = "video"
    thumb: ThumbFile = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None
    has_spoiler: Optional[bool] = None


class InputMediaAnimation(InputMedia):
    type: Literal["animation"] = "animation"
    thumb: ThumbFile = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    has_spoiler: Optional[bool] = None


class InputMediaAudio(InputMedia):
    type: Literal["audio"] = "audio"
    thumb: ThumbFile = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(InputMedia):
    type: Literal["document"] = "document"
    thumb: ThumbFile = None
    disable_content_type_detection: Optional[bool] = None


# ── Generic serialization ────────────────────────────────────────────────────


def needs_multipart(value: Any) -> bool:
    """True when *value* (or anything nested in it) must be uploaded."""
    if isinstance(value, InputFile):
        return value.needs_upload
    if isinstance(value, InputMedia):
        return value.needs_upload
    if isinstance(value, (list, tuple)):
        return any(needs_multipart(item) for item in value)
    return False


def to_wire(value: Any, field: str) -> Any:
    """Serialize a parameter value into its JSON-compatible wire form."""
    if isinstance(value, ChatId):
        return value.to_wire(field)
    if isinstance(value, InputFile):
        value.validate(field)
        return value.to_wire(field)
    if isinstance(value, InputMedia):
        return value.to_wire(field)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True, by_alias=True)
    if isinstance(value, (list, tuple)):
        return [to_wire(item, f"{field}[{i}]") for i, item in enumerate(value)]
    if isinstance(value, dict):
        return {str(k): to_wire(v, f"{field}.{k}") for k, v in value.items() if v is not None}
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    raise InvalidValueError(field, f"cannot serialize {type(value).__name__}")
