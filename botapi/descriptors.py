"""Static per-call descriptors: endpoint name, parameter list, result type.

The catalogue is plain data.  The encoder reads it to find required
parameters and attachment slots; the decoder reads ``result_type``.
:class:`MethodCall` binds one descriptor to the values of one invocation.
"""

from __future__ import annotations

import dataclasses
import enum
import types
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from botapi.exceptions import InvalidValueError
from botapi.models import (
    BotCommand,
    Chat,
    ChatAdministratorRights,
    ChatInviteLink,
    ChatMember,
    File,
    GameHighScore,
    MenuButton,
    Message,
    MessageId,
    Poll,
    SentWebAppMessage,
    Sticker,
    StickerSet,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)
from botapi.values import ChatId, InputFile, InputMedia, validate_reply_markup


class ParamKind(enum.Enum):
    """How a parameter value is checked and coerced before encoding."""

    PLAIN = "plain"
    CHAT_ID = "chat_id"
    FILE = "file"
    MEDIA = "media"
    MEDIA_GROUP = "media_group"
    REPLY_MARKUP = "reply_markup"


_ATTACHMENT_KINDS = frozenset({ParamKind.FILE, ParamKind.MEDIA, ParamKind.MEDIA_GROUP})


@dataclasses.dataclass(frozen=True, slots=True)
class ParamSpec:
    name: str
    required: bool = False
    kind: ParamKind = ParamKind.PLAIN

    @property
    def attachment(self) -> bool:
        """Whether this parameter may carry an uploaded file."""
        return self.kind in _ATTACHMENT_KINDS


@dataclasses.dataclass(frozen=True, slots=True)
class MethodDescriptor:
    """Shape of one Bot API method, independent of any invocation."""

    name: str
    params: Tuple[ParamSpec, ...]
    result_type: Any

    @property
    def endpoint(self) -> str:
        return self.name

    @property
    def attachments(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.params if p.attachment)

    def param(self, name: str) -> Optional[ParamSpec]:
        for spec in self.params:
            if spec.name == name:
                return spec
        return None


# ── Catalogue helpers ────────────────────────────────────────────────────────


def _req(name: str, kind: ParamKind = ParamKind.PLAIN) -> ParamSpec:
    return ParamSpec(name, True, kind)


def _opt(name: str, kind: ParamKind = ParamKind.PLAIN) -> ParamSpec:
    return ParamSpec(name, False, kind)


def _method(name: str, result_type: Any, *params: ParamSpec) -> MethodDescriptor:
    return MethodDescriptor(name, tuple(params), result_type)


_CHAT = _req("chat_id", ParamKind.CHAT_ID)
_THREAD = _opt("message_thread_id")
_THUMB = _opt("thumb", ParamKind.FILE)
_CAPTION = (_opt("caption"), _opt("parse_mode"), _opt("caption_entities"))
_DELIVERY = (
    _opt("disable_notification"),
    _opt("protect_content"),
    _opt("reply_to_message_id"),
    _opt("allow_sending_without_reply"),
)
_REPLY_MARKUP = _opt("reply_markup", ParamKind.REPLY_MARKUP)
_INLINE_TARGET = (
    _opt("chat_id", ParamKind.CHAT_ID),
    _opt("message_id"),
    _opt("inline_message_id"),
)
_STICKER_FILES = (
    _opt("png_sticker", ParamKind.FILE),
    _opt("tgs_sticker", ParamKind.FILE),
    _opt("webm_sticker", ParamKind.FILE),
)
_INVOICE = (
    _req("title"),
    _req("description"),
    _req("payload"),
    _req("provider_token"),
    _req("currency"),
    _req("prices"),
    _opt("max_tip_amount"),
    _opt("suggested_tip_amounts"),
    _opt("provider_data"),
    _opt("photo_url"),
    _opt("photo_size"),
    _opt("photo_width"),
    _opt("photo_height"),
    _opt("need_name"),
    _opt("need_phone_number"),
    _opt("need_email"),
    _opt("need_shipping_address"),
    _opt("send_phone_number_to_provider"),
    _opt("send_email_to_provider"),
    _opt("is_flexible"),
)

# editMessage*, stopMessageLiveLocation and setGameScore return True for inline messages.
MaybeMessage = Union[Message, bool]


_CATALOGUE: List[MethodDescriptor] = [
    # Bot and webhook
    _method("getMe", User),
    _method("logOut", bool),
    _method("close", bool),
    _method(
        "getUpdates", List[Update],
        _opt("offset"), _opt("limit"), _opt("timeout"), _opt("allowed_updates"),
    ),
    _method(
        "setWebhook", bool,
        _req("url"), _opt("certificate", ParamKind.FILE), _opt("ip_address"), _opt("max_connections"),
        _opt("allowed_updates"), _opt("drop_pending_updates"), _opt("secret_token"),
    ),
    _method("deleteWebhook", bool, _opt("drop_pending_updates")),
    _method("getWebhookInfo", WebhookInfo),
    # Sending messages
    _method(
        "sendMessage", Message,
        _CHAT, _THREAD, _req("text"), _opt("parse_mode"), _opt("entities"),
        _opt("disable_web_page_preview"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "forwardMessage", Message,
        _CHAT, _THREAD, _req("from_chat_id", ParamKind.CHAT_ID), _opt("disable_notification"),
        _opt("protect_content"), _req("message_id"),
    ),
    _method(
        "copyMessage", MessageId,
        _CHAT, _THREAD, _req("from_chat_id", ParamKind.CHAT_ID), _req("message_id"), *_CAPTION,
        *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendPhoto", Message,
        _CHAT, _THREAD, _req("photo", ParamKind.FILE), *_CAPTION, _opt("has_spoiler"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendAudio", Message,
        _CHAT, _THREAD, _req("audio", ParamKind.FILE), *_CAPTION, _opt("duration"), _opt("performer"),
        _opt("title"), _THUMB, *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendDocument", Message,
        _CHAT, _THREAD, _req("document", ParamKind.FILE), _THUMB, *_CAPTION,
        _opt("disable_content_type_detection"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendVideo", Message,
        _CHAT, _THREAD, _req("video", ParamKind.FILE), _opt("duration"), _opt("width"), _opt("height"), _THUMB,
        *_CAPTION, _opt("has_spoiler"), _opt("supports_streaming"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendAnimation", Message,
        _CHAT, _THREAD, _req("animation", ParamKind.FILE), _opt("duration"), _opt("width"), _opt("height"),
        _THUMB, *_CAPTION, _opt("has_spoiler"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendVoice", Message,
        _CHAT, _THREAD, _req("voice", ParamKind.FILE), *_CAPTION, _opt("duration"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendVideoNote", Message,
        _CHAT, _THREAD, _req("video_note", ParamKind.FILE), _opt("duration"), _opt("length"), _THUMB,
        *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendMediaGroup", List[Message],
        _CHAT, _THREAD, _req("media", ParamKind.MEDIA_GROUP), *_DELIVERY,
    ),
    _method(
        "sendLocation", Message,
        _CHAT, _THREAD, _req("latitude"), _req("longitude"), _opt("horizontal_accuracy"), _opt("live_period"),
        _opt("heading"), _opt("proximity_alert_radius"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "editMessageLiveLocation", MaybeMessage,
        *_INLINE_TARGET, _req("latitude"), _req("longitude"), _opt("horizontal_accuracy"), _opt("heading"),
        _opt("proximity_alert_radius"), _REPLY_MARKUP,
    ),
    _method("stopMessageLiveLocation", MaybeMessage, *_INLINE_TARGET, _REPLY_MARKUP),
    _method(
        "sendVenue", Message,
        _CHAT, _THREAD, _req("latitude"), _req("longitude"), _req("title"), _req("address"),
        _opt("foursquare_id"), _opt("foursquare_type"), _opt("google_place_id"), _opt("google_place_type"),
        *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendContact", Message,
        _CHAT, _THREAD, _req("phone_number"), _req("first_name"), _opt("last_name"), _opt("vcard"),
        *_DELIVERY, _REPLY_MARKUP,
    ),
    _method(
        "sendPoll", Message,
        _CHAT, _THREAD, _req("question"), _req("options"), _opt("is_anonymous"), _opt("type"),
        _opt("allows_multiple_answers"), _opt("correct_option_id"), _opt("explanation"),
        _opt("explanation_parse_mode"), _opt("explanation_entities"), _opt("open_period"), _opt("close_date"),
        _opt("is_closed"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method("sendDice", Message, _CHAT, _THREAD, _opt("emoji"), *_DELIVERY, _REPLY_MARKUP),
    _method("sendChatAction", bool, _CHAT, _THREAD, _req("action")),
    # Users, files and chats
    _method("getUserProfilePhotos", UserProfilePhotos, _req("user_id"), _opt("offset"), _opt("limit")),
    _method("getFile", File, _req("file_id")),
    _method(
        "banChatMember", bool,
        _CHAT, _req("user_id"), _opt("until_date"), _opt("revoke_messages"),
    ),
    _method("unbanChatMember", bool, _CHAT, _req("user_id"), _opt("only_if_banned")),
    _method("restrictChatMember", bool, _CHAT, _req("user_id"), _req("permissions"), _opt("until_date")),
    _method(
        "promoteChatMember", bool,
        _CHAT, _req("user_id"), _opt("is_anonymous"), _opt("can_manage_chat"), _opt("can_post_messages"),
        _opt("can_edit_messages"), _opt("can_delete_messages"), _opt("can_manage_video_chats"),
        _opt("can_restrict_members"), _opt("can_promote_members"), _opt("can_change_info"),
        _opt("can_invite_users"), _opt("can_pin_messages"),
    ),
    _method("setChatAdministratorCustomTitle", bool, _CHAT, _req("user_id"), _req("custom_title")),
    _method("banChatSenderChat", bool, _CHAT, _req("sender_chat_id")),
    _method("unbanChatSenderChat", bool, _CHAT, _req("sender_chat_id")),
    _method("setChatPermissions", bool, _CHAT, _req("permissions")),
    _method("exportChatInviteLink", str, _CHAT),
    _method(
        "createChatInviteLink", ChatInviteLink,
        _CHAT, _opt("name"), _opt("expire_date"), _opt("member_limit"), _opt("creates_join_request"),
    ),
    _method(
        "editChatInviteLink", ChatInviteLink,
        _CHAT, _req("invite_link"), _opt("name"), _opt("expire_date"), _opt("member_limit"),
        _opt("creates_join_request"),
    ),
    _method("revokeChatInviteLink", ChatInviteLink, _CHAT, _req("invite_link")),
    _method("approveChatJoinRequest", bool, _CHAT, _req("user_id")),
    _method("declineChatJoinRequest", bool, _CHAT, _req("user_id")),
    _method("setChatPhoto", bool, _CHAT, _req("photo", ParamKind.FILE)),
    _method("deleteChatPhoto", bool, _CHAT),
    _method("setChatTitle", bool, _CHAT, _req("title")),
    _method("setChatDescription", bool, _CHAT, _opt("description")),
    _method("pinChatMessage", bool, _CHAT, _req("message_id"), _opt("disable_notification")),
    _method("unpinChatMessage", bool, _CHAT, _opt("message_id")),
    _method("unpinAllChatMessages", bool, _CHAT),
    _method("leaveChat", bool, _CHAT),
    _method("getChat", Chat, _CHAT),
    _method("getChatAdministrators", List[ChatMember], _CHAT),
    _method("getChatMemberCount", int, _CHAT),
    _method("getChatMember", ChatMember, _CHAT, _req("user_id")),
    _method("setChatStickerSet", bool, _CHAT, _req("sticker_set_name")),
    _method("deleteChatStickerSet", bool, _CHAT),
    _method(
        "answerCallbackQuery", bool,
        _req("callback_query_id"), _opt("text"), _opt("show_alert"), _opt("url"), _opt("cache_time"),
    ),
    # Commands
    _method("setMyCommands", bool, _req("commands"), _opt("scope"), _opt("language_code")),
    _method("getMyCommands", List[BotCommand], _opt("scope"), _opt("language_code")),
    _method("deleteMyCommands", bool, _opt("scope"), _opt("language_code")),
    _method("setChatMenuButton", bool, _opt("chat_id", ParamKind.CHAT_ID), _opt("menu_button")),
    _method("getChatMenuButton", MenuButton, _opt("chat_id", ParamKind.CHAT_ID)),
    _method("setMyDefaultAdministratorRights", bool, _opt("rights"), _opt("for_channels")),
    _method("getMyDefaultAdministratorRights", ChatAdministratorRights, _opt("for_channels")),
    # Editing
    _method(
        "editMessageText", MaybeMessage,
        *_INLINE_TARGET, _req("text"), _opt("parse_mode"), _opt("entities"), _opt("disable_web_page_preview"),
        _REPLY_MARKUP,
    ),
    _method("editMessageCaption", MaybeMessage, *_INLINE_TARGET, *_CAPTION, _REPLY_MARKUP),
    _method(
        "editMessageMedia", MaybeMessage,
        *_INLINE_TARGET, _req("media", ParamKind.MEDIA), _REPLY_MARKUP,
    ),
    _method("editMessageReplyMarkup", MaybeMessage, *_INLINE_TARGET, _REPLY_MARKUP),
    _method("stopPoll", Poll, _CHAT, _req("message_id"), _REPLY_MARKUP),
    _method("deleteMessage", bool, _CHAT, _req("message_id")),
    # Stickers
    _method(
        "sendSticker", Message,
        _CHAT, _THREAD, _req("sticker", ParamKind.FILE), _opt("emoji"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method("getStickerSet", StickerSet, _req("name")),
    _method("getCustomEmojiStickers", List[Sticker], _req("custom_emoji_ids")),
    _method("uploadStickerFile", File, _req("user_id"), _req("png_sticker", ParamKind.FILE)),
    _method(
        "createNewStickerSet", bool,
        _req("user_id"), _req("name"), _req("title"), *_STICKER_FILES, _opt("sticker_type"), _req("emojis"),
        _opt("mask_position"),
    ),
    _method(
        "addStickerToSet", bool,
        _req("user_id"), _req("name"), *_STICKER_FILES, _req("emojis"), _opt("mask_position"),
    ),
    _method("setStickerPositionInSet", bool, _req("sticker"), _req("position")),
    _method("deleteStickerFromSet", bool, _req("sticker")),
    _method("setStickerSetThumb", bool, _req("name"), _req("user_id"), _THUMB),
    # Inline mode
    _method(
        "answerInlineQuery", bool,
        _req("inline_query_id"), _req("results"), _opt("cache_time"), _opt("is_personal"), _opt("next_offset"),
        _opt("switch_pm_text"), _opt("switch_pm_parameter"),
    ),
    _method("answerWebAppQuery", SentWebAppMessage, _req("web_app_query_id"), _req("result")),
    # Payments
    _method(
        "sendInvoice", Message,
        _CHAT, _THREAD, *_INVOICE, _opt("start_parameter"), *_DELIVERY, _REPLY_MARKUP,
    ),
    _method("createInvoiceLink", str, *_INVOICE),
    _method(
        "answerShippingQuery", bool,
        _req("shipping_query_id"), _req("ok"), _opt("shipping_options"), _opt("error_message"),
    ),
    _method("answerPreCheckoutQuery", bool, _req("pre_checkout_query_id"), _req("ok"), _opt("error_message")),
    # Telegram Passport
    _method("setPassportDataErrors", bool, _req("user_id"), _req("errors")),
    # Games
    _method("sendGame", Message, _CHAT, _THREAD, _req("game_short_name"), *_DELIVERY, _REPLY_MARKUP),
    _method(
        "setGameScore", MaybeMessage,
        _req("user_id"), _req("score"), _opt("force"), _opt("disable_edit_message"), *_INLINE_TARGET,
    ),
    _method("getGameHighScores", List[GameHighScore], _req("user_id"), *_INLINE_TARGET),
]

METHODS: Mapping[str, MethodDescriptor] = types.MappingProxyType({d.name: d for d in _CATALOGUE})


def get_descriptor(method: str) -> MethodDescriptor:
    """Return the descriptor for *method* (Bot API camelCase name)."""
    try:
        return METHODS[method]
    except KeyError:
        raise InvalidValueError("method", f"unknown Bot API method {method!r}") from None


# ── Method calls ─────────────────────────────────────────────────────────────


def _coerce(method: str, spec: ParamSpec, value: Any) -> Any:
    """Normalise *value* for *spec*; raises :class:`InvalidValueError` on a shape mismatch."""
    if spec.kind is ParamKind.CHAT_ID:
        return ChatId.coerce(value, spec.name)
    if spec.kind is ParamKind.FILE:
        return InputFile.coerce(value, spec.name)
    if spec.kind is ParamKind.REPLY_MARKUP:
        return validate_reply_markup(value, spec.name)
    if spec.kind is ParamKind.MEDIA:
        if not isinstance(value, InputMedia):
            raise InvalidValueError(spec.name, f"{method} expects an InputMedia, got {type(value).__name__}")
        return value
    if spec.kind is ParamKind.MEDIA_GROUP:
        if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
            raise InvalidValueError(spec.name, f"{method} expects a sequence of InputMedia")
        for i, item in enumerate(value):
            if not isinstance(item, InputMedia):
                raise InvalidValueError(f"{spec.name}[{i}]", f"expected InputMedia, got {type(item).__name__}")
        return tuple(value)
    return value


@dataclasses.dataclass(frozen=True, eq=False)
class MethodCall:
    """One invocation: a descriptor plus its (already normalised) parameter values.

    Build instances with :meth:`build`; the parameter mapping is read-only.
    ``None`` values are dropped at construction so unset optionals never
    reach the wire.
    """

    descriptor: MethodDescriptor
    params: Mapping[str, Any]

    @classmethod
    def build(cls, method: str, **params: Any) -> "MethodCall":
        descriptor = get_descriptor(method)
        values: Dict[str, Any] = {}
        for name, value in params.items():
            spec = descriptor.param(name)
            if spec is None:
                raise InvalidValueError(name, f"not a parameter of {method}")
            if value is None:
                continue
            values[name] = _coerce(method, spec, value)
        return cls(descriptor, types.MappingProxyType(values))

    @property
    def method(self) -> str:
        return self.descriptor.name
