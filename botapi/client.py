"""BotClient -- one typed coroutine per Telegram Bot API method.

Every method builds a :class:`~botapi.descriptors.MethodCall` from its
arguments and hands it to the :class:`~botapi.dispatcher.Dispatcher`.
Arguments left as ``None`` are omitted from the request.  Chat arguments
accept ``int``/``str``/:class:`~botapi.values.ChatId`; file arguments accept
an :class:`~botapi.values.InputFile`, a ``file_id``/URL string, a
:class:`pathlib.Path` or raw ``bytes``.

Usage::

    async with BotClient.with_token(token) as bot:
        me = await bot.get_me()
        await bot.send_photo(chat_id=42, photo=LocalFile("cat.jpg"), caption="hi")
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Union

from botapi.descriptors import MaybeMessage, MethodCall
from botapi.dispatcher import Dispatcher
from botapi.models import (
    BotCommand,
    Chat,
    ChatAdministratorRights,
    ChatInviteLink,
    ChatMember,
    ChatPermissions,
    File,
    GameHighScore,
    InlineKeyboardMarkup,
    InlineQueryResult,
    LabeledPrice,
    MaskPosition,
    MenuButton,
    Message,
    MessageEntity,
    MessageId,
    PassportElementError,
    Poll,
    SentWebAppMessage,
    ShippingOption,
    Sticker,
    StickerSet,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)
from botapi.transport import DEFAULT_API_URL, DEFAULT_FILE_URL, RequestsTransport, Transport
from botapi.values import ChatId, InputFile, InputMedia, ReplyMarkup

logger = logging.getLogger("botapi.client")

ChatRef = Union[int, str, ChatId]
FileRef = Union[InputFile, str, bytes, Any]


class BotClient:
    """Client for the Telegram Bot API.

    Each public coroutine corresponds to one Bot API method and returns that
    method's result model.  Errors are raised as subclasses of
    :class:`~botapi.exceptions.BotAPIError`; nothing is retried.
    """

    def __init__(self, transport: Transport, dispatcher: Optional[Dispatcher] = None) -> None:
        self._transport = transport
        self._dispatcher = dispatcher or Dispatcher(transport)

    @classmethod
    def with_token(
        cls,
        token: str,
        api_url: str = DEFAULT_API_URL,
        file_url: str = DEFAULT_FILE_URL,
        timeout: float = 10,
    ) -> "BotClient":
        """Create a client using :class:`~botapi.transport.RequestsTransport`."""
        return cls(RequestsTransport(token, api_url=api_url, file_url=file_url, timeout=timeout))

    @classmethod
    def from_config(cls) -> "BotClient":
        """Create a client from the values in :mod:`config`."""
        import config  # reads the environment on first import

        if not config.BOT_TOKEN:
            logger.warning("BOT_TOKEN is not set; requests will be rejected")
        return cls.with_token(
            config.BOT_TOKEN or "",
            api_url=config.API_URL,
            file_url=config.FILE_URL,
            timeout=config.REQUEST_TIMEOUT,
        )

    @classmethod
    async def connect(cls, token: str, **kwargs: Any) -> "BotClient":
        """Create a client and verify the token with ``getMe``."""
        client = cls.with_token(token, **kwargs)
        try:
            me = await client.get_me()
        except Exception:
            client.shutdown()
            raise
        logger.info("Bot token verified", extra={"bot_id": me.id, "bot_username": me.username})
        return client

    async def __aenter__(self) -> "BotClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.shutdown()

    def shutdown(self) -> None:
        """Release the transport's connections."""
        self._transport.close()

    # ------------------------------------------------------------------
    #  Generic entry points
    # ------------------------------------------------------------------

    async def call(self, call: MethodCall) -> Any:
        return await self._dispatcher.dispatch(call)

    async def call_method(self, method: str, **params: Any) -> Any:
        """Invoke any catalogued method by its Bot API name."""
        return await self.call(MethodCall.build(method, **params))

    async def download_file(self, file_path: str) -> bytes:
        """Download raw bytes for the ``file_path`` of a :class:`~botapi.models.File`."""
        return await self._transport.download(file_path)

    # ------------------------------------------------------------------
    #  Bot and webhook
    # ------------------------------------------------------------------

    async def get_me(self) -> User:
        """A simple method for testing your bot's auth token."""
        return await self.call_method("getMe")

    async def log_out(self) -> bool:
        """Log out from the cloud Bot API server before launching the bot locally."""
        return await self.call_method("logOut")

    async def close(self) -> bool:
        """Close the bot instance before moving it from one local server to another."""
        return await self.call_method("close")

    async def get_updates(self, offset: Optional[int] = None, limit: Optional[int] = None, timeout: Optional[int] = None, allowed_updates: Optional[List[str]] = None) -> List[Update]:
        """Receive incoming updates using long polling."""
        return await self.call_method("getUpdates", offset=offset, limit=limit, timeout=timeout, allowed_updates=allowed_updates)

    async def set_webhook(self, url: str, certificate: Optional[FileRef] = None, ip_address: Optional[str] = None, max_connections: Optional[int] = None, allowed_updates: Optional[List[str]] = None, drop_pending_updates: Optional[bool] = None, secret_token: Optional[str] = None) -> bool:
        """Specify a URL and receive incoming updates via an outgoing webhook."""
        return await self.call_method(
            "setWebhook", url=url, certificate=certificate, ip_address=ip_address, max_connections=max_connections,
            allowed_updates=allowed_updates, drop_pending_updates=drop_pending_updates, secret_token=secret_token,
        )

    async def delete_webhook(self, drop_pending_updates: Optional[bool] = None) -> bool:
        return await self.call_method("deleteWebhook", drop_pending_updates=drop_pending_updates)

    async def get_webhook_info(self) -> WebhookInfo:
        return await self.call_method("getWebhookInfo")

    # ------------------------------------------------------------------
    #  Sending messages
    # ------------------------------------------------------------------

    async def send_message(self, chat_id: ChatRef, text: str, message_thread_id: Optional[int] = None, parse_mode: Optional[str] = None, entities: Optional[List[MessageEntity]] = None, disable_web_page_preview: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send a text message. On success, the sent Message is returned."""
        return await self.call_method(
            "sendMessage", chat_id=chat_id, text=text, message_thread_id=message_thread_id, parse_mode=parse_mode,
            entities=entities, disable_web_page_preview=disable_web_page_preview,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def forward_message(self, chat_id: ChatRef, from_chat_id: ChatRef, message_id: int, message_thread_id: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None) -> Message:
        """Forward a message of any kind."""
        return await self.call_method(
            "forwardMessage", chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id,
            message_thread_id=message_thread_id, disable_notification=disable_notification,
            protect_content=protect_content,
        )

    async def copy_message(self, chat_id: ChatRef, from_chat_id: ChatRef, message_id: int, message_thread_id: Optional[int] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> MessageId:
        """Copy a message without a link to the original; returns the new MessageId."""
        return await self.call_method(
            "copyMessage", chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id,
            message_thread_id=message_thread_id, caption=caption, parse_mode=parse_mode,
            caption_entities=caption_entities, disable_notification=disable_notification,
            protect_content=protect_content, reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup,
        )

    async def send_photo(self, chat_id: ChatRef, photo: FileRef, message_thread_id: Optional[int] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, has_spoiler: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send a photo. Local files and buffers are uploaded as multipart."""
        return await self.call_method(
            "sendPhoto", chat_id=chat_id, photo=photo, message_thread_id=message_thread_id, caption=caption,
            parse_mode=parse_mode, caption_entities=caption_entities, has_spoiler=has_spoiler,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def send_audio(self, chat_id: ChatRef, audio: FileRef, message_thread_id: Optional[int] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, duration: Optional[int] = None, performer: Optional[str] = None, title: Optional[str] = None, thumb: Optional[FileRef] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send an audio file to be shown in the music player (.MP3 or .M4A)."""
        return await self.call_method(
            "sendAudio", chat_id=chat_id, audio=audio, message_thread_id=message_thread_id, caption=caption,
            parse_mode=parse_mode, caption_entities=caption_entities, duration=duration, performer=performer,
            title=title, thumb=thumb, disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def send_document(self, chat_id: ChatRef, document: FileRef, message_thread_id: Optional[int] = None, thumb: Optional[FileRef] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, disable_content_type_detection: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send a general file."""
        return await self.call_method(
            "sendDocument", chat_id=chat_id, document=document, message_thread_id=message_thread_id, thumb=thumb,
            caption=caption, parse_mode=parse_mode, caption_entities=caption_entities,
            disable_content_type_detection=disable_content_type_detection,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def send_video(self, chat_id: ChatRef, video: FileRef, message_thread_id: Optional[int] = None, duration: Optional[int] = None, width: Optional[int] = None, height: Optional[int] = None, thumb: Optional[FileRef] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, has_spoiler: Optional[bool] = None, supports_streaming: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send an MPEG4 video."""
        return await self.call_method(
            "sendVideo", chat_id=chat_id, video=video, message_thread_id=message_thread_id, duration=duration,
            width=width, height=height, thumb=thumb, caption=caption, parse_mode=parse_mode,
            caption_entities=caption_entities, has_spoiler=has_spoiler, supports_streaming=supports_streaming,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def send_animation(self, chat_id: ChatRef, animation: FileRef, message_thread_id: Optional[int] = None, duration: Optional[int] = None, width: Optional[int] = None, height: Optional[int] = None, thumb: Optional[FileRef] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, has_spoiler: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send a GIF or H.264/MPEG-4 AVC video without sound."""
        return await self.call_method(
            "sendAnimation", chat_id=chat_id, animation=animation, message_thread_id=message_thread_id,
            duration=duration, width=width, height=height, thumb=thumb, caption=caption, parse_mode=parse_mode,
            caption_entities=caption_entities, has_spoiler=has_spoiler, disable_notification=disable_notification,
            protect_content=protect_content, reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup,
        )

    async def send_voice(self, chat_id: ChatRef, voice: FileRef, message_thread_id: Optional[int] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, duration: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send an OGG/OPUS voice message."""
        return await self.call_method(
            "sendVoice", chat_id=chat_id, voice=voice, message_thread_id=message_thread_id, caption=caption,
            parse_mode=parse_mode, caption_entities=caption_entities, duration=duration,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def send_video_note(self, chat_id: ChatRef, video_note: FileRef, message_thread_id: Optional[int] = None, duration: Optional[int] = None, length: Optional[int] = None, thumb: Optional[FileRef] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send a rounded square video message. Video notes cannot be sent by URL."""
        return await self.call_method(
            "sendVideoNote", chat_id=chat_id, video_note=video_note, message_thread_id=message_thread_id,
            duration=duration, length=length, thumb=thumb, disable_notification=disable_notification,
            protect_content=protect_content, reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup,
        )

    async def send_media_group(self, chat_id: ChatRef, media: Sequence[InputMedia], message_thread_id: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None) -> List[Message]:
        """Send 2-10 photos, videos, documents or audios as an album, in the given order."""
        return await self.call_method(
            "sendMediaGroup", chat_id=chat_id, media=media, message_thread_id=message_thread_id,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
        )

    async def send_location(self, chat_id: ChatRef, latitude: float, longitude: float, message_thread_id: Optional[int] = None, horizontal_accuracy: Optional[float] = None, live_period: Optional[int] = None, heading: Optional[int] = None, proximity_alert_radius: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        return await self.call_method(
            "sendLocation", chat_id=chat_id, latitude=latitude, longitude=longitude,
            message_thread_id=message_thread_id, horizontal_accuracy=horizontal_accuracy, live_period=live_period,
            heading=heading, proximity_alert_radius=proximity_alert_radius,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def edit_message_live_location(self, latitude: float, longitude: float, chat_id: Optional[ChatRef] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, horizontal_accuracy: Optional[float] = None, heading: Optional[int] = None, proximity_alert_radius: Optional[int] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> MaybeMessage:
        """Edit a live location; returns the Message, or True for inline messages."""
        return await self.call_method(
            "editMessageLiveLocation", latitude=latitude, longitude=longitude, chat_id=chat_id,
            message_id=message_id, inline_message_id=inline_message_id, horizontal_accuracy=horizontal_accuracy,
            heading=heading, proximity_alert_radius=proximity_alert_radius, reply_markup=reply_markup,
        )

    async def stop_message_live_location(self, chat_id: Optional[ChatRef] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> MaybeMessage:
        return await self.call_method(
            "stopMessageLiveLocation", chat_id=chat_id, message_id=message_id,
            inline_message_id=inline_message_id, reply_markup=reply_markup,
        )

    async def send_venue(self, chat_id: ChatRef, latitude: float, longitude: float, title: str, address: str, message_thread_id: Optional[int] = None, foursquare_id: Optional[str] = None, foursquare_type: Optional[str] = None, google_place_id: Optional[str] = None, google_place_type: Optional[str] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        return await self.call_method(
            "sendVenue", chat_id=chat_id, latitude=latitude, longitude=longitude, title=title, address=address,
            message_thread_id=message_thread_id, foursquare_id=foursquare_id, foursquare_type=foursquare_type,
            google_place_id=google_place_id, google_place_type=google_place_type,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def send_contact(self, chat_id: ChatRef, phone_number: str, first_name: str, message_thread_id: Optional[int] = None, last_name: Optional[str] = None, vcard: Optional[str] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        return await self.call_method(
            "sendContact", chat_id=chat_id, phone_number=phone_number, first_name=first_name,
            message_thread_id=message_thread_id, last_name=last_name, vcard=vcard,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def send_poll(self, chat_id: ChatRef, question: str, options: List[str], message_thread_id: Optional[int] = None, is_anonymous: Optional[bool] = None, type: Optional[str] = None, allows_multiple_answers: Optional[bool] = None, correct_option_id: Optional[int] = None, explanation: Optional[str] = None, explanation_parse_mode: Optional[str] = None, explanation_entities: Optional[List[MessageEntity]] = None, open_period: Optional[int] = None, close_date: Optional[int] = None, is_closed: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send a native poll."""
        return await self.call_method(
            "sendPoll", chat_id=chat_id, question=question, options=options, message_thread_id=message_thread_id,
            is_anonymous=is_anonymous, type=type, allows_multiple_answers=allows_multiple_answers,
            correct_option_id=correct_option_id, explanation=explanation,
            explanation_parse_mode=explanation_parse_mode, explanation_entities=explanation_entities,
            open_period=open_period, close_date=close_date, is_closed=is_closed,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def send_dice(self, chat_id: ChatRef, emoji: Optional[str] = None, message_thread_id: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        return await self.call_method(
            "sendDice", chat_id=chat_id, emoji=emoji, message_thread_id=message_thread_id,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def send_chat_action(self, chat_id: ChatRef, action: str, message_thread_id: Optional[int] = None) -> bool:
        """Show a status such as ``typing`` or ``upload_photo`` for up to 5 seconds."""
        return await self.call_method("sendChatAction", chat_id=chat_id, action=action, message_thread_id=message_thread_id)

    # ------------------------------------------------------------------
    #  Users, files and chats
    # ------------------------------------------------------------------

    async def get_user_profile_photos(self, user_id: int, offset: Optional[int] = None, limit: Optional[int] = None) -> UserProfilePhotos:
        return await self.call_method("getUserProfilePhotos", user_id=user_id, offset=offset, limit=limit)

    async def get_file(self, file_id: str) -> File:
        """Prepare a file for downloading; fetch it with :meth:`download_file`."""
        return await self.call_method("getFile", file_id=file_id)

    async def ban_chat_member(self, chat_id: ChatRef, user_id: int, until_date: Optional[int] = None, revoke_messages: Optional[bool] = None) -> bool:
        return await self.call_method(
            "banChatMember", chat_id=chat_id, user_id=user_id, until_date=until_date, revoke_messages=revoke_messages,
        )

    async def unban_chat_member(self, chat_id: ChatRef, user_id: int, only_if_banned: Optional[bool] = None) -> bool:
        return await self.call_method("unbanChatMember", chat_id=chat_id, user_id=user_id, only_if_banned=only_if_banned)

    async def restrict_chat_member(self, chat_id: ChatRef, user_id: int, permissions: ChatPermissions, until_date: Optional[int] = None) -> bool:
        """Restrict a user in a supergroup; pass all permissions True to lift restrictions."""
        return await self.call_method(
            "restrictChatMember", chat_id=chat_id, user_id=user_id, permissions=permissions, until_date=until_date,
        )

    async def promote_chat_member(self, chat_id: ChatRef, user_id: int, is_anonymous: Optional[bool] = None, can_manage_chat: Optional[bool] = None, can_post_messages: Optional[bool] = None, can_edit_messages: Optional[bool] = None, can_delete_messages: Optional[bool] = None, can_manage_video_chats: Optional[bool] = None, can_restrict_members: Optional[bool] = None, can_promote_members: Optional[bool] = None, can_change_info: Optional[bool] = None, can_invite_users: Optional[bool] = None, can_pin_messages: Optional[bool] = None) -> bool:
        """Promote or demote a user; pass False for every right to demote."""
        return await self.call_method(
            "promoteChatMember", chat_id=chat_id, user_id=user_id, is_anonymous=is_anonymous,
            can_manage_chat=can_manage_chat, can_post_messages=can_post_messages,
            can_edit_messages=can_edit_messages, can_delete_messages=can_delete_messages,
            can_manage_video_chats=can_manage_video_chats, can_restrict_members=can_restrict_members,
            can_promote_members=can_promote_members, can_change_info=can_change_info,
            can_invite_users=can_invite_users, can_pin_messages=can_pin_messages,
        )

    async def set_chat_administrator_custom_title(self, chat_id: ChatRef, user_id: int, custom_title: str) -> bool:
        return await self.call_method(
            "setChatAdministratorCustomTitle", chat_id=chat_id, user_id=user_id, custom_title=custom_title,
        )

    async def ban_chat_sender_chat(self, chat_id: ChatRef, sender_chat_id: int) -> bool:
        """Ban a channel chat from posting on behalf of itself in a supergroup or channel."""
        return await self.call_method("banChatSenderChat", chat_id=chat_id, sender_chat_id=sender_chat_id)

    async def unban_chat_sender_chat(self, chat_id: ChatRef, sender_chat_id: int) -> bool:
        return await self.call_method("unbanChatSenderChat", chat_id=chat_id, sender_chat_id=sender_chat_id)

    async def set_chat_permissions(self, chat_id: ChatRef, permissions: ChatPermissions) -> bool:
        """Set default permissions for all members."""
        return await self.call_method("setChatPermissions", chat_id=chat_id, permissions=permissions)

    async def export_chat_invite_link(self, chat_id: ChatRef) -> str:
        """Generate a new primary invite link; returns the link."""
        return await self.call_method("exportChatInviteLink", chat_id=chat_id)

    async def create_chat_invite_link(self, chat_id: ChatRef, name: Optional[str] = None, expire_date: Optional[int] = None, member_limit: Optional[int] = None, creates_join_request: Optional[bool] = None) -> ChatInviteLink:
        return await self.call_method(
            "createChatInviteLink", chat_id=chat_id, name=name, expire_date=expire_date,
            member_limit=member_limit, creates_join_request=creates_join_request,
        )

    async def edit_chat_invite_link(self, chat_id: ChatRef, invite_link: str, name: Optional[str] = None, expire_date: Optional[int] = None, member_limit: Optional[int] = None, creates_join_request: Optional[bool] = None) -> ChatInviteLink:
        return await self.call_method(
            "editChatInviteLink", chat_id=chat_id, invite_link=invite_link, name=name, expire_date=expire_date,
            member_limit=member_limit, creates_join_request=creates_join_request,
        )

    async def revoke_chat_invite_link(self, chat_id: ChatRef, invite_link: str) -> ChatInviteLink:
        """Revoke a link created by the bot; returns the revoked link."""
        return await self.call_method("revokeChatInviteLink", chat_id=chat_id, invite_link=invite_link)

    async def approve_chat_join_request(self, chat_id: ChatRef, user_id: int) -> bool:
        return await self.call_method("approveChatJoinRequest", chat_id=chat_id, user_id=user_id)

    async def decline_chat_join_request(self, chat_id: ChatRef, user_id: int) -> bool:
        return await self.call_method("declineChatJoinRequest", chat_id=chat_id, user_id=user_id)

    async def set_chat_photo(self, chat_id: ChatRef, photo: FileRef) -> bool:
        """Set a new chat photo; the photo must be uploaded (local file or buffer)."""
        return await self.call_method("setChatPhoto", chat_id=chat_id, photo=photo)

    async def delete_chat_photo(self, chat_id: ChatRef) -> bool:
        return await self.call_method("deleteChatPhoto", chat_id=chat_id)

    async def set_chat_title(self, chat_id: ChatRef, title: str) -> bool:
        return await self.call_method("setChatTitle", chat_id=chat_id, title=title)

    async def set_chat_description(self, chat_id: ChatRef, description: Optional[str] = None) -> bool:
        return await self.call_method("setChatDescription", chat_id=chat_id, description=description)

    async def pin_chat_message(self, chat_id: ChatRef, message_id: int, disable_notification: Optional[bool] = None) -> bool:
        return await self.call_method(
            "pinChatMessage", chat_id=chat_id, message_id=message_id, disable_notification=disable_notification,
        )

    async def unpin_chat_message(self, chat_id: ChatRef, message_id: Optional[int] = None) -> bool:
        return await self.call_method("unpinChatMessage", chat_id=chat_id, message_id=message_id)

    async def unpin_all_chat_messages(self, chat_id: ChatRef) -> bool:
        return await self.call_method("unpinAllChatMessages", chat_id=chat_id)

    async def leave_chat(self, chat_id: ChatRef) -> bool:
        return await self.call_method("leaveChat", chat_id=chat_id)

    async def get_chat(self, chat_id: ChatRef) -> Chat:
        return await self.call_method("getChat", chat_id=chat_id)

    async def get_chat_administrators(self, chat_id: ChatRef) -> List[ChatMember]:
        return await self.call_method("getChatAdministrators", chat_id=chat_id)

    async def get_chat_member_count(self, chat_id: ChatRef) -> int:
        return await self.call_method("getChatMemberCount", chat_id=chat_id)

    async def get_chat_member(self, chat_id: ChatRef, user_id: int) -> ChatMember:
        return await self.call_method("getChatMember", chat_id=chat_id, user_id=user_id)

    async def set_chat_sticker_set(self, chat_id: ChatRef, sticker_set_name: str) -> bool:
        """Set the group sticker set of a supergroup."""
        return await self.call_method("setChatStickerSet", chat_id=chat_id, sticker_set_name=sticker_set_name)

    async def delete_chat_sticker_set(self, chat_id: ChatRef) -> bool:
        return await self.call_method("deleteChatStickerSet", chat_id=chat_id)

    async def answer_callback_query(self, callback_query_id: str, text: Optional[str] = None, show_alert: Optional[bool] = None, url: Optional[str] = None, cache_time: Optional[int] = None) -> bool:
        """Acknowledge a callback query so the spinner disappears for the user."""
        return await self.call_method(
            "answerCallbackQuery", callback_query_id=callback_query_id, text=text, show_alert=show_alert,
            url=url, cache_time=cache_time,
        )

    # ------------------------------------------------------------------
    #  Commands
    # ------------------------------------------------------------------

    async def set_my_commands(self, commands: List[BotCommand], scope: Optional[dict] = None, language_code: Optional[str] = None) -> bool:
        return await self.call_method("setMyCommands", commands=commands, scope=scope, language_code=language_code)

    async def get_my_commands(self, scope: Optional[dict] = None, language_code: Optional[str] = None) -> List[BotCommand]:
        return await self.call_method("getMyCommands", scope=scope, language_code=language_code)

    async def delete_my_commands(self, scope: Optional[dict] = None, language_code: Optional[str] = None) -> bool:
        return await self.call_method("deleteMyCommands", scope=scope, language_code=language_code)

    async def set_chat_menu_button(self, chat_id: Optional[ChatRef] = None, menu_button: Optional[MenuButton] = None) -> bool:
        """Change the menu button of a private chat, or the default one when *chat_id* is omitted."""
        return await self.call_method("setChatMenuButton", chat_id=chat_id, menu_button=menu_button)

    async def get_chat_menu_button(self, chat_id: Optional[ChatRef] = None) -> MenuButton:
        return await self.call_method("getChatMenuButton", chat_id=chat_id)

    async def set_my_default_administrator_rights(self, rights: Optional[ChatAdministratorRights] = None, for_channels: Optional[bool] = None) -> bool:
        """Change the rights requested when the bot is added to groups or channels as an admin."""
        return await self.call_method("setMyDefaultAdministratorRights", rights=rights, for_channels=for_channels)

    async def get_my_default_administrator_rights(self, for_channels: Optional[bool] = None) -> ChatAdministratorRights:
        return await self.call_method("getMyDefaultAdministratorRights", for_channels=for_channels)

    # ------------------------------------------------------------------
    #  Editing
    # ------------------------------------------------------------------

    async def edit_message_text(self, text: str, chat_id: Optional[ChatRef] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, parse_mode: Optional[str] = None, entities: Optional[List[MessageEntity]] = None, disable_web_page_preview: Optional[bool] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> MaybeMessage:
        """Edit a text message; returns the Message, or True for inline messages."""
        return await self.call_method(
            "editMessageText", text=text, chat_id=chat_id, message_id=message_id,
            inline_message_id=inline_message_id, parse_mode=parse_mode, entities=entities,
            disable_web_page_preview=disable_web_page_preview, reply_markup=reply_markup,
        )

    async def edit_message_caption(self, chat_id: Optional[ChatRef] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> MaybeMessage:
        return await self.call_method(
            "editMessageCaption", chat_id=chat_id, message_id=message_id, inline_message_id=inline_message_id,
            caption=caption, parse_mode=parse_mode, caption_entities=caption_entities, reply_markup=reply_markup,
        )

    async def edit_message_media(self, media: InputMedia, chat_id: Optional[ChatRef] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> MaybeMessage:
        """Replace the media of a message; a new file is uploaded via ``attach://``."""
        return await self.call_method(
            "editMessageMedia", media=media, chat_id=chat_id, message_id=message_id,
            inline_message_id=inline_message_id, reply_markup=reply_markup,
        )

    async def edit_message_reply_markup(self, chat_id: Optional[ChatRef] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> MaybeMessage:
        return await self.call_method(
            "editMessageReplyMarkup", chat_id=chat_id, message_id=message_id,
            inline_message_id=inline_message_id, reply_markup=reply_markup,
        )

    async def stop_poll(self, chat_id: ChatRef, message_id: int, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Poll:
        return await self.call_method("stopPoll", chat_id=chat_id, message_id=message_id, reply_markup=reply_markup)

    async def delete_message(self, chat_id: ChatRef, message_id: int) -> bool:
        return await self.call_method("deleteMessage", chat_id=chat_id, message_id=message_id)

    # ------------------------------------------------------------------
    #  Stickers
    # ------------------------------------------------------------------

    async def send_sticker(self, chat_id: ChatRef, sticker: FileRef, message_thread_id: Optional[int] = None, emoji: Optional[str] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send a static .WEBP, animated .TGS or video .WEBM sticker."""
        return await self.call_method(
            "sendSticker", chat_id=chat_id, sticker=sticker, message_thread_id=message_thread_id, emoji=emoji,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def get_sticker_set(self, name: str) -> StickerSet:
        return await self.call_method("getStickerSet", name=name)

    async def upload_sticker_file(self, user_id: int, png_sticker: FileRef) -> File:
        """Upload a .PNG sticker for later use in sticker-set methods."""
        return await self.call_method("uploadStickerFile", user_id=user_id, png_sticker=png_sticker)

    async def get_custom_emoji_stickers(self, custom_emoji_ids: List[str]) -> List[Sticker]:
        return await self.call_method("getCustomEmojiStickers", custom_emoji_ids=custom_emoji_ids)

    async def create_new_sticker_set(self, user_id: int, name: str, title: str, emojis: str, png_sticker: Optional[FileRef] = None, tgs_sticker: Optional[FileRef] = None, webm_sticker: Optional[FileRef] = None, sticker_type: Optional[str] = None, mask_position: Optional[MaskPosition] = None) -> bool:
        """Create a sticker set owned by *user_id*; exactly one of the sticker files is expected."""
        return await self.call_method(
            "createNewStickerSet", user_id=user_id, name=name, title=title, emojis=emojis, png_sticker=png_sticker,
            tgs_sticker=tgs_sticker, webm_sticker=webm_sticker, sticker_type=sticker_type,
            mask_position=mask_position,
        )

    async def add_sticker_to_set(self, user_id: int, name: str, emojis: str, png_sticker: Optional[FileRef] = None, tgs_sticker: Optional[FileRef] = None, webm_sticker: Optional[FileRef] = None, mask_position: Optional[MaskPosition] = None) -> bool:
        return await self.call_method(
            "addStickerToSet", user_id=user_id, name=name, emojis=emojis, png_sticker=png_sticker,
            tgs_sticker=tgs_sticker, webm_sticker=webm_sticker, mask_position=mask_position,
        )

    async def set_sticker_position_in_set(self, sticker: str, position: int) -> bool:
        return await self.call_method("setStickerPositionInSet", sticker=sticker, position=position)

    async def delete_sticker_from_set(self, sticker: str) -> bool:
        return await self.call_method("deleteStickerFromSet", sticker=sticker)

    async def set_sticker_set_thumb(self, name: str, user_id: int, thumb: Optional[FileRef] = None) -> bool:
        """Set the thumbnail of a sticker set; omit *thumb* to use the first sticker."""
        return await self.call_method("setStickerSetThumb", name=name, user_id=user_id, thumb=thumb)

    # ------------------------------------------------------------------
    #  Inline mode
    # ------------------------------------------------------------------

    async def answer_inline_query(self, inline_query_id: str, results: List[InlineQueryResult], cache_time: Optional[int] = None, is_personal: Optional[bool] = None, next_offset: Optional[str] = None, switch_pm_text: Optional[str] = None, switch_pm_parameter: Optional[str] = None) -> bool:
        """Send at most 50 results for an inline query."""
        return await self.call_method(
            "answerInlineQuery", inline_query_id=inline_query_id, results=results, cache_time=cache_time,
            is_personal=is_personal, next_offset=next_offset, switch_pm_text=switch_pm_text,
            switch_pm_parameter=switch_pm_parameter,
        )

    async def answer_web_app_query(self, web_app_query_id: str, result: InlineQueryResult) -> SentWebAppMessage:
        return await self.call_method("answerWebAppQuery", web_app_query_id=web_app_query_id, result=result)

    # ------------------------------------------------------------------
    #  Payments
    # ------------------------------------------------------------------

    async def send_invoice(self, chat_id: ChatRef, title: str, description: str, payload: str, provider_token: str, currency: str, prices: List[LabeledPrice], message_thread_id: Optional[int] = None, max_tip_amount: Optional[int] = None, suggested_tip_amounts: Optional[List[int]] = None, start_parameter: Optional[str] = None, provider_data: Optional[str] = None, photo_url: Optional[str] = None, photo_size: Optional[int] = None, photo_width: Optional[int] = None, photo_height: Optional[int] = None, need_name: Optional[bool] = None, need_phone_number: Optional[bool] = None, need_email: Optional[bool] = None, need_shipping_address: Optional[bool] = None, send_phone_number_to_provider: Optional[bool] = None, send_email_to_provider: Optional[bool] = None, is_flexible: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Message:
        """Send an invoice. Amounts are in the smallest units of *currency*."""
        return await self.call_method(
            "sendInvoice", chat_id=chat_id, title=title, description=description, payload=payload,
            provider_token=provider_token, currency=currency, prices=prices, message_thread_id=message_thread_id,
            max_tip_amount=max_tip_amount, suggested_tip_amounts=suggested_tip_amounts,
            start_parameter=start_parameter, provider_data=provider_data, photo_url=photo_url,
            photo_size=photo_size, photo_width=photo_width, photo_height=photo_height, need_name=need_name,
            need_phone_number=need_phone_number, need_email=need_email, need_shipping_address=need_shipping_address,
            send_phone_number_to_provider=send_phone_number_to_provider,
            send_email_to_provider=send_email_to_provider, is_flexible=is_flexible,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def create_invoice_link(self, title: str, description: str, payload: str, provider_token: str, currency: str, prices: List[LabeledPrice], max_tip_amount: Optional[int] = None, suggested_tip_amounts: Optional[List[int]] = None, provider_data: Optional[str] = None, photo_url: Optional[str] = None, photo_size: Optional[int] = None, photo_width: Optional[int] = None, photo_height: Optional[int] = None, need_name: Optional[bool] = None, need_phone_number: Optional[bool] = None, need_email: Optional[bool] = None, need_shipping_address: Optional[bool] = None, send_phone_number_to_provider: Optional[bool] = None, send_email_to_provider: Optional[bool] = None, is_flexible: Optional[bool] = None) -> str:
        """Create a link for an invoice; returns the link."""
        return await self.call_method(
            "createInvoiceLink", title=title, description=description, payload=payload,
            provider_token=provider_token, currency=currency, prices=prices, max_tip_amount=max_tip_amount,
            suggested_tip_amounts=suggested_tip_amounts, provider_data=provider_data, photo_url=photo_url,
            photo_size=photo_size, photo_width=photo_width, photo_height=photo_height, need_name=need_name,
            need_phone_number=need_phone_number, need_email=need_email, need_shipping_address=need_shipping_address,
            send_phone_number_to_provider=send_phone_number_to_provider,
            send_email_to_provider=send_email_to_provider, is_flexible=is_flexible,
        )

    async def answer_shipping_query(self, shipping_query_id: str, ok: bool, shipping_options: Optional[List[ShippingOption]] = None, error_message: Optional[str] = None) -> bool:
        return await self.call_method(
            "answerShippingQuery", shipping_query_id=shipping_query_id, ok=ok, shipping_options=shipping_options,
            error_message=error_message,
        )

    async def answer_pre_checkout_query(self, pre_checkout_query_id: str, ok: bool, error_message: Optional[str] = None) -> bool:
        """Confirm or reject a checkout; must be answered within 10 seconds."""
        return await self.call_method(
            "answerPreCheckoutQuery", pre_checkout_query_id=pre_checkout_query_id, ok=ok, error_message=error_message,
        )

    # ------------------------------------------------------------------
    #  Telegram Passport
    # ------------------------------------------------------------------

    async def set_passport_data_errors(self, user_id: int, errors: List[PassportElementError]) -> bool:
        """Tell a user which Passport elements must be resubmitted."""
        return await self.call_method("setPassportDataErrors", user_id=user_id, errors=errors)

    # ------------------------------------------------------------------
    #  Games
    # ------------------------------------------------------------------

    async def send_game(self, chat_id: int, game_short_name: str, message_thread_id: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_to_message_id: Optional[int] = None, allow_sending_without_reply: Optional[bool] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Message:
        return await self.call_method(
            "sendGame", chat_id=chat_id, game_short_name=game_short_name, message_thread_id=message_thread_id,
            disable_notification=disable_notification, protect_content=protect_content,
            reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        )

    async def set_game_score(self, user_id: int, score: int, force: Optional[bool] = None, disable_edit_message: Optional[bool] = None, chat_id: Optional[int] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None) -> MaybeMessage:
        """Set a user's score; returns the edited Message, or True for inline messages."""
        return await self.call_method(
            "setGameScore", user_id=user_id, score=score, force=force, disable_edit_message=disable_edit_message,
            chat_id=chat_id, message_id=message_id, inline_message_id=inline_message_id,
        )

    async def get_game_high_scores(self, user_id: int, chat_id: Optional[int] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None) -> List[GameHighScore]:
        return await self.call_method(
            "getGameHighScores", user_id=user_id, chat_id=chat_id, message_id=message_id,
            inline_message_id=inline_message_id,
        )
