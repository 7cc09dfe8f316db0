"""Tests for BotClient endpoint wrappers and lifecycle."""

import json
import os
import re
import sys
from typing import List, Tuple
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botapi.client import BotClient
from botapi.descriptors import METHODS, MethodCall
from botapi.exceptions import InvalidValueError, RemoteError
from botapi.models import (
    ChatAdministratorRights,
    ChatMember,
    ChatPermissions,
    File,
    GameHighScore,
    LabeledPrice,
    Message,
    MessageId,
    User,
)
from botapi.transport import RequestsTransport, TransportResponse
from botapi.values import BufferedFile, ChatId, InputMediaPhoto


class RecordingTransport:
    """Returns a fixed envelope for every call and records what was sent."""

    def __init__(self, result: object = True, status: int = 200, ok: bool = True) -> None:
        envelope = {"ok": ok, "result": result} if ok else {"ok": False, **result}  # type: ignore[dict-item]
        self.status = status
        self.body = json.dumps(envelope).encode("utf-8")
        self.posted: List[Tuple[str, str, bytes]] = []
        self.closed = False

    async def post(self, method: str, content_type: str, body: bytes) -> TransportResponse:
        self.posted.append((method, content_type, body))
        return TransportResponse(self.status, self.body)

    async def download(self, file_path: str) -> bytes:
        return f"content of {file_path}".encode()

    def close(self) -> None:
        self.closed = True

    def last_json(self) -> dict:
        return json.loads(self.posted[-1][2])


_ME = {"id": 99, "is_bot": True, "first_name": "Bot", "username": "test_bot"}
_MSG = {"message_id": 1, "date": 1700000000, "chat": {"id": 42, "type": "private"}}


# ── Construction ─────────────────────────────────────────────────────────────


class TestClientInit:
    """Validate client construction helpers."""

    def test_with_token(self) -> None:
        client = BotClient.with_token("123:ABC", timeout=30)
        transport = client._transport
        assert isinstance(transport, RequestsTransport)
        assert transport.method_url("getMe") == "https://api.telegram.org/bot123:ABC/getMe"
        assert transport._timeout == 30

    def test_from_config(self) -> None:
        fake_config = MagicMock(
            BOT_TOKEN="1:X", API_URL="http://local/bot", FILE_URL="http://local/file/bot", REQUEST_TIMEOUT=5,
        )
        with patch.dict(sys.modules, {"config": fake_config}):
            client = BotClient.from_config()
        assert client._transport.method_url("getMe") == "http://local/bot1:X/getMe"
        assert client._transport._timeout == 5

    @pytest.mark.asyncio
    async def test_connect_verifies_token(self) -> None:
        with patch.object(BotClient, "get_me", new_callable=AsyncMock) as mock_get_me:
            mock_get_me.return_value = User(**_ME)
            client = await BotClient.connect("1:X")
        mock_get_me.assert_awaited_once()
        assert isinstance(client, BotClient)

    @pytest.mark.asyncio
    async def test_connect_bad_token(self) -> None:
        with patch.object(BotClient, "get_me", new_callable=AsyncMock) as mock_get_me, \
                patch.object(RequestsTransport, "close") as mock_close:
            mock_get_me.side_effect = RemoteError(401, "Unauthorized")
            with pytest.raises(RemoteError):
                await BotClient.connect("bad")
        mock_close.assert_called_once()

    @pytest.mark.asyncio
    async def test_async_context_closes_transport(self) -> None:
        transport = RecordingTransport()
        async with BotClient(transport) as client:
            assert isinstance(client, BotClient)
        assert transport.closed is True


# ── Endpoint methods ─────────────────────────────────────────────────────────


class TestEndpointMethods:
    """Spot-check selected endpoint wrapper methods."""

    @pytest.mark.asyncio
    async def test_get_me(self) -> None:
        transport = RecordingTransport(_ME)
        me = await BotClient(transport).get_me()
        assert isinstance(me, User)
        assert me.username == "test_bot"
        assert transport.posted[0][0] == "getMe"

    @pytest.mark.asyncio
    async def test_send_message(self) -> None:
        transport = RecordingTransport(_MSG)
        msg = await BotClient(transport).send_message(chat_id=42, text="hello", parse_mode="HTML")
        assert isinstance(msg, Message)
        assert transport.last_json() == {"chat_id": 42, "text": "hello", "parse_mode": "HTML"}

    @pytest.mark.asyncio
    async def test_send_message_to_username(self) -> None:
        transport = RecordingTransport(_MSG)
        await BotClient(transport).send_message(chat_id=ChatId.username("@news"), text="x")
        assert transport.last_json()["chat_id"] == "@news"

    @pytest.mark.asyncio
    async def test_copy_message(self) -> None:
        transport = RecordingTransport({"message_id": 77})
        result = await BotClient(transport).copy_message(chat_id=1, from_chat_id="@src", message_id=5)
        assert result == MessageId(message_id=77)

    @pytest.mark.asyncio
    async def test_send_photo_upload(self) -> None:
        transport = RecordingTransport(_MSG)
        await BotClient(transport).send_photo(chat_id=42, photo=BufferedFile("cat.jpg", b"jpg"), caption="c")
        method, content_type, body = transport.posted[0]
        assert method == "sendPhoto"
        assert content_type.startswith("multipart/form-data")
        assert b'filename="cat.jpg"' in body

    @pytest.mark.asyncio
    async def test_send_media_group(self) -> None:
        transport = RecordingTransport([_MSG, _MSG])
        msgs = await BotClient(transport).send_media_group(
            chat_id=42, media=[InputMediaPhoto(media="a"), InputMediaPhoto(media="b")],
        )
        assert len(msgs) == 2
        assert all(isinstance(m, Message) for m in msgs)

    @pytest.mark.asyncio
    async def test_get_chat_administrators(self) -> None:
        transport = RecordingTransport([{"status": "creator", "user": _ME}])
        admins = await BotClient(transport).get_chat_administrators(chat_id=-100)
        assert isinstance(admins[0], ChatMember)
        assert admins[0].status == "creator"

    @pytest.mark.asyncio
    async def test_export_chat_invite_link(self) -> None:
        transport = RecordingTransport("https://t.me/+abc")
        assert await BotClient(transport).export_chat_invite_link(chat_id=-100) == "https://t.me/+abc"

    @pytest.mark.asyncio
    async def test_edit_message_text_inline(self) -> None:
        transport = RecordingTransport(True)
        result = await BotClient(transport).edit_message_text(text="new", inline_message_id="abc")
        assert result is True
        assert transport.last_json() == {"inline_message_id": "abc", "text": "new"}

    @pytest.mark.asyncio
    async def test_answer_callback_query(self) -> None:
        transport = RecordingTransport(True)
        assert await BotClient(transport).answer_callback_query("cb1", text="Done") is True
        assert transport.last_json() == {"callback_query_id": "cb1", "text": "Done"}

    @pytest.mark.asyncio
    async def test_remote_error_raised(self) -> None:
        transport = RecordingTransport({"error_code": 403, "description": "Forbidden"}, status=403, ok=False)
        with pytest.raises(RemoteError) as exc_info:
            await BotClient(transport).send_message(chat_id=1, text="x")
        assert exc_info.value.error_code == 403

    @pytest.mark.asyncio
    async def test_invalid_value_raised_before_send(self) -> None:
        transport = RecordingTransport()
        with pytest.raises(InvalidValueError):
            await BotClient(transport).send_message(chat_id=1.5, text="x")  # type: ignore[arg-type]
        assert transport.posted == []

    @pytest.mark.asyncio
    async def test_set_game_score_inline(self) -> None:
        transport = RecordingTransport(True)
        result = await BotClient(transport).set_game_score(user_id=5, score=120, inline_message_id="im1")
        assert result is True
        assert transport.last_json() == {"user_id": 5, "score": 120, "inline_message_id": "im1"}

    @pytest.mark.asyncio
    async def test_set_game_score_in_chat(self) -> None:
        transport = RecordingTransport(_MSG)
        result = await BotClient(transport).set_game_score(user_id=5, score=120, chat_id=42, message_id=1)
        assert isinstance(result, Message)

    @pytest.mark.asyncio
    async def test_get_game_high_scores(self) -> None:
        transport = RecordingTransport([{"position": 1, "user": _ME, "score": 300}])
        scores = await BotClient(transport).get_game_high_scores(user_id=99, chat_id=42, message_id=1)
        assert scores == [GameHighScore(position=1, user=User(**_ME), score=300)]
        assert transport.posted[0][0] == "getGameHighScores"

    @pytest.mark.asyncio
    async def test_restrict_chat_member(self) -> None:
        transport = RecordingTransport(True)
        await BotClient(transport).restrict_chat_member(
            chat_id=-100, user_id=7, permissions=ChatPermissions(can_send_messages=False), until_date=1700000000,
        )
        assert transport.last_json() == {
            "chat_id": -100, "user_id": 7, "permissions": {"can_send_messages": False}, "until_date": 1700000000,
        }

    @pytest.mark.asyncio
    async def test_send_invoice_prices(self) -> None:
        transport = RecordingTransport(_MSG)
        await BotClient(transport).send_invoice(
            chat_id=42, title="T", description="D", payload="p1", provider_token="tok", currency="EUR",
            prices=[LabeledPrice(label="Item", amount=1000)],
        )
        assert transport.last_json()["prices"] == [{"label": "Item", "amount": 1000}]

    @pytest.mark.asyncio
    async def test_create_new_sticker_set_upload(self) -> None:
        transport = RecordingTransport(True)
        ok = await BotClient(transport).create_new_sticker_set(
            user_id=7, name="cats_by_test_bot", title="Cats", emojis="x", png_sticker=BufferedFile("c.png", b"PNG"),
        )
        assert ok is True
        method, content_type, body = transport.posted[0]
        assert method == "createNewStickerSet"
        assert content_type.startswith("multipart/form-data")
        assert b'name="png_sticker"; filename="c.png"' in body

    @pytest.mark.asyncio
    async def test_get_my_default_administrator_rights(self) -> None:
        rights = {
            "is_anonymous": False, "can_manage_chat": True, "can_delete_messages": True,
            "can_manage_video_chats": False, "can_restrict_members": True, "can_promote_members": False,
            "can_change_info": False, "can_invite_users": True,
        }
        transport = RecordingTransport(rights)
        result = await BotClient(transport).get_my_default_administrator_rights(for_channels=False)
        assert isinstance(result, ChatAdministratorRights)
        assert result.can_restrict_members is True
        assert transport.last_json() == {"for_channels": False}

    def test_every_method_has_a_wrapper(self) -> None:
        for name in METHODS:
            snake = re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
            assert callable(getattr(BotClient, snake, None)), name

    def test_wrappers_go_through_call_method(self) -> None:
        assert not hasattr(BotClient, "_call")


# ── Generic calls and downloads ──────────────────────────────────────────────


class TestGenericCalls:
    @pytest.mark.asyncio
    async def test_call_method(self) -> None:
        transport = RecordingTransport(5)
        count = await BotClient(transport).call_method("getChatMemberCount", chat_id="@grp")
        assert count == 5
        assert transport.posted[0][0] == "getChatMemberCount"

    @pytest.mark.asyncio
    async def test_call_prebuilt(self) -> None:
        transport = RecordingTransport(True)
        call = MethodCall.build("deleteMessage", chat_id=1, message_id=2)
        assert await BotClient(transport).call(call) is True

    @pytest.mark.asyncio
    async def test_get_file_then_download(self) -> None:
        transport = RecordingTransport({"file_id": "f", "file_unique_id": "u", "file_path": "docs/a.txt"})
        client = BotClient(transport)
        info = await client.get_file("f")
        assert isinstance(info, File)
        assert await client.download_file(info.file_path) == b"content of docs/a.txt"
