"""Tests for the Pydantic result models."""

import os
import sys

import pytest
from pydantic import ValidationError

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botapi.models import (
    CallbackQuery,
    Chat,
    ChatMember,
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    Message,
    Poll,
    ReplyKeyboardRemove,
    ResponseParameters,
    Update,
    User,
    UserProfilePhotos,
)


# ── User / Chat ──────────────────────────────────────────────────────────────


class TestUserModel:
    """Validate the User schema."""

    def test_minimal(self) -> None:
        user = User(id=1, is_bot=False, first_name="Ann")
        assert user.username is None

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            User(id=1, is_bot=False)  # missing first_name

    def test_extra_fields_kept(self) -> None:
        user = User.model_validate({"id": 1, "is_bot": False, "first_name": "A", "added_later": True})
        assert user.model_extra == {"added_later": True}


class TestChatModel:
    def test_pinned_message_nested(self) -> None:
        chat = Chat.model_validate({
            "id": -100,
            "type": "supergroup",
            "title": "Group",
            "pinned_message": {"message_id": 3, "date": 0, "chat": {"id": -100, "type": "supergroup"}},
        })
        assert isinstance(chat.pinned_message, Message)
        assert chat.pinned_message.message_id == 3


# ── Message / Update ─────────────────────────────────────────────────────────


class TestMessageModel:
    """Validate the ``from`` alias and nested content."""

    def test_from_alias(self) -> None:
        msg = Message.model_validate({
            "message_id": 1,
            "date": 0,
            "chat": {"id": 5, "type": "private"},
            "from": {"id": 5, "is_bot": False, "first_name": "U"},
        })
        assert msg.from_user.id == 5
        assert msg.model_dump(by_alias=True, exclude_none=True)["from"]["id"] == 5

    def test_reply_to_message(self) -> None:
        msg = Message.model_validate({
            "message_id": 2,
            "date": 0,
            "chat": {"id": 5, "type": "private"},
            "reply_to_message": {"message_id": 1, "date": 0, "chat": {"id": 5, "type": "private"}},
        })
        assert msg.reply_to_message.message_id == 1

    def test_update_with_callback_query(self) -> None:
        update = Update.model_validate({
            "update_id": 10,
            "callback_query": {
                "id": "cb",
                "from": {"id": 1, "is_bot": False, "first_name": "A"},
                "chat_instance": "ci",
                "data": "yes",
            },
        })
        assert isinstance(update.callback_query, CallbackQuery)
        assert update.callback_query.from_user.first_name == "A"


# ── Misc ─────────────────────────────────────────────────────────────────────


class TestMiscModels:
    def test_chat_member(self) -> None:
        member = ChatMember.model_validate({
            "status": "administrator",
            "user": {"id": 1, "is_bot": False, "first_name": "A"},
            "can_delete_messages": True,
        })
        assert member.can_delete_messages is True

    def test_poll(self) -> None:
        poll = Poll.model_validate({
            "id": "p", "question": "?", "options": [{"text": "a", "voter_count": 2}],
            "total_voter_count": 2, "is_closed": True, "is_anonymous": True, "type": "regular",
            "allows_multiple_answers": False,
        })
        assert poll.options[0].voter_count == 2

    def test_profile_photos(self) -> None:
        photos = UserProfilePhotos.model_validate({
            "total_count": 1,
            "photos": [[{"file_id": "f", "file_unique_id": "u", "width": 10, "height": 10}]],
        })
        assert photos.photos[0][0].width == 10

    def test_response_parameters_optional(self) -> None:
        assert ResponseParameters().retry_after is None

    def test_keyboard_markups(self) -> None:
        markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="x", callback_data="1")]])
        assert markup.inline_keyboard[0][0].callback_data == "1"
        assert ReplyKeyboardRemove().remove_keyboard is True
        assert ForceReply().force_reply is True

    def test_remove_keyboard_must_be_true(self) -> None:
        with pytest.raises(ValidationError):
            ReplyKeyboardRemove(remove_keyboard=False)
