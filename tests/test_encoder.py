"""Tests for RequestEncoder: mode selection, attachments, and field naming."""

import json
import os
import pathlib
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botapi.descriptors import MethodCall
from botapi.encoder import (
    JSON_CONTENT_TYPE,
    AttachmentRegistry,
    EncodingMode,
    RequestEncoder,
    form_text,
    media_part_name,
)
from botapi.exceptions import AttachmentIOError, InvalidValueError
from botapi.models import InlineKeyboardButton, InlineKeyboardMarkup, MaskPosition
from botapi.values import (
    BufferedFile,
    FileId,
    InputMediaPhoto,
    InputMediaVideo,
    LocalFile,
)


@pytest.fixture()
def encoder() -> RequestEncoder:
    return RequestEncoder()


# ── JSON mode ────────────────────────────────────────────────────────────────


class TestJsonEncoding:
    """Calls without uploads are sent as a JSON object."""

    def test_send_message(self, encoder: RequestEncoder) -> None:
        req = encoder.encode(MethodCall.build("sendMessage", chat_id=42, text="héllo"))
        assert req.mode is EncodingMode.JSON
        assert req.content_type == JSON_CONTENT_TYPE
        assert json.loads(req.body.decode("utf-8")) == {"chat_id": 42, "text": "héllo"}
        assert req.attachments == {}

    def test_no_params(self, encoder: RequestEncoder) -> None:
        req = encoder.encode(MethodCall.build("getMe"))
        assert req.body == b"{}"

    def test_remote_file_stays_json(self, encoder: RequestEncoder) -> None:
        req = encoder.encode(MethodCall.build("sendPhoto", chat_id="@chan", photo=FileId("AgAD")))
        assert req.mode is EncodingMode.JSON
        assert req.payload == {"chat_id": "@chan", "photo": "AgAD"}

    def test_reply_markup_nested(self, encoder: RequestEncoder) -> None:
        markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="Go", url="https://x.org")]])
        req = encoder.encode(MethodCall.build("sendMessage", chat_id=1, text="t", reply_markup=markup))
        assert req.payload["reply_markup"] == {"inline_keyboard": [[{"text": "Go", "url": "https://x.org"}]]}

    def test_media_group_by_file_id(self, encoder: RequestEncoder) -> None:
        group = [InputMediaPhoto(media="a"), InputMediaPhoto(media="b", caption="second")]
        req = encoder.encode(MethodCall.build("sendMediaGroup", chat_id=1, media=group))
        assert req.mode is EncodingMode.JSON
        assert req.payload["media"] == [
            {"type": "photo", "media": "a"},
            {"type": "photo", "media": "b", "caption": "second"},
        ]

    def test_missing_required(self, encoder: RequestEncoder) -> None:
        with pytest.raises(InvalidValueError) as exc_info:
            encoder.encode(MethodCall.build("sendMessage", chat_id=1))
        assert exc_info.value.field == "text"


# ── Multipart mode ───────────────────────────────────────────────────────────


class TestMultipartEncoding:
    """Uploads switch the call to multipart/form-data."""

    def test_top_level_upload(self, encoder: RequestEncoder) -> None:
        call = MethodCall.build(
            "sendPhoto", chat_id=42, photo=BufferedFile("cat.jpg", b"\xff\xd8jpeg"), caption="hi",
            disable_notification=True,
        )
        req = encoder.encode(call)
        assert req.mode is EncodingMode.MULTIPART
        assert req.content_type.startswith("multipart/form-data; boundary=")
        assert req.form_fields == {"chat_id": "42", "caption": "hi", "disable_notification": "true"}
        assert req.attachments == {"photo": ("cat.jpg", b"\xff\xd8jpeg")}
        assert b'name="photo"; filename="cat.jpg"' in req.body
        assert b"\xff\xd8jpeg" in req.body
        assert b"Content-Type: image/jpeg" in req.body

    def test_structured_field_is_json_text(self, encoder: RequestEncoder) -> None:
        markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="A", callback_data="a")]])
        call = MethodCall.build("sendDocument", chat_id=1, document=BufferedFile("a.txt", b"x"), reply_markup=markup)
        req = encoder.encode(call)
        assert json.loads(req.form_fields["reply_markup"]) == {
            "inline_keyboard": [[{"text": "A", "callback_data": "a"}]]
        }

    def test_local_file(self, encoder: RequestEncoder, tmp_path: pathlib.Path) -> None:
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF-1.4")
        req = encoder.encode(MethodCall.build("sendDocument", chat_id=1, document=LocalFile(path)))
        assert req.attachments == {"document": ("report.pdf", b"%PDF-1.4")}

    def test_missing_local_file(self, encoder: RequestEncoder, tmp_path: pathlib.Path) -> None:
        call = MethodCall.build("sendDocument", chat_id=1, document=LocalFile(tmp_path / "nope.pdf"))
        with pytest.raises(AttachmentIOError):
            encoder.encode(call)

    def test_document_and_thumb(self, encoder: RequestEncoder) -> None:
        call = MethodCall.build(
            "sendDocument", chat_id=1, document=BufferedFile("a.bin", b"A"), thumb=BufferedFile("t.jpg", b"T"),
        )
        req = encoder.encode(call)
        assert set(req.attachments) == {"document", "thumb"}

    def test_sticker_set_upload(self, encoder: RequestEncoder) -> None:
        call = MethodCall.build(
            "createNewStickerSet", user_id=7, name="cats_by_test_bot", title="Cats", emojis="🐱",
            webm_sticker=BufferedFile("cat.webm", b"WEBM"), sticker_type="mask",
            mask_position=MaskPosition(point="eyes", x_shift=0.0, y_shift=-0.5, scale=1.5),
        )
        req = encoder.encode(call)
        assert req.mode is EncodingMode.MULTIPART
        assert req.attachments == {"webm_sticker": ("cat.webm", b"WEBM")}
        assert req.form_fields["user_id"] == "7"
        assert req.form_fields["emojis"] == "🐱"
        assert json.loads(req.form_fields["mask_position"]) == {
            "point": "eyes", "x_shift": 0.0, "y_shift": -0.5, "scale": 1.5,
        }

    def test_sticker_set_thumb_by_file_id_stays_json(self, encoder: RequestEncoder) -> None:
        call = MethodCall.build("setStickerSetThumb", name="cats_by_test_bot", user_id=7, thumb=FileId("AAQ"))
        req = encoder.encode(call)
        assert req.mode is EncodingMode.JSON
        assert req.payload == {"name": "cats_by_test_bot", "user_id": 7, "thumb": "AAQ"}

    def test_media_group_placeholders(self, encoder: RequestEncoder) -> None:
        group = [
            InputMediaPhoto(media=BufferedFile("one.jpg", b"1")),
            InputMediaPhoto(media=FileId("remote")),
            InputMediaVideo(media=BufferedFile("three.mp4", b"3"), thumb=BufferedFile("th.jpg", b"t")),
        ]
        req = encoder.encode(MethodCall.build("sendMediaGroup", chat_id=1, media=group))
        assert req.mode is EncodingMode.MULTIPART
        assert json.loads(req.form_fields["media"]) == [
            {"type": "photo", "media": "attach://file-0"},
            {"type": "photo", "media": "remote"},
            {"type": "video", "media": "attach://file-2", "thumb": "attach://file-2-thumb"},
        ]
        assert list(req.attachments) == ["file-0", "file-2", "file-2-thumb"]

    def test_every_placeholder_has_a_part(self, encoder: RequestEncoder) -> None:
        group = [InputMediaPhoto(media=BufferedFile(f"{i}.jpg", b"x")) for i in range(4)]
        req = encoder.encode(MethodCall.build("sendMediaGroup", chat_id=1, media=group))
        refs = [entry["media"][len("attach://"):] for entry in json.loads(req.form_fields["media"])]
        assert sorted(refs) == sorted(req.attachments)
        assert len(set(refs)) == 4

    def test_edit_message_media(self, encoder: RequestEncoder) -> None:
        call = MethodCall.build(
            "editMessageMedia", chat_id=1, message_id=5, media=InputMediaPhoto(media=BufferedFile("new.png", b"p")),
        )
        req = encoder.encode(call)
        assert json.loads(req.form_fields["media"]) == {"type": "photo", "media": "attach://file-0"}
        assert req.form_fields["message_id"] == "5"
        assert "file-0" in req.attachments

    def test_omitted_optionals_absent(self, encoder: RequestEncoder) -> None:
        req = encoder.encode(MethodCall.build("sendPhoto", chat_id=1, photo=BufferedFile("a.png", b"a")))
        assert set(req.form_fields) == {"chat_id"}
        assert b'name="caption"' not in req.body


# ── Helpers ──────────────────────────────────────────────────────────────────


class TestAttachmentRegistry:
    """Part names never collide within one request."""

    def test_collision_gets_suffix(self) -> None:
        registry = AttachmentRegistry()
        registry.reserve("photo")
        first = registry.add("photo", BufferedFile("a.jpg", b"a"), "photo")
        second = registry.add("photo", BufferedFile("b.jpg", b"b"), "photo")
        assert (first, second) == ("photo-1", "photo-2")
        assert "photo" in registry

    def test_unknown_mimetype_fallback(self) -> None:
        registry = AttachmentRegistry()
        registry.add("blob", BufferedFile("data", b"\x00"), "blob")
        assert registry.parts() == [("blob", ("data", b"\x00", "application/octet-stream"))]

    def test_invalid_file_rejected(self) -> None:
        with pytest.raises(InvalidValueError):
            AttachmentRegistry().add("doc", BufferedFile("", b"x"), "document")


class TestFormHelpers:
    def test_form_text(self) -> None:
        assert form_text("plain") == "plain"
        assert form_text(12) == "12"
        assert form_text(False) == "false"
        assert form_text(["a", "b"]) == '["a", "b"]'

    def test_media_part_name(self) -> None:
        assert media_part_name(0, "media") == "file-0"
        assert media_part_name(3, "thumb") == "file-3-thumb"
