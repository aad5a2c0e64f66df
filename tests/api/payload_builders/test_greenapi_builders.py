"""Testes para api.payload_builders.greenapi.

Foco no contrato de omissão de campos opcionais e na codificação de
arquivos; formatos completos por endpoint são cobertos pelos testes do
cliente.
"""

from __future__ import annotations

import base64
from pathlib import Path

import pytest

from api.connectors.greenapi.errors import ValidationError
from api.payload_builders.greenapi.base import build_chat_payload, compact_payload
from api.payload_builders.greenapi.groups import build_create_group_payload
from api.payload_builders.greenapi.media import (
    build_file_upload_payload,
    build_picture_payload,
    encode_file,
)
from api.payload_builders.greenapi.messaging import (
    Contact,
    InteractiveButton,
    build_send_message_payload,
    build_typing_payload,
)
from api.payload_builders.greenapi.statuses import build_status_media_payload


class TestCompactPayload:
    """Testes para compact_payload."""

    def test_drops_none_and_empty_values(self) -> None:
        payload = {"a": None, "b": "", "c": [], "d": {}, "e": "x"}
        assert compact_payload(payload) == {"e": "x"}

    def test_keeps_false_and_zero(self) -> None:
        assert compact_payload({"flag": False, "count": 0, "lat": 0.0}) == {
            "flag": False,
            "count": 0,
            "lat": 0.0,
        }

    def test_present_values_are_not_reencoded(self) -> None:
        nested = {"k": [1, 2]}
        assert compact_payload({"nested": nested})["nested"] is nested


class TestMessagingBuilders:
    """Testes dos builders de mensagem."""

    def test_send_message_without_optionals(self) -> None:
        body = build_send_message_payload("1@c.us", "oi")
        assert body == {"chatId": "1@c.us", "message": "oi"}

    def test_send_message_with_optionals(self) -> None:
        body = build_send_message_payload("1@c.us", "oi", quoted_message_id="Q", link_preview=True)
        assert body["quotedMessageId"] == "Q"
        assert body["linkPreview"] is True

    def test_chat_payload_puts_chat_id_first(self) -> None:
        assert next(iter(build_chat_payload("1@c.us", count=3))) == "chatId"

    def test_typing_payload(self) -> None:
        assert build_typing_payload("1@c.us") == {"chatId": "1@c.us"}
        assert build_typing_payload("1@c.us", typing_time_ms=3000)["typingTime"] == 3000

    def test_button_and_contact_omit_absent_fields(self) -> None:
        assert InteractiveButton("b1", "Abrir", "url", url="https://x.example").to_payload() == {
            "type": "url",
            "buttonId": "b1",
            "buttonText": "Abrir",
            "url": "https://x.example",
        }
        assert Contact(phone_contact=27731234567).to_payload() == {"phoneContact": 27731234567}


class TestMediaBuilders:
    """Testes de arquivos e mídia."""

    def test_encode_file(self, tmp_path: Path) -> None:
        file_path = tmp_path / "photo.png"
        file_path.write_bytes(b"\x89PNG")

        encoded = encode_file(file_path)

        assert base64.b64decode(encoded.data) == b"\x89PNG"
        assert encoded.file_name == "photo.png"
        assert encoded.mime_type == "image/png"
        assert encoded.size_bytes == 4

    def test_encode_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError, match="file not found"):
            encode_file(tmp_path / "missing.png")

    def test_encode_file_over_limit_raises(self, tmp_path: Path) -> None:
        file_path = tmp_path / "big.bin"
        file_path.write_bytes(b"x" * 10)
        with pytest.raises(ValidationError, match="maximum size"):
            encode_file(file_path, max_size_bytes=5)

    def test_upload_payload_prefers_explicit_name(self, tmp_path: Path) -> None:
        file_path = tmp_path / "a.txt"
        file_path.write_bytes(b"hi")
        body = build_file_upload_payload("1@c.us", encode_file(file_path), file_name="b.txt")
        assert body["fileName"] == "b.txt"
        assert "caption" not in body

    def test_picture_payload(self, tmp_path: Path) -> None:
        file_path = tmp_path / "p.jpg"
        file_path.write_bytes(b"jpg")
        encoded = encode_file(file_path)
        assert build_picture_payload(encoded) == {"file": encoded.data}
        assert build_picture_payload(encoded, group_id="1@g.us")["groupId"] == "1@g.us"


class TestGroupAndStatusBuilders:
    """Testes de grupos e status."""

    def test_create_group_payload(self) -> None:
        assert build_create_group_payload("G", ["1@c.us"]) == {
            "groupName": "G",
            "chatIds": ["1@c.us"],
        }

    def test_status_payload_omits_empty_participants(self) -> None:
        body = build_status_media_payload("https://x.example/a.mp3", "a.mp3", participants=[])
        assert body == {"urlFile": "https://x.example/a.mp3", "fileName": "a.mp3"}
