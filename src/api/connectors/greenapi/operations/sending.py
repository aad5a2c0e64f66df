"""Operações de envio de mensagens."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from api.connectors.greenapi.models import ApiResult
from api.normalizers.phone import resolve_chat_id
from api.payload_builders.greenapi.media import (
    build_file_by_url_payload,
    build_file_upload_payload,
    encode_file,
)
from api.payload_builders.greenapi.messaging import (
    Contact,
    InteractiveButton,
    build_contact_payload,
    build_forward_payload,
    build_interactive_buttons_payload,
    build_location_payload,
    build_poll_payload,
    build_send_message_payload,
    build_typing_payload,
)
from api.validators.greenapi.messaging import (
    validate_caption,
    validate_file_reference,
    validate_forward,
    validate_interactive_buttons,
    validate_location,
    validate_message_text,
    validate_poll,
    validate_typing_time,
)
from app.constants.greenapi import Endpoint

from .base import OperationBase


class SendingOperations(OperationBase):
    """sendMessage, sendFile*, sendLocation, sendContact, sendPoll, ..."""

    def send_message(
        self,
        recipient: str,
        message: str,
        *,
        quoted_message_id: str | None = None,
        link_preview: bool | None = None,
    ) -> ApiResult[Any]:
        """Envia mensagem de texto.

        Args:
            recipient: Número bruto ou chatId ("...@c.us" / "...@g.us")
            message: Texto da mensagem
            quoted_message_id: ID da mensagem citada
            link_preview: Liga/desliga preview de links (omitido se None)

        Returns:
            ApiResult com {"idMessage": ...}

        Raises:
            ValidationError: Se destinatário ou texto inválidos
        """
        validate_message_text(message)
        body = build_send_message_payload(
            resolve_chat_id(recipient),
            message,
            quoted_message_id=quoted_message_id,
            link_preview=link_preview,
        )
        return self._call(Endpoint.SEND_MESSAGE, body=body)

    def send_file_by_upload(
        self,
        recipient: str,
        path: str | Path,
        *,
        file_name: str | None = None,
        caption: str | None = None,
        quoted_message_id: str | None = None,
    ) -> ApiResult[Any]:
        """Envia arquivo local, embutido em base64 no corpo JSON."""
        validate_caption(caption)
        chat_id = resolve_chat_id(recipient)
        encoded = encode_file(path, self._settings.media_max_size_bytes)
        body = build_file_upload_payload(
            chat_id,
            encoded,
            file_name=file_name,
            caption=caption,
            quoted_message_id=quoted_message_id,
        )
        return self._call(Endpoint.SEND_FILE_BY_UPLOAD, body=body)

    def send_file_by_url(
        self,
        recipient: str,
        url_file: str,
        file_name: str,
        *,
        caption: str | None = None,
        quoted_message_id: str | None = None,
    ) -> ApiResult[Any]:
        validate_file_reference(url_file, file_name)
        validate_caption(caption)
        body = build_file_by_url_payload(
            resolve_chat_id(recipient),
            url_file,
            file_name,
            caption=caption,
            quoted_message_id=quoted_message_id,
        )
        return self._call(Endpoint.SEND_FILE_BY_URL, body=body)

    def send_location(
        self,
        recipient: str,
        latitude: float,
        longitude: float,
        *,
        name_location: str | None = None,
        address: str | None = None,
        quoted_message_id: str | None = None,
    ) -> ApiResult[Any]:
        validate_location(latitude, longitude)
        body = build_location_payload(
            resolve_chat_id(recipient),
            latitude,
            longitude,
            name_location=name_location,
            address=address,
            quoted_message_id=quoted_message_id,
        )
        return self._call(Endpoint.SEND_LOCATION, body=body)

    def send_contact(
        self,
        recipient: str,
        contact: Contact,
        *,
        quoted_message_id: str | None = None,
    ) -> ApiResult[Any]:
        body = build_contact_payload(
            resolve_chat_id(recipient),
            contact,
            quoted_message_id=quoted_message_id,
        )
        return self._call(Endpoint.SEND_CONTACT, body=body)

    def send_poll(
        self,
        recipient: str,
        question: str,
        options: Sequence[str],
        *,
        multiple_answers: bool | None = None,
        quoted_message_id: str | None = None,
    ) -> ApiResult[Any]:
        """Envia enquete (2 a 12 opções), validada antes de qualquer IO."""
        validate_poll(question, options)
        body = build_poll_payload(
            resolve_chat_id(recipient),
            question,
            options,
            multiple_answers=multiple_answers,
            quoted_message_id=quoted_message_id,
        )
        return self._call(Endpoint.SEND_POLL, body=body)

    def forward_messages(
        self,
        recipient: str,
        chat_id_from: str,
        message_ids: Sequence[str],
    ) -> ApiResult[Any]:
        validate_forward(message_ids)
        body = build_forward_payload(
            resolve_chat_id(recipient),
            resolve_chat_id(chat_id_from),
            message_ids,
        )
        return self._call(Endpoint.FORWARD_MESSAGES, body=body)

    def send_interactive_buttons(
        self,
        recipient: str,
        body_text: str,
        buttons: Sequence[InteractiveButton],
        *,
        header: str | None = None,
        footer: str | None = None,
    ) -> ApiResult[Any]:
        validate_interactive_buttons(body_text, buttons)
        body = build_interactive_buttons_payload(
            resolve_chat_id(recipient),
            body_text,
            buttons,
            header=header,
            footer=footer,
        )
        return self._call(Endpoint.SEND_INTERACTIVE_BUTTONS, body=body)

    def send_typing(
        self,
        recipient: str,
        *,
        typing_time_ms: int | None = None,
        typing_type: str | None = None,
    ) -> ApiResult[Any]:
        validate_typing_time(typing_time_ms)
        body = build_typing_payload(
            resolve_chat_id(recipient),
            typing_time_ms=typing_time_ms,
            typing_type=typing_type,
        )
        return self._call(Endpoint.SEND_TYPING, body=body)
