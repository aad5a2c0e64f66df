"""Builders para mensagens de texto, enquete, contato, localização e botões."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from api.payload_builders.greenapi.base import build_chat_payload, compact_payload


@dataclass(frozen=True, slots=True)
class InteractiveButton:
    """Botão de sendInteractiveButtons.

    `button_type` segue o provedor: "reply", "url", "call" ou "copy".
    """

    button_id: str
    text: str
    button_type: str = "reply"
    url: str | None = None
    phone_number: str | None = None
    copy_code: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return compact_payload(
            {
                "type": self.button_type,
                "buttonId": self.button_id,
                "buttonText": self.text,
                "url": self.url,
                "phoneNumber": self.phone_number,
                "copyCode": self.copy_code,
            }
        )


@dataclass(frozen=True, slots=True)
class Contact:
    """Cartão de contato de sendContact."""

    phone_contact: int
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    company: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return compact_payload(
            {
                "phoneContact": self.phone_contact,
                "firstName": self.first_name,
                "middleName": self.middle_name,
                "lastName": self.last_name,
                "company": self.company,
            }
        )


def build_send_message_payload(
    chat_id: str,
    message: str,
    *,
    quoted_message_id: str | None = None,
    link_preview: bool | None = None,
) -> dict[str, Any]:
    """Corpo de sendMessage."""
    return build_chat_payload(
        chat_id,
        message=message,
        quotedMessageId=quoted_message_id,
        linkPreview=link_preview,
    )


def build_location_payload(
    chat_id: str,
    latitude: float,
    longitude: float,
    *,
    name_location: str | None = None,
    address: str | None = None,
    quoted_message_id: str | None = None,
) -> dict[str, Any]:
    return build_chat_payload(
        chat_id,
        nameLocation=name_location,
        address=address,
        latitude=latitude,
        longitude=longitude,
        quotedMessageId=quoted_message_id,
    )


def build_contact_payload(
    chat_id: str,
    contact: Contact,
    *,
    quoted_message_id: str | None = None,
) -> dict[str, Any]:
    return build_chat_payload(
        chat_id,
        contact=contact.to_payload(),
        quotedMessageId=quoted_message_id,
    )


def build_poll_payload(
    chat_id: str,
    question: str,
    options: Sequence[str],
    *,
    multiple_answers: bool | None = None,
    quoted_message_id: str | None = None,
) -> dict[str, Any]:
    """Corpo de sendPoll: opções viram [{"optionName": ...}]."""
    return build_chat_payload(
        chat_id,
        message=question,
        options=[{"optionName": option} for option in options],
        multipleAnswers=multiple_answers,
        quotedMessageId=quoted_message_id,
    )


def build_forward_payload(
    chat_id: str,
    chat_id_from: str,
    message_ids: Sequence[str],
) -> dict[str, Any]:
    return build_chat_payload(
        chat_id,
        chatIdFrom=chat_id_from,
        messages=list(message_ids),
    )


def build_interactive_buttons_payload(
    chat_id: str,
    body: str,
    buttons: Sequence[InteractiveButton],
    *,
    header: str | None = None,
    footer: str | None = None,
) -> dict[str, Any]:
    return build_chat_payload(
        chat_id,
        header=header,
        body=body,
        footer=footer,
        buttons=[button.to_payload() for button in buttons],
    )


def build_typing_payload(
    chat_id: str,
    *,
    typing_time_ms: int | None = None,
    typing_type: str | None = None,
) -> dict[str, Any]:
    return build_chat_payload(chat_id, typingTime=typing_time_ms, typingType=typing_type)
