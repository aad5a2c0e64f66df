"""Validadores para operações de envio."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from api.connectors.greenapi.errors import ValidationError
from api.validators.greenapi.limits import (
    MAX_BUTTON_TEXT_LENGTH,
    MAX_CAPTION_LENGTH,
    MAX_INTERACTIVE_BUTTONS,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MAX_MESSAGE_LENGTH,
    MAX_POLL_OPTION_LENGTH,
    MAX_POLL_OPTIONS,
    MAX_POLL_QUESTION_LENGTH,
    MAX_TYPING_TIME_MS,
    MIN_INTERACTIVE_BUTTONS,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_POLL_OPTIONS,
    MIN_TYPING_TIME_MS,
)

if TYPE_CHECKING:
    from api.payload_builders.greenapi.messaging import InteractiveButton


def validate_message_text(message: str) -> None:
    """Valida o texto de uma mensagem.

    Raises:
        ValidationError: Se vazio ou acima do limite
    """
    if not message or not message.strip():
        raise ValidationError("message is required")
    if len(message) > MAX_MESSAGE_LENGTH:
        raise ValidationError(
            f"message exceeds maximum length of {MAX_MESSAGE_LENGTH} characters"
        )


def validate_caption(caption: str | None) -> None:
    if caption and len(caption) > MAX_CAPTION_LENGTH:
        raise ValidationError(
            f"caption exceeds maximum length of {MAX_CAPTION_LENGTH} characters"
        )


def validate_poll(question: str, options: Sequence[str]) -> None:
    """Valida pergunta e opções de uma enquete.

    Raises:
        ValidationError: Se a contagem de opções sai de 2..12, se há opções
            vazias/repetidas ou se algum texto excede o limite
    """
    if not question or not question.strip():
        raise ValidationError("poll question is required")
    if len(question) > MAX_POLL_QUESTION_LENGTH:
        raise ValidationError(
            f"poll question exceeds maximum length of {MAX_POLL_QUESTION_LENGTH} characters"
        )

    if len(options) < MIN_POLL_OPTIONS:
        raise ValidationError(f"poll requires at least {MIN_POLL_OPTIONS} options")
    if len(options) > MAX_POLL_OPTIONS:
        raise ValidationError(
            f"poll accepts at most {MAX_POLL_OPTIONS} options, got {len(options)}"
        )

    for option in options:
        if not option or not option.strip():
            raise ValidationError("poll options cannot be empty")
        if len(option) > MAX_POLL_OPTION_LENGTH:
            raise ValidationError(
                f"poll option exceeds maximum length of {MAX_POLL_OPTION_LENGTH} characters"
            )

    if len(set(options)) != len(options):
        raise ValidationError("poll options must be unique")


def validate_interactive_buttons(body: str, buttons: Sequence[InteractiveButton]) -> None:
    """Valida corpo e botões de uma mensagem interativa."""
    if not body or not body.strip():
        raise ValidationError("interactive message body is required")

    if not MIN_INTERACTIVE_BUTTONS <= len(buttons) <= MAX_INTERACTIVE_BUTTONS:
        raise ValidationError(
            f"interactive message requires {MIN_INTERACTIVE_BUTTONS} to "
            f"{MAX_INTERACTIVE_BUTTONS} buttons, got {len(buttons)}"
        )

    for button in buttons:
        if not button.text or not button.text.strip():
            raise ValidationError("button text is required")
        if len(button.text) > MAX_BUTTON_TEXT_LENGTH:
            raise ValidationError(
                f"button text exceeds maximum length of {MAX_BUTTON_TEXT_LENGTH} characters"
            )

    ids = [button.button_id for button in buttons]
    if len(set(ids)) != len(ids):
        raise ValidationError("button ids must be unique")


def validate_typing_time(typing_time_ms: int | None) -> None:
    if typing_time_ms is None:
        return
    if not MIN_TYPING_TIME_MS <= typing_time_ms <= MAX_TYPING_TIME_MS:
        raise ValidationError(
            f"typing time must be between {MIN_TYPING_TIME_MS} and {MAX_TYPING_TIME_MS} ms"
        )


def validate_location(latitude: float, longitude: float) -> None:
    if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        raise ValidationError(f"latitude out of range: {latitude}")
    if not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
        raise ValidationError(f"longitude out of range: {longitude}")


def validate_forward(message_ids: Sequence[str]) -> None:
    if not message_ids:
        raise ValidationError("at least one message id is required to forward")
    if any(not message_id for message_id in message_ids):
        raise ValidationError("message ids cannot be empty")


def validate_file_reference(url_file: str, file_name: str) -> None:
    """Valida URL e nome de arquivo para envios por URL."""
    if not url_file or not url_file.startswith(("http://", "https://")):
        raise ValidationError("urlFile must be an http(s) URL")
    if not file_name:
        raise ValidationError("fileName is required")
