"""Testes para api/validators/greenapi.

Cenários válidos, inválidos e bordas dos limites client-side.
"""

from __future__ import annotations

import pytest

from api.payload_builders.greenapi.messaging import InteractiveButton
from api.validators.greenapi import (
    MAX_POLL_OPTIONS,
    ValidationError,
    validate_file_reference,
    validate_forward,
    validate_group_id,
    validate_group_name,
    validate_history_count,
    validate_interactive_buttons,
    validate_location,
    validate_message_text,
    validate_minutes,
    validate_participants,
    validate_poll,
    validate_receipt_id,
    validate_receive_timeout,
    validate_typing_time,
)
from api.validators.greenapi.limits import (
    MAX_BUTTON_TEXT_LENGTH,
    MAX_MESSAGE_LENGTH,
    MAX_POLL_OPTION_LENGTH,
)


class TestMessageText:
    """Testes para validate_message_text."""

    def test_valid_text(self) -> None:
        validate_message_text("olá")

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_text_raises(self, text: str) -> None:
        with pytest.raises(ValidationError, match="message is required"):
            validate_message_text(text)

    def test_text_at_limit_is_valid(self) -> None:
        validate_message_text("a" * MAX_MESSAGE_LENGTH)

    def test_text_over_limit_raises(self) -> None:
        with pytest.raises(ValidationError, match="maximum length"):
            validate_message_text("a" * (MAX_MESSAGE_LENGTH + 1))


class TestPoll:
    """Testes para validate_poll."""

    def test_twelve_options_are_valid(self) -> None:
        validate_poll("Q?", [f"o{i}" for i in range(MAX_POLL_OPTIONS)])

    def test_thirteen_options_reference_maximum(self) -> None:
        with pytest.raises(ValidationError, match="at most 12 options, got 13"):
            validate_poll("Q?", [f"o{i}" for i in range(13)])

    def test_single_option_raises(self) -> None:
        with pytest.raises(ValidationError, match="at least 2"):
            validate_poll("Q?", ["only"])

    def test_duplicate_options_raise(self) -> None:
        with pytest.raises(ValidationError, match="unique"):
            validate_poll("Q?", ["a", "a"])

    def test_long_option_raises(self) -> None:
        with pytest.raises(ValidationError, match="poll option exceeds"):
            validate_poll("Q?", ["a", "b" * (MAX_POLL_OPTION_LENGTH + 1)])

    def test_missing_question_raises(self) -> None:
        with pytest.raises(ValidationError, match="question is required"):
            validate_poll("", ["a", "b"])


class TestInteractiveButtons:
    """Testes para validate_interactive_buttons."""

    def test_valid_buttons(self) -> None:
        validate_interactive_buttons("body", [InteractiveButton("1", "Sim")])

    def test_four_buttons_raise(self) -> None:
        buttons = [InteractiveButton(str(i), f"b{i}") for i in range(4)]
        with pytest.raises(ValidationError, match="1 to 3 buttons, got 4"):
            validate_interactive_buttons("body", buttons)

    def test_no_buttons_raise(self) -> None:
        with pytest.raises(ValidationError):
            validate_interactive_buttons("body", [])

    def test_long_button_text_raises(self) -> None:
        button = InteractiveButton("1", "x" * (MAX_BUTTON_TEXT_LENGTH + 1))
        with pytest.raises(ValidationError, match="button text exceeds"):
            validate_interactive_buttons("body", [button])

    def test_duplicate_button_ids_raise(self) -> None:
        buttons = [InteractiveButton("1", "a"), InteractiveButton("1", "b")]
        with pytest.raises(ValidationError, match="unique"):
            validate_interactive_buttons("body", buttons)

    def test_missing_body_raises(self) -> None:
        with pytest.raises(ValidationError, match="body is required"):
            validate_interactive_buttons(" ", [InteractiveButton("1", "a")])


class TestMiscBounds:
    """Testes para os demais limites."""

    @pytest.mark.parametrize("value", [None, 1000, 20000])
    def test_typing_time_valid(self, value: int | None) -> None:
        validate_typing_time(value)

    @pytest.mark.parametrize("value", [999, 20001])
    def test_typing_time_invalid(self, value: int) -> None:
        with pytest.raises(ValidationError):
            validate_typing_time(value)

    def test_location_bounds(self) -> None:
        validate_location(-90.0, 180.0)
        with pytest.raises(ValidationError, match="latitude"):
            validate_location(91.0, 0.0)
        with pytest.raises(ValidationError, match="longitude"):
            validate_location(0.0, -181.0)

    def test_forward_requires_ids(self) -> None:
        with pytest.raises(ValidationError):
            validate_forward([])
        with pytest.raises(ValidationError):
            validate_forward(["ok", ""])

    def test_file_reference(self) -> None:
        validate_file_reference("https://cdn.example/a.png", "a.png")
        with pytest.raises(ValidationError, match="urlFile"):
            validate_file_reference("ftp://cdn.example/a.png", "a.png")
        with pytest.raises(ValidationError, match="fileName"):
            validate_file_reference("https://cdn.example/a.png", "")

    def test_journal_bounds(self) -> None:
        validate_minutes(None)
        validate_history_count(1)
        validate_receive_timeout(60)
        with pytest.raises(ValidationError):
            validate_minutes(0)
        with pytest.raises(ValidationError):
            validate_history_count(0)
        with pytest.raises(ValidationError):
            validate_receive_timeout(4)

    @pytest.mark.parametrize("value", [-1, True, "12"])
    def test_invalid_receipt_id(self, value: object) -> None:
        with pytest.raises(ValidationError, match="receiptId"):
            validate_receipt_id(value)  # type: ignore[arg-type]

    def test_groups(self) -> None:
        validate_group_id("123@g.us")
        validate_group_name("Família")
        validate_participants(["0731234567"])
        with pytest.raises(ValidationError):
            validate_group_id("123@c.us")
        with pytest.raises(ValidationError):
            validate_group_name("x" * 101)
        with pytest.raises(ValidationError):
            validate_participants([])
