"""Testes para api.normalizers.phone.

As duas funções têm contratos diferentes para números de 9 dígitos;
os testes fixam essa assimetria.
"""

from __future__ import annotations

import pytest

from api.connectors.greenapi.errors import NormalizationError, ValidationError
from api.normalizers.phone import (
    is_group_chat_id,
    normalize_to_plain_digits,
    normalize_to_recipient_id,
    resolve_chat_id,
)


class TestNormalizeToRecipientId:
    """Testes para normalize_to_recipient_id."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0731234567", "27731234567@c.us"),
            ("073 123 4567", "27731234567@c.us"),
            ("(082) 555-0000", "27825550000@c.us"),
        ],
    )
    def test_leading_zero_becomes_country_code(self, raw: str, expected: str) -> None:
        assert normalize_to_recipient_id(raw) == expected

    def test_nine_digits_get_country_code(self) -> None:
        """9 dígitos sem "27" = número local que perdeu o zero."""
        assert normalize_to_recipient_id("731234567") == "27731234567@c.us"

    def test_nine_digits_already_starting_with_27_unchanged(self) -> None:
        assert normalize_to_recipient_id("271234567") == "271234567@c.us"

    def test_international_number_passes_through(self) -> None:
        assert normalize_to_recipient_id("+27 73 123 4567") == "27731234567@c.us"
        assert normalize_to_recipient_id("5511999999999") == "5511999999999@c.us"

    def test_without_suffix_returns_bare_digits(self) -> None:
        assert normalize_to_recipient_id("0731234567", return_id_suffix=False) == "27731234567"

    def test_international_number_is_idempotent(self) -> None:
        first = normalize_to_recipient_id("27731234567")
        again = normalize_to_recipient_id(first.removesuffix("@c.us"))
        assert again == first

    def test_garbage_input_never_raises(self) -> None:
        assert normalize_to_recipient_id("") == "@c.us"
        assert normalize_to_recipient_id("abc", return_id_suffix=False) == ""


class TestNormalizeToPlainDigits:
    """Testes para normalize_to_plain_digits."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("27731234567@c.us", "27731234567"),
            ("+27 (73) 123-4567", "27731234567"),
            ("0731234567", "27731234567"),
            ("0027731234567", "27731234567"),
            ("  27731234567  ", "27731234567"),
            ("120363043968066561@g.us", "120363043968066561"),
        ],
    )
    def test_normalizes_common_formats(self, raw: str, expected: str) -> None:
        assert normalize_to_plain_digits(raw) == expected

    def test_nine_digits_are_not_completed(self) -> None:
        """Diferente de normalize_to_recipient_id: nada é prefixado."""
        assert normalize_to_plain_digits("731234567") == "731234567"

    def test_custom_default_country_code(self) -> None:
        assert normalize_to_plain_digits("011987654321", default_country_code="55") == (
            "5511987654321"
        )

    def test_plus_only_meaningful_at_start(self) -> None:
        assert normalize_to_plain_digits("27+731234567") == "27731234567"

    def test_single_zero_is_kept(self) -> None:
        assert normalize_to_plain_digits("0") == "0"

    @pytest.mark.parametrize("raw", ["", "   ", "@c.us", "abc", "+"])
    def test_empty_result_raises(self, raw: str) -> None:
        with pytest.raises(NormalizationError):
            normalize_to_plain_digits(raw)


class TestResolveChatId:
    """Testes para resolve_chat_id e is_group_chat_id."""

    def test_group_id_passes_through(self) -> None:
        assert resolve_chat_id("120363043968066561@g.us") == "120363043968066561@g.us"

    def test_individual_id_passes_through(self) -> None:
        assert resolve_chat_id("27731234567@c.us") == "27731234567@c.us"

    def test_raw_number_is_normalized(self) -> None:
        assert resolve_chat_id("073 123 4567") == "27731234567@c.us"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("27 73 123-4567@c.us", "27731234567@c.us"),
            ("+27 (73) 123-4567@c.us", "27731234567@c.us"),
            ("0731234567@c.us", "27731234567@c.us"),
            (" 27731234567@c.us ", "27731234567@c.us"),
        ],
    )
    def test_individual_id_keeps_only_digits(self, raw: str, expected: str) -> None:
        """Ids "@c.us" com formatação são reduzidos a dígitos + sufixo."""
        assert resolve_chat_id(raw) == expected

    def test_group_id_is_not_rewritten(self) -> None:
        assert resolve_chat_id("12036-3043@g.us") == "12036-3043@g.us"

    @pytest.mark.parametrize("raw", ["", "abc", "@c.us", "@g.us", "abc@c.us"])
    def test_invalid_recipient_raises(self, raw: str) -> None:
        with pytest.raises(ValidationError, match="invalid recipient"):
            resolve_chat_id(raw)

    def test_is_group_chat_id(self) -> None:
        assert is_group_chat_id("123@g.us")
        assert not is_group_chat_id("123@c.us")
