"""Normalização de números de telefone para identificadores do provedor.

Duas regras coexistem e NÃO devem ser unificadas:

- `normalize_to_recipient_id`: usada no envio. Um número de 9 dígitos sem
  prefixo "27" é tratado como número local que já perdeu o "0" inicial.
- `normalize_to_plain_digits`: usada em consultas (checkWhatsapp, código de
  autorização). Aceita "+", "00" e sufixos de chat; nunca completa 9 dígitos.
"""

from __future__ import annotations

import re

from api.connectors.greenapi.errors import NormalizationError, ValidationError
from app.constants.greenapi import (
    DEFAULT_COUNTRY_CODE,
    GROUP_CHAT_SUFFIX,
    INDIVIDUAL_CHAT_SUFFIX,
)

_NON_DIGITS = re.compile(r"\D")
_NON_DIGITS_OR_PLUS = re.compile(r"[^\d+]")

LOCAL_NUMBER_WITHOUT_ZERO_LENGTH = 9


def normalize_to_recipient_id(value: str, return_id_suffix: bool = True) -> str:
    """Converte um número bruto em identificador de destinatário.

    Nunca falha: entrada vazia ou lixo produz um id degenerado (sem dígitos).
    Quem chama deve checar o resultado.

    Args:
        value: Número em qualquer formato ("073 123 4567", "+27...", ...)
        return_id_suffix: Se True, anexa "@c.us"

    Returns:
        Dígitos canônicos, com ou sem sufixo
    """
    digits = _NON_DIGITS.sub("", value or "")

    if digits.startswith("0"):
        digits = DEFAULT_COUNTRY_CODE + digits[1:]
    elif (
        len(digits) == LOCAL_NUMBER_WITHOUT_ZERO_LENGTH
        and not digits.startswith(DEFAULT_COUNTRY_CODE)
    ):
        digits = DEFAULT_COUNTRY_CODE + digits

    if return_id_suffix:
        return digits + INDIVIDUAL_CHAT_SUFFIX
    return digits


def normalize_to_plain_digits(
    value: str,
    default_country_code: str = DEFAULT_COUNTRY_CODE,
) -> str:
    """Converte um número bruto em dígitos internacionais, sem sufixo.

    Args:
        value: Número, opcionalmente com "+", "00" ou sufixo "@c.us"/"@g.us"
        default_country_code: Código aplicado quando há "0" inicial

    Returns:
        Somente dígitos (ex: "27731234567")

    Raises:
        NormalizationError: Se não sobrar nenhum dígito
    """
    text = (value or "").strip()
    for suffix in (INDIVIDUAL_CHAT_SUFFIX, GROUP_CHAT_SUFFIX):
        if text.endswith(suffix):
            text = text[: -len(suffix)]
            break

    text = _NON_DIGITS_OR_PLUS.sub("", text)
    # "+" só é significativo na primeira posição
    if text.startswith("+"):
        text = text[1:].replace("+", "")
    else:
        text = text.replace("+", "")

    if text.startswith("00"):
        text = text[2:]

    if len(text) > 1 and text.startswith("0"):
        text = default_country_code + text[1:]

    text = _NON_DIGITS.sub("", text)
    if not text:
        raise NormalizationError(f"could not normalize phone number: {value!r}")
    return text


def is_group_chat_id(value: str) -> bool:
    """True se o valor já é um id de grupo ("...@g.us")."""
    return value.strip().endswith(GROUP_CHAT_SUFFIX)


def resolve_chat_id(value: str) -> str:
    """Resolve o chatId de destino para corpos de requisição.

    Ids de grupo ("@g.us") passam sem alteração. Ids individuais ("@c.us")
    e números crus passam por `normalize_to_recipient_id`, então o chatId
    final só tem dígitos antes do sufixo.

    Raises:
        ValidationError: Se o destinatário resultante não tem dígitos
    """
    candidate = (value or "").strip()
    if candidate.endswith(GROUP_CHAT_SUFFIX):
        if candidate == GROUP_CHAT_SUFFIX:
            raise ValidationError(f"invalid recipient: {value!r}")
        return candidate
    candidate = candidate.removesuffix(INDIVIDUAL_CHAT_SUFFIX)

    chat_id = normalize_to_recipient_id(candidate)
    if chat_id == INDIVIDUAL_CHAT_SUFFIX:
        raise ValidationError(f"invalid recipient: {value!r}")
    return chat_id
