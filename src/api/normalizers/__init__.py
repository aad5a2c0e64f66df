"""Normalizers — conversão de entradas brutas para formatos do provedor."""

from .phone import (
    is_group_chat_id,
    normalize_to_plain_digits,
    normalize_to_recipient_id,
    resolve_chat_id,
)

__all__ = [
    "is_group_chat_id",
    "normalize_to_plain_digits",
    "normalize_to_recipient_id",
    "resolve_chat_id",
]
