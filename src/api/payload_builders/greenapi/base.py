"""Helpers comuns aos payload builders Green API.

Contrato de campos opcionais: omitir a chave, nunca enviar null.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_EMPTY_VALUES: tuple[Any, ...] = ("", [], {}, ())


def _is_absent(value: Any) -> bool:
    if value is None:
        return True
    # bool/int/float nunca são "vazios" (False e 0 são valores válidos)
    if isinstance(value, bool | int | float):
        return False
    return value in _EMPTY_VALUES


def compact_payload(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Remove chaves cujo valor é None ou vazio.

    Valores presentes são mantidos sem nenhuma recodificação.
    """
    return {key: value for key, value in payload.items() if not _is_absent(value)}


def build_chat_payload(chat_id: str, **fields: Any) -> dict[str, Any]:
    """Corpo padrão {chatId, ...campos opcionais presentes}."""
    return compact_payload({"chatId": chat_id, **fields})
