"""Decodificação best-effort de falhas do provedor.

Ordem:
1. Sem resposta HTTP -> mensagem da exceção
2. Corpo JSON com "message" -> ErrorDetail(message, code)
3. Qualquer outro corpo -> ErrorDetail(message=texto bruto)

Nunca levanta: falha de decodificação degrada para texto bruto.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from config.logging import log_fallback

from .models import ErrorDetail

logger = logging.getLogger(__name__)


def decode_error(exc: Exception) -> ErrorDetail:
    """Converte uma exceção de transporte/HTTP em ErrorDetail.

    Args:
        exc: Exceção levantada ao executar a requisição

    Returns:
        ErrorDetail estruturado ou com texto bruto
    """
    response: httpx.Response | None = getattr(exc, "response", None)
    if response is None:
        return ErrorDetail(message=str(exc) or type(exc).__name__)

    raw_text = _read_body(response)
    if raw_text is None:
        return ErrorDetail(
            message=str(exc) or type(exc).__name__,
            status_code=response.status_code,
        )
    return decode_error_body(raw_text, response.status_code)


def decode_error_body(raw_text: str, status_code: int | None = None) -> ErrorDetail:
    """Interpreta o corpo de uma resposta de erro."""
    envelope = _parse_envelope(raw_text)
    if envelope is not None and envelope.get("message") is not None:
        code = envelope.get("code")
        return ErrorDetail(
            message=str(envelope["message"]),
            code=None if code is None else str(code),
            raw=raw_text,
            status_code=status_code,
        )

    log_fallback(logger, "error_decoder", reason="raw_text")
    message = raw_text.strip() or f"HTTP {status_code}"
    return ErrorDetail(message=message, raw=raw_text, status_code=status_code)


def _read_body(response: httpx.Response) -> str | None:
    try:
        response.read()
        return response.text
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError) as exc:
        logger.debug(
            "greenapi_error_body_unreadable",
            extra={"error_type": type(exc).__name__},
        )
        return None


def _parse_envelope(raw_text: str) -> dict[str, Any] | None:
    try:
        data = json.loads(raw_text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
