"""Hierarquia de erros do cliente Green API.

Erros de configuração, validação e normalização são levantados antes de
qualquer IO. Erros de transporte e do provedor chegam como `ApiResult` e só
viram exceção via `ApiResult.unwrap()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ErrorDetail


class GreenApiError(Exception):
    """Base de todos os erros do cliente."""


class ConfigurationError(GreenApiError):
    """Credenciais ausentes ou inválidas; a chamada não é enviada."""


class ValidationError(GreenApiError):
    """Entrada fora dos limites aceitos pelo provedor."""


class NormalizationError(ValidationError):
    """Número de telefone que não pôde ser normalizado."""


class _DetailedError(GreenApiError):
    def __init__(self, detail: ErrorDetail) -> None:
        super().__init__(detail.message)
        self.detail = detail

    @property
    def code(self) -> str | None:
        return self.detail.code

    @property
    def status_code(self) -> int | None:
        return self.detail.status_code


class TransportError(_DetailedError):
    """Falha de rede/DNS/timeout; nenhuma resposta do provedor."""


class ApiError(_DetailedError):
    """Provedor respondeu com erro (estruturado ou texto bruto)."""
