"""Modelos de requisição e resultado do conector Green API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from app.constants.greenapi import HttpMethod

from .errors import ApiError, TransportError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Requisição completa, construída nova a cada chamada."""

    method: HttpMethod
    url: str
    endpoint: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def has_body(self) -> bool:
        return self.body is not None


@dataclass(frozen=True, slots=True)
class ErrorDetail:
    """Erro extraído de uma falha de transporte ou do provedor.

    Attributes:
        message: Mensagem legível (do envelope JSON, texto bruto ou exceção)
        code: Código do provedor, quando presente no envelope
        raw: Corpo bruto da resposta, quando houver
        status_code: Status HTTP; None quando não houve resposta
    """

    message: str
    code: str | None = None
    raw: str | None = None
    status_code: int | None = None

    @property
    def is_transport_failure(self) -> bool:
        """True quando nenhuma resposta HTTP foi recebida."""
        return self.status_code is None


@dataclass(frozen=True, slots=True)
class ApiResult(Generic[T]):
    """União discriminada Success(data) | Failure(error)."""

    data: T | None = None
    error: ErrorDetail | None = None

    @classmethod
    def success(cls, data: T) -> ApiResult[T]:
        return cls(data=data)

    @classmethod
    def failure(cls, error: ErrorDetail) -> ApiResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Retorna o payload ou levanta o erro correspondente.

        Raises:
            TransportError: Se não houve resposta HTTP
            ApiError: Se o provedor respondeu com erro
        """
        if self.error is None:
            return self.data  # type: ignore[return-value]
        if self.error.is_transport_failure:
            raise TransportError(self.error)
        raise ApiError(self.error)
