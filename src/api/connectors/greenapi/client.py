"""Cliente Green API: uma instância, um objeto de settings explícito.

Uso:
    settings = GreenApiSettings(id_instance="7103123456", api_token_instance="...")
    with GreenApiClient(settings) as client:
        result = client.send_message("073 123 4567", "Olá")
        if result.ok:
            print(result.data["idMessage"])
        else:
            print(result.error.message, result.error.code)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .http_client import GreenApiHttpClient
from .operations import (
    AccountOperations,
    GroupOperations,
    JournalOperations,
    SendingOperations,
    ServiceOperations,
    StatusOperations,
)
from .request_builder import ensure_credentials

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from app.protocols.http_client import GreenApiTransportProtocol
    from config.settings import GreenApiSettings


class GreenApiClient(
    SendingOperations,
    JournalOperations,
    ServiceOperations,
    AccountOperations,
    GroupOperations,
    StatusOperations,
):
    """Fachada com uma operação por endpoint do provedor.

    Erros de entrada (ConfigurationError, ValidationError,
    NormalizationError) são levantados antes de qualquer IO; falhas de
    rede e do provedor voltam como ApiResult.failure.
    """

    def __init__(
        self,
        settings: GreenApiSettings,
        transport: GreenApiTransportProtocol | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Inicializa cliente.

        Args:
            settings: Credenciais e limites da instância
            transport: Transporte customizado (testes)
            http_client: httpx.Client injetado no transporte padrão

        Raises:
            ConfigurationError: Se credenciais ausentes
        """
        ensure_credentials(settings)
        self._settings = settings
        self._http_client = http_client
        self._transport = transport or GreenApiHttpClient(
            client=http_client,
            timeout_seconds=settings.request_timeout_seconds,
        )

    @property
    def settings(self) -> GreenApiSettings:
        return self._settings

    def close(self) -> None:
        """Fecha o httpx.Client injetado, se houver."""
        if self._http_client is not None:
            self._http_client.close()

    def __enter__(self) -> GreenApiClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
