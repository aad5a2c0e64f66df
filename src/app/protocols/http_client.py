"""Protocolo do transporte HTTP usado pelo cliente Green API.

Permite substituir o transporte real por fakes nos testes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from api.connectors.greenapi.models import ApiResult, RequestDescriptor


class GreenApiTransportProtocol(Protocol):
    """Contrato mínimo para executar requisições e downloads."""

    def execute(self, request: RequestDescriptor) -> ApiResult[Any]: ...

    def download(
        self,
        url: str,
        destination: Path,
        max_size_bytes: int | None = None,
    ) -> ApiResult[Path]: ...
