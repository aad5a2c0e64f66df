"""Base das operações: endpoint -> request_builder -> transporte."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.greenapi.endpoints import get_endpoint_spec
from api.connectors.greenapi.request_builder import build_request

if TYPE_CHECKING:
    from api.connectors.greenapi.models import ApiResult
    from app.constants.greenapi import Endpoint
    from app.protocols.http_client import GreenApiTransportProtocol
    from config.settings import GreenApiSettings


class OperationBase:
    """Pipeline único usado por todas as operações do cliente."""

    _settings: GreenApiSettings
    _transport: GreenApiTransportProtocol

    def _call(
        self,
        endpoint: Endpoint,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        path_params: Iterable[Any] = (),
    ) -> ApiResult[Any]:
        request = build_request(
            self._settings,
            get_endpoint_spec(endpoint),
            body=body,
            query=query,
            path_params=path_params,
        )
        return self._transport.execute(request)
