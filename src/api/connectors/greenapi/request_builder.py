"""Montagem de requisições para a API Green API.

URL: {base_url}/{endpoint}/{token}[/{path_params}][?{query}]

Valores de query e path são percent-encoded. O corpo JSON é incluído
sem alterações; campos opcionais ausentes já devem ter sido omitidos
pelos payload builders.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode

from .errors import ConfigurationError
from .models import RequestDescriptor

if TYPE_CHECKING:
    from config.settings import GreenApiSettings

    from .endpoints import EndpointSpec

JSON_CONTENT_TYPE = "application/json"


def ensure_credentials(settings: GreenApiSettings) -> None:
    """Garante que a instância está configurada antes de montar a URL.

    Raises:
        ConfigurationError: Se id_instance, token ou base_url ausentes
    """
    missing: list[str] = []
    if not settings.id_instance:
        missing.append("id_instance")
    if not settings.api_token_instance:
        missing.append("api_token_instance")
    if not settings.base_url:
        missing.append("base_url")
    if missing:
        raise ConfigurationError(f"missing Green API credentials: {', '.join(missing)}")


def build_query_string(query: Mapping[str, Any] | None) -> str:
    """Monta a query string na ordem de inserção, ignorando valores None."""
    if not query:
        return ""
    pairs = [(key, _to_query_value(value)) for key, value in query.items() if value is not None]
    if not pairs:
        return ""
    return "?" + urlencode(pairs)


def _to_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(
    settings: GreenApiSettings,
    endpoint: str,
    *,
    path_params: Iterable[Any] = (),
    query: Mapping[str, Any] | None = None,
) -> str:
    """Monta a URL completa do endpoint."""
    url = f"{settings.base_url}/{endpoint}/{settings.api_token_instance}"
    for param in path_params:
        url += "/" + quote(str(param), safe="")
    return url + build_query_string(query)


def build_request(
    settings: GreenApiSettings,
    spec: EndpointSpec,
    *,
    body: Any = None,
    query: Mapping[str, Any] | None = None,
    path_params: Iterable[Any] = (),
) -> RequestDescriptor:
    """Constrói o descritor de requisição para um endpoint.

    Args:
        settings: Credenciais da instância
        spec: Endpoint (nome + método)
        body: Corpo JSON (já compactado); None para requisições sem corpo
        query: Parâmetros de query, em ordem de inserção
        path_params: Segmentos extras após o token (ex: receiptId)

    Returns:
        RequestDescriptor novo

    Raises:
        ConfigurationError: Se credenciais ausentes (nada é enviado)
    """
    ensure_credentials(settings)

    headers = {"Accept": JSON_CONTENT_TYPE}
    if body is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE

    return RequestDescriptor(
        method=spec.method,
        url=build_url(settings, spec.name, path_params=path_params, query=query),
        endpoint=str(spec.name),
        headers=headers,
        body=body,
    )
