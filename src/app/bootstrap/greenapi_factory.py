"""Factory de wiring para o cliente Green API (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.greenapi.client import GreenApiClient
from api.connectors.greenapi.errors import ConfigurationError
from config.settings import (
    CredentialsFileError,
    GreenApiSettings,
    get_greenapi_settings,
    save_credentials_file,
)

if TYPE_CHECKING:
    from pathlib import Path

    import httpx


def load_greenapi_settings() -> GreenApiSettings:
    """Carrega e valida settings da instância (env + arquivo salvo).

    Raises:
        ConfigurationError: Se o arquivo salvo é inválido, um valor numérico do
            ambiente é malformado ou faltam credenciais
    """
    try:
        settings = get_greenapi_settings()
    except CredentialsFileError as exc:
        raise ConfigurationError(str(exc)) from exc
    except ValueError as exc:
        raise ConfigurationError(f"invalid Green API setting: {exc}") from exc

    errors = settings.validate()
    if errors:
        raise ConfigurationError("; ".join(errors))
    return settings


def create_greenapi_client(
    settings: GreenApiSettings | None = None,
    http_client: httpx.Client | None = None,
) -> GreenApiClient:
    """Cria cliente Green API com settings explícitos ou do ambiente.

    Args:
        settings: Settings da instância. Se None, carrega do ambiente.
        http_client: httpx.Client opcional (compartilhado pelo chamador)
    """
    greenapi = settings or load_greenapi_settings()
    return GreenApiClient(greenapi, http_client=http_client)


def store_credentials(
    id_instance: str,
    api_token_instance: str,
    path: Path | None = None,
) -> GreenApiSettings:
    """Valida e persiste credenciais; retorna settings prontos para uso.

    Raises:
        ConfigurationError: Se as credenciais não passam na validação
    """
    settings = GreenApiSettings(
        id_instance=id_instance.strip(),
        api_token_instance=api_token_instance.strip(),
    )
    errors = settings.validate()
    if errors:
        raise ConfigurationError("; ".join(errors))

    save_credentials_file(settings.id_instance, settings.api_token_instance, path)
    get_greenapi_settings.cache_clear()
    return settings
