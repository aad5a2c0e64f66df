"""Settings da instância Green API.

Cada instância (sessão WhatsApp no provedor) é identificada por
`id_instance` + `api_token_instance`. O objeto é imutável e deve ser passado
explicitamente ao cliente; nada no núcleo lê settings globais.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from app.constants.greenapi import DEFAULT_API_DOMAIN, DEFAULT_COUNTRY_CODE
from config.settings.credentials_file import load_credentials_file

# Quantidade de dígitos do idInstance usada como subdomínio
HOST_PREFIX_LENGTH: int = 4


@dataclass(frozen=True)
class GreenApiSettings:
    """Configurações de uma instância Green API.

    Attributes:
        id_instance: ID da instância (ex: "7103123456")
        api_token_instance: Token de acesso da instância
        api_domain: Domínio do provedor (sem subdomínio da instância)
        request_timeout_seconds: Timeout por requisição HTTP
        media_max_size_bytes: Limite para downloads de arquivos
        default_country_code: Código de país aplicado a números locais
    """

    id_instance: str = ""
    api_token_instance: str = ""
    api_domain: str = DEFAULT_API_DOMAIN

    request_timeout_seconds: float = 30.0
    media_max_size_bytes: int = 100 * 1024 * 1024  # 100MB

    default_country_code: str = DEFAULT_COUNTRY_CODE

    @property
    def api_host(self) -> str:
        """Host da instância: https://{4 primeiros dígitos}.{domínio}."""
        return f"https://{self.id_instance[:HOST_PREFIX_LENGTH]}.{self.api_domain}"

    @property
    def base_url(self) -> str:
        """URL base da instância; vazia se id_instance não configurado."""
        if not self.id_instance:
            return ""
        return f"{self.api_host}/waInstance{self.id_instance}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.id_instance:
            errors.append("GREENAPI_ID_INSTANCE não configurado")
        elif not self.id_instance.isdigit():
            errors.append("GREENAPI_ID_INSTANCE deve conter apenas dígitos")

        if not self.api_token_instance:
            errors.append("GREENAPI_API_TOKEN_INSTANCE não configurado")

        if not self.api_domain:
            errors.append("GREENAPI_API_DOMAIN não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("GREENAPI_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not self.default_country_code.isdigit():
            errors.append("GREENAPI_DEFAULT_COUNTRY_CODE deve conter apenas dígitos")

        return errors


def _load_from_env() -> GreenApiSettings:
    """Carrega GreenApiSettings do ambiente, com fallback para o arquivo salvo."""
    id_instance = os.getenv("GREENAPI_ID_INSTANCE", "")
    api_token = os.getenv("GREENAPI_API_TOKEN_INSTANCE", "")

    if not id_instance or not api_token:
        stored = load_credentials_file()
        if stored is not None:
            id_instance = id_instance or stored.id_instance
            api_token = api_token or stored.api_token_instance

    return GreenApiSettings(
        id_instance=id_instance,
        api_token_instance=api_token,
        api_domain=os.getenv("GREENAPI_API_DOMAIN", DEFAULT_API_DOMAIN),
        request_timeout_seconds=float(
            os.getenv("GREENAPI_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        media_max_size_bytes=int(
            os.getenv("GREENAPI_MEDIA_MAX_SIZE_BYTES", str(100 * 1024 * 1024))
        ),
        default_country_code=os.getenv(
            "GREENAPI_DEFAULT_COUNTRY_CODE", DEFAULT_COUNTRY_CODE
        ),
    )


@lru_cache(maxsize=1)
def get_greenapi_settings() -> GreenApiSettings:
    """Retorna instância cacheada de GreenApiSettings."""
    return _load_from_env()
