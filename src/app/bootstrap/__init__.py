"""Bootstrap do cliente — inicialização e wiring.

Composition root: configura logging e monta o cliente com as
implementações concretas.

Uso:
    from app.bootstrap import create_greenapi_client, initialize_logging

    initialize_logging()
    client = create_greenapi_client()
"""

from __future__ import annotations

from app.bootstrap.greenapi_factory import (
    create_greenapi_client,
    load_greenapi_settings,
    store_credentials,
)
from config.logging import configure_logging
from config.settings import get_base_settings


def initialize_logging(instance_id: str = "") -> None:
    """Configura logging JSON a partir das settings base.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        instance_id=instance_id,
    )


__all__ = [
    "create_greenapi_client",
    "initialize_logging",
    "load_greenapi_settings",
    "store_credentials",
]
