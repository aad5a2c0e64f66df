"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap/)
    configure_logging(level="INFO", instance_id=settings.id_instance)

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("greenapi_request_sent", extra={"endpoint": "sendMessage"})
"""

from __future__ import annotations

import logging

from config.logging.filters import InstanceContextFilter
from config.logging.formatters import create_json_formatter
from config.settings.base import VALID_LOG_LEVELS

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "greenapi-client"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    instance_id: str = "",
) -> None:
    """Configura logging JSON estruturado.

    Deve ser chamada uma vez, no composition root.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        instance_id: ID da instância (é mascarado no output).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(InstanceContextFilter(service_name, instance_id))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra que um fallback determinístico foi usado (sem PII).

    Exemplo:
        log_fallback(logger, "error_decoder", reason="invalid_json")
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason

    logger.info("Fallback applied for %s", component, extra=extra)
