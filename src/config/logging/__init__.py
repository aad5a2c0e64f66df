"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", instance_id="7103123456")
    logger = get_logger(__name__)
    logger.info("Operação OK", extra={"endpoint": "getStateInstance"})

Campos obrigatórios em todo log: service, instance_id, level, logger,
message, asctime. Nunca logar tokens ou números completos.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import InstanceContextFilter, mask_instance_id
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "InstanceContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "mask_instance_id",
]
