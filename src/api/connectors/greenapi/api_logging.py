"""Helpers de logging para a API Green API (sem tokens nem números)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ErrorDetail

logger = logging.getLogger(__name__)


def log_api_error(
    detail: ErrorDetail,
    method: str,
    endpoint: str,
) -> None:
    """Loga falha de uma chamada sem expor dados sensíveis."""
    logger.warning(
        "greenapi_request_failed",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": detail.status_code,
            "error_code": detail.code,
            "transport_failure": detail.is_transport_failure,
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "greenapi_request_succeeded",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
