"""Filters de logging para injeção de contexto.

Campos injetados:
- service: Nome do serviço (ex: greenapi-client)
- instance_id: ID da instância Green API, mascarado

Tokens e números de telefone nunca entram nos logs.
"""

from __future__ import annotations

import logging

# Dígitos visíveis no início do instance_id mascarado
VISIBLE_INSTANCE_DIGITS = 4


def mask_instance_id(instance_id: str) -> str:
    """Mascara o ID da instância, preservando só o prefixo do host.

    Exemplo: "7103123456" -> "7103******"
    """
    if not instance_id:
        return ""
    visible = instance_id[:VISIBLE_INSTANCE_DIGITS]
    return visible + "*" * (len(instance_id) - len(visible))


class InstanceContextFilter(logging.Filter):
    """Injeta service e instance_id (mascarado) em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        instance_id: ID da instância ativa; vazio quando não configurado.
    """

    def __init__(self, service_name: str, instance_id: str = "") -> None:
        super().__init__()
        self._service_name = service_name
        self._instance_id = mask_instance_id(instance_id)

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona service e instance_id ao record.

        Se instance_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "instance_id", None)
        record.instance_id = existing if existing else self._instance_id
        record.service = self._service_name
        return True
