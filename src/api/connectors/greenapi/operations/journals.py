"""Operações de leitura: jornais, histórico, mensagens e download."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from api.connectors.greenapi.models import ApiResult, ErrorDetail
from api.normalizers.phone import resolve_chat_id
from api.payload_builders.greenapi.base import build_chat_payload
from api.validators.greenapi.journal import (
    validate_history_count,
    validate_message_id,
    validate_minutes,
)
from app.constants.greenapi import Endpoint

from .base import OperationBase


class JournalOperations(OperationBase):
    """lastIncoming/OutgoingMessages, getChatHistory, readChat, downloadFile, ..."""

    def last_incoming_messages(self, minutes: int | None = None) -> ApiResult[Any]:
        """Mensagens recebidas nos últimos `minutes` (padrão do provedor: 1440)."""
        validate_minutes(minutes)
        return self._call(Endpoint.LAST_INCOMING_MESSAGES, query={"minutes": minutes})

    def last_outgoing_messages(self, minutes: int | None = None) -> ApiResult[Any]:
        validate_minutes(minutes)
        return self._call(Endpoint.LAST_OUTGOING_MESSAGES, query={"minutes": minutes})

    def get_chat_history(self, recipient: str, count: int | None = None) -> ApiResult[Any]:
        validate_history_count(count)
        body = build_chat_payload(resolve_chat_id(recipient), count=count)
        return self._call(Endpoint.GET_CHAT_HISTORY, body=body)

    def read_chat(self, recipient: str, id_message: str | None = None) -> ApiResult[Any]:
        """Marca o chat (ou uma mensagem) como lido."""
        body = build_chat_payload(resolve_chat_id(recipient), idMessage=id_message)
        return self._call(Endpoint.READ_CHAT, body=body)

    def get_message(self, recipient: str, id_message: str) -> ApiResult[Any]:
        validate_message_id(id_message)
        body = build_chat_payload(resolve_chat_id(recipient), idMessage=id_message)
        return self._call(Endpoint.GET_MESSAGE, body=body)

    def get_message_status(self, id_message: str) -> ApiResult[Any]:
        validate_message_id(id_message)
        return self._call(Endpoint.GET_MESSAGE_STATUS, query={"idMessage": id_message})

    def download_file(
        self,
        recipient: str,
        id_message: str,
        destination: str | Path,
    ) -> ApiResult[Path]:
        """Baixa o arquivo de uma mensagem para `destination`.

        Se `destination` é um diretório existente, o nome do arquivo vem do
        provedor (ou do idMessage). O arquivo só aparece no destino depois
        de completamente escrito.

        Returns:
            ApiResult com o caminho final do arquivo
        """
        validate_message_id(id_message)
        body = build_chat_payload(resolve_chat_id(recipient), idMessage=id_message)
        result = self._call(Endpoint.DOWNLOAD_FILE, body=body)
        if not result.ok:
            return ApiResult.failure(result.error)

        data = result.data if isinstance(result.data, dict) else {}
        download_url = data.get("downloadUrl")
        if not download_url:
            return ApiResult.failure(
                ErrorDetail(
                    message="provider response has no downloadUrl",
                    code="missing_download_url",
                    raw=str(result.data),
                    status_code=200,
                )
            )

        target = Path(destination)
        if target.is_dir():
            target = target / Path(data.get("fileName") or id_message).name

        return self._transport.download(
            download_url,
            target,
            max_size_bytes=self._settings.media_max_size_bytes,
        )
