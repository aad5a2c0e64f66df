"""Operações de serviço: contatos, notificações e filas."""

from __future__ import annotations

from typing import Any

from api.connectors.greenapi.models import ApiResult
from api.normalizers.phone import normalize_to_plain_digits
from api.validators.greenapi.journal import validate_receipt_id, validate_receive_timeout
from app.constants.greenapi import Endpoint

from .base import OperationBase


class ServiceOperations(OperationBase):
    """getContacts, checkWhatsapp, receive/deleteNotification e filas."""

    def get_contacts(self) -> ApiResult[Any]:
        return self._call(Endpoint.GET_CONTACTS)

    def check_whatsapp(self, phone_number: str) -> ApiResult[Any]:
        """Verifica se o número tem conta WhatsApp.

        Raises:
            NormalizationError: Se o número não contém dígitos
        """
        digits = normalize_to_plain_digits(phone_number, self._settings.default_country_code)
        return self._call(Endpoint.CHECK_WHATSAPP, body={"phoneNumber": int(digits)})

    def receive_notification(self, receive_timeout: int | None = None) -> ApiResult[Any]:
        """Lê a próxima notificação da fila.

        Fila vazia retorna Success(None); isso não é erro.
        """
        validate_receive_timeout(receive_timeout)
        return self._call(
            Endpoint.RECEIVE_NOTIFICATION,
            query={"receiveTimeout": receive_timeout},
        )

    def delete_notification(self, receipt_id: int) -> ApiResult[Any]:
        validate_receipt_id(receipt_id)
        return self._call(Endpoint.DELETE_NOTIFICATION, path_params=(receipt_id,))

    def get_messages_count(self) -> ApiResult[Any]:
        return self._call(Endpoint.GET_MESSAGES_COUNT)

    def show_messages_queue(self) -> ApiResult[Any]:
        return self._call(Endpoint.SHOW_MESSAGES_QUEUE)

    def clear_messages_queue(self) -> ApiResult[Any]:
        return self._call(Endpoint.CLEAR_MESSAGES_QUEUE)

    def get_webhooks_count(self) -> ApiResult[Any]:
        return self._call(Endpoint.GET_WEBHOOKS_COUNT)

    def clear_webhooks_queue(self) -> ApiResult[Any]:
        return self._call(Endpoint.CLEAR_WEBHOOKS_QUEUE)
