"""Catálogo declarativo de endpoints do provedor.

Cada endpoint é apenas (nome, método). Parâmetros de query/path e o
formato do corpo ficam nas operações do cliente.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.constants.greenapi import Endpoint, HttpMethod


@dataclass(frozen=True, slots=True)
class EndpointSpec:
    """Descritor de um endpoint do provedor."""

    name: Endpoint
    method: HttpMethod


_GET = HttpMethod.GET
_POST = HttpMethod.POST
_DELETE = HttpMethod.DELETE

_METHODS: dict[Endpoint, HttpMethod] = {
    # Envio
    Endpoint.SEND_MESSAGE: _POST,
    Endpoint.SEND_FILE_BY_UPLOAD: _POST,
    Endpoint.SEND_FILE_BY_URL: _POST,
    Endpoint.SEND_LOCATION: _POST,
    Endpoint.SEND_CONTACT: _POST,
    Endpoint.SEND_POLL: _POST,
    Endpoint.FORWARD_MESSAGES: _POST,
    Endpoint.SEND_INTERACTIVE_BUTTONS: _POST,
    Endpoint.SEND_TYPING: _POST,
    # Jornal
    Endpoint.LAST_INCOMING_MESSAGES: _GET,
    Endpoint.LAST_OUTGOING_MESSAGES: _GET,
    Endpoint.GET_CHAT_HISTORY: _POST,
    Endpoint.READ_CHAT: _POST,
    Endpoint.DOWNLOAD_FILE: _POST,
    Endpoint.GET_MESSAGE: _POST,
    Endpoint.GET_MESSAGE_STATUS: _GET,
    # Serviço
    Endpoint.GET_CONTACTS: _GET,
    Endpoint.CHECK_WHATSAPP: _POST,
    # Notificações
    Endpoint.RECEIVE_NOTIFICATION: _GET,
    Endpoint.DELETE_NOTIFICATION: _DELETE,
    # Conta
    Endpoint.GET_SETTINGS: _GET,
    Endpoint.SET_SETTINGS: _POST,
    Endpoint.GET_STATE_INSTANCE: _GET,
    Endpoint.GET_STATUS_INSTANCE: _GET,
    Endpoint.REBOOT: _GET,
    Endpoint.LOGOUT: _GET,
    Endpoint.QR: _GET,
    Endpoint.GET_AUTHORIZATION_CODE: _POST,
    Endpoint.SET_PROFILE_PICTURE: _POST,
    Endpoint.UPDATE_API_TOKEN: _GET,
    Endpoint.GET_WA_SETTINGS: _GET,
    # Filas
    Endpoint.GET_MESSAGES_COUNT: _GET,
    Endpoint.SHOW_MESSAGES_QUEUE: _GET,
    Endpoint.CLEAR_MESSAGES_QUEUE: _GET,
    Endpoint.GET_WEBHOOKS_COUNT: _GET,
    Endpoint.CLEAR_WEBHOOKS_QUEUE: _DELETE,
    # Grupos
    Endpoint.CREATE_GROUP: _POST,
    Endpoint.UPDATE_GROUP_NAME: _POST,
    Endpoint.GET_GROUP_DATA: _POST,
    Endpoint.ADD_GROUP_PARTICIPANT: _POST,
    Endpoint.REMOVE_GROUP_PARTICIPANT: _POST,
    Endpoint.SET_GROUP_ADMIN: _POST,
    Endpoint.REMOVE_ADMIN: _POST,
    Endpoint.SET_GROUP_PICTURE: _POST,
    Endpoint.LEAVE_GROUP: _POST,
    # Status
    Endpoint.SEND_STATUS_AUDIO: _POST,
    Endpoint.SEND_STATUS_MEDIA: _POST,
}

ENDPOINTS: dict[Endpoint, EndpointSpec] = {
    name: EndpointSpec(name=name, method=method) for name, method in _METHODS.items()
}


def get_endpoint_spec(endpoint: Endpoint | str) -> EndpointSpec:
    """Retorna o descritor do endpoint.

    Raises:
        KeyError: Se o endpoint não está no catálogo
    """
    return ENDPOINTS[Endpoint(endpoint)]
