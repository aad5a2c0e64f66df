"""Constantes e enums do provedor Green API."""

from __future__ import annotations

from enum import StrEnum

DEFAULT_API_DOMAIN: str = "api.greenapi.com"
DEFAULT_COUNTRY_CODE: str = "27"

INDIVIDUAL_CHAT_SUFFIX: str = "@c.us"
GROUP_CHAT_SUFFIX: str = "@g.us"


class HttpMethod(StrEnum):
    """Métodos HTTP aceitos pelo provedor."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class Endpoint(StrEnum):
    """Nome de cada endpoint (segmento de path) do provedor."""

    # Envio
    SEND_MESSAGE = "sendMessage"
    SEND_FILE_BY_UPLOAD = "sendFileByUpload"
    SEND_FILE_BY_URL = "sendFileByUrl"
    SEND_LOCATION = "sendLocation"
    SEND_CONTACT = "sendContact"
    SEND_POLL = "sendPoll"
    FORWARD_MESSAGES = "forwardMessages"
    SEND_INTERACTIVE_BUTTONS = "sendInteractiveButtons"
    SEND_TYPING = "sendTyping"

    # Jornal / leitura
    LAST_INCOMING_MESSAGES = "lastIncomingMessages"
    LAST_OUTGOING_MESSAGES = "lastOutgoingMessages"
    GET_CHAT_HISTORY = "getChatHistory"
    READ_CHAT = "readChat"
    DOWNLOAD_FILE = "downloadFile"
    GET_MESSAGE = "getMessage"
    GET_MESSAGE_STATUS = "getMessageStatus"

    # Serviço
    GET_CONTACTS = "getContacts"
    CHECK_WHATSAPP = "checkWhatsapp"

    # Notificações
    RECEIVE_NOTIFICATION = "receiveNotification"
    DELETE_NOTIFICATION = "deleteNotification"

    # Conta / instância
    GET_SETTINGS = "getSettings"
    SET_SETTINGS = "setSettings"
    GET_STATE_INSTANCE = "getStateInstance"
    GET_STATUS_INSTANCE = "getStatusInstance"
    REBOOT = "reboot"
    LOGOUT = "logout"
    QR = "qr"
    GET_AUTHORIZATION_CODE = "getAuthorizationCode"
    SET_PROFILE_PICTURE = "setProfilePicture"
    UPDATE_API_TOKEN = "updateApiToken"
    GET_WA_SETTINGS = "getWaSettings"

    # Filas
    GET_MESSAGES_COUNT = "getMessagesCount"
    SHOW_MESSAGES_QUEUE = "showMessagesQueue"
    CLEAR_MESSAGES_QUEUE = "clearMessagesQueue"
    GET_WEBHOOKS_COUNT = "getWebhooksCount"
    CLEAR_WEBHOOKS_QUEUE = "clearWebhooksQueue"

    # Grupos
    CREATE_GROUP = "createGroup"
    UPDATE_GROUP_NAME = "updateGroupName"
    GET_GROUP_DATA = "getGroupData"
    ADD_GROUP_PARTICIPANT = "addGroupParticipant"
    REMOVE_GROUP_PARTICIPANT = "removeGroupParticipant"
    SET_GROUP_ADMIN = "setGroupAdmin"
    REMOVE_ADMIN = "removeAdmin"
    SET_GROUP_PICTURE = "setGroupPicture"
    LEAVE_GROUP = "leaveGroup"

    # Status
    SEND_STATUS_AUDIO = "sendStatusAudio"
    SEND_STATUS_MEDIA = "sendStatusMedia"
