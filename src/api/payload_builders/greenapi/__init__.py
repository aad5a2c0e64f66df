"""Builders de corpo JSON para a API Green API.

Todos seguem o mesmo contrato: campos opcionais ausentes são omitidos.
"""

from api.payload_builders.greenapi.base import build_chat_payload, compact_payload
from api.payload_builders.greenapi.media import EncodedFile, encode_file
from api.payload_builders.greenapi.messaging import (
    Contact,
    InteractiveButton,
    build_send_message_payload,
)

__all__ = [
    "Contact",
    "EncodedFile",
    "InteractiveButton",
    "build_chat_payload",
    "build_send_message_payload",
    "compact_payload",
    "encode_file",
]
