"""Operações de status (stories)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from api.connectors.greenapi.models import ApiResult
from api.normalizers.phone import resolve_chat_id
from api.payload_builders.greenapi.statuses import build_status_media_payload
from api.validators.greenapi.messaging import validate_caption, validate_file_reference
from app.constants.greenapi import Endpoint

from .base import OperationBase


class StatusOperations(OperationBase):
    """sendStatusAudio e sendStatusMedia."""

    def send_status_audio(
        self,
        url_file: str,
        file_name: str,
        *,
        participants: Sequence[str] | None = None,
    ) -> ApiResult[Any]:
        validate_file_reference(url_file, file_name)
        body = build_status_media_payload(
            url_file,
            file_name,
            participants=_resolve_participants(participants),
        )
        return self._call(Endpoint.SEND_STATUS_AUDIO, body=body)

    def send_status_media(
        self,
        url_file: str,
        file_name: str,
        *,
        caption: str | None = None,
        participants: Sequence[str] | None = None,
    ) -> ApiResult[Any]:
        validate_file_reference(url_file, file_name)
        validate_caption(caption)
        body = build_status_media_payload(
            url_file,
            file_name,
            caption=caption,
            participants=_resolve_participants(participants),
        )
        return self._call(Endpoint.SEND_STATUS_MEDIA, body=body)


def _resolve_participants(participants: Sequence[str] | None) -> list[str] | None:
    if not participants:
        return None
    return [resolve_chat_id(participant) for participant in participants]
