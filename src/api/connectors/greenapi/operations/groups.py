"""Operações de grupos.

Ids de grupo ("...@g.us") passam sem alteração; participantes passam por
`resolve_chat_id`.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from api.connectors.greenapi.models import ApiResult
from api.normalizers.phone import resolve_chat_id
from api.payload_builders.greenapi.groups import (
    build_create_group_payload,
    build_group_payload,
    build_participant_payload,
)
from api.payload_builders.greenapi.media import build_picture_payload, encode_file
from api.validators.greenapi.groups import (
    validate_group_id,
    validate_group_name,
    validate_participants,
)
from app.constants.greenapi import Endpoint

from .base import OperationBase


class GroupOperations(OperationBase):
    """createGroup, updateGroupName, participantes, admins, foto e saída."""

    def create_group(self, group_name: str, participants: Sequence[str]) -> ApiResult[Any]:
        validate_group_name(group_name)
        validate_participants(participants)
        chat_ids = [resolve_chat_id(participant) for participant in participants]
        return self._call(
            Endpoint.CREATE_GROUP,
            body=build_create_group_payload(group_name, chat_ids),
        )

    def update_group_name(self, group_id: str, group_name: str) -> ApiResult[Any]:
        validate_group_id(group_id)
        validate_group_name(group_name)
        return self._call(
            Endpoint.UPDATE_GROUP_NAME,
            body=build_group_payload(group_id, groupName=group_name),
        )

    def get_group_data(self, group_id: str) -> ApiResult[Any]:
        validate_group_id(group_id)
        return self._call(Endpoint.GET_GROUP_DATA, body=build_group_payload(group_id))

    def add_group_participant(self, group_id: str, participant: str) -> ApiResult[Any]:
        return self._participant_call(Endpoint.ADD_GROUP_PARTICIPANT, group_id, participant)

    def remove_group_participant(self, group_id: str, participant: str) -> ApiResult[Any]:
        return self._participant_call(Endpoint.REMOVE_GROUP_PARTICIPANT, group_id, participant)

    def set_group_admin(self, group_id: str, participant: str) -> ApiResult[Any]:
        return self._participant_call(Endpoint.SET_GROUP_ADMIN, group_id, participant)

    def remove_admin(self, group_id: str, participant: str) -> ApiResult[Any]:
        return self._participant_call(Endpoint.REMOVE_ADMIN, group_id, participant)

    def set_group_picture(self, group_id: str, path: str | Path) -> ApiResult[Any]:
        validate_group_id(group_id)
        encoded = encode_file(path, self._settings.media_max_size_bytes)
        return self._call(
            Endpoint.SET_GROUP_PICTURE,
            body=build_picture_payload(encoded, group_id=group_id),
        )

    def leave_group(self, group_id: str) -> ApiResult[Any]:
        validate_group_id(group_id)
        return self._call(Endpoint.LEAVE_GROUP, body=build_group_payload(group_id))

    def _participant_call(
        self,
        endpoint: Endpoint,
        group_id: str,
        participant: str,
    ) -> ApiResult[Any]:
        validate_group_id(group_id)
        body = build_participant_payload(group_id, resolve_chat_id(participant))
        return self._call(endpoint, body=body)
