"""Builders para operações de grupos."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from api.payload_builders.greenapi.base import compact_payload


def build_create_group_payload(group_name: str, chat_ids: Sequence[str]) -> dict[str, Any]:
    return {"groupName": group_name, "chatIds": list(chat_ids)}


def build_group_payload(group_id: str, **fields: Any) -> dict[str, Any]:
    """Corpo padrão {groupId, ...campos presentes}."""
    return compact_payload({"groupId": group_id, **fields})


def build_participant_payload(group_id: str, participant_chat_id: str) -> dict[str, Any]:
    """Corpo de add/remove participante e set/remove admin."""
    return build_group_payload(group_id, participantChatId=participant_chat_id)
