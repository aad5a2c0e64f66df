"""Validadores para operações de grupos."""

from __future__ import annotations

from collections.abc import Sequence

from api.connectors.greenapi.errors import ValidationError
from api.normalizers.phone import is_group_chat_id
from api.validators.greenapi.limits import MAX_GROUP_NAME_LENGTH


def validate_group_id(group_id: str) -> None:
    """Exige um id de grupo no formato "...@g.us"."""
    if not group_id or not is_group_chat_id(group_id):
        raise ValidationError(f"groupId must end with @g.us: {group_id!r}")


def validate_group_name(group_name: str) -> None:
    if not group_name or not group_name.strip():
        raise ValidationError("groupName is required")
    if len(group_name) > MAX_GROUP_NAME_LENGTH:
        raise ValidationError(
            f"groupName exceeds maximum length of {MAX_GROUP_NAME_LENGTH} characters"
        )


def validate_participants(participants: Sequence[str]) -> None:
    if not participants:
        raise ValidationError("at least one participant is required")
