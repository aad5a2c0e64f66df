"""Validadores para leitura de jornal e fila de notificações."""

from __future__ import annotations

from api.connectors.greenapi.errors import ValidationError
from api.validators.greenapi.limits import (
    MAX_RECEIVE_TIMEOUT_SECONDS,
    MIN_HISTORY_COUNT,
    MIN_JOURNAL_MINUTES,
    MIN_RECEIVE_TIMEOUT_SECONDS,
)


def validate_minutes(minutes: int | None) -> None:
    if minutes is not None and minutes < MIN_JOURNAL_MINUTES:
        raise ValidationError(f"minutes must be >= {MIN_JOURNAL_MINUTES}")


def validate_history_count(count: int | None) -> None:
    if count is not None and count < MIN_HISTORY_COUNT:
        raise ValidationError(f"count must be >= {MIN_HISTORY_COUNT}")


def validate_receive_timeout(receive_timeout: int | None) -> None:
    if receive_timeout is None:
        return
    if not MIN_RECEIVE_TIMEOUT_SECONDS <= receive_timeout <= MAX_RECEIVE_TIMEOUT_SECONDS:
        raise ValidationError(
            f"receiveTimeout must be between {MIN_RECEIVE_TIMEOUT_SECONDS} "
            f"and {MAX_RECEIVE_TIMEOUT_SECONDS} seconds"
        )


def validate_message_id(id_message: str) -> None:
    if not id_message or not id_message.strip():
        raise ValidationError("idMessage is required")


def validate_receipt_id(receipt_id: int) -> None:
    if isinstance(receipt_id, bool) or not isinstance(receipt_id, int) or receipt_id < 0:
        raise ValidationError(f"invalid receiptId: {receipt_id!r}")
