"""Validadores client-side para a API Green API.

Checam apenas limites simples que o provedor também aplica; regras de
negócio ficam no provedor.

Uso:
    from api.validators.greenapi import validate_poll

    validate_poll("Almoço?", ["Sim", "Não"])
"""

from api.connectors.greenapi.errors import ValidationError
from api.validators.greenapi.groups import (
    validate_group_id,
    validate_group_name,
    validate_participants,
)
from api.validators.greenapi.journal import (
    validate_history_count,
    validate_message_id,
    validate_minutes,
    validate_receipt_id,
    validate_receive_timeout,
)
from api.validators.greenapi.limits import (
    MAX_BUTTON_TEXT_LENGTH,
    MAX_INTERACTIVE_BUTTONS,
    MAX_MESSAGE_LENGTH,
    MAX_POLL_OPTIONS,
    MIN_POLL_OPTIONS,
)
from api.validators.greenapi.messaging import (
    validate_caption,
    validate_file_reference,
    validate_forward,
    validate_interactive_buttons,
    validate_location,
    validate_message_text,
    validate_poll,
    validate_typing_time,
)

__all__ = [
    "MAX_BUTTON_TEXT_LENGTH",
    "MAX_INTERACTIVE_BUTTONS",
    "MAX_MESSAGE_LENGTH",
    "MAX_POLL_OPTIONS",
    "MIN_POLL_OPTIONS",
    "ValidationError",
    "validate_caption",
    "validate_file_reference",
    "validate_forward",
    "validate_group_id",
    "validate_group_name",
    "validate_history_count",
    "validate_interactive_buttons",
    "validate_location",
    "validate_message_id",
    "validate_message_text",
    "validate_minutes",
    "validate_participants",
    "validate_poll",
    "validate_receipt_id",
    "validate_receive_timeout",
    "validate_typing_time",
]
