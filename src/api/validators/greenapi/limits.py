"""Limites aplicados pelo provedor, checados no cliente antes do envio."""

from __future__ import annotations

# Texto
MAX_MESSAGE_LENGTH = 20000
MAX_CAPTION_LENGTH = 20000

# Enquete (sendPoll)
MIN_POLL_OPTIONS = 2
MAX_POLL_OPTIONS = 12
MAX_POLL_QUESTION_LENGTH = 255
MAX_POLL_OPTION_LENGTH = 100

# Botões interativos (sendInteractiveButtons)
MIN_INTERACTIVE_BUTTONS = 1
MAX_INTERACTIVE_BUTTONS = 3
MAX_BUTTON_TEXT_LENGTH = 25

# Digitação (sendTyping), em milissegundos
MIN_TYPING_TIME_MS = 1000
MAX_TYPING_TIME_MS = 20000

# Grupos
MAX_GROUP_NAME_LENGTH = 100

# Jornal / notificações
MIN_HISTORY_COUNT = 1
MIN_JOURNAL_MINUTES = 1
MIN_RECEIVE_TIMEOUT_SECONDS = 5
MAX_RECEIVE_TIMEOUT_SECONDS = 60

# Localização
MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0
MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0
