"""Operações do cliente, agrupadas por área do provedor."""

from .account import AccountOperations
from .base import OperationBase
from .groups import GroupOperations
from .journals import JournalOperations
from .sending import SendingOperations
from .service import ServiceOperations
from .statuses import StatusOperations

__all__ = [
    "AccountOperations",
    "GroupOperations",
    "JournalOperations",
    "OperationBase",
    "SendingOperations",
    "ServiceOperations",
    "StatusOperations",
]
