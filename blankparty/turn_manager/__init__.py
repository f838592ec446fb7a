"""Turn management for Blank Party."""

from .turn_manager import TurnManager
from .action_validator import ERROR_MESSAGES, ActionValidator, ErrorCode

__all__ = [
    "TurnManager",
    "ActionValidator",
    "ErrorCode",
    "ERROR_MESSAGES",
]
