"""Telegram bot interface for Blank Party."""

from .telegram_bot import BlankPartyBot, ChatSession
from .handlers import CommandHandlers, GameHandlers

__all__ = [
    "BlankPartyBot",
    "ChatSession",
    "CommandHandlers",
    "GameHandlers",
]
