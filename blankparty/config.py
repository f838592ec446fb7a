"""Environment configuration for Blank Party."""

import os

DEFAULT_WINNING_SCORE = 5


def get_winning_score() -> int:
    """Get the score that wins a game.

    Reads ``WINNING_SCORE`` from the environment.

    Returns:
        Positive winning score.
    """
    raw = os.getenv("WINNING_SCORE")
    if not raw:
        return DEFAULT_WINNING_SCORE
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"WINNING_SCORE must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"WINNING_SCORE must be at least 1, got {value}")
    return value


def get_bot_token() -> str:
    """Get the Telegram bot token, or an empty string if unset."""
    return os.getenv("TELEGRAM_BOT_TOKEN", "")
