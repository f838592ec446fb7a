"""Game engine for Blank Party."""

from .round_engine import RoundEngine
from .question_bank import QUESTIONS_BANK, QuestionBank

__all__ = [
    "RoundEngine",
    "QuestionBank",
    "QUESTIONS_BANK",
]
