"""Shared fixtures for Blank Party tests."""

import random

import pytest

from blankparty.engine.question_bank import QuestionBank
from blankparty.engine.round_engine import RoundEngine

SMALL_BANK = [
    "My pet hates ______.",
    "Never trust a ______.",
    "Tonight's dinner is ______.",
]


@pytest.fixture
def engine() -> RoundEngine:
    """Fresh engine at the title screen, deterministic random source."""
    rng = random.Random(7)
    return RoundEngine(
        winning_score=3,
        question_bank=QuestionBank(SMALL_BANK, rng=rng),
        rng=rng,
    )


@pytest.fixture
def match_engine(engine: RoundEngine) -> RoundEngine:
    """Engine with host Alice and players Bob and Cara, match started."""
    engine.new_game()
    engine.set_host("Alice")
    engine.add_player("Bob")
    engine.add_player("Cara")
    engine.start_match()
    return engine
