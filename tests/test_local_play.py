"""Tests for the terminal session."""

import random

from blankparty.engine.round_engine import RoundEngine
from blankparty.main import CLEAR_SCREEN, run_local
from blankparty.models.game_state import GamePhase


def scripted(lines):
    """Build an input function that replays lines, then hits end of input."""
    remaining = list(lines)

    def _input(prompt: str) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


def make_engine(winning_score: int = 1) -> RoundEngine:
    return RoundEngine(winning_score=winning_score, rng=random.Random(11))


def test_local_game_to_victory():
    output: list[str] = []
    inputs = scripted(
        [
            "Alice",
            "Bob",
            "bob",  # duplicate, rejected
            "Cara",
            "",  # start match
            "I like ___",
            "",  # submit question
            "pizza",
            "rain",
            "",  # open answers
            "7",  # out of range
            "1",
            "",  # next round
            "q",
        ]
    )

    engine = run_local(inputs, output.append, engine=make_engine())

    assert engine.phase == GamePhase.VICTORY
    assert [p.name for p in engine.state.players] == ["Alice", "Bob", "Cara"]
    assert sum(p.score for p in engine.state.players) == 1
    assert any("already taken" in line for line in output)
    assert any("Pick a number from 1 to 2" in line for line in output)
    assert output[-1] == "👋 Bye!"


def test_local_question_draft_with_blank_button():
    output: list[str] = []
    inputs = scripted(["Alice", "Bob", "Cara", "", "I want", "+", ""])

    engine = run_local(inputs, output.append, engine=make_engine())

    assert engine.phase == GamePhase.ANSWER_ROUND
    assert engine.state.question.text == "I want______"
    assert any("Blanks: 1" in line for line in output)


def test_local_random_question():
    inputs = scripted(["Alice", "Bob", "Cara", "", "?"])

    engine = run_local(inputs, lambda text: None, engine=make_engine())

    assert engine.phase == GamePhase.ANSWER_ROUND
    assert engine.state.question.text in engine.question_bank.questions


def test_local_rematch_keeps_players():
    inputs = scripted(
        ["Alice", "Bob", "Cara", "", "?", "x", "y", "", "2", "", "again"]
    )

    engine = run_local(inputs, lambda text: None, engine=make_engine())

    assert engine.phase == GamePhase.CREATE_QUESTION
    assert len(engine.state.players) == 3
    assert all(p.score == 0 for p in engine.state.players)


def test_local_quit_command():
    inputs = scripted(["Alice", "/quit", "Bob"])

    engine = run_local(inputs, lambda text: None, engine=make_engine())

    assert engine.phase == GamePhase.ADD_PLAYERS
    assert len(engine.state.players) == 1


def test_local_draft_keeps_blank_when_text_follows():
    output: list[str] = []
    inputs = scripted(["Alice", "Bob", "Cara", "", "I like", "+", " a lot", ""])

    engine = run_local(inputs, output.append, engine=make_engine())

    assert engine.phase == GamePhase.ANSWER_ROUND
    assert engine.state.question.text == "I like______ a lot"
    assert engine.state.question.slot_count == 1


def test_local_clear_draft():
    output: list[str] = []
    inputs = scripted(["Alice", "Bob", "Cara", "", "Oops ___", "-", "Fixed ___", ""])

    engine = run_local(inputs, output.append, engine=make_engine())

    assert engine.phase == GamePhase.ANSWER_ROUND
    assert engine.state.question.text == "Fixed ___"
    assert "✏️ (empty)\nBlanks: 0" in output


def test_local_clears_screen_after_each_answer():
    output: list[str] = []
    inputs = scripted(["Alice", "Bob", "Cara", "", "I like ___", "", "pizza", "rain"])

    engine = run_local(inputs, output.append, engine=make_engine())

    assert engine.phase == GamePhase.WAIT_FOR_HOST
    assert output.count(CLEAR_SCREEN) == 2
    handoff = next(i for i, line in enumerate(output) if "Pass the device back" in line)
    assert output[handoff - 1] == CLEAR_SCREEN
