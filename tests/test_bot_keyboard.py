"""Tests for the bot's inline keyboards and sessions."""

import pytest

from blankparty.bot.handlers import build_keyboard
from blankparty.bot.telegram_bot import BlankPartyBot, ChatSession


def callbacks(markup):
    return [button.callback_data for row in markup.inline_keyboard for button in row]


def test_keyboard_follows_phase(engine):
    session = ChatSession(engine=engine)

    assert callbacks(build_keyboard(session)) == ["fresh"]

    engine.new_game()
    assert build_keyboard(session) is None

    engine.set_host("Alice")
    assert callbacks(build_keyboard(session)) == ["start"]

    engine.add_player("Bob")
    engine.add_player("Cara")
    engine.start_match()
    assert callbacks(build_keyboard(session)) == ["blank", "done", "clear", "random"]

    engine.draw_random_question()
    assert build_keyboard(session) is None

    engine.submit_answer(["a"])
    engine.submit_answer(["b"])
    assert callbacks(build_keyboard(session)) == ["open"]

    engine.open_judgment()
    expected = [f"pick:{a.author_index}" for a in engine.judgment_answers()]
    assert callbacks(build_keyboard(session)) == expected

    engine.pick_winner(1)
    assert callbacks(build_keyboard(session)) == ["next"]


def test_session_reset_inputs(engine):
    session = ChatSession(engine=engine, draft="half ___", pending=["one"])

    session.reset_inputs()

    assert session.draft == ""
    assert session.pending == []


def test_bot_requires_token(monkeypatch):
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)

    with pytest.raises(ValueError):
        BlankPartyBot()


def test_bot_sessions_per_chat():
    bot = BlankPartyBot(token="123:abc", winning_score=4)

    first = bot.get_or_create_session(1)
    assert bot.get_or_create_session(1) is first
    assert bot.get_or_create_session(2) is not first
    assert first.engine.winning_score == 4

    assert bot.end_session(1)
    assert bot.get_session(1) is None
    assert not bot.end_session(1)
