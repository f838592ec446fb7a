"""Tests for environment configuration."""

import pytest

from blankparty.config import DEFAULT_WINNING_SCORE, get_bot_token, get_winning_score


def test_winning_score_default(monkeypatch):
    monkeypatch.delenv("WINNING_SCORE", raising=False)

    assert get_winning_score() == DEFAULT_WINNING_SCORE


def test_winning_score_from_env(monkeypatch):
    monkeypatch.setenv("WINNING_SCORE", "8")

    assert get_winning_score() == 8


@pytest.mark.parametrize("raw", ["zero", "0", "-3", "2.5"])
def test_winning_score_invalid(monkeypatch, raw):
    monkeypatch.setenv("WINNING_SCORE", raw)

    with pytest.raises(ValueError):
        get_winning_score()


def test_bot_token(monkeypatch):
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    assert get_bot_token() == ""

    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    assert get_bot_token() == "123:abc"
