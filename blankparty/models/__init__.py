"""Game models for Blank Party."""

from .player import Player
from .question import (
    BLANK_MARKER,
    Answer,
    Question,
    append_to_draft,
    compose_sentence,
    count_blanks,
    insert_blank,
)
from .game_state import (
    AddPlayers,
    AnswerRound,
    CreateQuestion,
    GamePhase,
    GameState,
    Home,
    Judgment,
    PhaseState,
    Reveal,
    SetupHost,
    Victory,
    WaitForHost,
)

__all__ = [
    "Player",
    "Question",
    "Answer",
    "BLANK_MARKER",
    "append_to_draft",
    "compose_sentence",
    "count_blanks",
    "insert_blank",
    "GamePhase",
    "GameState",
    "PhaseState",
    "Home",
    "SetupHost",
    "AddPlayers",
    "CreateQuestion",
    "AnswerRound",
    "WaitForHost",
    "Judgment",
    "Reveal",
    "Victory",
]
