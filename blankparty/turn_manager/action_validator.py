"""Action validator for Blank Party."""

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blankparty.models.game_state import GameState

from blankparty.models.game_state import GamePhase
from blankparty.models.question import MAX_BLANKS, count_blanks

MIN_PLAYERS = 3


class ErrorCode(Enum):
    """Reasons an operation can be rejected."""

    EMPTY_INPUT = "empty_input"
    DUPLICATE_NAME = "duplicate_name"
    INSUFFICIENT_PLAYERS = "insufficient_players"
    EMPTY_QUESTION = "empty_question"
    NO_BLANKS = "no_blanks"
    TOO_MANY_BLANKS = "too_many_blanks"
    INCOMPLETE_ANSWER = "incomplete_answer"
    INVALID_PHASE = "invalid_phase"
    UNKNOWN_AUTHOR = "unknown_author"


ERROR_MESSAGES = {
    ErrorCode.EMPTY_INPUT: "Please enter a name.",
    ErrorCode.DUPLICATE_NAME: "That name is already taken!",
    ErrorCode.INSUFFICIENT_PLAYERS: (
        f"Add at least 2 more players ({MIN_PLAYERS} people in total)."
    ),
    ErrorCode.EMPTY_QUESTION: "Write a question with at least one blank (______).",
    ErrorCode.NO_BLANKS: "Write a question with at least one blank (______).",
    ErrorCode.TOO_MANY_BLANKS: f"A question can have at most {MAX_BLANKS} blanks.",
    ErrorCode.INCOMPLETE_ANSWER: "Fill in every blank!",
    ErrorCode.INVALID_PHASE: "That can't be done right now.",
    ErrorCode.UNKNOWN_AUTHOR: "Nobody gave that answer this round.",
}


class ActionValidator:
    """Validates operations against the current state.

    Every check returns None when the operation is allowed, or the
    ErrorCode explaining why it is not.

    Attributes:
        state: Reference to game state.
    """

    def __init__(self, state: "GameState") -> None:
        """Initialize action validator.

        Args:
            state: The game state to validate against.
        """
        self.state = state

    def validate_phase(self, *allowed: GamePhase) -> ErrorCode | None:
        """Check the session is in one of the allowed phases."""
        if self.state.current_phase not in allowed:
            return ErrorCode.INVALID_PHASE
        return None

    def validate_new_name(self, name: str) -> ErrorCode | None:
        """Validate a host or player name."""
        trimmed = name.strip()
        if not trimmed:
            return ErrorCode.EMPTY_INPUT
        if self.state.find_player(trimmed):
            return ErrorCode.DUPLICATE_NAME
        return None

    def validate_start(self) -> ErrorCode | None:
        """Validate there are enough players for a match."""
        if len(self.state.players) < MIN_PLAYERS:
            return ErrorCode.INSUFFICIENT_PLAYERS
        return None

    def validate_question(self, text: str) -> ErrorCode | None:
        """Validate a hand-written question."""
        trimmed = text.strip()
        if not trimmed:
            return ErrorCode.EMPTY_QUESTION

        blanks = count_blanks(trimmed)
        if blanks == 0:
            return ErrorCode.NO_BLANKS
        if blanks > MAX_BLANKS:
            return ErrorCode.TOO_MANY_BLANKS
        return None

    def validate_answer(self, texts: Sequence[str], slot_count: int) -> ErrorCode | None:
        """Validate an answer covers every blank.

        Extra texts beyond ``slot_count`` are ignored.
        """
        if len(texts) < slot_count:
            return ErrorCode.INCOMPLETE_ANSWER
        if any(not text.strip() for text in texts[:slot_count]):
            return ErrorCode.INCOMPLETE_ANSWER
        return None

    def validate_winner(self, author_index: int) -> ErrorCode | None:
        """Validate the picked author answered this round."""
        if not any(a.author_index == author_index for a in self.state.answers):
            return ErrorCode.UNKNOWN_AUTHOR
        return None
