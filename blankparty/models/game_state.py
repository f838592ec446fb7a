"""Game state model for Blank Party."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from .player import Player
from .question import Answer, Question


class GamePhase(Enum):
    """Phases of a session."""

    HOME = "home"
    SETUP_HOST = "setup_host"
    ADD_PLAYERS = "add_players"
    CREATE_QUESTION = "create_question"
    ANSWER_ROUND = "answer_round"
    WAIT_FOR_HOST = "wait_for_host"
    JUDGMENT = "judgment"
    REVEAL = "reveal"
    VICTORY = "victory"


@dataclass(frozen=True)
class Home:
    """Title screen, before any game exists."""

    kind: ClassVar[GamePhase] = GamePhase.HOME


@dataclass(frozen=True)
class SetupHost:
    """Waiting for the first host's name."""

    kind: ClassVar[GamePhase] = GamePhase.SETUP_HOST


@dataclass(frozen=True)
class AddPlayers:
    """Host is set, more players are joining."""

    kind: ClassVar[GamePhase] = GamePhase.ADD_PLAYERS


@dataclass(frozen=True)
class CreateQuestion:
    """Host is drawing or writing the round's question."""

    kind: ClassVar[GamePhase] = GamePhase.CREATE_QUESTION


@dataclass(frozen=True)
class AnswerRound:
    """Participants answer one after another.

    Attributes:
        question: The round's question.
        answers: Answers submitted so far, in turn order.
        turn_index: Position of the answering participant in turn order.
    """

    question: Question
    answers: tuple[Answer, ...] = ()
    turn_index: int = 0

    kind: ClassVar[GamePhase] = GamePhase.ANSWER_ROUND


@dataclass(frozen=True)
class WaitForHost:
    """All answers are in, device goes back to the host."""

    question: Question
    answers: tuple[Answer, ...]

    kind: ClassVar[GamePhase] = GamePhase.WAIT_FOR_HOST


@dataclass(frozen=True)
class Judgment:
    """Host reads the answers and picks one.

    Attributes:
        question: The round's question.
        answers: Answers in submission order.
        presentation: The same answers in the shuffled order shown to the
            host. Set once when judging opens.
    """

    question: Question
    answers: tuple[Answer, ...]
    presentation: tuple[Answer, ...]

    kind: ClassVar[GamePhase] = GamePhase.JUDGMENT


@dataclass(frozen=True)
class Reveal:
    """The winning author is shown before points are awarded."""

    question: Question
    answers: tuple[Answer, ...]
    winner_index: int

    kind: ClassVar[GamePhase] = GamePhase.REVEAL


@dataclass(frozen=True)
class Victory:
    """A player reached the winning score."""

    winner_index: int

    kind: ClassVar[GamePhase] = GamePhase.VICTORY


PhaseState = (
    Home
    | SetupHost
    | AddPlayers
    | CreateQuestion
    | AnswerRound
    | WaitForHost
    | Judgment
    | Reveal
    | Victory
)


@dataclass
class GameState:
    """Complete state of one pass-the-device session.

    Attributes:
        players: Players in join order. Index 0 is the first host.
        host_index: Index of the current host.
        used_questions: Bank questions already drawn this game.
        phase: Current phase with its phase-specific data.
        game_log: Log of game events.
    """

    players: list[Player] = field(default_factory=list)
    host_index: int = 0
    used_questions: set[str] = field(default_factory=set)
    phase: PhaseState = field(default_factory=Home)
    game_log: list[dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Post-initialization setup."""
        self.logger = logging.getLogger(__name__)

    @property
    def current_phase(self) -> GamePhase:
        """Get the tag of the current phase."""
        return self.phase.kind

    @property
    def host(self) -> Player | None:
        """Get the current host."""
        if 0 <= self.host_index < len(self.players):
            return self.players[self.host_index]
        return None

    @property
    def participant_indices(self) -> list[int]:
        """Indices of everyone but the host, in turn order."""
        return [i for i in range(len(self.players)) if i != self.host_index]

    @property
    def participants(self) -> list[Player]:
        """Players answering this round, in turn order."""
        return [self.players[i] for i in self.participant_indices]

    @property
    def question(self) -> Question | None:
        """Get the active question, if a round is under way."""
        return getattr(self.phase, "question", None)

    @property
    def answers(self) -> tuple[Answer, ...]:
        """Get answers collected this round."""
        return getattr(self.phase, "answers", ())

    def find_player(self, name: str) -> Player | None:
        """Find a player by name, ignoring case."""
        for player in self.players:
            if player.matches(name):
                return player
        return None

    def get_scores(self) -> dict[str, int]:
        """Get each player's score keyed by name."""
        return {player.name: player.score for player in self.players}

    def log_event(self, event_type: str, data: dict[str, Any]) -> None:
        """Log a game event."""
        self.game_log.append(
            {
                "type": event_type,
                "data": data,
                "phase": self.current_phase.value,
            }
        )
