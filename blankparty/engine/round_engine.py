"""Round engine for Blank Party."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Any

from blankparty.config import get_winning_score
from blankparty.models.game_state import (
    AddPlayers,
    AnswerRound,
    CreateQuestion,
    GamePhase,
    GameState,
    Judgment,
    Reveal,
    SetupHost,
    Victory,
    WaitForHost,
)
from blankparty.models.player import Player
from blankparty.models.question import Answer, Question, count_blanks
from blankparty.turn_manager.action_validator import (
    ERROR_MESSAGES,
    ActionValidator,
    ErrorCode,
)
from blankparty.turn_manager.turn_manager import TurnManager

from .question_bank import QuestionBank

logger = logging.getLogger(__name__)

# Phases in which a match is under way and players are fixed
MATCH_PHASES = (
    GamePhase.CREATE_QUESTION,
    GamePhase.ANSWER_ROUND,
    GamePhase.WAIT_FOR_HOST,
    GamePhase.JUDGMENT,
    GamePhase.REVEAL,
    GamePhase.VICTORY,
)


class RoundEngine:
    """Main engine driving a session from setup to victory.

    Every operation returns a result dictionary. On success it holds
    ``success=True`` and a ``message``; on failure ``success=False``, an
    ``error`` message for the player and the ``code`` that caused it.
    Failed operations never change the state.

    Attributes:
        state: The current game state.
        winning_score: Score that ends the game.
        question_bank: Source of random questions.
        turn_manager: Tracks the answering order.
        validator: Checks operations before they run.
    """

    def __init__(
        self,
        winning_score: int | None = None,
        question_bank: QuestionBank | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize a new round engine.

        Args:
            winning_score: Score that wins. Defaults to the configured value.
            question_bank: Bank to draw from. Defaults to the built-in bank.
            rng: Random source for draws and shuffles.
        """
        if winning_score is None:
            winning_score = get_winning_score()
        if winning_score < 1:
            raise ValueError(f"Winning score must be at least 1, got {winning_score}")

        self.winning_score = winning_score
        self.rng = rng or random.Random()
        self.question_bank = question_bank or QuestionBank(rng=self.rng)
        self.state = GameState()
        self.turn_manager = TurnManager(self.state)
        self.validator = ActionValidator(self.state)

    # -- queries ---------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        """Get the current phase tag."""
        return self.state.current_phase

    @property
    def host(self) -> Player | None:
        """Get the current host."""
        return self.state.host

    @property
    def participants(self) -> list[Player]:
        """Get the players answering this round, in turn order."""
        return self.state.participants

    @property
    def current_participant(self) -> Player | None:
        """Get the participant who should be holding the device."""
        return self.turn_manager.get_current_player()

    @property
    def is_last_participant(self) -> bool:
        """Check if the current participant answers last this round."""
        return self.turn_manager.is_last_turn()

    @property
    def winner(self) -> Player | None:
        """Get the picked author during reveal or the game winner."""
        phase = self.state.phase
        if isinstance(phase, (Reveal, Victory)):
            return self.state.players[phase.winner_index]
        return None

    @property
    def victor(self) -> Player | None:
        """Get the player who reached the winning score, if any."""
        for player in self.state.players:
            if player.score >= self.winning_score:
                return player
        return None

    def judgment_answers(self) -> tuple[Answer, ...]:
        """Get answers in the order shown to the host while judging."""
        phase = self.state.phase
        if isinstance(phase, Judgment):
            return phase.presentation
        return ()

    def scoreboard(self) -> list[Player]:
        """Get players ordered by score, highest first."""
        return sorted(self.state.players, key=lambda p: p.score, reverse=True)

    # -- setup -----------------------------------------------------------

    def new_game(self) -> dict[str, Any]:
        """Drop all players and start setting up a new game."""
        self._clear_players()
        self.state.phase = SetupHost()
        self.state.log_event("new_game", {})
        logger.info("New game, waiting for host")
        return self._ok("New game! Who is hosting?")

    def set_host(self, name: str) -> dict[str, Any]:
        """Create the first player, who hosts the first round.

        Args:
            name: Host's name.
        """
        error = self.validator.validate_phase(GamePhase.SETUP_HOST)
        error = error or self.validator.validate_new_name(name)
        if error:
            return self._fail(error, "set_host")

        host = Player(name=name.strip())
        self.state.players = [host]
        self.state.host_index = 0
        self.state.phase = AddPlayers()

        self.state.log_event("host_set", {"name": host.name})
        logger.info(f"Host set to {host.name}")
        return self._ok(f"{host.name} is the host.")

    def add_player(self, name: str) -> dict[str, Any]:
        """Add a player to the roster.

        Args:
            name: Player's name, unique ignoring case.
        """
        error = self.validator.validate_phase(GamePhase.ADD_PLAYERS)
        error = error or self.validator.validate_new_name(name)
        if error:
            return self._fail(error, "add_player")

        player = Player(name=name.strip())
        self.state.players.append(player)

        self.state.log_event("player_added", {"name": player.name})
        logger.info(f"Player {player.name} added ({len(self.state.players)} total)")
        return self._ok(f"{player.name} joined.")

    def start_match(self) -> dict[str, Any]:
        """Start the first round once enough players joined."""
        error = self.validator.validate_phase(GamePhase.ADD_PLAYERS)
        error = error or self.validator.validate_start()
        if error:
            return self._fail(error, "start_match")

        self.state.phase = CreateQuestion()

        self.state.log_event("match_started", {"players": len(self.state.players)})
        logger.info(f"Match started with {len(self.state.players)} players")
        return self._ok("Let's play!")

    # -- questions -------------------------------------------------------

    def draw_random_question(self) -> dict[str, Any]:
        """Draw an unused question from the bank and open answering."""
        error = self.validator.validate_phase(GamePhase.CREATE_QUESTION)
        if error:
            return self._fail(error, "draw_random_question")

        text = self.question_bank.draw(self.state.used_questions)
        return self._open_round(Question(text=text, slot_count=1), source="bank")

    def compose_manual_question(self, raw_text: str) -> dict[str, Any]:
        """Use the host's own question and open answering.

        Args:
            raw_text: Question with one or two blanks.
        """
        error = self.validator.validate_phase(GamePhase.CREATE_QUESTION)
        error = error or self.validator.validate_question(raw_text)
        if error:
            return self._fail(error, "compose_manual_question")

        text = raw_text.strip()
        question = Question(text=text, slot_count=count_blanks(text))
        return self._open_round(question, source="manual")

    def _open_round(self, question: Question, source: str) -> dict[str, Any]:
        """Enter the answer round for a question."""
        self.state.phase = AnswerRound(question=question)

        self.state.log_event(
            "question_set",
            {"text": question.text, "slots": question.slot_count, "source": source},
        )
        logger.info(f"Question ({source}, {question.slot_count} blanks): {question.text}")

        first = self.current_participant
        return self._ok(f"Pass the device to {first.name}.")

    # -- answering -------------------------------------------------------

    def submit_answer(self, texts: Sequence[str]) -> dict[str, Any]:
        """Record the current participant's answer.

        Args:
            texts: One text per blank. Extra entries are ignored.
        """
        error = self.validator.validate_phase(GamePhase.ANSWER_ROUND)
        if error:
            return self._fail(error, "submit_answer")

        phase = self.state.phase
        slot_count = phase.question.slot_count

        error = self.validator.validate_answer(texts, slot_count)
        if error:
            return self._fail(error, "submit_answer")

        author_index = self.turn_manager.get_current_player_index()
        author = self.state.players[author_index]
        answer = Answer(
            author_index=author_index,
            texts=tuple(text.strip() for text in texts[:slot_count]),
        )
        answers = phase.answers + (answer,)
        last = self.turn_manager.is_last_turn()

        if last:
            self.state.phase = WaitForHost(question=phase.question, answers=answers)
        else:
            self.state.phase = AnswerRound(
                question=phase.question,
                answers=answers,
                turn_index=phase.turn_index + 1,
            )

        self.state.log_event("answer_submitted", {"author": author.name})
        logger.info(f"{author.name} answered ({len(answers)} in)")

        if last:
            return self._ok(f"All answers in! Pass the device back to {self.host.name}.")
        return self._ok(f"Pass the device to {self.current_participant.name}.")

    # -- judging ---------------------------------------------------------

    def open_judgment(self) -> dict[str, Any]:
        """Show the collected answers to the host in a shuffled order."""
        error = self.validator.validate_phase(GamePhase.WAIT_FOR_HOST)
        if error:
            return self._fail(error, "open_judgment")

        phase = self.state.phase
        presentation = list(phase.answers)
        self.rng.shuffle(presentation)
        self.state.phase = Judgment(
            question=phase.question,
            answers=phase.answers,
            presentation=tuple(presentation),
        )

        self.state.log_event("judgment_opened", {"answers": len(presentation)})
        logger.info(f"Judging {len(presentation)} answers")
        return self._ok(f"{self.host.name}, pick the best answer.")

    def pick_winner(self, author_index: int) -> dict[str, Any]:
        """Pick the round's best answer by its author.

        Args:
            author_index: Player index of the winning answer's author.
        """
        error = self.validator.validate_phase(GamePhase.JUDGMENT)
        error = error or self.validator.validate_winner(author_index)
        if error:
            return self._fail(error, "pick_winner")

        phase = self.state.phase
        self.state.phase = Reveal(
            question=phase.question,
            answers=phase.answers,
            winner_index=author_index,
        )

        winner = self.state.players[author_index]
        self.state.log_event("winner_picked", {"winner": winner.name})
        logger.info(f"{self.host.name} picked {winner.name}'s answer")
        return self._ok(f"The author was {winner.name}!")

    def advance_round(self) -> dict[str, Any]:
        """Award the point and move on to the next round or victory."""
        error = self.validator.validate_phase(GamePhase.REVEAL)
        if error:
            return self._fail(error, "advance_round")

        winner_index = self.state.phase.winner_index
        winner = self.state.players[winner_index]
        score = winner.add_point()
        self.state.log_event("point_awarded", {"winner": winner.name, "score": score})

        if score >= self.winning_score:
            self.state.phase = Victory(winner_index=winner_index)
            self.state.log_event("game_won", {"winner": winner.name, "score": score})
            logger.info(f"{winner.name} wins with {score} points")
            return self._ok(f"{winner.name} wins the game!")

        self.state.host_index = winner_index
        self.state.phase = CreateQuestion()
        logger.info(f"{winner.name} scores ({score}) and hosts next round")
        return self._ok(f"{winner.name} scores and hosts the next round.")

    # -- restart ---------------------------------------------------------

    def restart(self, keep_players: bool) -> dict[str, Any]:
        """Start over, either with the same players or from scratch.

        Args:
            keep_players: Keep the roster with scores reset to zero.
        """
        if not keep_players:
            return self.new_game()

        error = self.validator.validate_phase(*MATCH_PHASES)
        if error:
            return self._fail(error, "restart")

        for player in self.state.players:
            player.reset_score()
        self.state.host_index = 0
        self.state.phase = CreateQuestion()

        self.state.log_event("rematch", {"players": len(self.state.players)})
        logger.info(f"Rematch with {len(self.state.players)} players")
        return self._ok(f"Rematch! {self.host.name} hosts first.")

    # -- helpers ---------------------------------------------------------

    def _clear_players(self) -> None:
        """Forget the roster and everything tied to it."""
        self.state.players.clear()
        self.state.host_index = 0
        self.state.used_questions.clear()

    def _ok(self, message: str) -> dict[str, Any]:
        return {"success": True, "message": message}

    def _fail(self, code: ErrorCode, operation: str) -> dict[str, Any]:
        logger.debug(f"{operation} rejected in {self.phase.value}: {code.value}")
        return {"success": False, "error": ERROR_MESSAGES[code], "code": code}
