"""State renderer for Blank Party screens."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from blankparty.engine.round_engine import RoundEngine

from blankparty.models.game_state import GamePhase
from blankparty.models.question import Answer, compose_sentence, count_blanks

DIVIDER = "═══════════════════════════════════"


def emphasize(text: str) -> str:
    """Format an inserted answer so it stands out in the sentence."""
    return f"«{text.upper()}»"


class StateRenderer:
    """Renders the current screen of a session as text.

    Attributes:
        engine: Engine whose state is rendered.
        state: Reference to game state.
    """

    def __init__(self, engine: "RoundEngine") -> None:
        """Initialize state renderer.

        Args:
            engine: The engine to render.
        """
        self.engine = engine
        self.state = engine.state

    def render_screen(self) -> str:
        """Render the screen for the current phase.

        Returns:
            Formatted string for the current phase.
        """
        renderers = {
            GamePhase.HOME: self._render_home,
            GamePhase.SETUP_HOST: self._render_setup_host,
            GamePhase.ADD_PLAYERS: self._render_add_players,
            GamePhase.CREATE_QUESTION: self._render_create_question,
            GamePhase.ANSWER_ROUND: self._render_answer_round,
            GamePhase.WAIT_FOR_HOST: self._render_wait_for_host,
            GamePhase.JUDGMENT: self._render_judgment,
            GamePhase.REVEAL: self._render_reveal,
            GamePhase.VICTORY: self._render_victory,
        }
        return renderers[self.state.current_phase]()

    def _render_home(self) -> str:
        return f"{DIVIDER}\n🎉 BLANK PARTY\n{DIVIDER}\nStart a new game to begin."

    def _render_setup_host(self) -> str:
        return "🎤 Who is the host?\nSend the host's name."

    def _render_add_players(self) -> str:
        """Render the roster while players join."""
        host = self.state.host
        lines = [f"👥 Players (host: {host.name})"]

        others = self.state.players[1:]
        if not others:
            lines.append("  No players added yet")
        for i, player in enumerate(others, 1):
            lines.append(f"  #{i} {player.name}")

        lines.append("")
        lines.append("Send the next player's name, or start the match.")
        return "\n".join(lines)

    def _render_create_question(self) -> str:
        host = self.state.host
        return (
            f"🎤 {host.name}'s turn to host\n\n"
            f"{self.render_scoreboard()}\n\n"
            f"Write a question with 1 or 2 blanks (______), or draw a random one."
        )

    def render_draft(self, draft: str) -> str:
        """Render a question draft with its blank count.

        Args:
            draft: Question being written.
        """
        shown = draft if draft else "(empty)"
        return f"✏️ {shown}\nBlanks: {count_blanks(draft)}"

    def _render_answer_round(self) -> str:
        """Render the answering participant's prompt."""
        question = self.state.question
        current = self.engine.current_participant
        blanks = "blank" if question.slot_count == 1 else f"{question.slot_count} blanks"

        return (
            f"📱 Pass the device to {current.name}\n\n"
            f"❓ {question.text}\n\n"
            f"Fill the {blanks}, one message each."
        )

    def _render_wait_for_host(self) -> str:
        return (
            "✅ Answers sent!\n"
            f"📱 Pass the device back to {self.state.host.name}"
        )

    def _render_judgment(self) -> str:
        """Render shuffled answers as full sentences for the host."""
        lines = [
            f"🎤 Host: {self.state.host.name}",
            "Pick the best sentence:",
            "",
        ]
        for i, answer in enumerate(self.engine.judgment_answers(), 1):
            lines.append(f"{i}. {self.render_sentence(answer)}")
        return "\n".join(lines)

    def render_sentence(self, answer: Answer) -> str:
        """Render the round's question completed with an answer."""
        return compose_sentence(self.state.question.text, answer.texts, emphasize)

    def _render_reveal(self) -> str:
        winner = self.engine.winner
        # Points are awarded when the round advances
        if winner.score + 1 >= self.engine.winning_score:
            outcome = f"{winner.name} wins the game!"
        else:
            outcome = f"{winner.name} hosts the next round!"
        return f"The author was...\n🏅 {winner.name} +1\n\n{outcome}"

    def _render_victory(self) -> str:
        """Render the final standings."""
        winner = self.engine.winner
        lines = [
            DIVIDER,
            "🏆 WINNER! 🏆",
            DIVIDER,
            "",
            f"🎉 {winner.name} wins with {winner.score} points! 🎉",
            "",
            self.render_scoreboard(),
        ]
        return "\n".join(lines)

    def render_scoreboard(self) -> str:
        """Render scores, highest first."""
        lines = ["📊 Scores:"]
        host = self.state.host
        for player in self.engine.scoreboard():
            crown = "🎤 " if player is host else "   "
            lines.append(f"{crown}{player.name}: {player.score}")
        return "\n".join(lines)

    def render_action_result(self, result: dict[str, Any]) -> str:
        """Render the result of an operation.

        Args:
            result: Operation result dictionary.

        Returns:
            Formatted result message.
        """
        if result.get("success"):
            emoji = "✅"
            message = result.get("message", "Done")
        else:
            emoji = "❌"
            message = result.get("error", "Something went wrong")

        return f"{emoji} {message}"
