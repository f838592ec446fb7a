"""Turn manager for Blank Party round flow."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from blankparty.models.game_state import GameState
    from blankparty.models.player import Player

from blankparty.models.game_state import AnswerRound


class TurnManager:
    """Tracks whose turn it is to answer.

    Participants are everyone except the host, in join order. The answer
    round walks them round-robin from position 0.

    Attributes:
        state: Reference to game state.
    """

    def __init__(self, state: "GameState") -> None:
        """Initialize turn manager.

        Args:
            state: The game state to manage.
        """
        self.state = state

    def get_turn_index(self) -> int | None:
        """Get the answering participant's position in turn order."""
        phase = self.state.phase
        if not isinstance(phase, AnswerRound):
            return None
        return phase.turn_index

    def get_current_player_index(self) -> int | None:
        """Map the current turn position back to the full player list.

        Returns:
            Index into ``state.players`` or None outside the answer round.
        """
        turn_index = self.get_turn_index()
        if turn_index is None:
            return None
        order = self.state.participant_indices
        if turn_index >= len(order):
            return None
        return order[turn_index]

    def get_current_player(self) -> "Player | None":
        """Get the participant holding the device."""
        index = self.get_current_player_index()
        if index is None:
            return None
        return self.state.players[index]

    def is_last_turn(self) -> bool:
        """Check if the current participant is the last to answer."""
        turn_index = self.get_turn_index()
        if turn_index is None:
            return False
        return turn_index == len(self.state.participant_indices) - 1

    def get_turn_info(self) -> dict[str, Any]:
        """Get information about the current turn.

        Returns:
            Dictionary with turn information.
        """
        host = self.state.host
        current = self.get_current_player()
        turn_index = self.get_turn_index()

        return {
            "phase": self.state.current_phase.value,
            "host": host.name if host else None,
            "current_player": current.name if current else None,
            "turn": turn_index + 1 if turn_index is not None else None,
            "participants": len(self.state.participant_indices),
            "answers_in": len(self.state.answers),
        }
