"""Player model for Blank Party."""

from dataclasses import dataclass


@dataclass
class Player:
    """Represents a player in the game.

    Attributes:
        name: Display name of the player, unique within a session
            (compared case-insensitively).
        score: Rounds won in the current game.
    """

    name: str
    score: int = 0

    def matches(self, name: str) -> bool:
        """Check if a name refers to this player, ignoring case."""
        return self.name.lower() == name.strip().lower()

    def add_point(self) -> int:
        """Award one point and return the new score."""
        self.score += 1
        return self.score

    def reset_score(self) -> None:
        """Reset score to zero for a rematch."""
        self.score = 0
