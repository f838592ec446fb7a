"""Question bank for random rounds."""

import logging
import random

logger = logging.getLogger(__name__)

# Every entry holds exactly one blank
QUESTIONS_BANK = [
    "I can't go out tonight because ______.",
    "The secret ingredient in grandma's soup is ______.",
    "Nobody talks about it, but the office party ended with ______.",
    "My dating profile says I enjoy long walks and ______.",
    "The real reason the wifi is slow: ______.",
    "Scientists finally discovered what cats want: ______.",
    "My last two brain cells are busy thinking about ______.",
    "What's the worst thing to say at a wedding? ______.",
    "The new superhero has one power: ______.",
    "I would sell my soul for ______.",
    "Breaking news: local man arrested for ______.",
    "The theme of next year's family reunion is ______.",
    "My therapist says I need to stop ______.",
    "The worst gift I ever received was ______.",
    "My guilty pleasure at 3 a.m. is ______.",
    "The group chat went silent after someone sent ______.",
    "Nothing ruins a first date faster than ______.",
    "I put ______ on my resume and somehow got the job.",
    "The ancient prophecy warned us about ______.",
    "My neighbor keeps ______ in the garage.",
    "If I were president, my first law would ban ______.",
    "The sequel nobody asked for: ______ 2.",
    "Mom found ______ in my backpack.",
    "The only thing scarier than ghosts is ______.",
    "My New Year's resolution lasted until ______.",
]


class QuestionBank:
    """Draws bank questions without repeats until the bank runs out.

    Attributes:
        questions: Templates to draw from, each with one blank.
        rng: Random source used for draws.
    """

    def __init__(
        self,
        questions: list[str] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the question bank.

        Args:
            questions: Templates to use. Defaults to the built-in bank.
            rng: Random source. Defaults to a fresh ``random.Random``.
        """
        self.questions = list(questions if questions is not None else QUESTIONS_BANK)
        if not self.questions:
            raise ValueError("Question bank cannot be empty")
        self.rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self.questions)

    def available(self, used: set[str]) -> list[str]:
        """Get questions not drawn yet."""
        return [q for q in self.questions if q not in used]

    def draw(self, used: set[str]) -> str:
        """Draw a question and mark it used.

        When every question has been used, the used set is cleared and the
        whole bank becomes available again.

        Args:
            used: Questions already drawn this game. Updated in place.

        Returns:
            The drawn question text.
        """
        available = self.available(used)
        if not available:
            logger.info("Question bank exhausted, starting over")
            used.clear()
            available = list(self.questions)

        picked = self.rng.choice(available)
        used.add(picked)
        return picked
