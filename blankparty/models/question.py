"""Question and answer models for Blank Party.

A blank is any run of three or more underscores. Questions carry one or two
blanks; answers carry one text per blank.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

BLANK_PATTERN = re.compile(r"_{3,}")

# Marker inserted by the authoring helper
BLANK_MARKER = "______"

MAX_BLANKS = 2


@dataclass(frozen=True)
class Question:
    """A fill-in-the-blank sentence for one round.

    Attributes:
        text: Sentence containing one or two blank markers.
        slot_count: Number of blanks players must fill.
    """

    text: str
    slot_count: int = 1


@dataclass(frozen=True)
class Answer:
    """One participant's completion of the round's question.

    Attributes:
        author_index: Index of the author in the player list.
        texts: One text per blank, in order.
    """

    author_index: int
    texts: tuple[str, ...] = field(default_factory=tuple)


def count_blanks(text: str) -> int:
    """Count blank markers in a sentence."""
    return len(BLANK_PATTERN.findall(text))


def compose_sentence(
    text: str,
    answers: Sequence[str],
    highlight: Callable[[str], str] | None = None,
) -> str:
    """Fill blanks left to right with answer texts.

    Each text consumes exactly one marker, in order. Texts beyond the number
    of markers are ignored and markers beyond the number of texts are left
    as they are.

    Args:
        text: Question text with blank markers.
        answers: Texts to insert.
        highlight: Optional formatter applied to each inserted text.

    Returns:
        The completed sentence.
    """
    fill = iter(answers)

    def _replace(match: re.Match[str]) -> str:
        value = next(fill, None)
        if value is None:
            return match.group(0)
        return highlight(value) if highlight else value

    return BLANK_PATTERN.sub(_replace, text)


def insert_blank(text: str, position: int | None = None) -> str:
    """Insert a blank marker into a question draft.

    Args:
        text: Current draft.
        position: Character offset to insert at. Defaults to the end.

    Returns:
        The new draft, or the draft unchanged if it already holds the
        maximum number of blanks.
    """
    if count_blanks(text) >= MAX_BLANKS:
        return text
    if position is None:
        position = len(text)
    position = max(0, min(position, len(text)))
    return text[:position] + BLANK_MARKER + text[position:]


def append_to_draft(draft: str, text: str) -> str:
    """Continue a question draft with more text.

    A single space separates the two parts unless one side already has
    whitespace at the join.
    """
    if not draft or not text:
        return draft + text
    if draft[-1].isspace() or text[0].isspace():
        return draft + text
    return f"{draft} {text}"
