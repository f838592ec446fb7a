"""Text rendering for Blank Party."""

from .state_renderer import StateRenderer, emphasize

__all__ = [
    "StateRenderer",
    "emphasize",
]
