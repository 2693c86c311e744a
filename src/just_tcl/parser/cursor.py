"""Cursor - a position-tracking view over script text."""

from typing import Sequence, Union


class Cursor:
    """Read position over an immutable sequence of characters.

    Looking past the end returns an empty string instead of failing, and
    advancing past the end clamps at the end, so callers treat ``""`` as
    end of input.
    """

    def __init__(self, text: Union[str, Sequence[str]]):
        self._chars: Sequence[str] = tuple(text) if isinstance(text, str) else text
        self._pos = 0

    @property
    def position(self) -> int:
        """Index of the next character to be read."""
        return self._pos

    def peek(self, offset: int = 0) -> str:
        """Look ahead ``offset`` characters without consuming anything."""
        if self.at_end(offset):
            return ""
        return self._chars[self._pos + offset]

    def advance(self, n: int = 1) -> None:
        """Consume ``n`` characters, stopping at the end of input."""
        self._pos = min(self._pos + n, len(self._chars))

    def remaining(self) -> int:
        """Number of characters left to read."""
        return len(self._chars) - self._pos

    def at_end(self, offset: int = 0) -> bool:
        return self._pos + offset >= len(self._chars)

    def slice(self, start: int, end: int) -> str:
        """Join the characters in ``[start, end)``."""
        return "".join(self._chars[start:end])

    def __repr__(self) -> str:
        return f"Cursor(position={self._pos}, remaining={self.remaining()})"
