"""Variable frames and the scope stack.

Frames live in an arena owned by the ScopeStack and refer to each other by
index: a frame records its parent's index, and an alias records the index
of the frame it points into. Index 0 is the global frame, which lives as
long as the interpreter.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from ..errors import UnknownVariableError


@dataclass(frozen=True)
class Alias:
    """A variable slot redirected to a slot in another frame."""

    frame_index: int
    name: str


Slot = Union[str, Alias]


class Frame:
    """One variable scope."""

    def __init__(self, stack: "ScopeStack", index: int, parent_index: Optional[int]):
        self._stack = stack
        self.index = index
        self.parent_index = parent_index
        self.variables: dict[str, Slot] = {}

    @property
    def parent(self) -> Optional[Frame]:
        """The frame that was current when this one was pushed."""
        if self.parent_index is None:
            return None
        return self._stack.frame(self.parent_index)

    @property
    def is_root(self) -> bool:
        return self.parent_index is None

    def _resolve(self, name: str) -> tuple[Frame, str]:
        """Follow at most one alias hop for ``name``."""
        slot = self.variables.get(name)
        if isinstance(slot, Alias):
            return self._stack.frame(slot.frame_index), slot.name
        return self, name

    def get(self, name: str) -> str:
        """Return the value of ``name``, raising UnknownVariableError if unset."""
        frame, target = self._resolve(name)
        value = frame.variables.get(target)
        if value is None or isinstance(value, Alias):
            raise UnknownVariableError(name)
        return value

    def set(self, name: str, value: object) -> str:
        """Assign ``name`` (through its alias, if any) and return the value."""
        frame, target = self._resolve(name)
        text = value if isinstance(value, str) else str(value)
        frame.variables[target] = text
        return text

    def has(self, name: str) -> bool:
        frame, target = self._resolve(name)
        return isinstance(frame.variables.get(target), str)

    def link(self, name: str, frame_index: int, target_name: Optional[str] = None) -> None:
        """Make ``name`` in this frame an alias for a slot in another frame."""
        if frame_index == self.index and (target_name or name) == name:
            return
        self.variables[name] = Alias(frame_index, target_name or name)

    def unset(self, name: str) -> None:
        """Remove the local slot for ``name``; aliased targets are untouched."""
        if name not in self.variables:
            raise UnknownVariableError(name)
        del self.variables[name]

    def values(self) -> dict[str, str]:
        """Snapshot of the plain values held directly in this frame."""
        return {k: v for k, v in self.variables.items() if isinstance(v, str)}

    def __repr__(self) -> str:
        return f"Frame(index={self.index}, parent={self.parent_index}, variables={self.variables!r})"


class ScopeStack:
    """Ordered stack of frames. Never empty: the global frame is permanent."""

    def __init__(self):
        self._frames: list[Frame] = [Frame(self, 0, None)]

    @property
    def root(self) -> Frame:
        return self._frames[0]

    @property
    def current(self) -> Frame:
        return self._frames[-1]

    @property
    def depth(self) -> int:
        return len(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def frame(self, index: int) -> Frame:
        return self._frames[index]

    def push(self) -> Frame:
        """Push a new frame whose parent is the current top of the stack."""
        frame = Frame(self, len(self._frames), self.current.index)
        self._frames.append(frame)
        return frame

    def pop(self) -> Frame:
        if len(self._frames) == 1:
            raise RuntimeError("cannot pop the global frame")
        return self._frames.pop()

    @contextmanager
    def pushed(self) -> Iterator[Frame]:
        """Push a frame for the duration of the block, popping it on any exit."""
        frame = self.push()
        try:
            yield frame
        finally:
            self.pop()
