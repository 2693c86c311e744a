"""Interpreter types for just-tcl."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .frames import ScopeStack


class CompletionCode(Enum):
    """How a command or script finished."""

    OK = "ok"
    RETURN = "return"


@dataclass(frozen=True)
class Completion:
    """Result of dispatching a command or evaluating a script.

    A RETURN completion stops the script that sees it. Each evaluation
    level decides whether to pass it on (``evaluate_script``) or absorb it
    and keep only the value (procedure bodies, ``evaluate``).
    """

    value: str = ""
    code: CompletionCode = CompletionCode.OK

    @property
    def returning(self) -> bool:
        return self.code is CompletionCode.RETURN


@dataclass
class InterpreterState:
    """Mutable state maintained by the interpreter."""

    frames: ScopeStack = field(default_factory=ScopeStack)
    """Scope stack; index 0 is the global frame."""

    command_count: int = 0
    """Total commands dispatched (for limits)."""

    stdout: str = ""
    """Output written by puts and not yet collected."""

    pending_return: bool = False
    """Set when an embedded command returned while the current command's
    words were being parsed; the command then ends its script."""
