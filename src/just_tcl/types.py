"""Public types for just-tcl."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from .interpreter import Completion, Interpreter


@dataclass
class ExecResult:
    """Outcome of running a script through the Tcl facade."""

    result: str = ""
    """Result of the last command evaluated."""

    stdout: str = ""
    """Text written by puts during the run."""

    stderr: str = ""
    """Error message, if the run failed."""

    exit_code: int = 0
    """0 on success, 1 when a TclError ended the run."""


@dataclass
class ExecutionLimits:
    """Limits guarding against runaway scripts."""

    max_command_count: int = 10000
    """Maximum number of commands dispatched over the interpreter's life."""

    max_call_depth: int = 200
    """Maximum number of frames on the scope stack."""


@runtime_checkable
class Command(Protocol):
    """A command handler.

    ``words`` excludes the command name. The handler runs with a fresh frame
    pushed for it; ``interp.get_frame().parent`` is the caller's frame.
    """

    async def call(self, interp: "Interpreter", words: list[str]) -> Union[str, "Completion"]:
        ...
