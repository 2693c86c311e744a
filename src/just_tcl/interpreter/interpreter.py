"""Interpreter - Tcl Evaluation Engine.

Main interpreter class that owns the command registry and the scope stack.
Delegates to specialized modules for:
- Command and word parsing with substitution (substitution.py)
- Variable frames (frames.py)
- Built-in commands (builtins/)
"""

import logging
from typing import Optional, TextIO, Union

from ..errors import ExecutionLimitError, UnknownCommandError
from ..parser.cursor import Cursor
from ..types import Command, ExecutionLimits
from .builtins import BUILTINS
from .frames import Frame
from .substitution import parse_command
from .types import Completion, CompletionCode, InterpreterState

logger = logging.getLogger(__name__)


class Interpreter:
    """Parse-and-evaluate engine for Tcl scripts."""

    def __init__(
        self,
        commands: Optional[dict[str, Command]] = None,
        limits: Optional[ExecutionLimits] = None,
        state: Optional[InterpreterState] = None,
        stdout: Optional[TextIO] = None,
    ):
        """Initialize the interpreter.

        Args:
            commands: Command registry (defaults to a copy of the built-ins)
            limits: Execution limits
            state: Optional initial state (creates default if not provided)
            stdout: Stream that puts writes to. When omitted, output is
                buffered in ``state.stdout`` until collected.
        """
        self._commands = dict(BUILTINS) if commands is None else commands
        self._limits = limits or ExecutionLimits()
        self._state = state or InterpreterState()
        self._stream = stdout

        self.return_flag = False
        """Set by a handler to turn its result into a return signal."""

    @property
    def state(self) -> InterpreterState:
        """Get the interpreter state."""
        return self._state

    @property
    def commands(self) -> dict[str, Command]:
        return self._commands

    @property
    def limits(self) -> ExecutionLimits:
        return self._limits

    # Handler-facing operations

    def get_frame(self) -> Frame:
        """The current frame: during a handler call, the handler's own frame."""
        return self._state.frames.current

    def set_global(self, name: str, value: object) -> str:
        return self._state.frames.root.set(name, value)

    def get_global(self, name: str) -> str:
        return self._state.frames.root.get(name)

    def has_global(self, name: str) -> bool:
        return self._state.frames.root.has(name)

    def add_command(self, name: str, handler: Command) -> None:
        """Register (or replace) the handler for ``name``."""
        logger.debug("registering command %s", name)
        self._commands[name] = handler

    def has_command(self, name: str) -> bool:
        return name in self._commands

    def write(self, text: str) -> None:
        """Send output to the stream, or buffer it if there is none."""
        if self._stream is not None:
            self._stream.write(text)
        else:
            self._state.stdout += text

    def take_output(self) -> str:
        """Return buffered output and clear the buffer."""
        output = self._state.stdout
        self._state.stdout = ""
        return output

    # Evaluation

    async def evaluate(self, script: Union[str, Cursor]) -> str:
        """Evaluate a script and return the result of its last command.

        A return signal stops the script and is absorbed here.
        """
        self._state.pending_return = False
        completion = await self.evaluate_script(script)
        return completion.value

    async def evaluate_script(self, script: Union[str, Cursor]) -> Completion:
        """Evaluate commands until the input runs out or one returns.

        A returning completion is passed back to the caller unchanged. A
        return from an embedded command in a command's words ends the
        script once that command has run.
        """
        cursor = script if isinstance(script, Cursor) else Cursor(script)
        completion = Completion()
        while not cursor.at_end():
            words = await parse_command(self, cursor)
            embedded_return = self.take_pending_return()
            if not words:
                continue
            completion = await self.dispatch(words)
            if embedded_return and not completion.returning:
                completion = Completion(completion.value, CompletionCode.RETURN)
            if completion.returning:
                break
        return completion

    def take_pending_return(self) -> bool:
        """Return and clear the embedded-return marker."""
        pending = self._state.pending_return
        self._state.pending_return = False
        return pending

    async def dispatch(self, words: list[str]) -> Completion:
        """Run a command in a new frame whose parent is the current frame.

        The frame is popped however the handler exits.
        """
        name, args = words[0], list(words[1:])
        handler = self._commands.get(name)
        if handler is None:
            raise UnknownCommandError(name)

        self._state.command_count += 1
        if self._state.command_count > self._limits.max_command_count:
            raise ExecutionLimitError(
                f"too many commands executed (>{self._limits.max_command_count}), "
                "increase limits.max_command_count",
                "commands",
            )
        if self._state.frames.depth >= self._limits.max_call_depth:
            raise ExecutionLimitError(
                f"too many nested calls (>{self._limits.max_call_depth}), "
                "increase limits.max_call_depth",
                "depth",
            )

        logger.debug("dispatch %s %r at depth %d", name, args, self._state.frames.depth)
        with self._state.frames.pushed():
            self.return_flag = False
            try:
                result = await handler.call(self, args)
                returning = self.return_flag
            finally:
                self.return_flag = False

        if isinstance(result, Completion):
            return result
        value = "" if result is None else str(result)
        return Completion(value, CompletionCode.RETURN if returning else CompletionCode.OK)
