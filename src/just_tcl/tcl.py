"""Main Tcl class - the primary API for just-tcl.

Example usage:
    from just_tcl import Tcl

    # Synchronous usage (for REPL, scripts)
    tcl = Tcl()
    result = tcl.run("set greeting hello; puts $greeting")
    print(result.stdout)  # "hello\\n"

    # Async usage (for async applications)
    tcl = Tcl()
    result = await tcl.exec("set a 99")
    print(result.result)  # "99"

    # With initial globals
    tcl = Tcl(variables={"name": "world"})
    result = tcl.run('puts "hello $name"')
"""

import asyncio
from typing import Any, Coroutine, Optional, TextIO, TypeVar

import nest_asyncio  # type: ignore[import-untyped]

from .errors import TclError
from .interpreter import BUILTINS, Interpreter, InterpreterState
from .types import Command, ExecResult, ExecutionLimits

T = TypeVar("T")


def _run_sync(coro: Coroutine[Any, Any, T]) -> T:
    try:
        asyncio.get_running_loop()
        # We're in an existing event loop (Jupyter, async framework, etc.)
        # Apply nest_asyncio to allow nested event loops
        nest_asyncio.apply()
    except RuntimeError:
        # No running event loop, asyncio.run() will work fine
        pass
    return asyncio.run(coro)


class Tcl:
    """Main Tcl interpreter class.

    Provides a high-level API for evaluating Tcl scripts with a persistent
    set of global variables and commands.
    """

    def __init__(
        self,
        *,
        commands: Optional[dict[str, Command]] = None,
        limits: Optional[ExecutionLimits] = None,
        variables: Optional[dict[str, str]] = None,
        stdout: Optional[TextIO] = None,
    ):
        """Initialize the Tcl interpreter.

        Args:
            commands: Extra commands, added to (or replacing) the built-ins.
            limits: Execution limits for security.
            variables: Initial global variables.
            stdout: Stream for puts output. If not provided, output is
                collected into ExecResult.stdout.
        """
        self._limits = limits or ExecutionLimits()
        self._extra_commands = dict(commands or {})
        self._variables = dict(variables or {})
        self._stdout = stdout
        self._interpreter = self._create_interpreter()

    def _create_interpreter(self) -> Interpreter:
        interpreter = Interpreter(
            commands={**BUILTINS, **self._extra_commands},
            limits=self._limits,
            state=InterpreterState(),
            stdout=self._stdout,
        )
        for name, value in self._variables.items():
            interpreter.set_global(name, value)
        return interpreter

    @property
    def interpreter(self) -> Interpreter:
        """Get the underlying interpreter."""
        return self._interpreter

    @property
    def globals(self) -> dict[str, str]:
        """Get a snapshot of the global variables."""
        return self._interpreter.state.frames.root.values()

    def add_command(self, name: str, handler: Command) -> None:
        """Register a command that survives reset()."""
        self._extra_commands[name] = handler
        self._interpreter.add_command(name, handler)

    async def exec(self, script: str) -> ExecResult:
        """Evaluate a Tcl script.

        Args:
            script: The Tcl script to evaluate.

        Returns:
            ExecResult with the result, collected output, and any error.
        """
        self._interpreter.take_output()
        try:
            value = await self._interpreter.evaluate(script)
        except TclError as e:
            return ExecResult(
                result="",
                stdout=self._interpreter.take_output(),
                stderr=f"error: {e}\n",
                exit_code=1,
            )
        return ExecResult(
            result=value,
            stdout=self._interpreter.take_output(),
            stderr="",
            exit_code=0,
        )

    def run(self, script: str) -> ExecResult:
        """Evaluate a Tcl script synchronously.

        This is a convenience wrapper around exec() that works in any context,
        including Jupyter notebooks and async frameworks.

        Example:
            >>> tcl = Tcl()
            >>> result = tcl.run('puts "Hello, World!"')
            >>> print(result.stdout)
            Hello, World!
        """
        return _run_sync(self.exec(script))

    def eval(self, script: str) -> str:
        """Evaluate a script synchronously and return its result.

        Unlike run(), errors are raised as TclError.
        """
        return _run_sync(self._interpreter.evaluate(script))

    def reset(self) -> None:
        """Reset the interpreter to its initial variables and commands."""
        self._interpreter = self._create_interpreter()
