"""Error types raised by the Tcl interpreter.

Every error is fatal to the ``evaluate`` call that triggered it. Errors
propagate unchanged through nested command substitutions and procedure
bodies; only the :class:`~just_tcl.tcl.Tcl` facade and the script driver
turn them into output.
"""

from typing import Optional


class TclError(Exception):
    """Base class for all interpreter errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(TclError):
    """Malformed script text."""

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
        self.position = position


class UnclosedQuoteError(ParseError):
    """End of input reached inside a quoted word."""

    def __init__(self, position: Optional[int] = None):
        super().__init__("unclosed quote", position)


class UnclosedBraceError(ParseError):
    """End of input reached inside a braced word."""

    def __init__(self, position: Optional[int] = None):
        super().__init__("unclosed brace", position)


class UnsupportedEscapeError(ParseError):
    """Octal, hex and unicode backslash escapes are not decoded."""

    def __init__(self, sequence: str, kind: str, position: Optional[int] = None):
        super().__init__(f"{kind} escape \\{sequence} not supported", position)
        self.sequence = sequence
        self.kind = kind


class UnknownVariableError(TclError):
    """A variable was read before it was set."""

    def __init__(self, name: str):
        super().__init__(f"no such variable '{name}'")
        self.name = name


class UnknownCommandError(TclError):
    """The first word of a command names no registered handler."""

    def __init__(self, name: str):
        super().__init__(f"unknown command `{name}'")
        self.name = name


class WrongArgsError(TclError):
    """A command was called with the wrong number of arguments."""

    def __init__(self, usage: str):
        super().__init__(f'wrong # args: should be "{usage}"')
        self.usage = usage


class ExecutionLimitError(TclError):
    """An execution limit was exceeded."""

    def __init__(self, message: str, limit_type: str):
        super().__init__(message)
        self.limit_type = limit_type
