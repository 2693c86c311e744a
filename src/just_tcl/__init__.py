"""just-tcl: an embeddable interpreter for a subset of Tcl."""

from .errors import (
    ExecutionLimitError,
    ParseError,
    TclError,
    UnclosedBraceError,
    UnclosedQuoteError,
    UnknownCommandError,
    UnknownVariableError,
    UnsupportedEscapeError,
    WrongArgsError,
)
from .interpreter import Completion, CompletionCode, Frame, Interpreter, Procedure
from .parser import Cursor
from .tcl import Tcl
from .types import Command, ExecResult, ExecutionLimits

__version__ = "0.1.0"

__all__ = [
    "Command",
    "Completion",
    "CompletionCode",
    "Cursor",
    "ExecResult",
    "ExecutionLimitError",
    "ExecutionLimits",
    "Frame",
    "Interpreter",
    "ParseError",
    "Procedure",
    "Tcl",
    "TclError",
    "UnclosedBraceError",
    "UnclosedQuoteError",
    "UnknownCommandError",
    "UnknownVariableError",
    "UnsupportedEscapeError",
    "WrongArgsError",
]
