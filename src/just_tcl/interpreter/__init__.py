"""Interpreter module for just-tcl."""

from .builtins import BUILTINS, Procedure
from .frames import Alias, Frame, ScopeStack
from .interpreter import Interpreter
from .substitution import (
    parse_braced_word,
    parse_command,
    parse_quoted_word,
    parse_unquoted_word,
    resolve_variable,
    substitute_command,
)
from .types import Completion, CompletionCode, InterpreterState

__all__ = [
    "Alias",
    "BUILTINS",
    "Completion",
    "CompletionCode",
    "Frame",
    "Interpreter",
    "InterpreterState",
    "Procedure",
    "ScopeStack",
    "parse_braced_word",
    "parse_command",
    "parse_quoted_word",
    "parse_unquoted_word",
    "resolve_variable",
    "substitute_command",
]
