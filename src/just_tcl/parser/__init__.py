"""Parser module for just-tcl."""

from .cursor import Cursor
from .lexer import (
    ESCAPES,
    consume_comment,
    consume_whitespace,
    decode_escape,
    is_space,
    parse_variable,
)

__all__ = [
    "Cursor",
    "ESCAPES",
    "consume_comment",
    "consume_whitespace",
    "decode_escape",
    "is_space",
    "parse_variable",
]
