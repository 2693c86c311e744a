"""Lexical helpers for Tcl script text.

These routines only scan text; none of them evaluates anything:
- whitespace and comment skipping
- backslash escape decoding
- variable name scanning ($name, $name(index), ${braced name})
"""

import re

from ..errors import UnsupportedEscapeError
from .cursor import Cursor

# Single-character backslash escapes.
ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
}

_OCTAL_DIGITS = frozenset("01234567")
_VARIABLE_CHAR = re.compile(r"[\w:]", re.ASCII)
_INDEX_CHAR = re.compile(r"[\w,]", re.ASCII)


def is_space(c: str) -> bool:
    return c != "" and c.isspace()


def consume_whitespace(cursor: Cursor) -> None:
    """Skip whitespace, leaving the cursor at the next non-space character."""
    while is_space(cursor.peek()):
        cursor.advance()


def consume_comment(cursor: Cursor) -> None:
    """Skip a comment. The cursor must be at the ``#``.

    The comment runs to the first unescaped newline, which is consumed.
    Inside a comment only ``\\<newline>`` and ``\\\\`` are escapes; both are
    skipped as a unit so an escaped newline continues the comment.
    """
    while not cursor.at_end():
        c = cursor.peek()
        if c == "\\":
            if cursor.peek(1) in ("\n", "\\"):
                cursor.advance()
        elif c == "\n":
            cursor.advance()
            return
        cursor.advance()


def decode_escape(cursor: Cursor) -> str:
    """Decode the backslash escape at the cursor and consume it.

    Known escapes map through ESCAPES; any other character stands for
    itself. Octal, ``\\x`` and ``\\u`` forms raise UnsupportedEscapeError
    instead of decoding to the wrong text.
    """
    c = cursor.peek(1)
    if c in _OCTAL_DIGITS:
        raise UnsupportedEscapeError(c, "octal", cursor.position)
    if c == "x":
        raise UnsupportedEscapeError(c, "hex", cursor.position)
    if c == "u":
        raise UnsupportedEscapeError(c, "unicode", cursor.position)
    cursor.advance(2)
    return ESCAPES.get(c, c)


def parse_variable(cursor: Cursor) -> str:
    """Scan a variable reference and return the variable name.

    The cursor must be at the ``$``; it is left just after the reference.
    """
    if cursor.peek(1) == "{":
        return _parse_braced_variable(cursor)
    return _parse_normal_variable(cursor)


def _parse_braced_variable(cursor: Cursor) -> str:
    # The first close brace ends the name, nested or not.
    cursor.advance(2)
    start = cursor.position
    while not cursor.at_end():
        if cursor.peek() == "}":
            name = cursor.slice(start, cursor.position)
            cursor.advance()
            return name
        cursor.advance()
    return cursor.slice(start, cursor.position)


def _parse_normal_variable(cursor: Cursor) -> str:
    cursor.advance()
    start = cursor.position
    while _VARIABLE_CHAR.fullmatch(cursor.peek()):
        cursor.advance()
    name = cursor.slice(start, cursor.position)
    if cursor.peek() == "(":
        name += _parse_array_index(cursor)
    return name


def _parse_array_index(cursor: Cursor) -> str:
    """Scan ``(index)`` and return it including the parentheses.

    A character that is neither an index character nor ``)`` ends the
    index too: it is consumed but left out of the returned text.
    """
    start = cursor.position
    cursor.advance()
    while not cursor.at_end():
        c = cursor.peek()
        if c == ")":
            cursor.advance()
            return cursor.slice(start, cursor.position)
        if not _INDEX_CHAR.fullmatch(c):
            index = cursor.slice(start, cursor.position)
            cursor.advance()
            return index
        cursor.advance()
    return cursor.slice(start, cursor.position)
