"""Command and Word Parsing with Substitution.

Splits commands into words, performing substitution while parsing:
- Variable substitution ($name, $name(index), ${name})
- Command substitution [...]
- Backslash escapes

Substitution happens at the point it is met, so parsing and evaluation
call each other recursively: an embedded ``[...]`` command is dispatched
while the enclosing word is still being parsed.
"""

from typing import TYPE_CHECKING

from ..errors import UnclosedBraceError, UnclosedQuoteError
from ..parser.cursor import Cursor
from ..parser.lexer import (
    consume_comment,
    consume_whitespace,
    decode_escape,
    is_space,
    parse_variable,
)

if TYPE_CHECKING:
    from .interpreter import Interpreter

# Backslash sequences reduced inside braces.
BRACE_ESCAPABLE = ("\n", "}", "{", "\\")


async def parse_command(interp: "Interpreter", cursor: Cursor, embedded: bool = False) -> list[str]:
    """Parse one command into its substituted words.

    The command ends at ``;`` or newline, or at ``]`` when ``embedded``, and
    the terminator is consumed. Leading whitespace and comments are skipped.
    """
    words: list[str] = []

    if embedded:
        cursor.advance()  # [

    consume_whitespace(cursor)
    while cursor.peek() == "#":
        consume_comment(cursor)
        consume_whitespace(cursor)

    while not cursor.at_end():
        c = cursor.peek()
        if c in (";", "\n"):
            cursor.advance()
            return words
        if c == '"':
            words.append(await parse_quoted_word(interp, cursor))
        elif c == "{":
            words.append(parse_braced_word(cursor))
        elif is_space(c):
            cursor.advance()
        elif embedded and c == "]":
            cursor.advance()
            return words
        else:
            words.append(await parse_unquoted_word(interp, cursor, stop_at_close_bracket=embedded))
    return words


async def parse_unquoted_word(
    interp: "Interpreter", cursor: Cursor, stop_at_close_bracket: bool = False
) -> str:
    """Parse a bare word, stopping before whitespace, ``;`` or (optionally) ``]``."""
    result = ""
    while not cursor.at_end():
        c = cursor.peek()
        if is_space(c) or c == ";":
            return result
        if stop_at_close_bracket and c == "]":
            return result
        result += await _substitute_or_literal(interp, cursor, c)
    return result


async def parse_quoted_word(interp: "Interpreter", cursor: Cursor) -> str:
    """Parse a double-quoted word. The cursor must be at the opening quote."""
    start = cursor.position
    cursor.advance()
    result = ""
    while not cursor.at_end():
        c = cursor.peek()
        if c == '"':
            cursor.advance()
            return result
        result += await _substitute_or_literal(interp, cursor, c)
    raise UnclosedQuoteError(start)


def parse_braced_word(cursor: Cursor) -> str:
    """Parse a braced word without any substitution.

    Nested braces are kept in the result. Only the backslash sequences in
    BRACE_ESCAPABLE are reduced to their second character; any other
    backslash is copied as is.
    """
    start = cursor.position
    cursor.advance()
    result = ""
    while not cursor.at_end():
        c = cursor.peek()
        if c == "}":
            cursor.advance()
            return result
        if c == "{":
            result += "{" + parse_braced_word(cursor) + "}"
        elif c == "\\" and cursor.peek(1) in BRACE_ESCAPABLE:
            result += cursor.peek(1)
            cursor.advance(2)
        else:
            result += c
            cursor.advance()
    raise UnclosedBraceError(start)


async def resolve_variable(interp: "Interpreter", cursor: Cursor) -> str:
    """Parse a variable reference and return its value in the current frame."""
    name = parse_variable(cursor)
    return interp.get_frame().get(name)


async def substitute_command(interp: "Interpreter", cursor: Cursor) -> str:
    """Parse and run the embedded ``[...]`` command at the cursor.

    The value is substituted either way. If the embedded command returned,
    the interpreter is marked so the enclosing script ends after the
    command being parsed has run.
    """
    words = await parse_command(interp, cursor, embedded=True)
    # Held across the dispatch so a procedure body run by it cannot see it.
    pending = interp.take_pending_return()
    if not words:
        interp.state.pending_return = pending
        return ""
    completion = await interp.dispatch(words)
    interp.state.pending_return = pending or completion.returning
    return completion.value


async def _substitute_or_literal(interp: "Interpreter", cursor: Cursor, c: str) -> str:
    """Consume one unit of a quoted or unquoted word and return its text."""
    if c == "\\":
        return decode_escape(cursor)
    if c == "$":
        return await resolve_variable(interp, cursor)
    if c == "[":
        return await substitute_command(interp, cursor)
    cursor.advance()
    return c
