"""Output builtin: puts."""

from typing import TYPE_CHECKING

from ...errors import WrongArgsError

if TYPE_CHECKING:
    from ..interpreter import Interpreter


class PutsCommand:
    """The puts builtin.

    Usage: puts ?-nonewline? string

    Write string followed by a newline to the interpreter's output.
    """

    name = "puts"

    async def call(self, interp: "Interpreter", words: list[str]) -> str:
        newline = True
        if len(words) == 2 and words[0] == "-nonewline":
            newline = False
            words = words[1:]
        if len(words) != 1:
            raise WrongArgsError("puts ?-nonewline? string")

        interp.write(words[0] + ("\n" if newline else ""))
        return ""
