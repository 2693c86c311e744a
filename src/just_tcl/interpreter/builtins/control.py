"""Control flow builtin: return."""

from typing import TYPE_CHECKING

from ...errors import WrongArgsError

if TYPE_CHECKING:
    from ..interpreter import Interpreter


class ReturnCommand:
    """The return builtin.

    Usage: return ?value?

    Stop the enclosing procedure body (or top-level script) and make value,
    or the empty string, its result.
    """

    name = "return"

    async def call(self, interp: "Interpreter", words: list[str]) -> str:
        if len(words) > 1:
            raise WrongArgsError("return ?value?")
        interp.return_flag = True
        return words[0] if words else ""
