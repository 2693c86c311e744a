"""Procedure builtin: proc.

Usage: proc name params body

Define a new command called name. When it is invoked, each parameter is
bound to the matching argument in the command's own frame and body is
evaluated as a script in that frame.
"""

import logging
from typing import TYPE_CHECKING

from ...errors import WrongArgsError
from ...parser.cursor import Cursor

if TYPE_CHECKING:
    from ..interpreter import Interpreter

logger = logging.getLogger(__name__)


class Procedure:
    """A command defined by proc."""

    def __init__(self, name: str, params: list[str], body: str):
        self.name = name
        self.params = params
        self.body = body
        # Only the character split is cached; substitutions depend on the
        # frame at call time, so the body is parsed again on every call.
        self._chars = tuple(body)

    async def call(self, interp: "Interpreter", words: list[str]) -> str:
        frame = interp.get_frame()
        # Extra parameters stay unbound, extra arguments are dropped.
        for param, value in zip(self.params, words):
            frame.set(param, value)

        completion = await interp.evaluate_script(Cursor(self._chars))
        return completion.value

    def __repr__(self) -> str:
        return f"Procedure(name={self.name!r}, params={self.params!r})"


class ProcCommand:
    """The proc builtin."""

    name = "proc"

    async def call(self, interp: "Interpreter", words: list[str]) -> str:
        if len(words) != 3:
            raise WrongArgsError("proc name args body")
        name, params, body = words
        logger.debug("defining procedure %s with params %s", name, params)
        interp.add_command(name, Procedure(name, params.split(), body))
        return ""
