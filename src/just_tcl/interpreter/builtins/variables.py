"""Variable builtins: set, global.

Both act on the caller's frame, i.e. the parent of the frame pushed for
the command itself.
"""

import logging
from typing import TYPE_CHECKING

from ...errors import WrongArgsError

if TYPE_CHECKING:
    from ..interpreter import Interpreter

logger = logging.getLogger(__name__)


class SetCommand:
    """The set builtin.

    Usage: set varName ?newValue?

    With one argument, return the value of varName. With two, assign
    newValue to varName and return it.
    """

    name = "set"

    async def call(self, interp: "Interpreter", words: list[str]) -> str:
        frame = interp.get_frame().parent
        if len(words) == 1:
            return frame.get(words[0])
        if len(words) == 2:
            return frame.set(words[0], words[1])
        raise WrongArgsError("set varName ?newValue?")


class GlobalCommand:
    """The global builtin.

    Usage: global ?varName ...?

    Link each varName in the caller's frame to the variable of the same
    name in the global frame. Has no effect at global level.
    """

    name = "global"

    async def call(self, interp: "Interpreter", words: list[str]) -> str:
        frame = interp.get_frame().parent
        root = interp.state.frames.root
        for name in words:
            logger.debug("linking %s in frame %d to global", name, frame.index)
            frame.link(name, root.index)
        return ""
