"""Built-in commands for just-tcl.

Each handler has ``async call(interp, words)`` where words excludes the
command name.
"""

from typing import TYPE_CHECKING

from .control import ReturnCommand
from .io import PutsCommand
from .procedures import ProcCommand, Procedure
from .variables import GlobalCommand, SetCommand

if TYPE_CHECKING:
    from ...types import Command


BUILTINS: dict[str, "Command"] = {
    "set": SetCommand(),
    "global": GlobalCommand(),
    "puts": PutsCommand(),
    "proc": ProcCommand(),
    "return": ReturnCommand(),
}

__all__ = [
    "BUILTINS",
    "GlobalCommand",
    "ProcCommand",
    "Procedure",
    "PutsCommand",
    "ReturnCommand",
    "SetCommand",
]
