"""Script driver: evaluate Tcl files in one interpreter.

Usage: python -m just_tcl script.tcl [more.tcl ...]
       python -m just_tcl -c 'puts hello'
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .errors import TclError
from .tcl import Tcl


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line interface for the interpreter."""
    parser = argparse.ArgumentParser(
        prog="just-tcl",
        description="Evaluate Tcl scripts",
    )
    parser.add_argument("files", nargs="*", help="Script files, evaluated in order")
    parser.add_argument("-c", "--command", help="Evaluate this script text after the files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log command dispatch")

    args = parser.parse_args(argv)
    if not args.files and args.command is None:
        parser.error("nothing to evaluate: give script files or -c")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    tcl = Tcl(stdout=sys.stdout)
    try:
        scripts = [Path(name).read_text() for name in args.files]
    except OSError as e:
        print(f"just-tcl: {e}", file=sys.stderr)
        return 1
    if args.command is not None:
        scripts.append(args.command)

    for script in scripts:
        try:
            tcl.eval(script)
        except TclError as e:
            print(f"just-tcl: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
