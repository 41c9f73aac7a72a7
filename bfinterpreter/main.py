"""Uses the bf engine to interpret Brainfuck files or run in command-line mode. Also uses error handling context
manager. Called from the bf executable script.

Python version must be >=3.6, because error handling requires that dicts are insertion-ordered.
"""

import argparse
import sys

from bfinterpreter.lang.error import ErrorHandler
from bfinterpreter.lang.session import Session
from bfinterpreter.lang.shell import Shell
from bfinterpreter.lang.tape import Tape


def main():
    """Runs bf interpreter. Called from bf executable script."""
    assert sys.version_info >= (3, 6), "bf cannot be run with python < 3.6"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="bf", description="Brainfuck interpreter")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("-t", "--tape-size", help=f"number of cells on the tape (default: {Tape.SIZE})",
                            type=int, default=Tape.SIZE)
        args = parser.parse_args()

        if args.file is not None:
            Session(error_handler, args.file, cmd_line=False, tape_size=args.tape_size).run()

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, tape_size=args.tape_size)).cmdloop()


if __name__ == "__main__":
    main()
