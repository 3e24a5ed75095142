"""Runs the letcalc interpreter on a file, on piped stdin, or in interactive mode. Called from the letcalc console
script and from `python -m letcalc`.
"""

import argparse
import sys

from letcalc.lang.error import ErrorHandler, GenericException
from letcalc.lang.session import Session
from letcalc.lang.shell import Shell
from letcalc.pure.reducer import Reducer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="letcalc", description="Line-oriented lambda calculus evaluator.")
    parser.add_argument("file", help="file to evaluate line by line (if empty, reads stdin)", nargs="?")
    parser.add_argument("-s", "--strategy", choices=Reducer.STRATEGIES, default="name",
                        help="binding strategy for let and application (default: %(default)s)")
    parser.add_argument("-t", "--tree", action="store_true", help="print each parsed tree to stderr")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs letcalc interpreter. Called from letcalc executable script."""
    args = parse_args(argv)

    with ErrorHandler() as error_handler:
        sess = Session(error_handler, strategy=args.strategy, show_tree=args.tree)

        if args.file is not None:
            try:
                with open(args.file, "rb") as file:
                    sess.run(file)
            except OSError as error:
                raise GenericException(f"'{args.file}' could not be opened: {error.strerror}", diagnosis=False)

        elif sys.stdin.isatty():
            error_handler.fatal = False
            Shell(sess).cmdloop()

        else:
            sess.run(sys.stdin.buffer)
