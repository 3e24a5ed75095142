"""Line loop for the letcalc interpreter. Every line is parsed and reduced on its own, in a fresh top-level environment:
nothing is carried over from one line to the next.

Blank lines are skipped without a diagnostic, although parse("") on its own fails with "Expected expression @0".
Leading whitespace is skipped before parsing instead of failing at offset 0. Neither changes what reaches out.
"""

import sys

from letcalc.lang.error import EvalError, ParseError
from letcalc.pure.lexical import parse
from letcalc.pure.reducer import Reducer


class Session:
    """Governs a letcalc session. Results go to out, diagnostics go through error_handler."""
    FAILED = "error"  # printed in place of a result when reduction fails

    def __init__(self, error_handler, strategy="name", show_tree=False, out=None):
        self.error_handler = error_handler
        self.reducer = Reducer(strategy)
        self.show_tree = show_tree
        self.out = out if out is not None else sys.stdout

    def execute(self, line):
        """Parses and reduces line. Returns the printed value, Session.FAILED if reduction failed, or None if line is
        blank or could not be parsed (nothing should be printed then).
        """
        line = line.rstrip("\r\n")
        if not line.strip():
            return None

        try:
            term = parse(line)
        except ParseError as error:
            self._report(error)
            return None

        if self.show_tree:
            print(term.display(), file=self.error_handler.stream)

        try:
            return str(self.reducer.reduce(term))
        except EvalError as error:
            self._report(error)
            return Session.FAILED

    def run(self, stream):
        """Executes every line of stream (text or bytes) and prints the results."""
        for line in stream:
            if isinstance(line, bytes):
                line = line.decode("utf-8", errors="replace")

            result = self.execute(line)
            if result is not None:
                print(result, file=self.out)

    def _report(self, error):
        # per-line errors never end the session
        fatal, self.error_handler.fatal = self.error_handler.fatal, False
        try:
            self.error_handler.throw(error)
        finally:
            self.error_handler.fatal = fatal
