"""Error handling for the letcalc language. Only GenericExceptions should be encountered while running a line: if another
type of error makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Diagnostics go to the error channel (stderr by default) so that the output channel only carries results.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a letcalc error."""

    def __init__(self, msg, expr="", start=0, end=-1, diagnosis=True, internal=False):
        super().__init__(msg)
        self.msg = msg
        self.expr = expr  # offending line, if known
        self.start = start
        self.end = end if end != -1 else start + 1  # needed for error display

        self.diagnosis = diagnosis
        self.internal = internal


class ParseError(GenericException):
    """Raised by the parser. position is the 0-based offset into the line where parsing failed."""

    def __init__(self, msg, position, expr=""):
        super().__init__(msg, expr, start=position)
        self.position = position

    def __str__(self):
        return f"{self.msg} @{self.position}"


class EvalError(GenericException):
    """Raised by the reducer: unbound variable, non-lambda application or lambda without environment."""

    def __init__(self, msg):
        super().__init__(msg, diagnosis=False)


class ErrorHandler:
    """Context manager that will suppress letcalc errors after printing them to the error channel."""
    ERROR = "red"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream if stream is not None else sys.stderr

    @staticmethod
    def diagnose(error):
        """Returns error.expr with the offending part highlighted and a caret line underneath."""
        start = min(error.start, len(error.expr))
        end = max(error.end, start + 1)

        diagnosis = "  " + error.expr[:start]
        diagnosis += colored(error.expr[start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (min(end, len(error.expr)) - start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Prints error, a GenericException. Exits if this handler is fatal."""
        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + str(error)
        print(error_msg, file=self.stream)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error), file=self.stream)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            # stack exhaustion is not a recoverable error
            self.fatal = True
            self.throw(GenericException("maximum recursion depth exceeded", internal=True))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.fatal = True
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))

        return not do_exit
