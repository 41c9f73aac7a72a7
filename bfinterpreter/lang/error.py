"""Error handling for the bf interpreter. Only GenericExceptions should be encountered during an evaluation: if another
type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a bf error/warning. Essentially just a
    wrapper around parse_args.
    """

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)

    def locate(self, expr, start, end=None):
        """Points this error at expr[start:end] (a single character if end is None). Used when the offending source is
        only known further up the stack. Returns self so it can be re-raised directly.
        """
        self.expr = expr
        self.start = start
        self.end = end if end is not None else start + 1
        return self

    def narrow(self):
        """Cuts self.expr down to the line containing self.start, shifting start and end accordingly. Returns the index
        of that line within the original expr.
        """
        row = self.expr.count("\n", 0, self.start)
        begin = self.expr.rfind("\n", 0, self.start) + 1
        stop = self.expr.find("\n", self.start)
        if stop == -1:
            stop = len(self.expr)

        self.expr = self.expr[begin:stop]
        self.end = min(self.end, stop) - begin
        self.start -= begin
        return row


class UnmatchedBracket(GenericException):
    """A '[' without a matching ']' or vice versa. Raised during loop resolution, before anything executes."""


class OutOfBounds(GenericException):
    """The cursor left the tape."""


class EndOfInput(GenericException):
    """A ',' was reached but the input stream is exhausted."""


class UnsupportedInstruction(GenericException):
    """An instruction that cannot be executed was reached (e.g. an unresolved bracket)."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=True):
        super().__init__(msg, exprs, start, end, diagnosis, internal)


class ErrorHandler:
    """Context manager that reports bf errors (suppressing them unless fatal) and reports, then re-raises, any other
    Python error as an internal one.
    """
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to an evaluation."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after a successful evaluation."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, 1)
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = ""
        for file, (line, line_num) in self.traceback.items():
            if line is not None:
                error_msg += colored(f"{file}:{line_num}: ", attrs=["bold"])
        error_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg

        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        source = error.expr
        row = error.narrow() if source else 0  # evaluated sources can span many lines (whole files)

        error_msg = ""
        lines = 0
        for file, (line, line_num) in self.traceback.items():  # assumes dict is insertion-ordered
            if line:
                if line == source:
                    line, line_num = error.expr, line_num + row
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line.rstrip()}\n"
                lines += 1

        if lines > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # if error occurred, reset traceback

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
