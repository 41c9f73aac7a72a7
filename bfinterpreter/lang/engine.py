"""Execution engine for the bf interpreter. An Engine owns the tape and the input/output streams and lives as long as
whoever drives it: state carries over between evaluations, which is what makes command-line mode useful.
"""

import sys

from bfinterpreter.lang.error import EndOfInput, GenericException
from bfinterpreter.lang.lexical import resolve, tokenize
from bfinterpreter.lang.tape import Tape


class Engine:
    """Fetch-execute loop over resolved programs. Not meant to be shared between threads."""

    def __init__(self, tape_size=Tape.SIZE, stdin=None, stdout=None):
        """stdin and stdout default to sys.stdin and sys.stdout, looked up when used."""
        self.tape = Tape(tape_size)
        self._stdin = stdin
        self._stdout = stdout

    def reset(self):
        """Replaces the tape with a fresh one of the same size."""
        self.tape = Tape(len(self.tape))

    @property
    def stdin(self):
        return sys.stdin if self._stdin is None else self._stdin

    @property
    def stdout(self):
        return sys.stdout if self._stdout is None else self._stdout

    def read(self):
        """Blocks until a character is available on stdin and returns its code as a byte."""
        char = self.stdin.read(1)
        if not char:
            raise EndOfInput("unexpected end of input")
        return ord(char) % Tape.CELL

    def write(self, value):
        self.stdout.write(chr(value))
        self.stdout.flush()

    def run(self, program, source=""):
        """Executes resolved program from its first instruction to its end. Any error is located at the offending
        instruction in source (program[i] was lexed from source[i]) and re-raised.
        """
        pc = 0
        while pc < len(program):
            try:
                self.tape.check()
                target = program[pc].execute(self)
            except GenericException as error:
                raise error.locate(source, pc)

            pc = pc + 1 if target is None else target

    def eval(self, source):
        """Lexes, resolves and runs source. Nothing is executed if source has unmatched brackets."""
        program = resolve(tokenize(source), source)
        self.run(program, source)
