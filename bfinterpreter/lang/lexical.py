"""Lexical analysis for the bf language. Note that this module does not read programs from files, but rather tokenizes
arbitrary source strings and resolves their loops.

The grammar can be loosely defined as follows:

```
<program>  ::= <char>*
<char>     ::= ">"         ; MoveRight: cursor += 1
             | "<"         ; MoveLeft: cursor -= 1
             | "+"         ; Increment: cell += 1 (mod 256)
             | "-"         ; Decrement: cell -= 1 (mod 256)
             | "."         ; Output: write cell as a character
             | ","         ; Input: read one character into cell
             | "["         ; LoopStart: resolved into JumpIfZero
             | "]"         ; LoopEnd: resolved into JumpIfNonZero
             | <other>     ; Noop: everything else is a comment
```

Lexing never fails, so program[i] always corresponds to source[i]. Resolution then replaces every bracket pair in place
with a pair of jumps that point at each other, so that no bracket matching happens while executing.
"""

from bfinterpreter.lang.error import UnmatchedBracket, UnsupportedInstruction


class Instruction:
    """Superclass representing any instruction in a bf program."""
    symbol = None
    _symbols = {}  # char: Instruction subclass, filled lazily by infer

    def __init__(self):
        self._cls = type(self).__name__

    @classmethod
    def infer(cls, char):
        """Infers the type of char and returns an object of the correct Instruction subclass (Noop if unrecognized)."""

        def _infer(cls, char):
            for subclass in cls.__subclasses__():
                if subclass.symbol == char:
                    return subclass
                found = _infer(subclass, char)
                if found is not None:
                    return found
            return None

        if char not in Instruction._symbols:
            Instruction._symbols[char] = _infer(Instruction, char) or Noop  # search from the root, whatever cls is
        return Instruction._symbols[char]()

    def execute(self, engine):
        """Executes this instruction against engine. Returns the position to continue at, or None to fall through."""
        raise UnsupportedInstruction("cannot execute '{}' instruction", self._cls)

    def __repr__(self):
        return f"{self._cls}()"

    def __str__(self):
        return self.symbol or ""

    def __eq__(self, other):
        return type(other) is type(self)

    def __hash__(self):
        return hash(self._cls)


class MoveRight(Instruction):
    symbol = ">"

    def execute(self, engine):
        engine.tape.move(1)


class MoveLeft(Instruction):
    symbol = "<"

    def execute(self, engine):
        engine.tape.move(-1)


class Increment(Instruction):
    symbol = "+"

    def execute(self, engine):
        engine.tape.add(1)


class Decrement(Instruction):
    symbol = "-"

    def execute(self, engine):
        engine.tape.add(-1)


class Output(Instruction):
    symbol = "."

    def execute(self, engine):
        engine.write(engine.tape.get())


class Input(Instruction):
    symbol = ","

    def execute(self, engine):
        engine.tape.set(engine.read())


class LoopStart(Instruction):
    """Only exists between lexing and resolution."""
    symbol = "["


class LoopEnd(Instruction):
    """Only exists between lexing and resolution."""
    symbol = "]"


class Noop(Instruction):

    def execute(self, engine):
        pass


class Jump(Instruction):
    """Superclass for resolved loop brackets. target is an index into the resolved program."""

    def __init__(self, target):
        super().__init__()
        self.target = target

    def __repr__(self):
        return f"{self._cls}({self.target})"

    def __eq__(self, other):
        return type(other) is type(self) and other.target == self.target

    def __hash__(self):
        return hash((self._cls, self.target))


class JumpIfZero(Jump):
    """Resolved '['. Jumps just past the matching ']' if the current cell is zero."""

    def execute(self, engine):
        if engine.tape.get() == 0:
            return self.target

    def __str__(self):
        return LoopStart.symbol


class JumpIfNonZero(Jump):
    """Resolved ']'. Jumps back to the matching '[' (which re-checks the cell) if the current cell is nonzero."""

    def execute(self, engine):
        if engine.tape.get() != 0:
            return self.target

    def __str__(self):
        return LoopEnd.symbol


def tokenize(chars):
    """Returns a list with one Instruction per character in chars."""
    return [Instruction.infer(char) for char in chars]


def resolve(program, source=""):
    """In-place replacement of every LoopStart/LoopEnd pair in program with a JumpIfZero/JumpIfNonZero pair. source is
    the text program was lexed from and is only used for error messages. Returns program.
    """
    stack = []  # positions of LoopStarts not yet matched
    for pos, instruction in enumerate(program):
        if isinstance(instruction, LoopStart):
            stack.append(pos)

        elif isinstance(instruction, LoopEnd):
            if not stack:
                raise UnmatchedBracket("unexpected close bracket", source, start=pos, end=pos + 1)

            start = stack.pop()
            program[start] = JumpIfZero(pos + 1)
            program[pos] = JumpIfNonZero(start)

    if stack:
        raise UnmatchedBracket("unclosed open bracket", source, start=stack[-1], end=stack[-1] + 1)

    return program
