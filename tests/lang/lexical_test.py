import unittest

from bfinterpreter.lang.error import UnmatchedBracket, UnsupportedInstruction
from bfinterpreter.lang.lexical import (Decrement, Increment, Input, Instruction, JumpIfNonZero, JumpIfZero, LoopEnd,
                                        LoopStart, MoveLeft, MoveRight, Noop, Output, resolve, tokenize)


class InstructionTestCase(unittest.TestCase):

    def test_infer(self):
        should_pass = {">": MoveRight(), "<": MoveLeft(), "+": Increment(), "-": Decrement(), ".": Output(),
                       ",": Input(), "[": LoopStart(), "]": LoopEnd()}
        for case, result in should_pass.items():
            self.assertEqual(result, Instruction.infer(case), case)
            self.assertEqual(case, str(Instruction.infer(case)), case)

        should_be_noop = ["a", " ", "\n", "#", "λ", "{", "0"]
        for case in should_be_noop:
            self.assertEqual(Noop(), Instruction.infer(case), case)

    def test_eq(self):
        self.assertEqual(JumpIfZero(3), JumpIfZero(3))
        self.assertNotEqual(JumpIfZero(3), JumpIfZero(4))
        self.assertNotEqual(JumpIfZero(3), JumpIfNonZero(3))
        self.assertNotEqual(LoopStart(), JumpIfZero(0))
        self.assertEqual("JumpIfNonZero(2)", repr(JumpIfNonZero(2)))

    def test_infer_from_subclass(self):
        cases = {LoopStart: "+", Noop: ">", JumpIfZero: "]", Increment: "a"}
        for cls, char in cases.items():
            self.assertEqual(Instruction.infer(char), cls.infer(char), cls)

        self.assertEqual([Increment(), MoveRight(), LoopEnd(), Noop()], tokenize("+>]a"))

    def test_unresolved_brackets_cannot_execute(self):
        for case in [LoopStart(), LoopEnd()]:
            self.assertRaises(UnsupportedInstruction, case.execute, None)


class TokenizeTestCase(unittest.TestCase):

    def test_tokenize(self):
        self.assertEqual([], tokenize(""))

        program = tokenize("><+-.,[] x\n")
        expected = [MoveRight(), MoveLeft(), Increment(), Decrement(), Output(), Input(), LoopStart(), LoopEnd(),
                    Noop(), Noop(), Noop()]
        self.assertEqual(expected, program)

    def test_equal_length(self):
        cases = ["", "+", "hello world", "[->+<]", "this is a comment. with, some [brackets]\n\t"]
        for case in cases:
            self.assertEqual(len(case), len(tokenize(case)), case)


class ResolveTestCase(unittest.TestCase):

    def test_resolve(self):
        cases = {
            "": [],
            "[]": [JumpIfZero(2), JumpIfNonZero(0)],
            "+[-]": [Increment(), JumpIfZero(4), Decrement(), JumpIfNonZero(1)],
            "[[]]": [JumpIfZero(4), JumpIfZero(3), JumpIfNonZero(1), JumpIfNonZero(0)],
            "[][]": [JumpIfZero(2), JumpIfNonZero(0), JumpIfZero(4), JumpIfNonZero(2)],
            "a[b]": [Noop(), JumpIfZero(4), Noop(), JumpIfNonZero(1)],
        }
        for case, result in cases.items():
            self.assertEqual(result, resolve(tokenize(case), case), case)

    def test_resolve_in_place(self):
        program = tokenize("+[>]")
        self.assertIs(program, resolve(program))
        self.assertEqual([Increment(), JumpIfZero(4), MoveRight(), JumpIfNonZero(1)], program)

    def test_jump_pairs(self):
        cases = ["[[[[]]]]", "+[>[-]<[>+<-]]", "[[][[]]][]", "[a[b[c]d]e]"]
        for case in cases:
            program = resolve(tokenize(case), case)

            self.assertFalse(any(isinstance(node, (LoopStart, LoopEnd)) for node in program), case)
            self.assertEqual(case.count("["), sum(isinstance(node, JumpIfZero) for node in program), case)
            self.assertEqual(case.count("]"), sum(isinstance(node, JumpIfNonZero) for node in program), case)

            for pos, node in enumerate(program):
                if isinstance(node, JumpIfZero):
                    self.assertEqual(JumpIfNonZero(pos), program[node.target - 1], case)
                elif isinstance(node, JumpIfNonZero):
                    self.assertEqual(JumpIfZero(pos + 1), program[node.target], case)

    def test_unmatched(self):
        should_raise = {"]": 0, "+]": 1, "[]]": 2, "][": 0, "+[": 1, "[[]": 0, "[+[": 2, "[[[]]": 0}
        for case, start in should_raise.items():
            with self.assertRaises(UnmatchedBracket, msg=case) as context:
                resolve(tokenize(case), case)

            self.assertEqual(case, context.exception.expr)
            self.assertEqual(start, context.exception.start, case)
            self.assertEqual(start + 1, context.exception.end, case)


if __name__ == '__main__':
    unittest.main()
