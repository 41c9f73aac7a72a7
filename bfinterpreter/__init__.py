"""Brainfuck interpreter.

Basic program flow for every evaluation (a whole file, or one line in command-line mode):
    1. Lexer: maps every source character to an Instruction, see bfinterpreter/lang/lexical.py
        - unrecognized characters become Noops, so lexing cannot fail
    2. Loop resolution: replaces bracket pairs in place with jumps to each other
        - will fail on an unmatched bracket, before anything runs
    3. Execution: fetch-execute loop over the resolved program against the Engine's tape, see
       bfinterpreter/lang/engine.py

"""
