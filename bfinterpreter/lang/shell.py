"""Handles interactive/command-line mode for the bf interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Brainfuck interpreter shell."""
    intro = "Brainfuck interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "BF-> "
    use_rawinput = False  # lines and ',' input must share sys.stdin's buffer

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def default(self, line):
        """Evaluates line against the session's tape."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            self.sess.add(line, self.line_num)

            try:
                self.sess.run()
            finally:
                self.stdout.write("\n")
                self.stdout.flush()

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the bf interpreter!\n\n"
              "Every line is run as a Brainfuck program on a tape of byte cells that persists \n"
              "between lines. '>' and '<' move the cursor, '+' and '-' change the current cell, \n"
              "'.' prints it, ',' reads a character into it and '[' ... ']' loops while it is \n"
              "nonzero. Everything else is ignored.\n\n"
              "Try it out by typing '++++++++[>++++++++<-]>+.'. This will print 'A'. Type 'tape' \n"
              "to look at the cells around the cursor, 'reset' to clear them, \n"
              "and 'exit' (or Ctrl-D) to quit.",
              file=self.stdout)

    def do_tape(self, arg):
        """Shows the cells around the cursor."""
        print(self.sess.engine.tape.display(), file=self.stdout)

    def do_reset(self, arg):
        """Clears the tape and puts the cursor back on the first cell."""
        self.sess.engine.reset()

    def emptyline(self):
        """Do not repeat previous command on empty line, evaluate it as an empty program instead."""
        self.stdout.write("\n")
        self.stdout.flush()

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            self.sess.error_handler.warn("ignoring trailing '{}'", arg)
        return True
