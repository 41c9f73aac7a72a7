"""Session control for the bf interpreter, either in command-line mode or file interpretation mode. A Session owns
the Engine, so tape and cursor live as long as the Session does.
"""

from bfinterpreter.lang.engine import Engine
from bfinterpreter.lang.error import GenericException
from bfinterpreter.lang.tape import Tape


class Session:
    """Governs a bf session: queues sources and evaluates them against one Engine."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line, tape_size=Tape.SIZE, stdin=None, stdout=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.engine = Engine(tape_size, stdin, stdout)
        self.to_exec = {}  # dict of line num: sources to evaluate

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r", encoding="latin-1") as file:  # one character per byte
                    self.add(file.read(), 1)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    def add(self, source, line_num):
        """Queues source, which starts at line_num. Evaluation is delayed until run is called."""
        self.to_exec[line_num] = source

    def run(self):
        """Evaluates this session's queued sources in order. Will raise any errors that are encountered; the failing
        source is dropped from the queue either way.
        """
        for line_num, source in list(self.to_exec.items()):
            self.error_handler.register_line(self.path, source, line_num)

            try:
                self.engine.eval(source)
            finally:
                del self.to_exec[line_num]

            self.error_handler.remove_line(self.path)
