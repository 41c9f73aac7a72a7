"""Memory model for the bf interpreter: a fixed number of byte cells and a single cursor. Cell values wrap around at
the 0-255 boundary, the cursor does not: leaving the tape is an error, raised by check before the next instruction runs.
"""

from bfinterpreter.lang.error import GenericException, OutOfBounds


class Tape:
    """Fixed-size tape of byte cells, all initialized to zero, with the cursor on the first cell."""
    SIZE = 30000
    CELL = 256  # number of distinct cell values

    def __init__(self, size=SIZE):
        if not isinstance(size, int) or size < 1:
            raise GenericException("tape size must be a positive integer, got '{}'", str(size), diagnosis=False)

        self.cells = bytearray(size)
        self.cursor = 0

    def check(self):
        """Raises OutOfBounds if the cursor is not on the tape."""
        if not 0 <= self.cursor < len(self.cells):
            msg = "pointer out of bounds (cursor at {1}, tape has {2} cells)"
            raise OutOfBounds(msg, ("", str(self.cursor), str(len(self.cells))))

    def move(self, offset):
        self.cursor += offset

    def add(self, delta):
        """Adds delta to the current cell, modulo 256."""
        self.cells[self.cursor] = (self.cells[self.cursor] + delta) % Tape.CELL

    def get(self):
        return self.cells[self.cursor]

    def set(self, value):
        self.cells[self.cursor] = value % Tape.CELL

    def display(self, radius=4):
        """Returns the cells within radius of the cursor, with the current cell bracketed. Format:

        cursor 2/30000: 0:72 1:101 [2:0] 3:0 4:0 5:0 6:0 ...
        """
        if not 0 <= self.cursor < len(self.cells):
            return f"cursor {self.cursor}/{len(self.cells)}: out of bounds"

        first = max(self.cursor - radius, 0)
        last = min(self.cursor + radius + 1, len(self.cells))

        cells = []
        for idx in range(first, last):
            cell = f"{idx}:{self.cells[idx]}"
            cells.append(f"[{cell}]" if idx == self.cursor else cell)

        result = f"cursor {self.cursor}/{len(self.cells)}: "
        if first > 0:
            result += "... "
        result += " ".join(cells)
        if last < len(self.cells):
            result += " ..."
        return result

    def __len__(self):
        return len(self.cells)
