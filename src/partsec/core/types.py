from typing import NamedTuple


class Position(NamedTuple):
    row: int
    col: int

    def advance(self, part: object, newline: object = "\n") -> "Position":
        if part == newline:
            return Position(self.row + 1, 1)
        return Position(self.row, self.col + 1)


START = Position(1, 1)
