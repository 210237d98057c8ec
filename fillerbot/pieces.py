"""Players and game pieces."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Robot:
    """A player on the board, identified by its id and its two characters."""

    id: int = 0
    characters: tuple[str, str] = ("\0", "\0")
    area: tuple[tuple[int, int], tuple[int, int]] = ((0, 0), (0, 0))
    starting_point: tuple[int, int] = (0, 0)
    score: int = 0

    def set_starting_point(self, x, y):
        """Record the starting cell and reset the area to it."""
        self.starting_point = (x, y)
        self.area = ((x, y), (x, y))

    def update_score(self, anfield):
        """Set the score to the number of board cells this robot holds."""
        self.score = sum(1 for owner in anfield.occupation.values() if owner == self.id)


@dataclass(frozen=True)
class Piece:
    """A piece to place: rows of characters where '.' is empty."""

    width: int = 0
    height: int = 0
    cells: tuple[tuple[str, ...], ...] = field(default_factory=tuple)

    @classmethod
    def from_cells(cls, cells):
        """Build a piece from rows of characters, taking its width from the first row."""
        rows = tuple(tuple(row) for row in cells)
        width = len(rows[0]) if rows else 0
        return cls(width=width, height=len(rows), cells=rows)

    def filled(self):
        """Yield the (column, row) offsets of the piece's non-empty cells."""
        for i, row in enumerate(self.cells[: self.height]):
            for j, ch in enumerate(row[: self.width]):
                if ch != ".":
                    yield j, i