"""The board, its cells and the scoring of candidate positions."""

from __future__ import annotations

from dataclasses import dataclass, field

from fillerbot.logger import console_log
from fillerbot.pieces import Piece, Robot

_I32_MAX = 2**31 - 1
_F32_MAX = 3.4028234663852886e38


def _div_trunc(a, b):
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class Cell:
    """A board cell and the id of the player holding it (0 when empty)."""

    x: int
    y: int
    occupied_by: int

    def neighbours(self, anfield):
        """Return the cells of the 3x3 block around this one, itself included."""
        found = []
        for di in (-1, 0, 1):
            for dj in (-1, 0, 1):
                key = (self.x + dj, self.y + di)
                owner = anfield.occupation.get(key)
                if owner is not None:
                    found.append(Cell(key[0], key[1], owner))
        return found

    def blocking_potential(self, anfield):
        """Score how much this cell hems in neighbouring enemy cells."""
        score = 0
        for cell in self.neighbours(anfield):
            if cell.occupied_by != self.occupied_by and cell.occupied_by != 0:
                free = sum(1 for c in cell.neighbours(anfield) if c.occupied_by == 0)
                score += 20 * free // 8
        return score // 8


@dataclass
class Anfield:
    """The playing board: its size and who holds each cell."""

    width: int = 0
    height: int = 0
    occupation: dict = field(default_factory=dict)
    opp_occupation: list = field(default_factory=list)

    def update_opp_occupation(self, robot):
        """Collect the opponent cells that still have more than two free neighbours."""
        frontier = []
        for (x, y), owner in self.occupation.items():
            if owner == robot.id or owner == 0:
                continue
            cell = Cell(x, y, owner)
            free = sum(1 for c in cell.neighbours(self) if c.occupied_by == 0)
            if free > 2:
                frontier.append(cell)
        self.opp_occupation = frontier

    def can_place(self, coord, robot, piece):
        """Whether ``piece`` fits at ``coord`` touching exactly one own cell."""
        x, y = coord
        touch = 0
        for j, i in piece.filled():
            if x + j >= self.width or y + i >= self.height:
                return False
            owner = self.occupation.get((x + j, y + i))
            if owner is None:
                continue
            if owner == robot.id:
                touch += 1
            elif owner != 0:
                return False
        return touch == 1

    def potential_positions(self, piece, robot):
        """Map every legal position of ``piece`` to its score."""
        positions = {}
        for i in range(self.height):
            for j in range(self.width):
                if self.can_place((j, i), robot, piece):
                    position = Position(x=j, y=i, robot_idx=robot.id, piece=piece)
                    positions[position] = position.score(self, robot)
        return positions


@dataclass(frozen=True)
class Position:
    """A candidate placement of a piece for a player."""

    x: int
    y: int
    robot_idx: int
    piece: Piece

    def _blocking_score(self, anfield, offset):
        dx, dy = offset
        return Cell(self.x + dx, self.y + dy, self.robot_idx).blocking_potential(anfield)

    def _edge_proximity(self, anfield, offset):
        x = self.x + offset[0]
        y = self.y + offset[1]
        row_dist = min(y, anfield.height - y - 1)
        col_dist = min(x, anfield.width - x - 1)
        return _div_trunc(row_dist + col_dist, 2)

    def surround_score(self, anfield, robot):
        """Score closeness to the opponent frontier against the free space around it."""
        min_distance = _F32_MAX
        score = 0
        for cell in anfield.opp_occupation:
            owner = anfield.occupation.get((cell.x, cell.y))
            if owner is None:
                continue
            if owner != 0 and owner != robot.id:
                distance = ((self.x - cell.x) ** 2 + (self.y - cell.y) ** 2) ** 0.5
                min_distance = min(min_distance, distance)
            for di in (-1, 0, 1):
                for dj in (-1, 0, 1):
                    ni = cell.y + di
                    nj = cell.x + dj
                    if 0 <= ni < anfield.height and 0 <= nj < anfield.width:
                        if anfield.occupation.get((nj, ni)) == 0:
                            score += 1
        value = abs(min_distance - score)
        console_log(f"surround: {value}")
        return min(int(value), _I32_MAX)

    def score(self, anfield, robot):
        """Total score of this position; higher is better."""
        blocking = 0
        edge = 0
        for offset in self.piece.filled():
            blocking += self._blocking_score(anfield, offset)
            edge += self._edge_proximity(anfield, offset)
        blocking_score = float(blocking * 10)
        edge_proximity = _div_trunc(20 * edge, max(anfield.height, anfield.width))

        total = blocking_score + edge_proximity
        total += self.surround_score(anfield, robot) * 2.0
        console_log(f"blocking_score: {blocking_score}")
        console_log(f"edge_proximity: {edge_proximity}")
        console_log(f"total: {total}")
        console_log(f"position: {(self.x, self.y)}")
        return total