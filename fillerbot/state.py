"""Game state parsed from the referee's turn input."""

from __future__ import annotations

import dataclasses
import string
import sys
from dataclasses import dataclass, field

from fillerbot.anfield import Anfield
from fillerbot.pieces import Piece, Robot

PLAYER_ONE_CHARS = ("a", "@")
PLAYER_TWO_CHARS = ("s", "$")


def program_name(argv0):
    """Return the last '/'-separated component of a program path."""
    parts = argv0.split("/")
    if parts and parts[-1] == "":
        parts.pop()
    if not parts:
        raise ValueError(f"cannot take a program name from {argv0!r}")
    return parts[-1]


def _default_name():
    try:
        return program_name(sys.argv[0] if sys.argv else "")
    except ValueError:
        return ""


def _strip_while(text, keep):
    """Strip characters from both ends of ``text`` until ``keep`` accepts one."""
    start = 0
    end = len(text)
    while start < end and not keep(text[start]):
        start += 1
    while end > start and not keep(text[end - 1]):
        end -= 1
    return text[start:end]


def parse_dimensions(line):
    """Read the two numbers of a header such as 'Anfield 20 15:'."""
    core = _strip_while(line, str.isnumeric)
    first, sep, second = core.partition(" ")
    if not sep:
        raise ValueError(f"no dimensions in {line!r}")
    return int(first), int(second)


def _is_board_char(ch):
    return ch in string.punctuation or ch in ("a", "s")


@dataclass
class State:
    """What the bot knows about the game between turns."""

    anfield: Anfield = field(default_factory=Anfield)
    robot: Robot = field(default_factory=Robot)
    opponent: Robot = field(default_factory=Robot)
    current_piece: Piece = field(default_factory=Piece)
    started: bool = False
    name: str = field(default_factory=_default_name)

    def parse(self, lines):
        """Update the state from the lines of one turn."""
        anfield = Anfield(0, 0)
        robot = dataclasses.replace(self.robot) if self.started else None
        opponent = Robot()
        piece_rows = []
        parsing_pieces = False
        parsing_anfield = False
        board_start = 0

        for idx, line in enumerate(lines):
            if line.startswith("$$$"):
                if "p1" in line and self.name in line:
                    robot = Robot(1, PLAYER_ONE_CHARS)
                    opponent = Robot(2, PLAYER_TWO_CHARS)
                else:
                    robot = Robot(2, PLAYER_TWO_CHARS)
                    opponent = Robot(1, PLAYER_ONE_CHARS)
            elif line.startswith("Anfield"):
                width, height = parse_dimensions(line)
                anfield = Anfield(width, height)
            elif all(ch.isnumeric() for ch in line.strip()):
                parsing_anfield = True
                board_start = idx + 1
                continue
            elif line.startswith("Piece"):
                parsing_anfield = False
                parsing_pieces = True
                continue

            if parsing_anfield:
                row = idx - board_start
                for i, ch in enumerate(_strip_while(line, _is_board_char)):
                    if ch == ".":
                        anfield.occupation[(i, row)] = 0
                        continue
                    if not self.started and robot is not None:
                        if ch in robot.characters:
                            self.robot = dataclasses.replace(robot)
                            self.robot.set_starting_point(i, row)
                        else:
                            self.opponent = dataclasses.replace(opponent)
                            self.opponent.set_starting_point(i, row)
                    if ch in self.robot.characters:
                        anfield.occupation[(i, row)] = self.robot.id
                    else:
                        anfield.occupation[(i, row)] = 2 if self.robot.id == 1 else 1

            if parsing_pieces:
                piece_rows.append(list(line.strip()))

        if anfield.width != 0:
            self.anfield = anfield

        self.current_piece = Piece.from_cells(piece_rows)
        (x, y), (x1, y1) = self.robot.area
        w, h = self.current_piece.width, self.current_piece.height
        self.robot.area = ((x - w, y - h), (x1 + w, y1 + h))
        self.started = True