"""Window that follows a game on stdin and draws the board and scores."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from fillerbot.anfield import Anfield
from fillerbot.cli import read_turn
from fillerbot.grid import LINE_COLOR, Grid, Rect
from fillerbot.pieces import Robot
from fillerbot.state import PLAYER_ONE_CHARS, PLAYER_TWO_CHARS, _is_board_char, _strip_while, parse_dimensions

GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
WINDOW_COLOR = (41, 45, 60)
FONT_NAME = "liberationmono"
FONT_SIZE = 30


class ScoreLine(NamedTuple):
    """A line of text to draw under the board."""

    text: str
    color: tuple
    position: tuple


def _player_color(player_id):
    return YELLOW if player_id == 2 else GREEN


@dataclass
class VisualizerState:
    """Board, players and winner as last read from the game output."""

    robot1: Robot = field(default_factory=Robot)
    robot2: Robot = field(default_factory=Robot)
    anfield: Anfield = field(default_factory=Anfield)
    grid: Grid = field(default_factory=Grid)
    started: bool = False
    winner: Optional[int] = None

    def parse(self, lines):
        """Update the board and winner from the lines of one turn."""
        anfield = Anfield(0, 0)
        robot1 = Robot(1, PLAYER_ONE_CHARS) if not self.started else self.robot1
        robot2 = Robot(2, PLAYER_TWO_CHARS) if not self.started else self.robot2
        parsing_anfield = False
        board_start = 0

        for idx, line in enumerate(lines):
            if line.startswith("Anfield"):
                width, height = parse_dimensions(line)
                anfield = Anfield(width, height)
            elif all(ch.isnumeric() for ch in line.strip()):
                parsing_anfield = True
                board_start = idx + 1
                continue
            elif line.startswith("Piece"):
                parsing_anfield = False
                continue
            elif "won" in line:
                self.winner = 1 if "Player1" in line else 2

            if parsing_anfield:
                row = idx - board_start
                for i, ch in enumerate(_strip_while(line, _is_board_char)):
                    if ch == ".":
                        anfield.occupation[(i, row)] = 0
                    elif ch in self.robot1.characters:
                        anfield.occupation[(i, row)] = self.robot1.id
                    else:
                        anfield.occupation[(i, row)] = self.robot2.id

        if anfield.width != 0:
            self.anfield = anfield
            self.robot1 = robot1
            self.robot2 = robot2
        self.started = True

    def filled_cells(self):
        """Return (rectangle, colour) for every occupied cell, ordered by position."""
        cw, ch = self.grid.cell_size
        cells = []
        for (col, row), owner in sorted(self.anfield.occupation.items()):
            if owner == 0:
                continue
            rect = Rect(self.grid.rect.x + col * cw, self.grid.rect.y + row * ch, cw, ch)
            cells.append((rect, GREEN if owner == 1 else YELLOW))
        return cells

    def score_lines(self):
        """Return the score texts, and the winner text once there is one."""
        x = self.grid.rect.x + self.grid.rect.w / 2.0
        y = self.grid.rect.y + self.grid.rect.h + 20.0
        lines = [
            ScoreLine(str(self.robot1.score), GREEN, (x, y)),
            ScoreLine(str(self.robot2.score), YELLOW, (x, y + 20.0)),
        ]
        if self.winner is not None:
            lines.append(
                ScoreLine(f"player{self.winner} won!", _player_color(self.winner), (x - 60.0, y + 40.0))
            )
        return lines

    def update(self, lines, size):
        """Apply one turn and lay the grid out for a screen of ``size``."""
        self.parse(lines)
        cols = self.anfield.width | 2
        rows = self.anfield.height | 2
        self.grid.resize(rows, cols, size)
        self.started = True
        self.robot1.update_score(self.anfield)
        self.robot2.update_score(self.anfield)


def _draw(pygame, screen, font, state):
    screen.fill(WINDOW_COLOR)
    rect, color = state.grid.background()
    pygame.draw.rect(screen, color, pygame.Rect(rect.x, rect.y, rect.w, rect.h))

    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    for start, end in state.grid.lines():
        pygame.draw.line(overlay, LINE_COLOR, start, end, 1)
    screen.blit(overlay, (0, 0))

    for cell, color in state.filled_cells():
        pygame.draw.rect(screen, color, pygame.Rect(cell.x, cell.y, cell.w, cell.h))

    for line in state.score_lines():
        screen.blit(font.render(line.text, True, line.color), line.position)


def main(argv=None):
    """Open a full-screen window and draw the game read from stdin."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        pygame.display.set_caption("filler_visualizer")
        font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        clock = pygame.time.Clock()
        state = VisualizerState()
        stdin = iter(sys.stdin)
        finished = False
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            if not finished:
                turn = read_turn(stdin)
                finished = not turn
                state.update(turn, screen.get_size())
            _draw(pygame, screen, font, state)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())