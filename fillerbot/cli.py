"""The bot's command: read turns from stdin and answer with a move on stdout."""

from __future__ import annotations

import sys

from fillerbot.logger import set_debug
from fillerbot.state import State, parse_dimensions

DEBUG_FLAGS = ("-d", "--debug")


def read_turn(lines):
    """Read the lines of one turn from an iterator of text lines.

    Reading stops once the rows of the piece have been read. The returned
    list is empty when the input is exhausted before any line was read.
    """
    turn = []
    remaining = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        turn.append(line)
        if line.startswith("Piece"):
            _, remaining = parse_dimensions(line)
            continue
        if remaining is not None:
            remaining -= 1
            if remaining < 1:
                break
    return turn


def choose_move(state):
    """Return the (x, y) of the best-scoring placement, or (0, 0) when none fits."""
    state.anfield.update_opp_occupation(state.robot)
    positions = state.anfield.potential_positions(state.current_piece, state.robot)
    if not positions:
        return 0, 0
    best = sorted(positions.items(), key=lambda item: item[1])[-1][0]
    return best.x, best.y


def main(argv=None):
    """Play turns read from stdin until the input ends."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0].strip() in DEBUG_FLAGS:
        set_debug(True)
        print("\nMode: DEBUG")

    state = State()
    stdin = iter(sys.stdin)
    while True:
        turn = read_turn(stdin)
        if not turn:
            break
        state.parse(turn)
        x, y = choose_move(state)
        print(f"{x} {y}", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())