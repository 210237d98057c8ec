import pytest

from fillerbot.anfield import Anfield, Cell, Position
from fillerbot.pieces import Piece, Robot


def make_board(rows):
    """Build a board from rows where '.' is empty and digits are owners."""
    anfield = Anfield(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            anfield.occupation[(x, y)] = 0 if ch == "." else int(ch)
    return anfield


@pytest.fixture
def robot():
    return Robot(1, ("a", "@"))


def test_neighbours_count_corner_and_centre():
    anfield = make_board(["...", "...", "..."])
    assert len(Cell(0, 0, 0).neighbours(anfield)) == 4
    centre = Cell(1, 1, 0).neighbours(anfield)
    assert len(centre) == 9
    assert Cell(1, 1, 0) in centre


def test_blocking_potential_zero_without_enemies():
    anfield = make_board(["1..", "...", "..."])
    assert Cell(1, 1, 1).blocking_potential(anfield) == 0


def test_blocking_potential_nonnegative_with_enemy():
    anfield = make_board([".....", ".....", "..2..", ".....", "....."])
    assert Cell(1, 1, 1).blocking_potential(anfield) >= 0


def test_can_place_touching_one_own_cell(robot):
    anfield = make_board(["1..", "...", "..2"])
    single = Piece.from_cells(["*"])
    assert anfield.can_place((0, 0), robot, single)
    assert not anfield.can_place((1, 1), robot, single)
    assert not anfield.can_place((2, 2), robot, single)


def test_can_place_rejects_out_of_bounds(robot):
    anfield = make_board(["1..", "...", "..."])
    wide = Piece.from_cells(["****"])
    assert not anfield.can_place((0, 0), robot, wide)


def test_can_place_rejects_two_touches(robot):
    anfield = make_board(["11.", "...", "..."])
    pair = Piece.from_cells(["**"])
    assert not anfield.can_place((0, 0), robot, pair)
    assert anfield.can_place((1, 0), robot, pair)


def test_can_place_ignores_empty_piece_cells(robot):
    anfield = make_board(["12.", "...", "..."])
    piece = Piece.from_cells(["*."])
    assert anfield.can_place((0, 0), robot, piece)


def test_update_opp_occupation_only_opponent(robot):
    anfield = make_board(["1....", ".....", "..2..", ".....", "....2"])
    anfield.update_opp_occupation(robot)
    assert anfield.opp_occupation
    assert all(c.occupied_by == 2 for c in anfield.opp_occupation)
    assert Cell(2, 2, 2) in anfield.opp_occupation


def test_potential_positions_are_all_legal(robot):
    anfield = make_board(["1....", ".....", "..2..", ".....", "....."])
    piece = Piece.from_cells(["**", ".*"])
    anfield.update_opp_occupation(robot)
    positions = anfield.potential_positions(piece, robot)
    assert positions
    for position, score in positions.items():
        assert anfield.can_place((position.x, position.y), robot, piece)
        assert position.robot_idx == robot.id
        assert score == position.score(anfield, robot)


def test_potential_positions_empty_when_unreachable(robot):
    anfield = make_board(["2..", "...", "..."])
    assert anfield.potential_positions(Piece.from_cells(["*"]), robot) == {}


def test_surround_score_without_opponents_saturates(robot):
    anfield = make_board(["1..", "...", "..."])
    anfield.update_opp_occupation(robot)
    position = Position(0, 0, 1, Piece.from_cells(["*"]))
    assert position.surround_score(anfield, robot) == 2**31 - 1


def test_surround_score_closer_is_not_larger_distance_term(robot):
    anfield = make_board(["1....", ".....", ".....", ".....", "....2"])
    anfield.update_opp_occupation(robot)
    near = Position(3, 3, 1, Piece.from_cells(["*"]))
    far = Position(0, 0, 1, Piece.from_cells(["*"]))
    assert near.surround_score(anfield, robot) <= far.surround_score(anfield, robot)