import pytest

from fillerbot.anfield import Anfield
from fillerbot.pieces import Piece, Robot


def test_piece_dimensions_from_cells():
    piece = Piece.from_cells([list(".*"), list("**"), list("..")])
    assert piece.width == 2
    assert piece.height == 3


def test_empty_piece():
    piece = Piece.from_cells([])
    assert (piece.width, piece.height) == (0, 0)
    assert list(piece.filled()) == []


def test_piece_equality_and_hash_independent_of_input_type():
    a = Piece.from_cells([["*", "."], [".", "*"]])
    b = Piece.from_cells(["*.", ".*"])
    assert a == b
    assert hash(a) == hash(b)
    assert {a: 1}[b] == 1


def test_filled_offsets():
    piece = Piece.from_cells(["*.", ".*"])
    assert list(piece.filled()) == [(0, 0), (1, 1)]


def test_set_starting_point_resets_area():
    robot = Robot(1, ("a", "@"))
    robot.area = ((-5, -5), (9, 9))
    robot.set_starting_point(3, 7)
    assert robot.starting_point == (3, 7)
    assert robot.area == ((3, 7), (3, 7))


@pytest.mark.parametrize("robot_id", [1, 2])
def test_update_score_counts_own_cells(robot_id):
    anfield = Anfield(3, 1)
    anfield.occupation = {(0, 0): 1, (1, 0): 2, (2, 0): 1}
    robot = Robot(robot_id, ("a", "@"))
    robot.update_score(anfield)
    expected = sum(1 for v in anfield.occupation.values() if v == robot_id)
    assert robot.score == expected
    assert robot.score > 0