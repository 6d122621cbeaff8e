import pytest

from mobagen.chess_heuristics import distance_to_center, material_score
from mobagen.chess_state import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D


def _empty() -> WorldState:
    return WorldState()


def _place(state, pieces):
    for (x, y), color, kind in pieces:
        state.set_piece(PieceData(color, kind), Point2D(x, y))
    return state


def _mirror(state: WorldState) -> WorldState:
    mirrored = WorldState()
    for y in range(8):
        for x in range(8):
            piece = state.piece_at(Point2D(x, y))
            if piece.piece is PieceType.NONE:
                continue
            mirrored.set_piece(PieceData(piece.color.opponent, piece.piece), Point2D(x, 7 - y))
    return mirrored


def test_corner_is_furthest_from_center():
    assert distance_to_center(Point2D(0, 0)) == 0


def test_center_square_gets_full_bonus():
    assert distance_to_center(Point2D(3, 3)) == 3


@pytest.mark.parametrize("x", range(8))
@pytest.mark.parametrize("y", range(8))
def test_distance_is_symmetric_and_bounded(x, y):
    value = distance_to_center(Point2D(x, y))
    assert 0 <= value <= 3
    assert value == distance_to_center(Point2D(7 - x, 7 - y))
    assert value == distance_to_center(Point2D(y, x))


def test_empty_board_scores_zero():
    assert material_score(_empty()) == 0


def test_starting_position_is_balanced():
    state = WorldState()
    state.reset()
    assert material_score(state) == 0


def test_removing_black_piece_favours_white():
    state = WorldState()
    state.reset()
    state.set_piece(PieceData.empty(), Point2D(3, 7))
    assert material_score(state) > 0


def test_removing_white_piece_favours_black():
    state = WorldState()
    state.reset()
    state.set_piece(PieceData.empty(), Point2D(0, 0))
    assert material_score(state) < 0


def test_colour_mirror_negates_score():
    state = _place(
        _empty(),
        [
            ((4, 0), PieceColor.WHITE, PieceType.KING),
            ((0, 0), PieceColor.WHITE, PieceType.ROOK),
            ((3, 1), PieceColor.WHITE, PieceType.PAWN),
            ((2, 2), PieceColor.WHITE, PieceType.BISHOP),
            ((4, 7), PieceColor.BLACK, PieceType.KING),
        ],
    )
    assert material_score(_mirror(state)) == -material_score(state)


def test_lone_king_scores_more_than_its_value():
    state = _place(_empty(), [((3, 3), PieceColor.WHITE, PieceType.KING)])
    assert material_score(state) > 1000


def test_score_does_not_change_board():
    state = WorldState()
    state.reset()
    snapshot = state.copy()
    material_score(state)
    assert state == snapshot