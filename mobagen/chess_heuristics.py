"""Static evaluation of chess positions."""

from __future__ import annotations

from mobagen.chess_pieces import (
    bishop_attack_moves,
    is_in_check,
    king_attack_moves,
    knight_attack_moves,
    pawn_attack_moves,
    pawn_count_doubles,
    pawn_cover_moves,
    pawn_is_isolated,
    pawn_possible_moves,
    queen_attack_moves,
    rook_attack_moves,
)
from mobagen.chess_state import BOARD_SIZE, PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

_PIECE_VALUES = {
    PieceType.KING: 1000,
    PieceType.QUEEN: 90,
    PieceType.ROOK: 50,
    PieceType.KNIGHT: 35,
    PieceType.BISHOP: 30,
    PieceType.PAWN: 10,
}

_MOBILITY = {
    PieceType.KING: king_attack_moves,
    PieceType.QUEEN: queen_attack_moves,
    PieceType.ROOK: rook_attack_moves,
    PieceType.KNIGHT: knight_attack_moves,
    PieceType.BISHOP: bishop_attack_moves,
}

_CHECK_PENALTY = 10
_BLOCKED_PAWN_PENALTY = 2
_DOUBLED_PAWN_PENALTY = 2
_ISOLATED_PAWN_PENALTY = 1


def distance_to_center(location: Point2D) -> int:
    """Bonus from 0 on the edges to 3 near the centre of the board."""
    doubled_x = location.x * 2 - (BOARD_SIZE - 1)
    doubled_y = location.y * 2 - (BOARD_SIZE - 1)
    nearest = min(abs(doubled_x), abs(doubled_y))
    return 3 - int((nearest - 1) / 2)


def _pawn_score(state: WorldState, location: Point2D) -> int:
    moves = len(pawn_possible_moves(state, location))
    score = moves
    score += len(pawn_attack_moves(state, location))
    score += len(pawn_cover_moves(state, location))
    if moves == 0:
        score -= _BLOCKED_PAWN_PENALTY
    score -= _DOUBLED_PAWN_PENALTY * pawn_count_doubles(state, location)
    if pawn_is_isolated(state, location):
        score -= _ISOLATED_PAWN_PENALTY
    return score


def _piece_score(state: WorldState, piece: PieceData, location: Point2D) -> int:
    score = _PIECE_VALUES[piece.piece] + distance_to_center(location)
    if piece.piece is PieceType.PAWN:
        return score + _pawn_score(state, location)
    score += len(_MOBILITY[piece.piece](state, location))
    if piece.piece is PieceType.KING:
        score -= is_in_check(state, piece.color) * _CHECK_PENALTY
    return score


def material_score(state: WorldState) -> int:
    """Material, mobility and structure; positive means white is ahead."""
    score = 0
    for line in range(BOARD_SIZE):
        for column in range(BOARD_SIZE):
            location = Point2D(column, line)
            piece = state.piece_at(location)
            if piece.piece not in _PIECE_VALUES:
                continue
            piece_score = _piece_score(state, piece, location)
            score += -piece_score if piece.color is PieceColor.BLACK else piece_score
    return score