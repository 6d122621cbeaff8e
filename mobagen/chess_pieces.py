"""Move generation for each chess piece and for whole sides of the board."""

from __future__ import annotations

from typing import Callable

from mobagen.chess_state import (
    BOARD_SIZE,
    Move,
    PieceColor,
    PieceType,
    WorldState,
)
from mobagen.point2d import Point2D

_DIAGONALS = (Point2D(1, 1), Point2D(-1, 1), Point2D(1, -1), Point2D(-1, -1))
_STRAIGHTS = (Point2D(0, 1), Point2D(0, -1), Point2D(1, 0), Point2D(-1, 0))
_ALL_DIRECTIONS = _STRAIGHTS + _DIAGONALS

_KNIGHT_ATTACK_DELTAS = (
    Point2D(-1, 2),
    Point2D(1, 2),
    Point2D(-2, 1),
    Point2D(2, 1),
    Point2D(-2, -1),
    Point2D(2, -1),
    Point2D(-1, -2),
    Point2D(1, -2),
)
# Cover moves look at a smaller, mirrored set of jumps.
_KNIGHT_COVER_DELTAS = (
    Point2D(-1, 2),
    Point2D(1, 2),
    Point2D(-2, 1),
    Point2D(-2, 1),
    Point2D(-2, -1),
    Point2D(-2, -1),
    Point2D(-1, -2),
    Point2D(1, -2),
)

MoveGenerator = Callable[[WorldState, Point2D], "set[Point2D]"]


def _squares() -> list[Point2D]:
    return [Point2D(column, line) for line in range(BOARD_SIZE) for column in range(BOARD_SIZE)]


def _slide(
    world: WorldState,
    origin: Point2D,
    expected: PieceType,
    directions: tuple[Point2D, ...],
    cover: bool,
) -> set[Point2D]:
    """Walk each direction until the board edge or a piece.

    Attack moves stop on (and include) an enemy piece; cover moves stop on
    (and include) a friendly piece.
    """
    piece = world.piece_at(origin)
    if piece.piece is not expected:
        return set()
    moves: set[Point2D] = set()
    for direction in directions:
        current = origin + direction
        other = world.piece_at(current)
        while other.piece is not PieceType.WRONG:
            if other.piece is PieceType.NONE:
                moves.add(current)
            else:
                if (other.color is piece.color) == cover:
                    moves.add(current)
                break
            current = current + direction
            other = world.piece_at(current)
    return moves


def bishop_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONALS, cover=False)


def bishop_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONALS, cover=True)


def rook_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _STRAIGHTS, cover=False)


def rook_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _STRAIGHTS, cover=True)


def queen_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, cover=False)


def queen_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, cover=True)


def _knight_jumps(
    world: WorldState, origin: Point2D, deltas: tuple[Point2D, ...], cover: bool
) -> set[Point2D]:
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KNIGHT:
        return set()
    moves: set[Point2D] = set()
    for delta in deltas:
        target = delta + origin
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is not PieceType.NONE and (other.color is piece.color) != cover:
            continue
        moves.add(target)
    return moves


def knight_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Jumps onto empty squares or enemy pieces."""
    return _knight_jumps(world, origin, _KNIGHT_ATTACK_DELTAS, cover=False)


def knight_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Jumps onto empty squares or friendly pieces."""
    return _knight_jumps(world, origin, _KNIGHT_COVER_DELTAS, cover=True)


def king_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """One-step moves that neither land on a friend nor on a covered square."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KING:
        return set()
    attacked = list_places_king_cannot_go(world, piece.color)
    moves: set[Point2D] = set()
    for direction in _ALL_DIRECTIONS:
        target = origin + direction
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if (other.piece is PieceType.NONE or other.color is not piece.color) and target not in attacked:
            moves.add(target)
    return moves


def king_cover_moves_naive(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Squares next to the king that are empty or hold a friendly piece."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KING:
        return set()
    moves: set[Point2D] = set()
    for direction in _ALL_DIRECTIONS:
        target = origin + direction
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is PieceType.NONE or other.color is piece.color:
            moves.add(target)
    return moves


def find_king(world: WorldState, color: PieceColor) -> Point2D:
    """Square of the king of ``color``; the origin if there is none."""
    for location in _squares():
        piece = world.piece_at(location)
        if piece.color is color and piece.piece is PieceType.KING:
            return location
    return Point2D()


def is_in_check(world: WorldState, color: PieceColor) -> int:
    """Number of opposing moves that land on the king of ``color``."""
    king_location = find_king(world, color)
    return sum(1 for move in list_moves(world, color.opponent) if move.target == king_location)


def pawn_possible_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward steps (two from the starting row) and diagonal captures."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return set()
    is_white = piece.color is PieceColor.WHITE
    step = 1 if is_white else -1
    start_row = 1 if is_white else 6
    enemy = piece.color.opponent
    points: set[Point2D] = set()

    ahead = Point2D(origin.x, origin.y + step)
    if world.piece_at(ahead).piece is PieceType.NONE:
        points.add(ahead)
        if origin.y == start_row:
            two_ahead = Point2D(origin.x, origin.y + 2 * step)
            if world.piece_at(two_ahead).piece is PieceType.NONE:
                points.add(two_ahead)

    for dx in (1, -1):
        target = Point2D(origin.x + dx, origin.y + step)
        other = world.piece_at(target)
        if other.piece not in (PieceType.WRONG, PieceType.NONE) and other.color is enemy:
            points.add(target)
    return points


def _pawn_diagonals(world: WorldState, origin: Point2D, cover: bool) -> set[Point2D]:
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return set()
    step = 1 if piece.color is PieceColor.WHITE else -1
    wanted = piece.color if cover else piece.color.opponent
    points: set[Point2D] = set()
    for dx in (1, -1):
        target = Point2D(origin.x + dx, origin.y + step)
        other = world.piece_at(target)
        if other.piece is PieceType.NONE or (other.piece is not PieceType.WRONG and other.color is wanted):
            points.add(target)
    return points


def pawn_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward diagonals that are empty or hold an enemy piece."""
    return _pawn_diagonals(world, origin, cover=False)


def pawn_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward diagonals that are empty or hold a friendly piece."""
    return _pawn_diagonals(world, origin, cover=True)


def pawn_count_doubles(world: WorldState, origin: Point2D) -> int:
    """Other pawns of the same colour in the pawn's column."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return 0
    same = sum(1 for y in range(BOARD_SIZE) if world.piece_at(Point2D(origin.x, y)) == piece)
    return same - 1


def pawn_is_isolated(world: WorldState, origin: Point2D) -> bool:
    """True when no friendly pawn stands next to this one (or it is no pawn)."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return True
    adjacency = (
        origin.right(),
        origin.left(),
        origin.up().left(),
        origin.up().right(),
        origin.down().left(),
        origin.down().right(),
        origin.up(),
        origin.down(),
    )
    return not any(world.piece_at(pos) == piece for pos in adjacency)


_MOVE_GENERATORS: dict[PieceType, MoveGenerator] = {
    PieceType.ROOK: rook_attack_moves,
    PieceType.BISHOP: bishop_attack_moves,
    PieceType.PAWN: pawn_possible_moves,
    PieceType.QUEEN: queen_attack_moves,
    PieceType.KNIGHT: knight_attack_moves,
    PieceType.KING: king_attack_moves,
}

_COVER_GENERATORS: dict[PieceType, MoveGenerator] = {
    PieceType.ROOK: rook_cover_moves,
    PieceType.BISHOP: bishop_cover_moves,
    PieceType.PAWN: pawn_cover_moves,
    PieceType.QUEEN: queen_cover_moves,
    PieceType.KNIGHT: knight_cover_moves,
    PieceType.KING: king_cover_moves_naive,
}


def list_moves(world: WorldState, turn: PieceColor) -> list[Move]:
    """Every move available to the pieces of ``turn``."""
    moves: list[Move] = []
    for location in _squares():
        piece = world.piece_at(location)
        if piece.piece is PieceType.NONE or piece.color is not turn:
            continue
        generator = _MOVE_GENERATORS.get(piece.piece)
        if generator is not None:
            moves.extend(Move.generate_list_of_moves(piece, location, generator(world, location)))
    return moves


def list_places_king_cannot_go(world: WorldState, turn: PieceColor) -> set[Point2D]:
    """Squares covered by the pieces opposing ``turn``."""
    covered: set[Point2D] = set()
    for location in _squares():
        piece = world.piece_at(location)
        if piece.piece in (PieceType.NONE, PieceType.WRONG) or piece.color is turn:
            continue
        generator = _COVER_GENERATORS.get(piece.piece)
        if generator is not None:
            covered |= generator(world, location)
    return covered