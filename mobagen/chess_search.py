"""A shallow look-ahead that picks the next chess move."""

from __future__ import annotations

from typing import Iterable, Iterator

from mobagen.chess_heuristics import material_score
from mobagen.chess_pieces import list_moves
from mobagen.chess_state import Move, MoveState, PieceColor, WorldState

SEARCH_DEPTH = 3


def _expand(frontier: Iterable[MoveState]) -> Iterator[MoveState]:
    for node in frontier:
        for move in list_moves(node.state, node.state.turn):
            state = node.state.copy()
            state.move(move.origin, move.target)
            yield MoveState(state, [*node.moves, move], material_score(state))


def _order(states: list[MoveState], mover: PieceColor) -> list[MoveState]:
    """Best line for ``mover`` first: highest score for white, lowest for black."""
    return sorted(states, key=lambda node: node.score, reverse=mover is PieceColor.WHITE)


def next_move(state: WorldState) -> Move:
    """First move of the best-scoring line three plies deep.

    Raises ``ValueError`` when some ply has no moves to explore.
    """
    frontier = [MoveState(state.copy(), [], 0)]
    for _ in range(SEARCH_DEPTH):
        mover = frontier[0].state.turn
        frontier = _order(list(_expand(frontier)), mover)
        if not frontier:
            raise ValueError("no moves to search")
    return frontier[0].first_move