"""Interactive chess game: selection, moves, undo and an optional AI player."""

from __future__ import annotations

import argparse
from typing import Callable, Optional

from mobagen.chess_heuristics import material_score
from mobagen.chess_pieces import (
    bishop_attack_moves,
    king_attack_moves,
    knight_attack_moves,
    pawn_possible_moves,
    queen_attack_moves,
    rook_attack_moves,
)
from mobagen.chess_search import next_move
from mobagen.chess_state import BOARD_SIZE, IllegalMoveError, PieceColor, PieceType, WorldState
from mobagen.point2d import Point2D

_MOVE_GENERATORS: dict[PieceType, Callable[[WorldState, Point2D], "set[Point2D]"]] = {
    PieceType.PAWN: pawn_possible_moves,
    PieceType.ROOK: rook_attack_moves,
    PieceType.KNIGHT: knight_attack_moves,
    PieceType.BISHOP: bishop_attack_moves,
    PieceType.QUEEN: queen_attack_moves,
    PieceType.KING: king_attack_moves,
}

_FILES = "abcdefgh"


class ChessGame:
    """Board state driven by square clicks, with history for undo."""

    def __init__(self, ai_enabled: bool = False, ai_color: PieceColor = PieceColor.BLACK) -> None:
        self.state = WorldState()
        self.state.reset()
        self.previous_states: list[WorldState] = []
        self.selected: Optional[Point2D] = None
        self.valid_moves: set[Point2D] = set()
        self.ai_enabled = ai_enabled
        self.ai_color = ai_color
        self.score = material_score(self.state)

    def _clear_selection(self) -> None:
        self.selected = None
        self.valid_moves = set()

    def reset(self) -> None:
        """Back to the starting position."""
        self.state.reset()
        self._clear_selection()
        self.score = material_score(self.state)

    def undo(self) -> bool:
        """Restore the board before the last player move; False if there is none."""
        if not self.previous_states:
            return False
        self._clear_selection()
        self.state = self.previous_states.pop()
        self.score = material_score(self.state)
        return True

    def moves_for(self, origin: Point2D) -> set[Point2D]:
        """Squares the piece on ``origin`` may move to."""
        generator = _MOVE_GENERATORS.get(self.state.piece_at(origin).piece)
        return generator(self.state, origin) if generator else set()

    def click(self, index: Point2D) -> bool:
        """Handle a click on a square; True when it played a move."""
        if index == self.selected:
            self._clear_selection()
            return False
        if self.selected is None or index not in self.valid_moves:
            piece = self.state.piece_at(index)
            if piece.piece is not PieceType.NONE and piece.color is self.state.turn:
                self.selected = index
                self.valid_moves = self.moves_for(index)
                if not self.valid_moves:
                    self._clear_selection()
            else:
                self._clear_selection()
            return False
        self.previous_states.append(self.state.copy())
        self.state.move(self.selected, index)
        self.score = material_score(self.state)
        self._clear_selection()
        return True

    def update(self) -> bool:
        """Let the AI play if it is its turn; True when it moved."""
        if not (self.ai_enabled and self.ai_color is self.state.turn):
            return False
        move = next_move(self.state)
        self.state.move(move.origin, move.target)
        self.score = material_score(self.state)
        return True


def _parse_square(text: str) -> Optional[Point2D]:
    text = text.lower()
    if len(text) != 2 or text[0] not in _FILES or not text[1].isdigit():
        return None
    rank = int(text[1]) - 1
    if not 0 <= rank < BOARD_SIZE:
        return None
    return Point2D(_FILES.index(text[0]), rank)


def _show(game: ChessGame) -> None:
    print(game.state, end="")
    print(f"Score: {game.score}")


def _play(game: ChessGame, words: list[str]) -> None:
    origin, target = (_parse_square(word) for word in words)
    if origin is None or target is None:
        print(f"Unrecognised command: {' '.join(words)}")
        return
    game._clear_selection()
    game.click(origin)
    try:
        played = game.click(target)
    except IllegalMoveError as error:
        played = False
        print(error)
    if played:
        _show(game)
    else:
        game._clear_selection()
        print(f"Illegal move: {' '.join(words)}")


def main(argv: Optional[list[str]] = None) -> int:
    """Play chess in the terminal with moves such as ``e2 e4``."""
    parser = argparse.ArgumentParser(
        prog="mobagen-chess",
        description="Play chess; enter moves as 'e2 e4', or 'undo', 'reset', 'quit'.",
    )
    parser.add_argument("--ai", choices=("black", "white"), help="let the computer play this side")
    args = parser.parse_args(argv)

    ai_color = PieceColor.WHITE if args.ai == "white" else PieceColor.BLACK
    game = ChessGame(ai_enabled=args.ai is not None, ai_color=ai_color)
    _show(game)
    while True:
        try:
            if game.update():
                _show(game)
        except ValueError as error:
            print(f"Game over: {error}")
            break
        try:
            line = input(f"{game.state.turn.name.capitalize()} to move> ")
        except EOFError:
            break
        words = line.split()
        if not words:
            continue
        command = words[0].lower()
        if command in ("quit", "exit"):
            break
        if command == "reset":
            game.reset()
            _show(game)
        elif command == "undo":
            if game.undo():
                _show(game)
            else:
                print("Nothing to undo")
        elif len(words) == 2:
            _play(game, words)
        else:
            print(f"Unrecognised command: {line.strip()}")
    return 0