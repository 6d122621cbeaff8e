"""Chess board state packed into half a byte per square."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

from mobagen.point2d import Point2D

BOARD_SIZE = 8
_NIBBLE = 0b1111
_PIECE_MASK = 0b0111


class PieceType(IntEnum):
    NONE = 0b0000
    KING = 0b0001
    QUEEN = 0b0010
    BISHOP = 0b0011
    KNIGHT = 0b0100
    ROOK = 0b0101
    PAWN = 0b0110
    WRONG = 0b0111


class PieceColor(IntEnum):
    BLACK = 0
    WHITE = 1

    @property
    def opponent(self) -> PieceColor:
        return PieceColor.WHITE if self is PieceColor.BLACK else PieceColor.BLACK


class MoveType(IntEnum):
    NORMAL = 0b000
    CAPTURE = 0b001
    EN_PASSANT = 0b010
    CASTLING = 0b011
    PROMOTE_TO_BISHOP = 0b100
    PROMOTE_TO_KNIGHT = 0b101
    PROMOTE_TO_ROOK = 0b110
    PROMOTE_TO_QUEEN = 0b111


class IllegalMoveError(ValueError):
    """Raised when a move cannot be played on the current board."""


_PIECE_CHARS = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


@dataclass(frozen=True)
class PieceData:
    """A piece and its colour; packs into four bits (colour in bit 0)."""

    color: PieceColor = PieceColor.WHITE
    piece: PieceType = PieceType.NONE

    def pack(self) -> int:
        return int(self.color) | (int(self.piece) << 1)

    @classmethod
    def unpack(cls, data: int) -> PieceData:
        return cls(PieceColor(data & 1), PieceType((data >> 1) & _PIECE_MASK))

    @classmethod
    def empty(cls) -> PieceData:
        return cls(PieceColor.WHITE, PieceType.NONE)

    @classmethod
    def wrong(cls) -> PieceData:
        return cls(PieceColor.WHITE, PieceType.WRONG)

    def to_char(self) -> str:
        """Letter for the piece, upper case for white, ``.`` for none."""
        char = _PIECE_CHARS.get(self.piece, ".")
        return char.upper() if self.color is PieceColor.WHITE else char


@dataclass(frozen=True)
class Move:
    """A piece going from one square to another."""

    origin: Point2D
    target: Point2D
    color: PieceColor
    piece: PieceType
    move_type: MoveType = MoveType.NORMAL

    @property
    def piece_data(self) -> PieceData:
        return PieceData(self.color, self.piece)

    @classmethod
    def generate_list_of_moves(
        cls, piece: PieceData, origin: Point2D, targets: Iterable[Point2D]
    ) -> list[Move]:
        """One normal move of ``piece`` from ``origin`` to each target."""
        return [cls(origin, target, piece.color, piece.piece, MoveType.NORMAL) for target in targets]


def _on_board(pos: Point2D) -> bool:
    return 0 <= pos.x < BOARD_SIZE and 0 <= pos.y < BOARD_SIZE


_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class WorldState:
    """The board and whose turn it is; white starts on rows 0 and 1."""

    def __init__(self) -> None:
        self.turn = PieceColor.WHITE
        self._board = bytearray(BOARD_SIZE * BOARD_SIZE // 2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorldState):
            return NotImplemented
        return self.turn == other.turn and self._board == other._board

    __hash__ = None  # mutable

    def piece_at(self, pos: Point2D) -> PieceData:
        """The piece on ``pos``, or :meth:`PieceData.wrong` off the board."""
        if not _on_board(pos):
            return PieceData.wrong()
        value = self._board[(pos.y * BOARD_SIZE + pos.x) // 2]
        value = value & _NIBBLE if pos.x % 2 == 0 else value >> 4
        return PieceData.unpack(value)

    def set_piece(self, piece: PieceData, pos: Point2D) -> None:
        if not _on_board(pos):
            raise IndexError(f"position {pos} is outside the board")
        packed = piece.pack()
        index = (pos.y * BOARD_SIZE + pos.x) // 2
        value = self._board[index]
        if pos.x % 2 == 0:
            value = (value & 0b11110000) | packed
        else:
            value = (value & 0b00001111) | (packed << 4)
        self._board[index] = value

    def move(self, origin: Point2D, target: Point2D) -> None:
        """Move the piece on ``origin`` to ``target`` and pass the turn."""
        piece_from = self.piece_at(origin)
        piece_to = self.piece_at(target)
        if piece_from.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Wrong FROM piece at position: {origin}")
        if piece_to.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Wrong TO position: {target}")
        if piece_from.color is not self.turn:
            raise IllegalMoveError(f"Piece color does not match the turn at position: {origin}")
        if piece_to.piece is not PieceType.NONE and piece_from.color is piece_to.color:
            raise IllegalMoveError(f"WRONG piece at position: {origin}")
        self.set_piece(piece_from, target)
        self.set_piece(PieceData.empty(), origin)
        self.end_turn()

    def end_turn(self) -> None:
        self.turn = self.turn.opponent

    def reset(self) -> None:
        """Set up the starting position with white to move."""
        self.turn = PieceColor.WHITE
        self._board = bytearray(len(self._board))
        for column, piece in enumerate(_BACK_RANK):
            self.set_piece(PieceData(PieceColor.WHITE, piece), Point2D(column, 0))
            self.set_piece(PieceData(PieceColor.WHITE, PieceType.PAWN), Point2D(column, 1))
            self.set_piece(PieceData(PieceColor.BLACK, PieceType.PAWN), Point2D(column, 6))
            self.set_piece(PieceData(PieceColor.BLACK, piece), Point2D(column, 7))

    def copy(self) -> WorldState:
        clone = WorldState()
        clone.turn = self.turn
        clone._board = bytearray(self._board)
        return clone

    def __str__(self) -> str:
        lines = [
            str(line + 1)
            + "".join(" " + self.piece_at(Point2D(col, line)).to_char() for col in range(BOARD_SIZE))
            for line in range(BOARD_SIZE - 1, -1, -1)
        ]
        lines.append("  A B C D E F G H")
        return "\n".join(lines) + "\n"


@dataclass(order=True)
class MoveState:
    """A board reached by a sequence of moves, ordered by its score."""

    state: WorldState = field(compare=False)
    moves: list[Move] = field(default_factory=list, compare=False)
    score: int = 0

    @property
    def current_move(self) -> Move:
        return self.moves[-1]

    @property
    def first_move(self) -> Move:
        return self.moves[0]