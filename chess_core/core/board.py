from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .piece import Piece, PieceType
from .types import Color, Square, BOARD_SIZE, OFF_BOARD_FILE


class Board:
    """8x8 grid of Piece values with a total (file, rank) accessor.

    Reads outside the grid return Piece.OFF_BOARD and writes outside the grid
    land in a scratch slot, so indexing never raises.
    """

    __slots__ = ("_pieces", "_none")

    def __init__(self, pieces: Optional[List[Piece]] = None) -> None:
        if pieces is None:
            pieces = [Piece.BLANK] * (BOARD_SIZE * BOARD_SIZE)
        elif len(pieces) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError("Board needs exactly 64 squares")
        self._pieces: List[Piece] = list(pieces)
        self._none: Piece = Piece.OFF_BOARD

    @classmethod
    def default_position(cls) -> "Board":
        from .setup import default_position
        return default_position()

    @staticmethod
    def _slot(index: Square) -> Optional[int]:
        f, r = index
        if 0 <= f <= OFF_BOARD_FILE and 0 <= r <= OFF_BOARD_FILE:
            # file or rank 8 is the sentinel band, not a ninth row/column
            if f < BOARD_SIZE and r < BOARD_SIZE:
                return f + BOARD_SIZE * r
        return None

    def __getitem__(self, index: Square) -> Piece:
        slot = self._slot(index)
        if slot is None:
            return self._none
        return self._pieces[slot]

    def __setitem__(self, index: Square, piece: Piece) -> None:
        slot = self._slot(index)
        if slot is None:
            self._none = Piece.OFF_BOARD
            return
        self._pieces[slot] = piece

    def copy(self) -> "Board":
        return Board(self._pieces)

    def key(self) -> Tuple[Piece, ...]:
        return tuple(self._pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ("".join(p.symbol for p in self._pieces[r * 8:(r + 1) * 8]) for r in range(BOARD_SIZE))
        return f"Board({'/'.join(rows)})"

    def iter_squares(self) -> Iterator[Tuple[Square, Piece]]:
        for r in range(BOARD_SIZE):
            for f in range(BOARD_SIZE):
                yield (f, r), self._pieces[f + BOARD_SIZE * r]

    def pieces_of(self, color: Color) -> Iterator[Tuple[Square, Piece]]:
        for s, p in self.iter_squares():
            if p.color is color:
                yield s, p

    def king_square(self, color: Color) -> Optional[Square]:
        king = Piece.of(PieceType.KING, color)
        for s, p in self.iter_squares():
            if p is king:
                return s
        return None
