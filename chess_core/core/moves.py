from __future__ import annotations

from dataclasses import dataclass

from .board import Board
from .piece import Piece
from .types import Square, sq_name


@dataclass(frozen=True)
class Move:
    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece = Piece.BLANK

    @property
    def is_capture(self) -> bool:
        return self.captured.is_piece

    def apply(self, board: Board) -> Board:
        """Return the successor board; `board` itself is left untouched."""
        out = board.copy()
        out[self.from_sq] = Piece.BLANK
        out[self.to_sq] = self.piece
        return out

    def uci(self) -> str:
        """From/to square names as produced by inverting coords_from_an.

        White starts on rank indices 6-7, which coords_from_an names ranks 7-8,
        so White's opening e-pawn push reads "e7e5".
        """
        return f"{sq_name(self.from_sq)}{sq_name(self.to_sq)}"
