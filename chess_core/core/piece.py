from __future__ import annotations

from enum import Enum
from typing import Optional

from .types import Color


class PieceType(Enum):
    PAWN = "p"
    BISHOP = "b"
    KNIGHT = "n"
    ROOK = "r"
    KING = "k"
    QUEEN = "q"


class Piece(Enum):
    """Content of a single square.

    Twelve colored pieces plus BLANK and OFF_BOARD. The owning color is an
    explicit attribute of each member.
    """

    WHITE_PAWN = (PieceType.PAWN, Color.WHITE)
    BLACK_PAWN = (PieceType.PAWN, Color.BLACK)
    WHITE_BISHOP = (PieceType.BISHOP, Color.WHITE)
    BLACK_BISHOP = (PieceType.BISHOP, Color.BLACK)
    WHITE_KNIGHT = (PieceType.KNIGHT, Color.WHITE)
    BLACK_KNIGHT = (PieceType.KNIGHT, Color.BLACK)
    WHITE_ROOK = (PieceType.ROOK, Color.WHITE)
    BLACK_ROOK = (PieceType.ROOK, Color.BLACK)
    WHITE_KING = (PieceType.KING, Color.WHITE)
    BLACK_KING = (PieceType.KING, Color.BLACK)
    WHITE_QUEEN = (PieceType.QUEEN, Color.WHITE)
    BLACK_QUEEN = (PieceType.QUEEN, Color.BLACK)
    # the second field only keeps the two empty values distinct; color is None
    BLANK = (None, "blank")
    OFF_BOARD = (None, "off_board")

    def __init__(self, kind: Optional[PieceType], owner: object) -> None:
        self.kind = kind
        self.color: Optional[Color] = owner if isinstance(owner, Color) else None

    @classmethod
    def of(cls, kind: PieceType, color: Color) -> "Piece":
        return _BY_KIND_COLOR[(kind, color)]

    @property
    def is_piece(self) -> bool:
        return self.color is not None

    @property
    def is_white(self) -> bool:
        return self.color is Color.WHITE

    @property
    def is_black(self) -> bool:
        return self.color is Color.BLACK

    @property
    def symbol(self) -> str:
        if self is Piece.BLANK:
            return "."
        if self is Piece.OFF_BOARD:
            return "#"
        return self.kind.value.upper() if self.is_white else self.kind.value


_BY_KIND_COLOR = {(p.kind, p.color): p for p in Piece if p.is_piece}
