from __future__ import annotations

from .board import Board
from .piece import Piece
from .types import BOARD_SIZE, coords_from_an

_BACK_RANK = (
    ("a", "ROOK"), ("b", "KNIGHT"), ("c", "BISHOP"), ("d", "QUEEN"),
    ("e", "KING"), ("f", "BISHOP"), ("g", "KNIGHT"), ("h", "ROOK"),
)


def default_position() -> Board:
    b = Board()

    # White occupies rank indices 6-7 and Black 0-1.
    for f in range(BOARD_SIZE):
        b[f, 6] = Piece.WHITE_PAWN
        b[f, 1] = Piece.BLACK_PAWN

    for file_char, name in _BACK_RANK:
        b[coords_from_an(file_char, 8)] = Piece[f"WHITE_{name}"]
        b[coords_from_an(file_char, 1)] = Piece[f"BLACK_{name}"]

    return b


def ascii_board(board: Board) -> str:
    rows = []
    for r in range(BOARD_SIZE):
        row = []
        for f in range(BOARD_SIZE):
            row.append(board[f, r].symbol)
        rows.append(" ".join(row))
    return "\n".join(rows)
