from __future__ import annotations

from typing import Iterator, List

from .board import Board
from .moves import Move
from .pieces import abilities_for
from .types import Color


def iter_moves(board: Board, color: Color) -> Iterator[Move]:
    for origin, piece in board.pieces_of(color):
        for ab in abilities_for(piece.kind):
            yield from ab.generate_moves(board, origin, piece)


def pseudo_legal_moves(board: Board, color: Color) -> List[Move]:
    """Every move of `color` that obeys movement and occupancy rules.

    King safety is not checked: a returned move may leave the mover's king
    attacked. The order is stable for a given board.
    """
    return list(iter_moves(board, color))


def generate_positions(board: Board, color: Color) -> List[Board]:
    """Successor boards, one per pseudo-legal move of `color`."""
    return [m.apply(board) for m in iter_moves(board, color)]
