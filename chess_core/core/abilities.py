from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from .board import Board
from .moves import Move
from .piece import Piece
from .types import Color, Square

# deltas
ORTH = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAG = ((1, 1), (1, -1), (-1, 1), (-1, -1))
KNIGHT_DELTAS = ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))
KING8 = ORTH + DIAG


def _enemy_of(target: Piece, color: Color) -> bool:
    return target.is_piece and target.color is not color


class Ability:
    """A way a piece moves. Yields pseudo-legal moves from `origin`."""

    def generate_moves(self, board: Board, origin: Square, piece: Piece) -> Iterator[Move]:
        return iter(())


class StepAbility(Ability):
    def __init__(self, deltas: Iterable[Tuple[int, int]]):
        self.deltas = tuple(deltas)

    def generate_moves(self, board, origin, piece):
        f0, r0 = origin
        for df, dr in self.deltas:
            to = (f0 + df, r0 + dr)
            target = board[to]
            if target is Piece.BLANK or _enemy_of(target, piece.color):
                yield Move(origin, to, piece, target)


class SlideAbility(Ability):
    def __init__(self, deltas: Iterable[Tuple[int, int]]):
        self.deltas = tuple(deltas)

    def generate_moves(self, board, origin, piece):
        f0, r0 = origin
        for df, dr in self.deltas:
            f, r = f0 + df, r0 + dr
            while True:
                target = board[f, r]
                if target is Piece.BLANK:
                    yield Move(origin, (f, r), piece)
                else:
                    # capture, own piece or edge: the ray ends here
                    if _enemy_of(target, piece.color):
                        yield Move(origin, (f, r), piece, target)
                    break
                f += df
                r += dr


class PawnAbility(Ability):
    def generate_moves(self, board, origin, piece):
        color = piece.color
        direction = color.forward
        f0, r0 = origin

        # forward 1
        one = (f0, r0 + direction)
        if board[one] is Piece.BLANK:
            yield Move(origin, one, piece)

            if r0 == color.pawn_start_rank:
                two = (f0, r0 + 2 * direction)
                if board[two] is Piece.BLANK:
                    yield Move(origin, two, piece)

        # captures
        for df in (-1, 1):
            to = (f0 + df, r0 + direction)
            target = board[to]
            if _enemy_of(target, color):
                yield Move(origin, to, piece, target)
