from __future__ import annotations

from enum import Enum
from typing import Tuple

Square = Tuple[int, int]

FILES = "abcdefgh"
OFF_BOARD_FILE = 8
BOARD_SIZE = 8


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        # White starts on the high rank indices and moves toward rank 0.
        return -1 if self is Color.WHITE else 1

    @property
    def pawn_start_rank(self) -> int:
        return 6 if self is Color.WHITE else 1

    @classmethod
    def parse(cls, text: str) -> "Color":
        key = text.strip().lower()
        for c in cls:
            if c.value == key or c.value[0] == key:
                return c
        raise ValueError(f"Unknown color: {text!r}")


def coords_from_an(file_char: str, rank_number: int) -> Square:
    """Algebraic (file letter, rank number) to zero-based (file, rank).

    Unknown file letters map to OFF_BOARD_FILE instead of failing, so the
    result can always be used as a board index.
    """
    f = FILES.find(file_char.lower()) if len(file_char) == 1 else -1
    if f < 0:
        f = OFF_BOARD_FILE
    return f, rank_number - 1


def in_bounds(file: int, rank: int) -> bool:
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def sq_name(s: Square) -> str:
    f, r = s
    if not in_bounds(f, r):
        return "-"
    return f"{FILES[f]}{r + 1}"
