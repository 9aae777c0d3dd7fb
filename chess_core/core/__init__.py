from .types import Color, Square, FILES, OFF_BOARD_FILE, coords_from_an, in_bounds, sq_name
from .piece import Piece, PieceType
from .board import Board
from .moves import Move
from .movegen import pseudo_legal_moves, generate_positions
from .setup import default_position, ascii_board

__all__ = [
    "Color","Square","FILES","OFF_BOARD_FILE","coords_from_an","in_bounds","sq_name",
    "Piece","PieceType","Board","Move",
    "pseudo_legal_moves","generate_positions",
    "default_position","ascii_board",
]
