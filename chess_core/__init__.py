"""chess_core: move generation and search for a two-player chess engine.

- core: board representation, coordinates and pseudo-legal move generation
- engine: CpuPlayer, a depth-limited alpha-beta search with a skill handicap
- perft: leaf counting over the move generator
- config: environment-driven engine settings
"""

from . import core
from .core import Board, Color, Move, Piece, PieceType, coords_from_an, generate_positions, pseudo_legal_moves
from .config import EngineSettings
from .engine import CpuPlayer, SearchResult, evaluate, next_move
from .perft import perft, perft_divide

__all__ = [
    "core",
    "Board","Color","Move","Piece","PieceType",
    "coords_from_an","generate_positions","pseudo_legal_moves",
    "EngineSettings",
    "CpuPlayer","SearchResult","evaluate","next_move",
    "perft","perft_divide",
]
