from __future__ import annotations

from typing import Dict

from .core import Board, Color, generate_positions, pseudo_legal_moves


def perft(board: Board, color: Color, depth: int) -> int:
    """Performance test: count pseudo-legal leaf positions to `depth`.

    Walks the same successor boards the search sees, so it doubles as a
    consistency check on the move generator.
    """
    if depth <= 0:
        return 1
    children = generate_positions(board, color)
    if depth == 1:
        return len(children)
    opp = color.opponent()
    return sum(perft(child, opp, depth - 1) for child in children)


def perft_divide(board: Board, color: Color, depth: int) -> Dict[str, int]:
    """Divide perft: nodes per root move, keyed by from/to square names."""
    out: Dict[str, int] = {}
    opp = color.opponent()
    for m in pseudo_legal_moves(board, color):
        key = m.uci()
        out[key] = out.get(key, 0) + perft(m.apply(board), opp, depth - 1)
    return out
