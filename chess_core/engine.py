from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import EngineSettings
from .core import Board, Color, Move, PieceType, pseudo_legal_moves

LOGGER = logging.getLogger("chess_core.engine")

MIN_LEVEL = 1
MAX_LEVEL = 10

_PIECE_VALUE = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    # No check detection, so losing the king has to be priced as material.
    PieceType.KING: 20_000,
}

INF = 10**18


def _material(board: Board, color: Color) -> Tuple[int, bool]:
    """Material balance for `color` and whether `color` still has a king."""
    score = 0
    has_king = False
    for p in board.key():
        if p.kind is None:
            continue
        v = _PIECE_VALUE[p.kind]
        if p.color is color:
            score += v
            if p.kind is PieceType.KING:
                has_king = True
        else:
            score -= v
    return score, has_king


def evaluate(board: Board, color: Color) -> int:
    """Material-only evaluation from `color`'s perspective."""
    return _material(board, color)[0]


def _settings_from_env() -> EngineSettings:
    try:
        return EngineSettings.from_env()
    except ValueError as exc:
        LOGGER.warning("settings_env_invalid", extra={"error": str(exc)})
        return EngineSettings()


def _capture_value(m: Move) -> int:
    if not m.is_capture:
        return 0
    return _PIECE_VALUE[m.captured.kind]


@dataclass(frozen=True)
class SearchResult:
    board: Board
    move: Optional[Move]
    score: int
    depth: int
    nodes: int
    # (move, score) best first; with skew 0 only the chosen move is scored
    ranked: Tuple[Tuple[Move, int], ...] = ()


class _Counter:
    __slots__ = ("nodes",)

    def __init__(self) -> None:
        self.nodes = 0


class CpuPlayer:
    """Computer opponent of a given color and skill level.

    The level is clamped into [1, 10] and fixes both the search depth and the
    skew handicap: at low levels the engine may pick a move ranked up to
    `skew` places below the best one.
    """

    def __init__(
        self,
        color: Color,
        level: int,
        rng: Optional[random.Random] = None,
        max_depth: Optional[int] = None,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        if settings is None:
            settings = _settings_from_env()
        self._color = color
        self._level = max(min(int(level), MAX_LEVEL), MIN_LEVEL)
        self._rng = rng if rng is not None else random.Random(settings.seed)
        self._max_depth = max_depth if max_depth is not None else settings.max_depth

    @property
    def color(self) -> Color:
        return self._color

    @property
    def level(self) -> int:
        return self._level

    @property
    def depth(self) -> int:
        return self._level + max(self._level // 2, 1)

    @property
    def skew(self) -> int:
        return max(5 - self._level, 0)

    @property
    def search_depth(self) -> int:
        if self._max_depth is None:
            return self.depth
        return max(1, min(self.depth, self._max_depth))

    def __repr__(self) -> str:
        return f"CpuPlayer(color={self._color.name}, level={self._level})"

    def next_move(self, board: Board) -> Board:
        return self.search(board).board

    def search(self, board: Board) -> SearchResult:
        depth = self.search_depth
        moves = pseudo_legal_moves(board, self._color)
        if not moves:
            LOGGER.debug("search_no_candidates", extra={"color": self._color.value})
            return SearchResult(board=board, move=None, score=evaluate(board, self._color), depth=depth, nodes=1)

        counter = _Counter()
        if self.skew == 0:
            ranked = self._best_only(board, moves, depth, counter)
            choice = 0
        else:
            ranked = self._rank_all(board, moves, depth, counter)
            choice = min(self._rng.randint(0, self.skew), len(ranked) - 1)

        move, score = ranked[choice]
        LOGGER.debug(
            "search_done",
            extra={
                "color": self._color.value,
                "level": self._level,
                "depth": depth,
                "nodes": counter.nodes,
                "score": score,
                "rank": choice,
                "move": move.uci(),
            },
        )
        return SearchResult(
            board=move.apply(board),
            move=move,
            score=score,
            depth=depth,
            nodes=counter.nodes,
            ranked=tuple(ranked),
        )

    def _rank_all(self, board: Board, moves: List[Move], depth: int, counter: _Counter) -> List[Tuple[Move, int]]:
        # full window per root move so that every score is exact
        opp = self._color.opponent()
        scored = []
        for m in moves:
            val = -_negamax(m.apply(board), opp, depth - 1, -INF, INF, 1, counter)
            scored.append((m, val))
        # stable: equal scores keep generation order
        scored.sort(key=lambda mv: mv[1], reverse=True)
        return scored

    def _best_only(self, board: Board, moves: List[Move], depth: int, counter: _Counter) -> List[Tuple[Move, int]]:
        opp = self._color.opponent()
        best: Optional[Move] = None
        best_val = -INF
        alpha = -INF
        for m in moves:
            val = -_negamax(m.apply(board), opp, depth - 1, -INF, -alpha, 1, counter)
            if val > best_val:
                best_val = val
                best = m
            alpha = max(alpha, val)
        return [(best, best_val)]


def _negamax(board: Board, color: Color, depth: int, alpha: int, beta: int, ply: int, counter: _Counter) -> int:
    counter.nodes += 1
    score, has_king = _material(board, color)
    if not has_king:
        # losing the king later is less bad than losing it now
        return score + ply
    if depth <= 0:
        return score

    moves = pseudo_legal_moves(board, color)
    if not moves:
        # TODO: score as mate/stalemate once a king-safety filter exists
        return score

    # ordering: captures first, most valuable victim first
    moves.sort(key=_capture_value, reverse=True)

    best_val = -INF
    opp = color.opponent()
    for m in moves:
        val = -_negamax(m.apply(board), opp, depth - 1, -beta, -alpha, ply + 1, counter)
        if val > best_val:
            best_val = val
        if val > alpha:
            alpha = val
        if alpha >= beta:
            break
    return best_val


def next_move(player: CpuPlayer, board: Board) -> Board:
    return player.next_move(board)
