from __future__ import annotations

import argparse
import logging
import random
from typing import Optional

from .config import EngineSettings
from .core import Board, Color, ascii_board
from .engine import CpuPlayer
from .perft import perft, perft_divide


def _color(text: str) -> Color:
    try:
        return Color.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def cmd_perft(args: argparse.Namespace) -> int:
    b = Board.default_position()
    if args.divide:
        out = perft_divide(b, args.color, args.depth)
        total = 0
        for k in sorted(out):
            print(f"{k}: {out[k]}")
            total += out[k]
        print(f"Total: {total}")
    else:
        print(perft(b, args.color, args.depth))
    return 0


def cmd_bestmove(args: argparse.Namespace, settings: EngineSettings) -> int:
    b = Board.default_position()
    seed = args.seed if args.seed is not None else settings.seed
    player = CpuPlayer(
        args.color,
        args.level,
        rng=random.Random(seed),
        max_depth=args.max_depth if args.max_depth is not None else settings.max_depth,
        settings=settings,
    )
    res = player.search(b)
    if res.move is None:
        print("bestmove 0000")
        return 0
    print(ascii_board(res.board))
    print()
    print(f"bestmove {res.move.uci()} score {res.score} depth {res.depth} nodes {res.nodes}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="chess-core")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("perft", help="Count pseudo-legal positions from the start position")
    sp.add_argument("--depth", type=int, default=3)
    sp.add_argument("--color", type=_color, default=Color.WHITE)
    sp.add_argument("--divide", action="store_true")

    bm = sub.add_parser("bestmove", help="Let the engine pick a move from the start position")
    bm.add_argument("--level", type=int, default=1)
    bm.add_argument("--color", type=_color, default=Color.WHITE)
    bm.add_argument("--seed", type=int, default=None)
    bm.add_argument("--max-depth", type=int, default=None)

    args = ap.parse_args(argv)
    try:
        settings = EngineSettings.from_env()
    except ValueError as exc:
        ap.error(str(exc))

    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))

    if args.cmd == "perft":
        return cmd_perft(args)
    return cmd_bestmove(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
