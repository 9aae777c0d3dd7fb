from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_SEED = "CHESS_CORE_SEED"
ENV_MAX_DEPTH = "CHESS_CORE_MAX_DEPTH"
ENV_LOG_LEVEL = "CHESS_CORE_LOG_LEVEL"

# Deeper searches do not finish in reasonable time in pure Python.
DEFAULT_MAX_DEPTH = 4


def _optional_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class EngineSettings:
    seed: Optional[int] = None
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        env = os.environ if env is None else env
        max_depth = _optional_int(env, ENV_MAX_DEPTH)
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"{ENV_MAX_DEPTH} must be at least 1, got {max_depth}")
        return cls(
            seed=_optional_int(env, ENV_SEED),
            max_depth=DEFAULT_MAX_DEPTH if max_depth is None else max_depth,
            log_level=env.get(ENV_LOG_LEVEL, "WARNING").strip().upper() or "WARNING",
        )
