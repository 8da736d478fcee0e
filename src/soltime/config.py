"""
soltime.config
--------------
Run-time settings taken from the environment.

Settings are re-read on every call to ``load_settings()`` so that nothing
mutable is kept at module level:

  SOLTIME_LEAP_SECONDS    leap-second awareness (default on; 0/false/no/off disables)
  SOLTIME_DELTAT_METHOD   best | table | em2006 (default best)
  SOLTIME_DELTAT_TABLE    path to a CSV with decimal_year,delta_t_seconds columns
  SOLTIME_MAX_ITERATIONS  cap for the iterative sunrise solvers (default 20)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DELTAT_METHODS = ("best", "table", "em2006")
DEFAULT_MAX_ITERATIONS = 20

_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    leap_seconds: bool = True
    deltat_method: str = "best"
    deltat_table: Optional[Path] = None
    max_iterations: int = DEFAULT_MAX_ITERATIONS


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``env`` (defaults to os.environ)."""
    if env is None:
        env = os.environ

    leap = env.get("SOLTIME_LEAP_SECONDS", "").strip().lower()

    method = env.get("SOLTIME_DELTAT_METHOD", "best").strip().lower() or "best"
    if method not in DELTAT_METHODS:
        raise ValueError(f"SOLTIME_DELTAT_METHOD must be one of: {', '.join(DELTAT_METHODS)}")

    table = env.get("SOLTIME_DELTAT_TABLE", "").strip()

    raw_max = env.get("SOLTIME_MAX_ITERATIONS", "").strip()
    if raw_max:
        try:
            max_iterations = int(raw_max)
        except ValueError as e:
            raise ValueError(f"SOLTIME_MAX_ITERATIONS must be an integer, got {raw_max!r}") from e
        if max_iterations < 2:
            raise ValueError("SOLTIME_MAX_ITERATIONS must be at least 2")
    else:
        max_iterations = DEFAULT_MAX_ITERATIONS

    return Settings(
        leap_seconds=leap not in _FALSY,
        deltat_method=method,
        deltat_table=Path(table).expanduser() if table else None,
        max_iterations=max_iterations,
    )
