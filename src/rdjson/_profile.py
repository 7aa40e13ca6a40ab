"""
Opt-in timing of the scanner and decoder entry points.

Set RDJSON_PROFILE before importing rdjson to collect per-function call
counts, elapsed nanoseconds and characters handled. Without it `profiled`
hands back the undecorated function, so normal parsing pays nothing.
"""

import functools
import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import replace

PROFILE_HOT_PATHS = __debug__ and "RDJSON_PROFILE" in os.environ

_stats: dict[str, "HotPathStats"] = {}


@dataclass
class HotPathStats:
    """Accumulated timings for one profiled function."""

    name: str
    calls: int = 0
    total_ns: int = 0
    chars: int = 0

    def record(self, elapsed_ns: int, chars: int = 0) -> None:
        self.calls += 1
        self.total_ns += elapsed_ns
        self.chars += chars

    @property
    def mean_ns(self) -> float:
        return self.total_ns / self.calls if self.calls else 0.0


def profiled[**P, R](
    name: str, size: Callable[..., int] | None = None
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Records each call of the decorated function under `name`.

    `size`, given the call's arguments, returns how many characters the call
    handled.
    """

    def decorate(func: Callable[P, R]) -> Callable[P, R]:
        if not PROFILE_HOT_PATHS:
            return func

        @functools.wraps(func)
        def timed(*args: P.args, **kwargs: P.kwargs) -> R:
            started = time.perf_counter_ns()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed = time.perf_counter_ns() - started
                chars = size(*args, **kwargs) if size else 0
                stats = _stats.get(name)
                if stats is None:
                    stats = _stats[name] = HotPathStats(name)
                stats.record(elapsed, chars)

        return timed

    return decorate


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the statistics collected so far."""
    return {name: replace(stats) for name, stats in _stats.items()}


def clear_hot_path_stats() -> None:
    _stats.clear()
