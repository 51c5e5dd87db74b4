"""
Opt-in timing of scanner and parser hot paths.

Profiling starts enabled when ``JSNOM_PROFILE`` is set at import time and
can be toggled afterwards with ``set_profiling``. Each timed section reports
the span of input it consumed, so ``bytes_processed`` is the number of bytes
covered by the tokens or containers that section produced. Sections that
raise are counted and timed but consume nothing.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

_enabled = __debug__ and "JSNOM_PROFILE" in os.environ
_stats: dict[str, "HotPathStats"] = {}


@dataclass
class HotPathStats:
    """Accumulated timings for one named hot path."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    bytes_processed: int = 0

    def record_call(self, duration_ns: int, nbytes: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.bytes_processed += nbytes


def profiling_enabled() -> bool:
    return _enabled


def set_profiling(enabled: bool) -> bool:
    """Turns profiling on or off and returns the previous setting."""
    global _enabled
    previous = _enabled
    _enabled = bool(enabled)
    return previous


class ProfileContext:
    """
    Times the enclosed block under func_name.

    The block reports its consumed input with ``consumed(start, end)``;
    nbytes given up front is used when the span is known before entering.
    Does nothing beyond two attribute stores while profiling is off.
    """

    __slots__ = ("func_name", "nbytes", "_start")

    def __init__(self, func_name: str, nbytes: int = 0) -> None:
        self.func_name = func_name
        self.nbytes = nbytes
        self._start: int | None = None

    def consumed(self, start: int, end: int) -> None:
        self.nbytes = end - start

    def __enter__(self) -> "ProfileContext":
        if _enabled:
            self._start = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._start is None:
            return
        duration = time.perf_counter_ns() - self._start
        stats = _stats.get(self.func_name)
        if stats is None:
            stats = _stats[self.func_name] = HotPathStats(self.func_name)
        stats.record_call(duration, 0 if exc_type is not None else self.nbytes)


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the statistics recorded so far."""
    return dict(_stats)


def clear_hot_path_stats() -> None:
    _stats.clear()
