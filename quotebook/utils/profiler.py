"""
Profiling helpers for Quotebook.

``profile_block`` measures a block of code:
- wall-clock time (perf_counter)
- process RSS before and after (psutil)
- peak Python allocations (tracemalloc)

Usage:
    from quotebook.utils.profiler import profile_block

    with profile_block("concurrent-save") as stats:
        run_writers()

    print(stats.duration_seconds, stats.rss_delta_bytes, stats.peak_traced_bytes)
"""

from __future__ import annotations

import contextlib
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    duration_seconds: float = field(default=0.0)
    rss_before_bytes: Optional[int] = field(default=None)
    rss_after_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def rss_delta_bytes(self) -> Optional[int]:
        if self.rss_before_bytes is None or self.rss_after_bytes is None:
            return None
        return self.rss_after_bytes - self.rss_before_bytes

    def as_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "duration_seconds": round(self.duration_seconds, 4),
            "rss_delta_bytes": self.rss_delta_bytes,
            "peak_traced_bytes": self.peak_traced_bytes,
            **self.extra,
        }


@contextlib.contextmanager
def profile_block(
    label: str, enable_tracemalloc: bool = True
) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    enable_tracemalloc : bool
        Whether to track Python-level allocations. tracemalloc is left running
        if it was already tracing when the block started.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()

    tracemalloc_was_running = tracemalloc.is_tracing()
    if enable_tracemalloc and not tracemalloc_was_running:
        tracemalloc.start()
    if enable_tracemalloc:
        tracemalloc.reset_peak()

    stats.rss_before_bytes = process.memory_info().rss
    start = time.perf_counter()
    try:
        yield stats
    finally:
        stats.duration_seconds = time.perf_counter() - start
        stats.rss_after_bytes = process.memory_info().rss
        if enable_tracemalloc:
            _, stats.peak_traced_bytes = tracemalloc.get_traced_memory()
            if not tracemalloc_was_running:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block"]
