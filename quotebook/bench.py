"""
Concurrent-writer benchmark for the in-memory repository.

Spawns ``workers`` threads that each save ``per_worker`` id-less quotes into
one shared repository, then checks that every save landed under a distinct
id. Timing and memory figures come from ``profile_block``.

Usage (example from CLI):
    from quotebook.bench import run_benchmark

    result = run_benchmark(workers=8, per_worker=1_000)
    print(result["saves_per_sec"], result["duplicate_ids"])
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from quotebook.config import get_settings
from quotebook.domain.models import Item
from quotebook.repository.abstract import QuoteRepository
from quotebook.repository.memory import InMemoryQuoteRepository
from quotebook.utils.logging import get_logger
from quotebook.utils.profiler import profile_block

log = get_logger(__name__)


def _write_batch(repository: QuoteRepository, worker: int, count: int) -> List[int]:
    ids: List[int] = []
    for i in range(count):
        saved = repository.save(Item(title=f"worker {worker} quote {i}", tags={f"w{worker}"}))
        ids.append(saved.id)
    return ids


def run_benchmark(
    workers: Optional[int] = None,
    per_worker: Optional[int] = None,
    repository: Optional[QuoteRepository] = None,
) -> Dict[str, Any]:
    """
    Run concurrent saves and report throughput plus id integrity.

    Parameters
    ----------
    workers : int | None
        Number of writer threads. Defaults to settings.bench_workers.
    per_worker : int | None
        Saves per thread. Defaults to settings.bench_per_worker.
    repository : QuoteRepository | None
        Target repository; a fresh in-memory one when omitted.

    Returns
    -------
    dict
        Saves, stored count, duplicate and missing id counts, and profile
        figures.
    """
    settings = get_settings()
    workers = workers or settings.bench_workers
    per_worker = per_worker or settings.bench_per_worker
    repository = repository if repository is not None else InMemoryQuoteRepository()
    expected = workers * per_worker
    before = repository.count()

    log.info(
        "[BENCH START] concurrent saves",
        extra={"workers": workers, "per_worker": per_worker},
    )
    with profile_block("concurrent-save") as stats:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(_write_batch, repository, worker, per_worker)
                for worker in range(workers)
            ]
            assigned = [item_id for future in futures for item_id in future.result()]

    duplicate_ids = len(assigned) - len(set(assigned))
    stored = repository.count() - before
    result: Dict[str, Any] = {
        "workers": workers,
        "per_worker": per_worker,
        "saves": len(assigned),
        "stored": stored,
        "duplicate_ids": duplicate_ids,
        "missing": expected - stored,
        "saves_per_sec": round(len(assigned) / stats.duration_seconds, 2)
        if stats.duration_seconds
        else 0.0,
        "profile": stats.as_dict(),
    }

    if duplicate_ids or stored != expected:
        log.error("[BENCH FAILED] id integrity broken", extra=result)
    else:
        log.info("[BENCH COMPLETE] concurrent saves", extra={"saves": len(assigned)})
    return result


__all__ = ["run_benchmark"]
