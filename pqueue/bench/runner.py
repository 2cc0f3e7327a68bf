# pqueue/bench/runner.py
from __future__ import annotations

import logging
import traceback as tb
from datetime import datetime, timezone
from time import perf_counter
from typing import Sequence, Tuple

from ..core.topk_queue import NeighborQueue
from ..core.types import Neighbor
from .dataset import NeighborDataset
from .types import BenchmarkConfig, BenchmarkResult, BenchmarkTimeoutError, RunStatus

logger = logging.getLogger(__name__)


def run_insert_benchmark(
    neighbors: Sequence[Neighbor],
    config: BenchmarkConfig,
) -> Tuple[Tuple[Neighbor, ...], float]:
    """
    Repeat ``config.rounds`` times: clear the queue, then insert every neighbor.

    Returns the snapshot left by the last round and the time spent in the loop.
    The deadline is checked between rounds, never inside one.
    """
    queue = NeighborQueue.with_capacity(config.capacity)
    insert = queue.insert

    start = perf_counter()
    for _ in range(config.rounds):
        if (perf_counter() - start) > config.timeout_sec:
            raise BenchmarkTimeoutError(f"exceeded {config.timeout_sec}s")
        queue.clear()
        for neighbor in neighbors:
            insert(neighbor)
    elapsed = perf_counter() - start

    return queue.snapshot(), elapsed


def run_with_timeout(dataset: NeighborDataset, config: BenchmarkConfig) -> BenchmarkResult:
    """
    Time the queue on ``dataset``. Timeouts and exceptions end up in the
    result's status instead of propagating.
    """
    result = BenchmarkResult(
        dataset_id=dataset.dataset_id,
        capacity=config.capacity,
        rounds=config.rounds,
        status=RunStatus.OK,
        start_time=datetime.now(timezone.utc).isoformat(),
    )
    tag = f"{dataset.dataset_id}/k={config.capacity}"
    start_perf = perf_counter()

    try:
        snapshot, elapsed = run_insert_benchmark(dataset.neighbors, config)
    except BenchmarkTimeoutError:
        result.status = RunStatus.TIMEOUT
        logger.warning("[%s] Timeout after %.1fs", tag, config.timeout_sec)
    except Exception as exc:  # noqa: BLE001
        result.status = RunStatus.EXCEPTION
        result.exception_type = type(exc).__name__
        result.exception_message = str(exc)
        result.exception_traceback = tb.format_exc()
        logger.exception("[%s] Benchmark failed", tag)
    else:
        result.inserts = config.rounds * len(dataset)
        if result.inserts:
            result.ns_per_insert = elapsed * 1e9 / result.inserts
        result.final_ids = [n.id for n in snapshot]

    result.wall_time_sec = perf_counter() - start_perf
    result.end_time = datetime.now(timezone.utc).isoformat()

    logger.info("[%s] status=%s wall_time=%.2fs ns_per_insert=%s",
                tag, result.status.value, result.wall_time_sec, result.ns_per_insert)
    return result
