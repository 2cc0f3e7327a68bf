# pqueue/bench/suite.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from joblib import Parallel, delayed
from tqdm import tqdm

from .dataset import NeighborDataset
from .runner import run_with_timeout
from .types import BenchmarkConfig, RunStatus

logger = logging.getLogger(__name__)

STATUSES = tuple(s.value for s in RunStatus)


def process_single_dataset(
        file_path: Path,
        result_dir: Path,
        capacity: int,
        rounds: int,
        timeout: float = 60.0,
) -> Dict[str, Any]:
    """
    Benchmark one dataset file with one capacity.
    Always writes a JSON with the result, even when loading fails.
    """
    file_path = Path(file_path)
    dataset_id = file_path.stem
    config = BenchmarkConfig(capacity=capacity, rounds=rounds, timeout_sec=timeout)

    try:
        dataset = NeighborDataset.load(file_path)
        dataset_id = dataset.dataset_id
        result = run_with_timeout(dataset, config).to_dict()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Could not load dataset %s", file_path)
        result = {
            "dataset_id": dataset_id,
            "capacity": capacity,
            "rounds": rounds,
            "status": RunStatus.EXCEPTION.value,
            "wall_time_sec": None,
            "ns_per_insert": None,
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
        }

    output_file = Path(result_dir) / f"result_{dataset_id}_k{capacity}.json"
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with output_file.open("w", encoding="utf-8") as f:
        json.dump(result, f, indent=2)

    return {
        "id": dataset_id,
        "capacity": capacity,
        "status": result["status"],
        "time": result["wall_time_sec"],
        "ns_per_insert": result["ns_per_insert"],
    }


def run_suite(
        files: Sequence[Path],
        result_dir: Path,
        capacities: Sequence[int] = (16, 64),
        rounds: int = 1000,
        timeout: float = 60.0,
        n_jobs: int = -1,
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Benchmark every (file, capacity) pair in parallel and group the stats by status.
    Each job builds its own queue, so no queue is shared between workers.
    """
    tasks = [
        delayed(process_single_dataset)(f, result_dir, k, rounds, timeout)
        for f in files
        for k in capacities
    ]

    parallel_runner = Parallel(n_jobs=n_jobs, return_as="generator")

    by_status: Dict[str, List[Dict[str, Any]]] = {s: [] for s in STATUSES}
    for stats in tqdm(parallel_runner(tasks), total=len(tasks), unit="run"):
        s = stats.get("status", RunStatus.EXCEPTION.value)
        if s not in by_status:
            s = RunStatus.EXCEPTION.value
        by_status[s].append(stats)

    logger.info(
        "Suite done: %s",
        ", ".join(f"{s}={len(v)}" for s, v in by_status.items()),
    )
    return by_status
