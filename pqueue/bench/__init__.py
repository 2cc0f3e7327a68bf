from .dataset import NeighborDataset, generate_random_dataset
from .runner import run_insert_benchmark, run_with_timeout
from .suite import process_single_dataset, run_suite
from .types import BenchmarkConfig, BenchmarkResult, BenchmarkTimeoutError, RunStatus

__all__ = [
    "NeighborDataset",
    "generate_random_dataset",
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkTimeoutError",
    "RunStatus",
    "run_insert_benchmark",
    "run_with_timeout",
    "process_single_dataset",
    "run_suite",
]
