# pqueue/bench/types.py
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any, Dict, List, Optional


class RunStatus(str, Enum):
    OK = "ok"
    TIMEOUT = "timeout"
    EXCEPTION = "exception"


class BenchmarkTimeoutError(Exception):
    """Raised when a benchmark run goes past its time limit."""


@dataclass(frozen=True)
class BenchmarkConfig:
    """Parameters of one insertion benchmark run."""
    capacity: int = 64          # K of the queue under test
    rounds: int = 1000          # clear + insert-all repetitions
    timeout_sec: float = 60.0


@dataclass
class BenchmarkResult:
    """
    Outcome of timing the queue on one dataset with one capacity.
    """
    dataset_id: str
    capacity: int
    rounds: int
    status: RunStatus

    start_time: str
    end_time: str = ""
    wall_time_sec: float = 0.0

    # Metrics (only when status is OK)
    inserts: int = 0
    ns_per_insert: Optional[float] = None
    final_ids: List[int] = field(default_factory=list)   # snapshot of the last round

    # Error info (if any)
    exception_type: Optional[str] = None
    exception_message: Optional[str] = None
    exception_traceback: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data
