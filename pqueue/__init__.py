"""
pqueue: bounded top-K neighbor queue for nearest-neighbor search.

- core.types: Neighbor value type and validation errors
- core.topk_queue: NeighborQueue (sorted, capacity-bounded)
- bench: random data generation and insertion benchmarks
"""

from .core import (
    InvalidCapacityError,
    InvalidIdentifierError,
    InvalidScoreError,
    Neighbor,
    NeighborQueue,
)

__all__ = [
    "Neighbor",
    "NeighborQueue",
    "InvalidCapacityError",
    "InvalidScoreError",
    "InvalidIdentifierError",
]
