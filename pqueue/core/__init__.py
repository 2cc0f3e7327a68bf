from .types import InvalidCapacityError, InvalidIdentifierError, InvalidScoreError, Neighbor
from .topk_queue import NeighborQueue

__all__ = [
    "Neighbor",
    "NeighborQueue",
    "InvalidCapacityError",
    "InvalidScoreError",
    "InvalidIdentifierError",
]
