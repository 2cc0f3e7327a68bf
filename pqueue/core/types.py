# pqueue/core/types.py
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Tuple


class InvalidCapacityError(ValueError):
    """Raised when a queue is built with a capacity below 1."""


class InvalidScoreError(ValueError):
    """Raised when a neighbor carries a score that is not a number or cannot be ordered (NaN)."""


class InvalidIdentifierError(ValueError):
    """Raised when a neighbor identifier is not an unsigned integer."""


@dataclass(frozen=True, slots=True)
class Neighbor:
    """
    A candidate of a nearest-neighbor search: identifier plus distance.

    Lower distance is better. Ties on distance are broken by ascending id,
    so ``key`` gives a total order as long as no distance is NaN.
    """
    id: int
    dist: float

    def __post_init__(self) -> None:
        # ids often come out of numpy arrays (uint32, int64); store plain ints
        if isinstance(self.id, bool) or not isinstance(self.id, numbers.Integral) or self.id < 0:
            raise InvalidIdentifierError(f"id must be a non-negative integer, got {self.id!r}")
        object.__setattr__(self, "id", int(self.id))

        if isinstance(self.dist, bool) or not isinstance(self.dist, numbers.Real):
            raise InvalidScoreError(f"dist of neighbor {self.id} is not a number: {self.dist!r}")
        try:
            dist = float(self.dist)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidScoreError(f"dist of neighbor {self.id} is not a float: {self.dist!r}") from exc
        if math.isnan(dist):
            raise InvalidScoreError(f"dist of neighbor {self.id} is NaN")
        object.__setattr__(self, "dist", dist)

    @property
    def key(self) -> Tuple[float, int]:
        return (self.dist, self.id)
