# pqueue/bench/dataset.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np

from ..core.types import Neighbor

DEFAULT_SEED = 42


@dataclass(slots=True)
class NeighborDataset:
    """Fixed list of neighbors fed to the queue by the benchmarks."""
    dataset_id: str
    neighbors: list[Neighbor] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.neighbors)

    # --- IO ---
    def to_dict(self) -> dict[str, Any]:
        return {
            "dataset_id": self.dataset_id,
            "neighbors": [{"id": n.id, "dist": n.dist} for n in self.neighbors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NeighborDataset:
        neighbors = [Neighbor(id=int(n["id"]), dist=float(n["dist"])) for n in data["neighbors"]]
        return cls(dataset_id=data["dataset_id"], neighbors=neighbors)

    def save(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Path | str) -> NeighborDataset:
        with Path(path).open("r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


# --- Generators ---

def generate_random_dataset(
        dataset_id: str,
        size: int = 100,
        seed: int | None = DEFAULT_SEED,
) -> NeighborDataset:
    """
    Ids 0..size-1 in shuffled order, each with a uniform distance in [0, 1).

    Distances are drawn as float32, the precision search code usually stores
    them in. The same seed always yields the same dataset.
    """
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")

    rng = np.random.default_rng(seed)
    ids = rng.permutation(size)
    dists = rng.random(size, dtype=np.float32)

    neighbors = [Neighbor(id=int(i), dist=float(d)) for i, d in zip(ids, dists)]
    return NeighborDataset(dataset_id=dataset_id, neighbors=neighbors)
