"""
Throughput demo: clear + insert 100 random neighbors into a queue of
capacity 64, many times over, and report the elapsed time.
"""

from time import perf_counter

from pqueue import NeighborQueue
from pqueue.bench.dataset import generate_random_dataset

CAPACITY = 64
ROUNDS = 100_000


def main():
    neighbors = generate_random_dataset("demo", size=100).neighbors
    queue = NeighborQueue.with_capacity(CAPACITY)

    start = perf_counter()
    for _ in range(ROUNDS):
        queue.clear()
        for neighbor in neighbors:
            queue.insert(neighbor)
    elapsed_ms = (perf_counter() - start) * 1000

    best = queue.snapshot()[:3]
    print(f"done in {elapsed_ms:.0f}ms")
    print("closest:", ", ".join(f"{n.id}@{n.dist:.4f}" for n in best))


if __name__ == "__main__":
    main()
