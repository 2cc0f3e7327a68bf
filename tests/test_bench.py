"""Tests for the benchmark scaffolding (pqueue.bench).

Dataset generation / JSON IO, the timed runner and the parallel suite.
"""

import json

import pytest

from pqueue import NeighborQueue
from pqueue.bench import (
    BenchmarkConfig,
    BenchmarkTimeoutError,
    NeighborDataset,
    RunStatus,
    generate_random_dataset,
    process_single_dataset,
    run_insert_benchmark,
    run_suite,
    run_with_timeout,
)


@pytest.fixture
def dataset():
    return generate_random_dataset("unit", size=100, seed=42)


# ── Dataset ─────────────────────────────────────────────────────

def test_dataset_ids_are_a_permutation(dataset):
    assert len(dataset) == 100
    assert sorted(n.id for n in dataset.neighbors) == list(range(100))
    assert all(0.0 <= n.dist < 1.0 for n in dataset.neighbors)


def test_dataset_is_deterministic_per_seed():
    a = generate_random_dataset("a", size=50, seed=3)
    b = generate_random_dataset("b", size=50, seed=3)
    c = generate_random_dataset("c", size=50, seed=4)
    assert a.neighbors == b.neighbors
    assert a.neighbors != c.neighbors


def test_dataset_rejects_empty_size():
    with pytest.raises(ValueError):
        generate_random_dataset("empty", size=0)


def test_dataset_save_and_load(tmp_path, dataset):
    path = tmp_path / "nested" / "unit.json"
    dataset.save(path)
    loaded = NeighborDataset.load(path)
    assert loaded.dataset_id == "unit"
    assert loaded.neighbors == dataset.neighbors


# ── Runner ──────────────────────────────────────────────────────

def test_insert_benchmark_returns_k_best(dataset):
    snapshot, elapsed = run_insert_benchmark(dataset.neighbors, BenchmarkConfig(capacity=10, rounds=3))
    expected = sorted(dataset.neighbors, key=lambda n: (n.dist, n.id))[:10]
    assert snapshot == tuple(expected)
    assert elapsed >= 0.0


def test_insert_benchmark_times_out(dataset):
    config = BenchmarkConfig(capacity=64, rounds=1_000_000, timeout_sec=0.0)
    with pytest.raises(BenchmarkTimeoutError):
        run_insert_benchmark(dataset.neighbors, config)


def test_run_with_timeout_ok(dataset):
    result = run_with_timeout(dataset, BenchmarkConfig(capacity=5, rounds=10))
    assert result.status is RunStatus.OK
    assert result.inserts == 1000
    assert result.ns_per_insert is not None
    assert len(result.final_ids) == 5
    assert result.end_time >= result.start_time
    assert result.wall_time_sec > 0.0
    assert "inserts_per_sec" not in result.to_dict()

    q = NeighborQueue(5)
    for n in dataset.neighbors:
        q.insert(n)
    assert result.final_ids == [n.id for n in q.snapshot()]


def test_run_with_timeout_records_timeout(dataset):
    result = run_with_timeout(dataset, BenchmarkConfig(rounds=1_000_000, timeout_sec=0.0))
    assert result.status is RunStatus.TIMEOUT
    assert result.final_ids == []
    assert result.to_dict()["status"] == "timeout"


def test_run_with_timeout_records_exception(dataset):
    result = run_with_timeout(dataset, BenchmarkConfig(capacity=0, rounds=1))
    assert result.status is RunStatus.EXCEPTION
    assert result.exception_type == "InvalidCapacityError"
    assert result.exception_traceback


# ── Suite ───────────────────────────────────────────────────────

def test_process_single_dataset_writes_json(tmp_path, dataset):
    data_file = tmp_path / "test" / "unit.json"
    dataset.save(data_file)
    stats = process_single_dataset(data_file, tmp_path / "result", capacity=8, rounds=2)

    assert stats["status"] == "ok"
    with (tmp_path / "result" / "result_unit_k8.json").open(encoding="utf-8") as f:
        saved = json.load(f)
    assert saved["capacity"] == 8
    assert len(saved["final_ids"]) == 8


def test_process_single_dataset_bad_file(tmp_path):
    bad = tmp_path / "broken.json"
    bad.write_text("{not json", encoding="utf-8")
    stats = process_single_dataset(bad, tmp_path / "result", capacity=4, rounds=1)
    assert stats["status"] == "exception"
    assert (tmp_path / "result" / "result_broken_k4.json").exists()


def test_run_suite_groups_by_status(tmp_path):
    files = []
    for i in range(2):
        path = tmp_path / "test" / f"d{i}.json"
        generate_random_dataset(f"d{i}", size=30, seed=i).save(path)
        files.append(path)

    by_status = run_suite(files, tmp_path / "result", capacities=(4, 16), rounds=2, n_jobs=1)
    assert len(by_status["ok"]) == 4
    assert by_status["timeout"] == [] and by_status["exception"] == []
    assert len(list((tmp_path / "result").glob("*.json"))) == 4
