from __future__ import annotations

from pathlib import Path

import json
import random

import numpy as np
import pytest

from editmetric.config import DEFAULT_CORPUS
from editmetric.harness.bench import (
    benchmark_implementation,
    load_results,
    persist_results,
    random_pairs,
    run_benchmark,
)


def test_benchmark_reports_timings_for_each_implementation() -> None:
    results = run_benchmark(
        DEFAULT_CORPUS, implementations=["rolling", "matrix"], iterations=3, rehearsal=False
    )
    assert [result.implementation for result in results] == ["rolling", "matrix"]
    for result in results:
        assert result.corpus == "default"
        assert result.calls == 3 * len(DEFAULT_CORPUS.all_pairs())
        assert result.total_seconds > 0
        assert result.min_iteration_ms <= result.median_iteration_ms <= result.max_iteration_ms
        assert result.stdev_iteration_ms >= 0


def test_default_benchmark_times_canonical_only() -> None:
    results = run_benchmark(DEFAULT_CORPUS, iterations=1)
    assert [result.implementation for result in results] == ["rolling"]


def test_iterations_must_be_positive() -> None:
    with pytest.raises(ValueError):
        benchmark_implementation("rolling", DEFAULT_CORPUS, iterations=0)


def test_unknown_implementation_raises() -> None:
    with pytest.raises(ValueError):
        benchmark_implementation("native-c", DEFAULT_CORPUS, iterations=1)


def test_random_pairs_are_reproducible() -> None:
    first = random_pairs(5, length=8, seed=11)
    second = random_pairs(5, length=8, seed=11)
    assert first.model_dump() == second.model_dump()
    assert len(first.pairs) == 5
    assert all(len(pair.left) <= 8 and len(pair.right) <= 8 for pair in first.pairs)


def test_random_pairs_requires_alphabet() -> None:
    with pytest.raises(ValueError):
        random_pairs(1, alphabet="")


def test_persist_and_load_results(tmp_path: Path) -> None:
    results = run_benchmark(
        DEFAULT_CORPUS, implementations=["rolling", "matrix"], iterations=2
    )
    run_dir = persist_results(results, tmp_path / "run")
    assert run_dir.joinpath("timings.jsonl").exists()
    summary = json.loads(run_dir.joinpath("summary.json").read_text())
    assert summary["implementations"] == ["rolling", "matrix"]
    assert summary["fastest"] in {"rolling", "matrix"}
    assert summary["total_calls"] == sum(result.calls for result in results)

    loaded = load_results(run_dir)
    assert loaded == results


def test_load_results_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_results(tmp_path)


def test_random_pairs_leave_global_prng_untouched() -> None:
    random.seed(99)
    np.random.seed(99)
    expected_py = random.random()
    expected_np = np.random.random()

    random.seed(99)
    np.random.seed(99)
    random_pairs(3, seed=1)
    assert random.random() == expected_py
    assert np.random.random() == expected_np
