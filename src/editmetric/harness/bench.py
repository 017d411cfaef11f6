from __future__ import annotations

"""Benchmark harness timing distance implementations over a corpus."""

import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..config import CorpusModel, CorpusPair
from ..encoding import CodePoints, to_code_points
from ..implementations import CANONICAL, DistanceFunc, get_implementation
from ..utils import jsonio
from ..utils.seeds import seeded_generator

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz "


@dataclass
class BenchmarkResult:
    implementation: str
    corpus: str
    iterations: int
    calls: int
    total_seconds: float
    per_call_us: float
    min_iteration_ms: float
    median_iteration_ms: float
    max_iteration_ms: float
    stdev_iteration_ms: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _decode_pairs(corpus: CorpusModel) -> List[Tuple[CodePoints, CodePoints]]:
    return [
        (
            to_code_points(corpus.operand(left)),
            to_code_points(corpus.operand(right)),
        )
        for left, right in corpus.all_pairs()
    ]


def _time_iterations(
    func: DistanceFunc, pairs: Sequence[Tuple[CodePoints, CodePoints]], iterations: int
) -> np.ndarray:
    timings = np.empty(iterations, dtype=np.float64)
    for index in range(iterations):
        start = time.perf_counter()
        for s, t in pairs:
            func(s, t)
        timings[index] = time.perf_counter() - start
    return timings


def benchmark_implementation(
    name: str,
    corpus: CorpusModel,
    *,
    iterations: int = 1000,
    rehearsal: bool = True,
) -> BenchmarkResult:
    """Time one implementation over every ordered pair of *corpus*.

    With *rehearsal* enabled a full untimed pass runs first, so allocation
    and cache warm-up do not skew the measured pass.
    """

    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    func = get_implementation(name)
    pairs = _decode_pairs(corpus)
    if rehearsal:
        logger.debug("Rehearsing %s over %d pairs", name, len(pairs))
        _time_iterations(func, pairs, iterations)
    timings = _time_iterations(func, pairs, iterations)
    total = float(timings.sum())
    calls = iterations * len(pairs)
    result = BenchmarkResult(
        implementation=name,
        corpus=corpus.id,
        iterations=iterations,
        calls=calls,
        total_seconds=total,
        per_call_us=(total / calls * 1e6) if calls else 0.0,
        min_iteration_ms=float(timings.min() * 1e3),
        median_iteration_ms=float(np.median(timings) * 1e3),
        max_iteration_ms=float(timings.max() * 1e3),
        stdev_iteration_ms=float(timings.std() * 1e3),
    )
    logger.info(
        "%s: %d calls in %.3fs (%.2fus/call)",
        name,
        calls,
        result.total_seconds,
        result.per_call_us,
    )
    return result


def run_benchmark(
    corpus: CorpusModel,
    *,
    implementations: Optional[Sequence[str]] = None,
    iterations: int = 1000,
    rehearsal: bool = True,
) -> List[BenchmarkResult]:
    names = list(implementations or [CANONICAL])
    return [
        benchmark_implementation(
            name, corpus, iterations=iterations, rehearsal=rehearsal
        )
        for name in names
    ]


def random_pairs(
    count: int,
    *,
    length: int = 32,
    alphabet: str = DEFAULT_ALPHABET,
    seed: int = 7,
) -> CorpusModel:
    """Build a reproducible synthetic corpus of *count* random text pairs."""

    if not alphabet:
        raise ValueError("alphabet must not be empty")
    rng = seeded_generator(seed)
    symbols = np.array(list(alphabet))
    texts: List[str] = []
    for _ in range(count * 2):
        size = int(rng.integers(0, length + 1))
        texts.append("".join(rng.choice(symbols, size=size)) if size else "")
    pairs = [
        CorpusPair(left=texts[i], right=texts[i + 1], label=f"random-{i // 2}")
        for i in range(0, len(texts), 2)
    ]
    return CorpusModel(id=f"random-{seed}", pairs=pairs)


def persist_results(results: Sequence[BenchmarkResult], run_dir: Path) -> Path:
    """Write ``timings.jsonl`` and ``summary.json`` into *run_dir*."""

    run_dir.mkdir(parents=True, exist_ok=True)
    rows = [result.to_dict() for result in results]
    jsonio.write_jsonl(run_dir / "timings.jsonl", rows)
    fastest = min(results, key=lambda r: r.per_call_us) if results else None
    jsonio.write_json(
        run_dir / "summary.json",
        {
            "implementations": [result.implementation for result in results],
            "fastest": fastest.implementation if fastest else None,
            "total_calls": sum(result.calls for result in results),
        },
    )
    logger.info("Benchmark artefacts written to %s", run_dir)
    return run_dir


def load_results(run_dir: Path) -> List[BenchmarkResult]:
    timings_path = run_dir / "timings.jsonl"
    if not timings_path.exists():
        raise FileNotFoundError(f"Timings not found at {timings_path}")
    return [BenchmarkResult(**row) for row in jsonio.read_jsonl(timings_path)]
