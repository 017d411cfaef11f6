from .bench import BenchmarkResult, persist_results, random_pairs, run_benchmark
from .crosscheck import CrossCheckReport, Mismatch, cross_check, cross_check_corpus

__all__ = [
    "BenchmarkResult",
    "CrossCheckReport",
    "Mismatch",
    "cross_check",
    "cross_check_corpus",
    "persist_results",
    "random_pairs",
    "run_benchmark",
]
