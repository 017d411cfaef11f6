from __future__ import annotations

"""Check that alternate implementations agree with the canonical one."""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..config import CorpusModel
from ..encoding import DEFAULT_ENCODING, Text, to_code_points
from ..implementations import CANONICAL, available_implementations, get_implementation

logger = logging.getLogger(__name__)


@dataclass
class Mismatch:
    left: str
    right: str
    implementation: str
    expected: int
    actual: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CrossCheckReport:
    baseline: str
    implementations: List[str]
    comparisons: int = 0
    mismatches: List[Mismatch] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatches


def _label(text: Text) -> str:
    return text if isinstance(text, str) else repr(text)


def cross_check(
    pairs: Iterable[Tuple[Text, Text]],
    *,
    implementations: Optional[Sequence[str]] = None,
    baseline: str = CANONICAL,
    encoding: str = DEFAULT_ENCODING,
    both_orders: bool = True,
) -> CrossCheckReport:
    """Compare every implementation against *baseline*.

    Each pair is also checked reversed unless *both_orders* is false, for
    callers whose pairs already list both orders.
    """

    names = list(implementations or available_implementations())
    names = [name for name in names if name != baseline]
    reference = get_implementation(baseline)
    funcs = {name: get_implementation(name) for name in names}
    report = CrossCheckReport(baseline=baseline, implementations=names)

    for left, right in pairs:
        s = to_code_points(left, encoding=encoding)
        t = to_code_points(right, encoding=encoding)
        orders = [(s, t, left, right)]
        if both_orders:
            orders.append((t, s, right, left))
        for a, b, a_text, b_text in orders:
            expected = reference(a, b)
            for name, func in funcs.items():
                actual = func(a, b)
                report.comparisons += 1
                if actual != expected:
                    logger.warning(
                        "%s disagrees with %s on (%r, %r): %d != %d",
                        name,
                        baseline,
                        a_text,
                        b_text,
                        actual,
                        expected,
                    )
                    report.mismatches.append(
                        Mismatch(
                            left=_label(a_text),
                            right=_label(b_text),
                            implementation=name,
                            expected=expected,
                            actual=actual,
                        )
                    )
    logger.info(
        "Cross-checked %d comparisons against %s: %d mismatches",
        report.comparisons,
        baseline,
        len(report.mismatches),
    )
    return report


def cross_check_corpus(
    corpus: CorpusModel, *, implementations: Optional[Sequence[str]] = None
) -> CrossCheckReport:
    """Run :func:`cross_check` over every ordered pair of *corpus*."""

    pairs = [
        (corpus.operand(left), corpus.operand(right))
        for left, right in corpus.all_pairs()
    ]
    return cross_check(pairs, implementations=implementations, both_orders=False)


def verify_expected(corpus: CorpusModel, *, implementation: str = CANONICAL) -> List[Mismatch]:
    """Return corpus pairs whose declared ``expected`` distance is not met."""

    func = get_implementation(implementation)
    failures: List[Mismatch] = []
    for pair in corpus.pairs:
        if pair.expected is None:
            continue
        s = to_code_points(corpus.operand(pair.left))
        t = to_code_points(corpus.operand(pair.right))
        actual = func(s, t)
        if actual != pair.expected:
            failures.append(
                Mismatch(
                    left=pair.left,
                    right=pair.right,
                    implementation=implementation,
                    expected=pair.expected,
                    actual=actual,
                )
            )
    return failures
