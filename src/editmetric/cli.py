from __future__ import annotations

"""CLI entrypoint for the editmetric harnesses."""

import logging
import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import CorpusNotFoundError, resolve_corpus
from .distance import distance as edit_distance
from .encoding import (
    BYTE_ENCODINGS,
    DEFAULT_ENCODING,
    EncodedText,
    InvalidEncodingError,
    Text,
    validate_encoding,
)
from .harness.bench import persist_results, run_benchmark
from .harness.crosscheck import cross_check_corpus, verify_expected
from .implementations import CANONICAL, available_implementations

app = typer.Typer(help="Levenshtein edit distance with benchmark and cross-check harnesses.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_corpus_or_exit(corpus_path: Optional[Path]):
    try:
        return resolve_corpus(corpus_path)
    except CorpusNotFoundError as exc:
        console.print(f"[red]Corpus not found:[/red] {exc}")
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[red]Invalid corpus:[/red] {exc}")
        raise typer.Exit(code=1)


def _argument_operand(text: str, encoding: str) -> Text:
    """Turn a command-line argument into a distance operand.

    Arguments the locale decoded cleanly are already text. Undecodable bytes
    arrive as surrogate escapes; such arguments, and every argument under a
    byte-wise encoding, are recovered as raw bytes and decoded under *encoding*.
    """

    escaped = any(0xD800 <= ord(char) <= 0xDFFF for char in text)
    if not escaped and encoding not in BYTE_ENCODINGS:
        return text
    try:
        raw = os.fsencode(text)
    except UnicodeEncodeError as exc:
        raise InvalidEncodingError(encoding, f"cannot recover bytes of {text!r}") from exc
    return EncodedText(raw, encoding)


@app.command()
def distance(
    text1: str = typer.Argument(..., help="First text."),
    text2: str = typer.Argument(..., help="Second text."),
    encoding: str = typer.Option(
        DEFAULT_ENCODING,
        "--encoding",
        "-e",
        help="Encoding of the argument bytes; binary counts one code point per byte.",
    ),
) -> None:
    """Print the edit distance between TEXT1 and TEXT2."""

    try:
        name = validate_encoding(encoding)
        value = edit_distance(
            _argument_operand(text1, name), _argument_operand(text2, name)
        )
    except InvalidEncodingError as exc:
        console.print(f"[red]Invalid encoding[/red]: {exc}")
        raise typer.Exit(code=1)
    console.print(value)


@app.command()
def check(
    corpus_path: Optional[Path] = typer.Option(
        None, "--corpus", "-c", help="YAML corpus file; defaults to the built-in corpus."
    ),
) -> None:
    """Cross-check every implementation against the canonical one."""

    corpus = _load_corpus_or_exit(corpus_path)
    try:
        report = cross_check_corpus(corpus)
        failures = verify_expected(corpus)
    except InvalidEncodingError as exc:
        console.print(f"[red]Invalid encoding[/red]: {exc}")
        raise typer.Exit(code=1)

    table = Table(title=f"Cross-check ({corpus.id})")
    table.add_column("implementation")
    table.add_column("left")
    table.add_column("right")
    table.add_column("expected", justify="right")
    table.add_column("actual", justify="right")
    for mismatch in report.mismatches + failures:
        table.add_row(
            mismatch.implementation,
            mismatch.left,
            mismatch.right,
            str(mismatch.expected),
            str(mismatch.actual),
        )

    if report.ok and not failures:
        console.print(
            f"[green]OK[/green]: {report.comparisons} comparisons, "
            f"{', '.join(report.implementations) or 'no alternates'} agree with {report.baseline}"
        )
        return
    console.print(table)
    raise typer.Exit(code=1)


@app.command()
def bench(
    corpus_path: Optional[Path] = typer.Option(
        None, "--corpus", "-c", help="YAML corpus file; defaults to the built-in corpus."
    ),
    iterations: int = typer.Option(1000, "--iterations", "-n", min=1, help="Timed passes."),
    implementations: Optional[List[str]] = typer.Option(
        None, "--impl", "-i", help="Implementation(s) to time; repeatable."
    ),
    rehearsal: bool = typer.Option(True, "--rehearsal/--no-rehearsal"),
    run_path: Optional[Path] = typer.Option(
        None, "--run-path", help="Directory to store timing artefacts."
    ),
) -> None:
    """Time implementations over every ordered pair of a corpus."""

    names = implementations or [CANONICAL]
    unknown = [name for name in names if name not in available_implementations()]
    if unknown:
        console.print(f"[red]Unknown implementation[/red]: {', '.join(unknown)}")
        raise typer.Exit(code=1)

    corpus = _load_corpus_or_exit(corpus_path)
    try:
        results = run_benchmark(
            corpus, implementations=names, iterations=iterations, rehearsal=rehearsal
        )
    except InvalidEncodingError as exc:
        console.print(f"[red]Invalid encoding[/red]: {exc}")
        raise typer.Exit(code=1)

    table = Table(title=f"Benchmark ({corpus.id}, {iterations} iterations)")
    table.add_column("implementation")
    table.add_column("calls", justify="right")
    table.add_column("total_s", justify="right")
    table.add_column("us/call", justify="right")
    table.add_column("median_ms", justify="right")
    table.add_column("stdev_ms", justify="right")
    for result in results:
        table.add_row(
            result.implementation,
            str(result.calls),
            f"{result.total_seconds:.3f}",
            f"{result.per_call_us:.2f}",
            f"{result.median_iteration_ms:.3f}",
            f"{result.stdev_iteration_ms:.3f}",
        )
    console.print(table)

    if run_path is not None:
        persist_results(results, run_path)
        console.print(f"Artefacts written to [green]{run_path}[/green]")


if __name__ == "__main__":  # pragma: no cover
    app()
