from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from editmetric.cli import app

runner = CliRunner()


def test_distance_command_prints_value() -> None:
    result = runner.invoke(app, ["distance", "kitten", "sitting"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "3"


def test_distance_command_binary_encoding() -> None:
    result = runner.invoke(app, ["distance", "café", "cafe", "--encoding", "binary"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "2"


def test_distance_command_rejects_unknown_encoding() -> None:
    result = runner.invoke(app, ["distance", "a", "b", "--encoding", "klingon"])
    assert result.exit_code == 1
    assert "Invalid encoding" in result.stdout


def test_check_command_passes_on_default_corpus() -> None:
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0
    assert "OK" in result.stdout


def test_check_command_fails_on_wrong_expectation(tmp_path: Path) -> None:
    path = tmp_path / "wrong.yaml"
    path.write_text("pairs:\n  - {left: flaw, right: lawn, expected: 5}\n", encoding="utf-8")
    result = runner.invoke(app, ["check", "--corpus", str(path)])
    assert result.exit_code == 1


def test_check_command_missing_corpus(tmp_path: Path) -> None:
    result = runner.invoke(app, ["check", "--corpus", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1
    assert "Corpus not found" in result.stdout


def test_bench_command_persists_artefacts(tmp_path: Path) -> None:
    run_dir = tmp_path / "run"
    result = runner.invoke(
        app,
        ["bench", "-n", "2", "-i", "rolling", "-i", "matrix", "--run-path", str(run_dir)],
    )
    assert result.exit_code == 0
    assert "Benchmark" in result.stdout
    assert run_dir.joinpath("timings.jsonl").exists()


def test_bench_command_rejects_unknown_implementation() -> None:
    result = runner.invoke(app, ["bench", "-i", "inline-c"])
    assert result.exit_code == 1
    assert "Unknown implementation" in result.stdout


def test_distance_command_undecodable_argument_under_binary() -> None:
    # "caf\udce9" is how a Latin-1 "café" argument reaches a UTF-8 locale.
    result = runner.invoke(app, ["distance", "caf\udce9", "cafe", "--encoding", "binary"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1"


def test_distance_command_undecodable_argument_under_latin1() -> None:
    result = runner.invoke(app, ["distance", "caf\udce9", "café", "--encoding", "latin-1"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "0"


def test_distance_command_clean_argument_under_latin1() -> None:
    result = runner.invoke(app, ["distance", "café", "cafe", "--encoding", "latin-1"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1"


def test_distance_command_undecodable_argument_under_utf8() -> None:
    result = runner.invoke(app, ["distance", "caf\udce9", "cafe"])
    assert result.exit_code == 1
    assert "Invalid encoding" in result.stdout


def test_verbose_flag_shows_debug_log() -> None:
    result = runner.invoke(app, ["-v", "distance", "a", "b", "--encoding", "klingon"])
    assert result.exit_code == 1
    assert "Unusable encoding" in result.stdout
    assert "Invalid encoding" in result.stdout


def test_debug_log_hidden_without_verbose() -> None:
    result = runner.invoke(app, ["distance", "a", "b", "--encoding", "klingon"])
    assert result.exit_code == 1
    assert "Unusable encoding" not in result.stdout
