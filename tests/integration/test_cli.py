"""
Smoke tests for the Quotebook CLI using Typer's test runner.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from quotebook.config import get_settings
from quotebook.domain.models import Item
from quotebook.main import app, main
from quotebook.seed import dump_items, generate_items, load_items

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_settings(monkeypatch):
    """
    Keep log lines out of captured output so stdout parses as JSON.
    """
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_info_prints_settings():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "sample=" in result.stdout


def test_generate_writes_file(tmp_path: Path):
    output = tmp_path / "quotes.json"
    result = runner.invoke(app, ["generate", "--output", str(output), "--count", "12"])
    assert result.exit_code == 0
    assert len(load_items(output)) == 12


def test_stats_with_archive(tmp_path: Path):
    output = tmp_path / "quotes.json"
    runner.invoke(app, ["generate", "-o", str(output), "-n", "40", "--seed", "3"])

    result = runner.invoke(app, ["stats", "--input", str(output), "--archive", "--top", "3"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["total"] == 40
    assert "INACTIVE" not in payload["by_status"]
    assert len(payload["popular_tags"]) <= 3


def test_search_generated_sample():
    result = runner.invoke(app, ["search", "reflection"])
    assert result.exit_code == 0
    matches = json.loads(result.stdout)
    assert matches
    assert all("id" in match and "title" in match for match in matches)


def test_bench_command():
    result = runner.invoke(app, ["bench", "--workers", "2", "--per-worker", "25"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["duplicate_ids"] == 0


def test_generate_honours_zero_seed_and_count(tmp_path: Path):
    output = tmp_path / "quotes.json"
    result = runner.invoke(app, ["generate", "-o", str(output), "-n", "5", "--seed", "0"])
    assert result.exit_code == 0
    assert load_items(output) == generate_items(5, seed=0)

    empty = tmp_path / "empty.json"
    result = runner.invoke(app, ["generate", "-o", str(empty), "--count", "0"])
    assert result.exit_code == 0
    assert load_items(empty) == []


def test_main_exits_with_status_one_on_invalid_quote(tmp_path: Path, monkeypatch):
    bad = tmp_path / "bad.json"
    dump_items([Item(title="x" * 101)], bad)
    monkeypatch.setattr("sys.argv", ["quotebook", "stats", "--input", str(bad)])

    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 1
