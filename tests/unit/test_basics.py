from __future__ import annotations

from pathlib import Path

from quotebook import config
from quotebook.domain.validation import validate
from quotebook.seed import dump_items, generate_items, load_items
from quotebook.utils import profiler

SAMPLE_COUNT = 25


def test_get_settings_defaults():
    settings = config.Settings()
    assert settings.log_level == "INFO"
    assert settings.sample_size > 0
    assert settings.popular_tags_limit > 0
    assert settings.bench_workers > 0
    assert settings.bench_per_worker > 0


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SAMPLE_SIZE", "3")
    monkeypatch.setenv("LOG_JSON", "true")
    settings = config.Settings()
    assert settings.sample_size == 3
    assert settings.log_json is True


def test_profile_block_measures_time():
    with profiler.profile_block("noop") as stats:
        sum(range(10_000))
    assert stats.duration_seconds > 0
    assert stats.rss_before_bytes is not None
    assert stats.as_dict()["label"] == "noop"


def test_generate_items_is_deterministic_and_valid():
    first = generate_items(SAMPLE_COUNT, seed=123)
    second = generate_items(SAMPLE_COUNT, seed=123)
    assert first == second
    assert len(first) == SAMPLE_COUNT
    for item in first:
        assert item.id is None
        validate(item)


def test_dump_and_load_items(tmp_path: Path):
    items = generate_items(SAMPLE_COUNT, seed=1)
    path = tmp_path / "out" / "quotes.json"
    dump_items(items, path)
    assert load_items(path) == items
