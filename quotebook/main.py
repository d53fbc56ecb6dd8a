from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from quotebook.bench import run_benchmark
from quotebook.config import get_settings
from quotebook.domain.errors import QuotebookError
from quotebook.repository.memory import InMemoryQuoteRepository
from quotebook.seed import dump_items, generate_items, load_items
from quotebook.services.quote_service import QuoteService
from quotebook.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Quotebook CLI: in-memory quote store, queries and aggregations.")
log = get_logger(__name__)


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _load_service(input_path: Optional[Path], count: Optional[int]) -> QuoteService:
    settings = get_settings()
    if input_path is not None:
        items = load_items(input_path)
    else:
        items = generate_items(
            count if count is not None else settings.sample_size, seed=settings.sample_seed
        )
    service = QuoteService(InMemoryQuoteRepository())
    service.create_all(items)
    return service


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log={settings.log_level} | "
        f"sample={settings.sample_size} seed={settings.sample_seed} "
        f"top_tags={settings.popular_tags_limit} | "
        f"bench={settings.bench_workers}x{settings.bench_per_worker}"
    )


@app.command()
def generate(
    output: Path = typer.Option(..., "--output", "-o", help="JSON file to write."),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", help="Number of quotes (default from settings)."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Deterministic RNG seed."),
) -> None:
    """
    Write deterministic sample quotes to a JSON file.
    """
    settings = get_settings()
    items = generate_items(
        count if count is not None else settings.sample_size,
        seed=seed if seed is not None else settings.sample_seed,
    )
    dump_items(items, output)
    typer.echo(f"Wrote {len(items)} quotes to {output}")


@app.command()
def stats(
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", exists=True, dir_okay=False, help="JSON file of quotes."
    ),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", help="Sample size when no input file is given."
    ),
    top: Optional[int] = typer.Option(None, "--top", "-t", help="How many popular tags to list."),
    archive: bool = typer.Option(False, "--archive", help="Archive inactive quotes first."),
) -> None:
    """
    Load quotes and print collection statistics as JSON.
    """
    service = _load_service(input_path, count)
    payload = {}
    if archive:
        payload["archived"] = service.archive_inactive_items()
    limit = top if top is not None else get_settings().popular_tags_limit
    payload.update(service.statistics(limit))
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to look for in title, description or category."),
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", exists=True, dir_okay=False, help="JSON file of quotes."
    ),
) -> None:
    """
    Print ids and titles of quotes matching QUERY.
    """
    service = _load_service(input_path, None)
    matches = [{"id": item.id, "title": item.title} for item in service.search(query)]
    typer.echo(json.dumps(matches, indent=2))


@app.command()
def bench(
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Writer threads."),
    per_worker: Optional[int] = typer.Option(
        None, "--per-worker", "-p", help="Saves per writer thread."
    ),
) -> None:
    """
    Hammer one repository with concurrent saves and report id integrity.
    """
    result = run_benchmark(workers=workers, per_worker=per_worker)
    typer.echo(json.dumps(result, indent=2))
    if result["duplicate_ids"] or result["missing"]:
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except QuotebookError as exc:
        log.error("Command failed: %s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
