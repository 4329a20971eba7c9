#!/usr/bin/env python3
"""Sliding Puzzle developer tools.

Usage::

    python main.py generate -s 4 -n 10 --seed 7 > boards.json
    python main.py -v generate --strategy parity
    python main.py check boards.json
"""

import json
import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidingpuzzle import (  # noqa: E402
    MAX_SIZE,
    MIN_SIZE,
    Board,
    GameGenerator,
    ShuffleStrategy,
    is_solvable,
    is_solved,
)

console = Console()


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_boards(path: Path) -> list[tuple[str, Board]]:
    data = json.loads(path.read_text())
    entries = data if isinstance(data, list) else [data]
    boards: list[tuple[str, Board]] = []
    for i, entry in enumerate(entries):
        board = Board.from_rows(entry["tiles"])
        boards.append((str(entry.get("id", i)), board))
    return boards


def _verdict(flag: bool) -> str:
    return "[green]yes[/green]" if flag else "[red]no[/red]"


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log generator and solvability details to stderr.",
    ),
) -> None:
    """Sliding Puzzle developer tools."""
    _configure_logging(verbose)


@app.command()
def generate(
    size: int = typer.Option(
        4, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="SLIDING_PUZZLE_SIZE",
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    count: int = typer.Option(
        1, "-n", "--count",
        min=1,
        help="Number of boards to generate.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="SLIDING_PUZZLE_SEED",
        help="Seed for reproducible boards.",
    ),
    strategy: ShuffleStrategy = typer.Option(
        ShuffleStrategy.REJECTION, "--strategy",
        envvar="SLIDING_PUZZLE_STRATEGY",
        help="Shuffle algorithm.",
    ),
) -> None:
    """Print random solvable boards as JSON."""
    rng = random.Random(seed)
    boards = []
    for i in range(count):
        board = GameGenerator.generate(size, rng, strategy)
        boards.append({"id": f"{size}x{size}-{i:03d}", **board.to_dict()})
    typer.echo(json.dumps(boards))


@app.command()
def check(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False,
        help="JSON file holding one board or a list of boards.",
    ),
) -> None:
    """Report whether each board in PATH is solvable and solved."""
    try:
        boards = _load_boards(path)
    except (ValueError, KeyError, TypeError) as exc:
        console.print(f"[red]Invalid board file:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    for board_id, board in boards:
        console.print(
            f"{board_id}: solvable={_verdict(is_solvable(board))} "
            f"solved={_verdict(is_solved(board))}"
        )


if __name__ == "__main__":
    app()
