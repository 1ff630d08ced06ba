#!/usr/bin/env python3
"""Pixel Puzzle Game.

Usage::

    python main.py                    # interactive menu
    python main.py -r 3 -c 4          # play a 3×4 grid directly
    python main.py --level 12         # play the level ladder from level 12
    python main.py --scores           # view scores and points
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _print_scores(data_dir: Path) -> None:
    from backend.models.highscore import ScoreBook

    book = ScoreBook(data_dir / "scores.json")
    sizes = book.get_all_sizes()

    print("\n  === SCORES ===")
    print(f"  Points: {book.points}   Unlocked level: {book.unlocked_level}")
    if not sizes:
        print("  No completed puzzles yet.\n")
        return
    for rows, cols in sizes:
        entries = book.get_scores(rows, cols)
        print(f"\n  --- {rows}x{cols} ---")
        for i, e in enumerate(entries[:10], 1):
            print(f"  {i:>2}. {e.moves:>4} moves  {e.time:>7.1f}s  ({e.date})")
    print()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    rows: Optional[int] = typer.Option(
        None, "-r", "--rows",
        min=2, max=10,
        envvar="PIXELPUZZLE_ROWS",
        help="Grid rows. Use with --cols to skip the menu.",
    ),
    cols: Optional[int] = typer.Option(
        None, "-c", "--cols",
        min=2, max=10,
        envvar="PIXELPUZZLE_COLS",
        help="Grid columns. Use with --rows to skip the menu.",
    ),
    level: Optional[int] = typer.Option(
        None, "-l", "--level",
        min=1,
        envvar="PIXELPUZZLE_LEVEL",
        help="Start the level ladder at this level.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="PIXELPUZZLE_SEED",
        help="Seed for reproducible shuffles.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        envvar="PIXELPUZZLE_DATA_DIR",
        help="Directory holding scores.json.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        envvar="PIXELPUZZLE_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show scores and exit.",
    ),
) -> None:
    """Pixel Puzzle Game."""
    _configure_logging(log_level)

    if scores:
        _print_scores(data_dir)
        return

    if (rows is None) != (cols is None):
        raise typer.BadParameter("--rows and --cols must be given together.")

    from frontend.cli.rich.app import run

    run(data_dir=data_dir, rows=rows, cols=cols, level=level, seed=seed)


if __name__ == "__main__":
    app()
