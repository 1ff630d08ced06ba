"""Rich terminal frontend — coloured grid, unit highlighting, and panels.

Pieces are shown by id and tinted per unit so fused groups are easy to
spot; pieces already at home are green.  Move the cursor, grab a unit,
then push it around the grid.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import GameGenerator, GridDifficulty
from backend.engine.gamehint import HintRevealer, Reveal
from backend.engine.gameplay import GamePlay
from backend.models.board import Board, Direction
from backend.models.highscore import ScoreBook, ScoreEntry
from backend.models.outcome import MoveEvent, MoveOutcome
from frontend.cli.input_handler import get_key

console = Console()
logger = logging.getLogger(__name__)

_UNIT_STYLES = ("cyan", "magenta", "yellow", "blue", "bright_red", "bright_cyan")

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_EVENT_STATUS = {
    MoveEvent.MERGE: "[bold cyan]Pieces fused![/bold cyan]",
    MoveEvent.COMPLETE: "[bold green]Puzzle complete![/bold green]",
    MoveEvent.ERROR: "[bold red]Can't move there.[/bold red]",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _unit_style(board: Board, unit_id: int) -> str:
    # Singletons stay white so only fused groups get a tint.
    if len(board.unit(unit_id)) == 1:
        return "white"
    return _UNIT_STYLES[unit_id % len(_UNIT_STYLES)]


# -- board rendering ----------------------------------------------------------


def _render_board(
    board: Board,
    cursor: tuple[int, int],
    grabbed: int | None = None,
    reveal: Reveal | None = None,
) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width + 1, justify="center")

    hinted = {board.to_pos(*home) for home in (reveal.homes.values() if reveal else ())}

    for r, row in enumerate(board.grid()):
        cells: list[Text] = []
        for c, piece in enumerate(row):
            if piece.is_home(board.cols):
                style = "bold green"
            else:
                style = f"bold {_unit_style(board, piece.unit_id)}"
            if grabbed is not None and piece.unit_id == grabbed:
                style += " underline"
            if (r, c) == cursor:
                style += " reverse"
            if board.to_pos(r, c) in hinted:
                style += " on dark_green"
            cells.append(Text(f"{piece.id:>{width}}", style=style))
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(sel: int) -> None:
    console.clear()

    choices = list(GridDifficulty)
    sizes = Text()
    for i, difficulty in enumerate(choices):
        if i:
            sizes.append("  ")
        label = f" {difficulty.rows}×{difficulty.cols} "
        if i == sel:
            sizes.append(label, style="bold green on #313244")
        else:
            sizes.append(label, style="dim")

    name = Text(choices[sel].display_name, style="bold")
    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="dim bold")
    opts.append("  Scores    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(name),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]P I X E L   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_game(
    game: GamePlay,
    cursor: tuple[int, int],
    grabbed: int | None,
    reveal: Reveal | None,
    status: str = "",
    title: str = "",
) -> None:
    console.clear()

    board = game.board
    board_table = _render_board(board, cursor, grabbed, reveal)

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Units: ", style="dim")
    stats.append(str(len(board.units())), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  grab   ", style="dim")
    controls.append("N/B/M", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("P", style="bold cyan")
    controls.append("  pause   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]{title or 'Pixel Puzzle'}  {board.rows}×{board.cols}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay, points: int) -> None:
    console.clear()

    board = game.board
    board_table = _render_board(board, cursor=(-1, -1))

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  Picture restored!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    stats.append("    Points: ", style="dim")
    stats.append(str(points), style="bold yellow")

    panel = Panel(
        Group(Align.center(board_table), Align.center(congrats), Align.center(stats)),
        title=f"[bold green]Pixel Puzzle  {board.rows}×{board.cols}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_scores(book: ScoreBook) -> None:
    """Full-screen scores view (used from the menu)."""
    console.clear()

    parts: list[Align] = [
        Align.center(
            Text(
                f"Points: {book.points}    Unlocked level: {book.unlocked_level}",
                style="bold yellow",
            )
        )
    ]

    for rows, cols in book.get_all_sizes():
        table = Table(
            title=f"{rows}×{cols}",
            title_style="bold cyan",
            box=rich.box.ROUNDED,
            border_style="dim",
        )
        table.add_column("#", justify="right", style="dim", width=3)
        table.add_column("Moves", justify="right", style="yellow")
        table.add_column("Time", justify="right", style="yellow")
        table.add_column("Date", style="dim")
        for i, e in enumerate(book.get_scores(rows, cols)[:10], 1):
            table.add_row(str(i), str(e.moves), f"{e.time:.1f}s", e.date)
        parts.append(Align.center(table))

    panel = Panel(
        Group(*parts),
        title="[bold]S C O R E S[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _step_cursor(cursor: tuple[int, int], direction: Direction, board: Board) -> tuple[int, int]:
    dr, dc = direction.offset
    r = min(max(cursor[0] + dr, 0), board.rows - 1)
    c = min(max(cursor[1] + dc, 0), board.cols - 1)
    return (r, c)


def _hint(game: GamePlay, key: str, rng: random.Random) -> tuple[Reveal, str]:
    board = game.board
    if key == "hint":
        reveal = HintRevealer.reveal_one(board, rng)
    elif key == "hint_area":
        reveal = HintRevealer.reveal_area(board, rng)
    else:
        reveal = HintRevealer.reveal_all(board)
    if not reveal:
        return reveal, "[green]Already solved![/green]"
    ids = ", ".join(str(i) for i in sorted(reveal.piece_ids))
    return reveal, f"[cyan]Hint:[/cyan] home of piece(s) [bold]{ids}[/bold] highlighted"


def _new_game(rows: int, cols: int, rng: random.Random, level: int | None) -> GamePlay:
    if level is not None:
        return GamePlay.from_board(GameGenerator.for_level(level, rng))
    return GamePlay(rows, cols, rng)


def _record_win(
    book: ScoreBook,
    game: GamePlay,
    outcome: MoveOutcome | None,
    level: int | None = None,
) -> ScoreEntry | None:
    """Store the finished game in *book*, or return ``None`` if it wasn't won.

    Only a move that completed the picture counts; a board that started out
    solved earns nothing.
    """
    if outcome is None or outcome.event is not MoveEvent.COMPLETE:
        return None
    game.state.pause()
    entry = ScoreEntry(
        moves=game.state.moves,
        time=round(game.state.elapsed_time, 2),
        date=datetime.now().strftime("%Y-%m-%d %H:%M"),
    )
    book.record_completion(game.rows, game.cols, entry, level=level)
    logger.info("Recorded completion for %dx%d: %s", game.rows, game.cols, entry)
    return entry


def _pause(game: GamePlay) -> None:
    game.state.pause()
    console.clear()
    console.print(
        Align.center(Text("\n  Paused. Press any key to continue.\n", style="bold yellow"))
    )
    get_key()
    game.state.resume()


def _play_game(
    rows: int,
    cols: int,
    book: ScoreBook,
    rng: random.Random,
    level: int | None = None,
) -> None:
    while True:
        game = _new_game(rows, cols, rng, level)
        title = f"Level {level}" if level is not None else ""
        cursor = (0, 0)
        grabbed: int | None = None
        reveal: Reveal | None = None
        status = ""
        outcome: MoveOutcome | None = None

        while not game.is_won:
            _draw_game(game, cursor, grabbed, reveal, status, title)
            status = ""
            key = get_key()

            if key in _DIRECTIONS:
                direction = _DIRECTIONS[key]
                if grabbed is None:
                    cursor = _step_cursor(cursor, direction, game.board)
                    continue
                outcome = game.shift(grabbed, direction)
                if outcome.accepted:
                    cursor = _step_cursor(cursor, direction, game.board)
                    # Merges may rename the unit under the cursor.
                    grabbed = game.board.piece_at(game.board.to_pos(*cursor)).unit_id
                    reveal = None
                if outcome.event is not None:
                    status = _EVENT_STATUS[outcome.event]
            elif key == "grab":
                if grabbed is None:
                    grabbed = game.board.piece_at(game.board.to_pos(*cursor)).unit_id
                else:
                    grabbed = None
            elif key in ("hint", "hint_area", "reveal"):
                reveal, status = _hint(game, key, rng)
            elif key == "pause":
                _pause(game)
            elif key == "restart":
                game = _new_game(rows, cols, rng, level)
                cursor, grabbed, reveal, outcome = (0, 0), None, None, None
            elif key == "quit":
                return

        # -- win ---------------------------------------------------------------
        if _record_win(book, game, outcome, level) is None:
            return
        _draw_win(game, book.points)

        prompt = "next level" if level is not None else "play again"
        console.print(
            Align.center(Text(f"\n  Press R to {prompt}, Q to go back.\n", style="dim"))
        )

        while True:
            key = get_key()
            if key == "restart":
                if level is not None:
                    level += 1
                break
            if key == "quit":
                return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(book: ScoreBook, rng: random.Random) -> None:
    choices = list(GridDifficulty)
    sel = 0

    while True:
        _draw_menu(sel)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel = max(0, sel - 1)
        elif key == "right":
            sel = min(len(choices) - 1, sel + 1)
        elif key in ("1", "grab"):
            _play_game(choices[sel].rows, choices[sel].cols, book, rng)
        elif key == "2":
            _draw_scores(book)


# -- public entry point -------------------------------------------------------


def run(
    data_dir: Path,
    rows: int | None = None,
    cols: int | None = None,
    level: int | None = None,
    seed: int | None = None,
) -> None:
    """Launch the Rich CLI.

    With *level* the session walks the level ladder; with *rows*/*cols*
    it plays that grid directly; with neither it opens the menu.
    """
    book = ScoreBook(data_dir / "scores.json")
    rng = random.Random(seed)
    if level is not None:
        _play_game(0, 0, book, rng, level=level)
    elif rows is not None and cols is not None:
        _play_game(rows, cols, book, rng)
    else:
        _menu_loop(book, rng)
