"""Board builders shared by the test modules."""

from __future__ import annotations

from dataclasses import replace

from backend.models.board import Board


def make_board(
    rows: int,
    cols: int,
    positions: list[int],
    units: dict[int, int] | None = None,
) -> Board:
    """Build a board from explicit positions, optionally regrouping pieces.

    *units* maps piece id to the unit id it should carry.
    """
    board = Board.from_positions(rows, cols, positions)
    if not units:
        return board
    pieces = tuple(
        replace(p, unit_id=units.get(p.id, p.unit_id)) for p in board.pieces
    )
    return board.with_pieces(pieces)


def positions(board: Board) -> list[int]:
    return [p.current_pos for p in board.pieces]


def unit_ids(board: Board) -> list[int]:
    return [p.unit_id for p in board.pieces]


# 3×3 board with pieces 0 and 1 swapped, everything else at home.
SWAPPED_3x3 = [1, 0, 2, 3, 4, 5, 6, 7, 8]
