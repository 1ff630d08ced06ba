"""Connectivity tests: alignment, splitting, merging, and convergence.

The union-find merge is checked against a direct pairwise fixpoint over
random boards with random unit groupings.
"""

from __future__ import annotations

import random
from dataclasses import replace

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameunits import aligned, merge_aligned, reconnect, split_detached
from backend.models.board import Board, Piece
from tests.helpers import SWAPPED_3x3, make_board, unit_ids


# -- reference fixpoint ---------------------------------------------------------


def _reference(board: Board) -> tuple[frozenset[frozenset[int]], set[int]]:
    """Split then merge by exhaustive pairwise scanning until stable."""
    cols = board.cols
    units = {p.id: p.unit_id for p in board.pieces}
    by_id = {p.id: p for p in board.pieces}

    detached: set[int] = set()
    for p in board.pieces:
        mates = [q for q in board.pieces if q.id != p.id and units[q.id] == units[p.id]]
        if mates and not any(aligned(p, q, cols) for q in mates):
            detached.add(p.id)
    fresh = board.next_unit_id
    for pid in sorted(detached):
        units[pid] = fresh
        fresh += 1

    changed = True
    while changed:
        changed = False
        for i in units:
            for j in units:
                if units[i] != units[j] and aligned(by_id[i], by_id[j], cols):
                    old = units[j]
                    for k in units:
                        if units[k] == old:
                            units[k] = units[i]
                    changed = True

    groups: dict[int, set[int]] = {}
    for pid, uid in units.items():
        groups.setdefault(uid, set()).add(pid)
    return frozenset(frozenset(g) for g in groups.values()), detached


def _random_board(rng: random.Random) -> Board:
    rows, cols = rng.randint(1, 5), rng.randint(1, 5)
    board = GameGenerator.generate(rows, cols, rng)
    labels = rng.randint(1, board.size)
    pieces = tuple(
        replace(p, unit_id=rng.randrange(labels)) for p in board.pieces
    )
    return board.with_pieces(pieces)


# -- alignment ------------------------------------------------------------------


def _piece(pid: int, home: tuple[int, int], pos: int) -> Piece:
    return Piece(id=pid, home_row=home[0], home_col=home[1], current_pos=pos, unit_id=pid)


@pytest.mark.parametrize(
    ("p", "q", "expected"),
    [
        (_piece(0, (0, 0), 4), _piece(1, (0, 1), 5), True),    # side by side, same order
        (_piece(0, (0, 0), 5), _piece(1, (0, 1), 4), False),   # side by side, flipped
        (_piece(0, (0, 0), 1), _piece(3, (1, 0), 4), True),    # stacked, same order
        (_piece(0, (0, 0), 1), _piece(1, (0, 1), 4), False),   # stacked but home is sideways
        (_piece(0, (0, 0), 0), _piece(4, (1, 1), 4), False),   # diagonal homes
        (_piece(0, (0, 0), 0), _piece(1, (0, 1), 2), False),   # gap between them
        (_piece(0, (0, 0), 2), _piece(1, (0, 1), 3), False),   # split across a row edge
    ],
    ids=["row", "flipped", "column", "rotated", "diagonal", "gap", "row-edge"],
)
def test_aligned(p: Piece, q: Piece, expected: bool) -> None:
    assert aligned(p, q, cols=3) is expected
    assert aligned(q, p, cols=3) is expected


# -- split pass -----------------------------------------------------------------


def test_split_detaches_pieces_without_aligned_mates() -> None:
    # Unit {0, 1} with piece1 pushed two cells away from piece0.
    board = make_board(3, 3, [0, 2, 1, 3, 4, 5, 6, 7, 8], units={1: 0})

    split, detached = split_detached(board)

    assert detached == (0, 1)
    assert unit_ids(split)[:2] == [9, 10]
    assert split.next_unit_id == 11


def test_split_keeps_pieces_with_one_aligned_mate() -> None:
    # Unit {0, 1, 2}: 0-1 still aligned, 2 has drifted to the next row.
    board = make_board(3, 3, [0, 1, 5, 3, 4, 2, 6, 7, 8], units={1: 0, 2: 0})

    split, detached = split_detached(board)

    assert detached == (2,)
    assert unit_ids(split)[:3] == [0, 0, 9]


def test_split_leaves_singletons_alone() -> None:
    board = Board.from_positions(3, 3, SWAPPED_3x3)

    split, detached = split_detached(board)

    assert detached == ()
    assert split is board


# -- merge pass -----------------------------------------------------------------


def test_merge_fuses_aligned_neighbours() -> None:
    board = Board.from_positions(1, 3, [0, 1, 2])

    merged, merges = merge_aligned(board)

    assert merges == 2
    assert unit_ids(merged) == [0, 0, 0]


def test_merge_keeps_lowest_piece_unit_id() -> None:
    board = make_board(1, 3, [0, 1, 2], units={0: 7, 1: 5, 2: 6})
    board = Board(rows=1, cols=3, pieces=board.pieces, next_unit_id=8)

    merged, _ = merge_aligned(board)

    assert unit_ids(merged) == [7, 7, 7]


def test_merge_keeps_disconnected_unit_together() -> None:
    # Unit 0 holds two aligned pairs that no longer touch; merging never splits.
    board = make_board(2, 4, [0, 1, 6, 7, 2, 3, 4, 5], units={1: 0, 2: 0, 3: 0})

    report = reconnect(board)

    assert report.split_ids == ()
    assert {0, 1, 2, 3} in [set(g) for g in report.board.partition()]


# -- whole-pass properties ------------------------------------------------------


@pytest.mark.parametrize("seed", range(60))
def test_matches_pairwise_fixpoint(seed: int) -> None:
    board = _random_board(random.Random(seed))

    report = reconnect(board)
    partition, detached = _reference(board)

    assert report.board.partition() == partition
    assert set(report.split_ids) == detached


@pytest.mark.parametrize("seed", range(20))
def test_reconnect_is_idempotent(seed: int) -> None:
    once = reconnect(_random_board(random.Random(seed))).board
    twice = reconnect(once)

    assert twice.split_ids == ()
    assert twice.merges == 0
    assert twice.board == once


@pytest.mark.parametrize(("rows", "cols"), [(1, 1), (3, 3), (4, 5), (5, 5)])
def test_solved_board_is_one_unit(rows: int, cols: int) -> None:
    board = GameGenerator.solved(rows, cols)

    for _ in range(3):
        board = reconnect(board).board
        assert len(board.units()) == 1


def test_fresh_unit_ids_exceed_every_existing_id() -> None:
    board = make_board(3, 3, [0, 2, 1, 3, 4, 5, 6, 7, 8], units={1: 0})

    report = reconnect(board)

    highest = max(max(p.id, p.unit_id) for p in report.board.pieces)
    assert report.board.next_unit_id > highest
    report.board.validate()
