"""Recomputes which pieces form rigid units after a move.

Two passes run in order.  The split pass drops every piece that is no
longer correctly attached to any other member of its unit into a fresh
singleton unit.  The merge pass then joins units whenever a piece of one
sits next to a piece of the other exactly as they sit in the source
image.  Joining is done with a union-find seeded by the post-split
units, which yields the same partition as repeatedly scanning all pairs
until nothing changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from backend.models.board import Board, Piece

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectivityReport:
    board: Board
    split_ids: tuple[int, ...] = ()
    merges: int = 0

    @property
    def merged(self) -> bool:
        return self.merges > 0

    @property
    def regrouped(self) -> bool:
        """True when any piece ended up with a different unit id."""
        return self.merged or bool(self.split_ids)


# -- alignment ------------------------------------------------------------------


def _orthogonal(dr: int, dc: int) -> bool:
    return abs(dr) + abs(dc) == 1


def aligned(p: Piece, q: Piece, cols: int) -> bool:
    """True when *p* and *q* touch on the grid the way they touch in the image."""
    home_dr = p.home_row - q.home_row
    home_dc = p.home_col - q.home_col
    if not _orthogonal(home_dr, home_dc):
        return False

    pr, pc = divmod(p.current_pos, cols)
    qr, qc = divmod(q.current_pos, cols)
    dr, dc = pr - qr, pc - qc
    if not _orthogonal(dr, dc):
        return False

    return (dr, dc) == (home_dr, home_dc)


def _neighbours(board: Board) -> dict[int, list[Piece]]:
    """Map each grid position to the pieces on its four orthogonal neighbours."""
    by_pos = {p.current_pos: p for p in board.pieces}
    result: dict[int, list[Piece]] = {}
    for pos in by_pos:
        row, col = board.to_cell(pos)
        found: list[Piece] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = row + dr, col + dc
            if 0 <= nr < board.rows and 0 <= nc < board.cols:
                found.append(by_pos[nr * board.cols + nc])
        result[pos] = found
    return result


# -- split pass -----------------------------------------------------------------


def split_detached(board: Board) -> tuple[Board, tuple[int, ...]]:
    """Give every unit member without an aligned unit-mate its own unit.

    Fresh ids are drawn from ``board.next_unit_id`` in piece-id order.
    Returns the new board and the ids of the pieces that were split off.
    """
    neighbours = _neighbours(board)
    detached: list[int] = []
    for members in board.units().values():
        if len(members) <= 1:
            continue
        for piece in members:
            if not any(
                other.unit_id == piece.unit_id and aligned(piece, other, board.cols)
                for other in neighbours[piece.current_pos]
            ):
                detached.append(piece.id)

    if not detached:
        return board, ()

    fresh = board.next_unit_id
    pieces: list[Piece] = []
    for piece in board.pieces:
        if piece.id in detached:
            piece = replace(piece, unit_id=fresh)
            fresh += 1
        pieces.append(piece)

    logger.debug("Split %d piece(s) off their units: %s", len(detached), detached)
    return board.with_pieces(tuple(pieces), next_unit_id=fresh), tuple(sorted(detached))


# -- merge pass -----------------------------------------------------------------


class _UnionFind:
    def __init__(self, keys: list[int]) -> None:
        self._parent = {k: k for k in keys}

    def find(self, key: int) -> int:
        root = key
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[key] != root:
            self._parent[key], key = root, self._parent[key]
        return root

    def union(self, a: int, b: int) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        # Keep the smaller piece id as the root.
        if rb < ra:
            ra, rb = rb, ra
        self._parent[rb] = ra
        return True


def merge_aligned(board: Board) -> tuple[Board, int]:
    """Fuse units that have at least one aligned pair of pieces.

    Each resulting unit takes the ``unit_id`` of its lowest-id piece.
    Returns the new board and how many unit fusions happened.
    """
    forest = _UnionFind([p.id for p in board.pieces])
    for members in board.units().values():
        for piece in members[1:]:
            forest.union(members[0].id, piece.id)

    merges = 0
    neighbours = _neighbours(board)
    for piece in board.pieces:
        for other in neighbours[piece.current_pos]:
            if other.id > piece.id and aligned(piece, other, board.cols):
                if forest.union(piece.id, other.id):
                    merges += 1

    if not merges:
        return board, 0

    by_id = {p.id: p for p in board.pieces}
    pieces = tuple(
        replace(p, unit_id=by_id[forest.find(p.id)].unit_id) for p in board.pieces
    )
    logger.debug("Merged %d unit pair(s)", merges)
    return board.with_pieces(pieces), merges


def reconnect(board: Board) -> ConnectivityReport:
    """Run the split pass and then the merge pass over *board*."""
    board, split_ids = split_detached(board)
    board, merges = merge_aligned(board)
    return ConnectivityReport(board=board, split_ids=split_ids, merges=merges)
