"""Moves a unit by a linear delta, pushing obstacles into vacated cells."""

from __future__ import annotations

from dataclasses import dataclass, replace

from backend.models.board import Board, Piece
from backend.models.outcome import RejectReason


@dataclass(frozen=True)
class MoveResolution:
    """Either the rearranged board or the reason the move was refused."""

    board: Board
    reason: RejectReason | None = None

    @property
    def accepted(self) -> bool:
        return self.reason is None


def resolve_move(board: Board, unit_id: int, delta: int) -> MoveResolution:
    """Shift every piece of *unit_id* by *delta* cells.

    *delta* is ``±1`` for a horizontal step and ``±cols`` for a vertical
    one.  Pieces standing where the unit lands are pushed into the cells
    the unit leaves: with a positive delta each obstacle (in id order)
    takes the lowest free vacated cell, with a negative delta the highest.
    The input board is never modified.
    """
    moving = board.unit(unit_id)
    if not moving:
        return MoveResolution(board, RejectReason.UNKNOWN_UNIT)
    if delta == 0:
        return MoveResolution(board)

    targets: dict[int, int] = {}
    for piece in moving:
        target = piece.current_pos + delta
        if not 0 <= target < board.size:
            return MoveResolution(board, RejectReason.OUT_OF_BOUNDS)
        # A one-cell horizontal step must not spill into the next row.
        if abs(delta) == 1 and target // board.cols != piece.current_pos // board.cols:
            return MoveResolution(board, RejectReason.ROW_WRAP)
        targets[piece.id] = target

    landing = set(targets.values())
    obstacles = [
        p for p in board.pieces if p.unit_id != unit_id and p.current_pos in landing
    ]
    vacated = sorted({p.current_pos for p in moving} - landing)

    if len(obstacles) > len(vacated):
        return MoveResolution(board, RejectReason.INSUFFICIENT_SPACE)

    pushed: dict[int, int] = {}
    for obstacle in obstacles:
        pushed[obstacle.id] = vacated.pop(0) if delta > 0 else vacated.pop()

    pieces: list[Piece] = []
    for piece in board.pieces:
        if piece.id in targets:
            piece = replace(piece, current_pos=targets[piece.id])
        elif piece.id in pushed:
            piece = replace(piece, current_pos=pushed[piece.id])
        pieces.append(piece)

    return MoveResolution(board.with_pieces(tuple(pieces)))
