"""Results handed to render and feedback collaborators after a move."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.board import Board


class MoveEvent(StrEnum):
    MERGE = "merge"
    COMPLETE = "complete"
    ERROR = "error"


class RejectReason(StrEnum):
    OUT_OF_BOUNDS = "out_of_bounds"
    ROW_WRAP = "row_wrap"
    INSUFFICIENT_SPACE = "insufficient_space"
    UNKNOWN_UNIT = "unknown_unit"
    DIAGONAL = "diagonal"


@dataclass(frozen=True)
class MoveOutcome:
    """What happened to a single move command.

    ``board`` is the snapshot after the move; on rejection it is the
    untouched snapshot from before.  ``event`` is ``None`` when nothing
    noteworthy happened.
    """

    board: Board
    event: MoveEvent | None
    reason: RejectReason | None = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def solved(self) -> bool:
        return self.board.is_solved()
