"""Core gameplay logic — processes unit moves and checks the win condition."""

from __future__ import annotations

import logging
import math
import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.events import classify
from backend.engine.gameplay.movement import MoveResolution, resolve_move
from backend.engine.gamestate import GameState
from backend.engine.gameunits import reconnect
from backend.models.board import Board, Direction
from backend.models.outcome import MoveEvent, MoveOutcome, RejectReason

logger = logging.getLogger(__name__)


def drag_to_cells(dx: float, dy: float, cell_width: float, cell_height: float) -> tuple[int, int]:
    """Round a drag offset in pixels to whole ``(d_rows, d_cols)`` cells.

    Halves round up, so a drag of exactly half a cell to the right counts
    as one cell while half a cell to the left counts as none.
    """
    d_cols = math.floor(dx / cell_width + 0.5)
    d_rows = math.floor(dy / cell_height + 0.5)
    return d_rows, d_cols


class GamePlay:
    """Orchestrates a single puzzle session."""

    def __init__(self, rows: int, cols: int, rng: random.Random | None = None) -> None:
        self.rows = rows
        self.cols = cols
        board = GameGenerator.generate(rows, cols, rng)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board (e.g. a fixed layout)."""
        obj = object.__new__(cls)
        obj.rows = board.rows
        obj.cols = board.cols
        obj.state = GameState(board)
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, unit_id: int, delta: int) -> MoveOutcome:
        """Move unit *unit_id* by a linear *delta* and settle the grid.

        The board is replaced only when the move is accepted; a rejected
        move leaves it exactly as it was and reports ``MoveEvent.ERROR``.
        """
        before = self.state.board
        resolution = resolve_move(before, unit_id, delta)
        return self._settle(before, resolution, unit_id, delta)

    def drag(self, unit_id: int, d_rows: int, d_cols: int) -> MoveOutcome:
        """Move a unit by a whole-cell drag along a single axis.

        Unlike :meth:`move`, horizontal drags of any length are checked
        against the row edges, and drags along both axes at once are
        refused.
        """
        before = self.state.board
        members = before.unit(unit_id)
        if not members:
            return self._reject(before, unit_id, d_rows * self.cols + d_cols, RejectReason.UNKNOWN_UNIT)
        if d_rows and d_cols:
            return self._reject(before, unit_id, d_rows * self.cols + d_cols, RejectReason.DIAGONAL)
        if d_cols and any(
            not 0 <= p.current_pos % self.cols + d_cols < self.cols for p in members
        ):
            return self._reject(before, unit_id, d_cols, RejectReason.ROW_WRAP)
        return self.move(unit_id, d_rows * self.cols + d_cols)

    def shift(self, unit_id: int, direction: Direction) -> MoveOutcome:
        """Move a unit one cell in *direction*."""
        d_rows, d_cols = direction.offset
        return self.drag(unit_id, d_rows, d_cols)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    def _settle(
        self, before: Board, resolution: MoveResolution, unit_id: int, delta: int
    ) -> MoveOutcome:
        if resolution.reason is not None:
            return self._reject(before, unit_id, delta, resolution.reason)
        if delta == 0:
            return MoveOutcome(board=before, event=None)

        report = reconnect(resolution.board)
        event = classify(report, was_solved=before.is_solved())
        self.state.commit(report.board)
        self.state.increment_moves()

        logger.debug(
            "Unit %d moved by %d (move %d), event=%s",
            unit_id, delta, self.state.moves, event,
        )
        if event is MoveEvent.COMPLETE:
            logger.info(
                "Puzzle %d×%d solved in %d moves", self.rows, self.cols, self.state.moves
            )
        return MoveOutcome(board=report.board, event=event)

    @staticmethod
    def _reject(board: Board, unit_id: int, delta: int, reason: RejectReason) -> MoveOutcome:
        logger.debug("Unit %d move by %d rejected: %s", unit_id, delta, reason)
        return MoveOutcome(board=board, event=classify(None, was_solved=False), reason=reason)
