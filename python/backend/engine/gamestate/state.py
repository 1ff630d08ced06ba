"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from backend.models.board import Board, InvalidBoardError


class GameState:
    """Holds the current board snapshot, move counter, and elapsed time.

    The board is only ever swapped for a whole new snapshot through
    :meth:`commit`; a snapshot that breaks the grid permutation is refused.
    """

    def __init__(self, board: Board) -> None:
        board.validate()
        self._board = board
        self.moves: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- board ----------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    def commit(self, board: Board) -> None:
        """Replace the current snapshot with *board*."""
        if (board.rows, board.cols) != (self._board.rows, self._board.cols):
            raise InvalidBoardError(
                f"Cannot replace a {self._board.rows}×{self._board.cols} board "
                f"with a {board.rows}×{board.cols} one."
            )
        board.validate()
        self._board = board

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self._board.is_solved()
