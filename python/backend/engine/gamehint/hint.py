"""Hint reveals: show where misplaced pieces belong."""

from __future__ import annotations

import random
from dataclasses import dataclass

from backend.models.board import Board, Piece


@dataclass(frozen=True)
class Reveal:
    """Piece ids to highlight, each mapped to its home ``(row, col)``."""

    homes: dict[int, tuple[int, int]]

    @property
    def piece_ids(self) -> set[int]:
        return set(self.homes)

    def __bool__(self) -> bool:
        return bool(self.homes)


class HintRevealer:
    """Stateless hint helper — all methods are static."""

    @staticmethod
    def misplaced(board: Board) -> list[Piece]:
        """Return the pieces not at their home position, in id order."""
        return [p for p in board.pieces if not p.is_home(board.cols)]

    @staticmethod
    def reveal_one(board: Board, rng: random.Random | None = None) -> Reveal:
        """Reveal the home of one random misplaced piece (empty if solved)."""
        wrong = HintRevealer.misplaced(board)
        if not wrong:
            return Reveal({})
        piece = (rng or random.Random()).choice(wrong)
        return Reveal({piece.id: piece.home})

    @staticmethod
    def reveal_area(board: Board, rng: random.Random | None = None) -> Reveal:
        """Reveal the 2×2 block of homes anchored at a random misplaced piece.

        The block extends down and right from the chosen piece's home and
        is clipped at the grid edge.
        """
        wrong = HintRevealer.misplaced(board)
        if not wrong:
            return Reveal({})
        anchor = (rng or random.Random()).choice(wrong)
        by_home = {p.home: p for p in board.pieces}
        homes: dict[int, tuple[int, int]] = {}
        for dr in (0, 1):
            for dc in (0, 1):
                cell = (anchor.home_row + dr, anchor.home_col + dc)
                piece = by_home.get(cell)
                if piece is not None:
                    homes[piece.id] = piece.home
        return Reveal(homes)

    @staticmethod
    def reveal_all(board: Board) -> Reveal:
        """Reveal every piece's home."""
        return Reveal({p.id: p.home for p in board.pieces})
