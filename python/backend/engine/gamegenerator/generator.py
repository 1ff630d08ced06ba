"""Generates shuffled pixel puzzle boards."""

from __future__ import annotations

import random

from backend.engine.gamegenerator.difficulty import difficulty_for_level
from backend.models.board import Board


class GameGenerator:
    """Creates puzzles by scattering every piece to a random cell."""

    @staticmethod
    def solved(rows: int, cols: int) -> Board:
        """Return the goal-state board (every piece at home, one unit each)."""
        return Board.from_positions(rows, cols, list(range(rows * cols)))

    @staticmethod
    def scramble(rows: int, cols: int, rng: random.Random | None = None) -> list[int]:
        """Return a random permutation of ``0..rows*cols-1``."""
        rng = rng or random.Random()
        positions = list(range(rows * cols))
        rng.shuffle(positions)
        return positions

    @staticmethod
    def generate(rows: int, cols: int, rng: random.Random | None = None) -> Board:
        """Return a random board of the given dimensions.

        Any layout can be solved because pieces push each other around,
        so the only thing ruled out is handing back an already-solved grid.
        """
        rng = rng or random.Random()
        positions = GameGenerator.scramble(rows, cols, rng)

        # Ensure the board is not already solved
        if rows * cols > 1 and positions == sorted(positions):
            return GameGenerator.generate(rows, cols, rng)

        return Board.from_positions(rows, cols, positions)

    @staticmethod
    def for_level(level: int, rng: random.Random | None = None) -> Board:
        """Return a fresh board sized for *level*."""
        difficulty = difficulty_for_level(level)
        return GameGenerator.generate(difficulty.rows, difficulty.cols, rng)
