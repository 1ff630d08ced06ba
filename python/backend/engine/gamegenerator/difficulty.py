"""Grid sizes offered per level."""

from __future__ import annotations

from enum import Enum


class GridDifficulty(Enum):
    SUPER_EASY = (3, 3, "Super Easy")
    EASY = (3, 4, "Easy")
    MEDIUM = (4, 4, "Medium")
    HARD = (4, 5, "Hard")
    SUPER_HARD = (5, 5, "Super Hard")

    def __init__(self, rows: int, cols: int, display_name: str) -> None:
        self.rows = rows
        self.cols = cols
        self.display_name = display_name

    @property
    def total_pieces(self) -> int:
        return self.rows * self.cols


# Levels up to this one always use the smallest grid.
WARMUP_LEVELS = 10


def difficulty_for_level(level: int) -> GridDifficulty:
    """Return the grid difficulty for *level* (1-based).

    Levels 1-10 are always 3×3; from level 11 on the five difficulties
    cycle, starting again from 3×3.
    """
    if level < 1:
        raise ValueError(f"Levels start at 1, got {level}.")
    if level <= WARMUP_LEVELS:
        return GridDifficulty.SUPER_EASY
    cycle = list(GridDifficulty)
    return cycle[(level - WARMUP_LEVELS - 1) % len(cycle)]


def display_text(level: int) -> str:
    difficulty = difficulty_for_level(level)
    return f"{difficulty.rows}×{difficulty.cols} - {difficulty.display_name}"
