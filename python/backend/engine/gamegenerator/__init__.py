from backend.engine.gamegenerator.difficulty import (
    GridDifficulty,
    difficulty_for_level,
    display_text,
)
from backend.engine.gamegenerator.generator import GameGenerator

__all__ = ["GameGenerator", "GridDifficulty", "difficulty_for_level", "display_text"]
