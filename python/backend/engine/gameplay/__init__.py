from backend.engine.gameplay.game import GamePlay, drag_to_cells
from backend.engine.gameplay.movement import MoveResolution, resolve_move

__all__ = ["GamePlay", "MoveResolution", "drag_to_cells", "resolve_move"]
