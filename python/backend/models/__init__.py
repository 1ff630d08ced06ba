from backend.models.board import Board, Direction, InvalidBoardError, Piece
from backend.models.highscore import ScoreBook, ScoreEntry
from backend.models.outcome import MoveEvent, MoveOutcome, RejectReason

__all__ = [
    "Board",
    "Direction",
    "InvalidBoardError",
    "MoveEvent",
    "MoveOutcome",
    "Piece",
    "RejectReason",
    "ScoreBook",
    "ScoreEntry",
]
