"""Completion records, points, and level progress persisted as JSON."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path

POINTS_PER_COMPLETION = 10


@dataclass
class ScoreEntry:
    moves: int
    time: float
    date: str


class ScoreBook:
    """Loads, saves, and queries completions from a JSON file.

    Completions are grouped by grid size (``"3x4"``).  Points and the
    highest unlocked level only change through :meth:`record_completion`,
    which frontends call when a move reports ``MoveEvent.COMPLETE``.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._scores: dict[str, list[ScoreEntry]] = {}
        self.points: int = 0
        self.unlocked_level: int = 1
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.filepath.exists():
            data = json.loads(self.filepath.read_text())
            self.points = data.get("points", 0)
            self.unlocked_level = data.get("unlocked_level", 1)
            for size_key, entries in data.get("scores", {}).items():
                self._scores[size_key] = [ScoreEntry(**e) for e in entries]

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "points": self.points,
            "unlocked_level": self.unlocked_level,
            "scores": {
                size_key: [asdict(e) for e in entries]
                for size_key, entries in self._scores.items()
            },
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- updates --------------------------------------------------------------

    def record_completion(
        self, rows: int, cols: int, entry: ScoreEntry, level: int | None = None
    ) -> None:
        """Store a finished puzzle, award points, and unlock the next level."""
        key = self.size_key(rows, cols)
        self._scores.setdefault(key, []).append(entry)
        self._scores[key].sort(key=lambda e: (e.moves, e.time))
        self.points += POINTS_PER_COMPLETION
        if level is not None:
            self.unlocked_level = max(self.unlocked_level, level + 1)
        self.save()

    # -- queries --------------------------------------------------------------

    @staticmethod
    def size_key(rows: int, cols: int) -> str:
        return f"{rows}x{cols}"

    def get_scores(self, rows: int, cols: int) -> list[ScoreEntry]:
        return self._scores.get(self.size_key(rows, cols), [])

    def get_all_sizes(self) -> list[tuple[int, int]]:
        sizes = [tuple(int(n) for n in k.split("x")) for k in self._scores]
        return sorted(sizes)  # type: ignore[return-value]
