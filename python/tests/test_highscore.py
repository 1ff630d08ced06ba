"""Score book persistence tests."""

from __future__ import annotations

from pathlib import Path

from backend.models.highscore import POINTS_PER_COMPLETION, ScoreBook, ScoreEntry


def test_empty_book(tmp_path: Path) -> None:
    book = ScoreBook(tmp_path / "scores.json")

    assert book.points == 0
    assert book.unlocked_level == 1
    assert book.get_all_sizes() == []


def test_record_completion_persists(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "scores.json"
    book = ScoreBook(path)

    book.record_completion(3, 4, ScoreEntry(moves=30, time=12.5, date="2026-01-01 10:00"))
    book.record_completion(3, 4, ScoreEntry(moves=20, time=40.0, date="2026-01-02 10:00"))
    book.record_completion(3, 3, ScoreEntry(moves=9, time=3.0, date="2026-01-03 10:00"), level=4)

    reloaded = ScoreBook(path)
    assert reloaded.points == 3 * POINTS_PER_COMPLETION
    assert reloaded.unlocked_level == 5
    assert reloaded.get_all_sizes() == [(3, 3), (3, 4)]
    assert [e.moves for e in reloaded.get_scores(3, 4)] == [20, 30]


def test_unlocked_level_never_goes_back(tmp_path: Path) -> None:
    book = ScoreBook(tmp_path / "scores.json")

    book.record_completion(3, 3, ScoreEntry(1, 1.0, "x"), level=7)
    book.record_completion(3, 3, ScoreEntry(1, 1.0, "x"), level=2)

    assert book.unlocked_level == 8
