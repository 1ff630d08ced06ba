"""Decides which single feedback event a move produces."""

from __future__ import annotations

from backend.engine.gameunits.connectivity import ConnectivityReport
from backend.models.outcome import MoveEvent


def classify(report: ConnectivityReport | None, was_solved: bool) -> MoveEvent | None:
    """Return the event for a move, or ``None`` if nothing worth signalling.

    *report* is ``None`` when the move was rejected.  Any change to the
    unit grouping, a split as much as a fusion, counts as a merge event;
    completion outranks it.
    """
    if report is None:
        return MoveEvent.ERROR
    if report.board.is_solved() and not was_solved:
        return MoveEvent.COMPLETE
    if report.regrouped:
        return MoveEvent.MERGE
    return None
