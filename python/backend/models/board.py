"""Board model for the pixel puzzle game."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class InvalidBoardError(ValueError):
    """Raised when a board does not describe a permutation of its grid."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        """Return ``(d_rows, d_cols)`` for a one-cell step."""
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Piece:
    """A single cropped tile of the source image.

    ``home_row``/``home_col`` never change; ``current_pos`` is a linear
    index ``row * cols + col`` into the live grid.
    """

    id: int
    home_row: int
    home_col: int
    current_pos: int
    unit_id: int

    @property
    def home(self) -> tuple[int, int]:
        return (self.home_row, self.home_col)

    def home_pos(self, cols: int) -> int:
        return self.home_row * cols + self.home_col

    def is_home(self, cols: int) -> bool:
        return self.current_pos == self.home_pos(cols)


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of a puzzle in progress.

    Pieces are ordered by id.  ``next_unit_id`` is the next fresh unit
    identifier; it is always greater than every piece id and unit id.
    """

    rows: int
    cols: int
    pieces: tuple[Piece, ...]
    next_unit_id: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_positions(cls, rows: int, cols: int, positions: list[int]) -> Board:
        """Create a board where piece ``i`` sits at ``positions[i]``.

        Piece ``i`` has home ``(i // cols, i % cols)`` and starts as its
        own unit.

        Example::

            Board.from_positions(3, 3, [1, 0, 2, 3, 4, 5, 6, 7, 8])
        """
        pieces = tuple(
            Piece(
                id=i,
                home_row=i // cols,
                home_col=i % cols,
                current_pos=pos,
                unit_id=i,
            )
            for i, pos in enumerate(positions)
        )
        board = cls(rows=rows, cols=cols, pieces=pieces, next_unit_id=len(pieces))
        board.validate()
        return board

    def validate(self) -> None:
        """Raise :class:`InvalidBoardError` unless the board is well formed."""
        total = self.rows * self.cols
        if self.rows < 1 or self.cols < 1:
            raise InvalidBoardError(
                f"Grid must be at least 1×1, got {self.rows}×{self.cols}."
            )
        if len(self.pieces) != total:
            raise InvalidBoardError(
                f"Expected {total} pieces for a {self.rows}×{self.cols} board, "
                f"got {len(self.pieces)}."
            )
        if sorted(p.current_pos for p in self.pieces) != list(range(total)):
            raise InvalidBoardError(
                "Piece positions must be a permutation of "
                f"0..{total - 1}."
            )
        if [p.id for p in self.pieces] != sorted(p.id for p in self.pieces):
            raise InvalidBoardError("Pieces must be ordered by id.")
        highest = max(max(p.id, p.unit_id) for p in self.pieces)
        if self.next_unit_id <= highest:
            raise InvalidBoardError(
                f"next_unit_id {self.next_unit_id} collides with id {highest}."
            )

    # -- geometry -------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def to_cell(self, pos: int) -> tuple[int, int]:
        return divmod(pos, self.cols)

    def to_pos(self, row: int, col: int) -> int:
        return row * self.cols + col

    # -- queries --------------------------------------------------------------

    def piece_at(self, pos: int) -> Piece:
        for piece in self.pieces:
            if piece.current_pos == pos:
                return piece
        raise KeyError(pos)

    def unit(self, unit_id: int) -> list[Piece]:
        return [p for p in self.pieces if p.unit_id == unit_id]

    def units(self) -> dict[int, list[Piece]]:
        """Group pieces by unit id, keyed in order of first appearance."""
        groups: dict[int, list[Piece]] = {}
        for piece in self.pieces:
            groups.setdefault(piece.unit_id, []).append(piece)
        return groups

    def partition(self) -> frozenset[frozenset[int]]:
        """Return the unit partition as sets of piece ids, ignoring unit ids."""
        return frozenset(
            frozenset(p.id for p in members) for members in self.units().values()
        )

    def grid(self) -> list[list[Piece]]:
        """Return pieces laid out row-major by their current position."""
        cells: list[Piece | None] = [None] * self.size
        for piece in self.pieces:
            cells[piece.current_pos] = piece
        return [
            [cells[r * self.cols + c] for c in range(self.cols)]  # type: ignore[misc]
            for r in range(self.rows)
        ]

    def is_solved(self) -> bool:
        """Check if every piece is in its home position."""
        return all(p.is_home(self.cols) for p in self.pieces)

    def with_pieces(self, pieces: tuple[Piece, ...], next_unit_id: int | None = None) -> Board:
        return replace(
            self,
            pieces=pieces,
            next_unit_id=self.next_unit_id if next_unit_id is None else next_unit_id,
        )
