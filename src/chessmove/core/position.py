"""Board coordinates and displacement helpers.

Files and ranks are both 1-based::

    A1 = Position(1, 1), H1 = Position(8, 1), ..., H8 = Position(8, 8)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8
FILE_LABELS = "ABCDEFGH"
RANK_LABELS = "12345678"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, slots=True)
class Displacement:
    """Vector between two positions, ``target - origin``."""

    d_file: int
    d_rank: int

    @property
    def is_zero(self) -> bool:
        return self.d_file == 0 and self.d_rank == 0

    @property
    def is_straight(self) -> bool:
        """Pure horizontal or vertical, non-zero."""
        return (self.d_file == 0) != (self.d_rank == 0)

    @property
    def is_diagonal(self) -> bool:
        return self.d_file != 0 and abs(self.d_file) == abs(self.d_rank)

    @property
    def length(self) -> int:
        """Chebyshev length, i.e. how many king steps it covers."""
        return max(abs(self.d_file), abs(self.d_rank))

    @property
    def unit(self) -> tuple[int, int]:
        return (_sign(self.d_file), _sign(self.d_rank))

    def steps_along(self, d_file: int, d_rank: int) -> int:
        """Return k > 0 if this vector equals k * (d_file, d_rank), else 0."""
        if d_file:
            if self.d_file % d_file:
                return 0
            k = self.d_file // d_file
        elif self.d_file:
            return 0
        else:
            if not d_rank or self.d_rank % d_rank:
                return 0
            k = self.d_rank // d_rank
        if k <= 0 or self.d_rank != k * d_rank:
            return 0
        return k


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable square on the 8x8 board, always within bounds."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (1 <= self.file <= BOARD_SIZE and 1 <= self.rank <= BOARD_SIZE):
            raise ValueError(
                f"Position out of board bounds: file={self.file}, rank={self.rank}"
            )

    # ── Parsing / display ────────────────────────────────────────────────

    @classmethod
    def from_label(cls, label: str) -> Position:
        """Parse an algebraic label, e.g. 'E4' or 'e4'."""
        text = label.strip().upper() if isinstance(label, str) else ""
        if len(text) != 2 or text[0] not in FILE_LABELS or text[1] not in RANK_LABELS:
            raise ValueError(f"Invalid position label: {label!r}")
        return cls(FILE_LABELS.index(text[0]) + 1, int(text[1]))

    @property
    def label(self) -> str:
        return f"{FILE_LABELS[self.file - 1]}{self.rank}"

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"Position({self.label})"

    # ── Geometry ─────────────────────────────────────────────────────────

    def __sub__(self, other: Position) -> Displacement:
        if not isinstance(other, Position):
            return NotImplemented
        return Displacement(self.file - other.file, self.rank - other.rank)

    def shifted(self, d_file: int, d_rank: int) -> Position:
        """Position offset by the given amounts; raises if it leaves the board."""
        return Position(self.file + d_file, self.rank + d_rank)

    def can_shift(self, d_file: int, d_rank: int) -> bool:
        return (
            1 <= self.file + d_file <= BOARD_SIZE
            and 1 <= self.rank + d_rank <= BOARD_SIZE
        )

    def file_distance(self, other: Position) -> int:
        return abs(self.file - other.file)

    def rank_distance(self, other: Position) -> int:
        return abs(self.rank - other.rank)

    def distance(self, other: Position) -> int:
        """King distance between two squares."""
        return max(self.file_distance(other), self.rank_distance(other))

    def between(self, other: Position) -> tuple[Position, ...]:
        """Squares strictly between two positions on a shared line or diagonal.

        Returns an empty tuple when the squares are adjacent, identical or not
        aligned.
        """
        delta = other - self
        if not (delta.is_straight or delta.is_diagonal):
            return ()
        df, dr = delta.unit
        return tuple(self.shifted(df * i, dr * i) for i in range(1, delta.length))

    @staticmethod
    def all() -> Iterator[Position]:
        """Every square, rank by rank starting at A1."""
        for rank in range(1, BOARD_SIZE + 1):
            for file in range(1, BOARD_SIZE + 1):
                yield Position(file, rank)


def parse_position(label: str) -> Position:
    """Shorthand for :meth:`Position.from_label`."""
    return Position.from_label(label)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(f, 1) for f in range(1, 9))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(f, 2) for f in range(1, 9))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(f, 3) for f in range(1, 9))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(f, 4) for f in range(1, 9))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(f, 5) for f in range(1, 9))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(f, 6) for f in range(1, 9))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(f, 7) for f in range(1, 9))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(f, 8) for f in range(1, 9))
