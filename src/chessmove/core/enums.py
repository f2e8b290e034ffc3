"""Core enumerations for the movement engine."""

from __future__ import annotations

from enum import IntEnum


class Team(IntEnum):
    """Side a piece belongs to."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Team:
        return Team(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction pawns of this team advance in (+1 or -1)."""
        return 1 if self is Team.WHITE else -1

    @property
    def pawn_start_rank(self) -> int:
        return 2 if self is Team.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class PieceVariant(IntEnum):
    """Movement variant of a piece; pawns split by whether they have moved."""

    NOT_MOVED_PAWN = 0
    MOVED_PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def kind(self) -> PieceKind:
        return _VARIANT_KIND[self]

    @property
    def is_pawn(self) -> bool:
        return self in (PieceVariant.NOT_MOVED_PAWN, PieceVariant.MOVED_PAWN)


_VARIANT_KIND: dict[PieceVariant, PieceKind] = {
    PieceVariant.NOT_MOVED_PAWN: PieceKind.PAWN,
    PieceVariant.MOVED_PAWN: PieceKind.PAWN,
    PieceVariant.KNIGHT: PieceKind.KNIGHT,
    PieceVariant.BISHOP: PieceKind.BISHOP,
    PieceVariant.ROOK: PieceKind.ROOK,
    PieceVariant.QUEEN: PieceKind.QUEEN,
    PieceVariant.KING: PieceKind.KING,
}
