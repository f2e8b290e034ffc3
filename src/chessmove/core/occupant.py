"""Occupant descriptor: what stands on a square."""

from __future__ import annotations

from dataclasses import dataclass

from chessmove.core.enums import PieceKind, Team

# FEN character ↔ (Team, PieceKind)
_CHAR_MAP: dict[str, tuple[Team, PieceKind]] = {
    "P": (Team.WHITE, PieceKind.PAWN),
    "N": (Team.WHITE, PieceKind.KNIGHT),
    "B": (Team.WHITE, PieceKind.BISHOP),
    "R": (Team.WHITE, PieceKind.ROOK),
    "Q": (Team.WHITE, PieceKind.QUEEN),
    "K": (Team.WHITE, PieceKind.KING),
    "p": (Team.BLACK, PieceKind.PAWN),
    "n": (Team.BLACK, PieceKind.KNIGHT),
    "b": (Team.BLACK, PieceKind.BISHOP),
    "r": (Team.BLACK, PieceKind.ROOK),
    "q": (Team.BLACK, PieceKind.QUEEN),
    "k": (Team.BLACK, PieceKind.KING),
}

_SYMBOLS = "♙♘♗♖♕♔♟♞♝♜♛♚"

_FEN_CHARS: dict[tuple[Team, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Occupant:
    """Kind and team of the piece sitting on a square."""

    kind: PieceKind
    team: Team

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.team, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Occupant:
        """Create occupant from FEN character, e.g. 'n' → black knight."""
        try:
            team, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, team)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _SYMBOLS[int(self.team) * 6 + int(self.kind) - 1]

    def is_ally_of(self, team: Team) -> bool:
        return self.team == team
