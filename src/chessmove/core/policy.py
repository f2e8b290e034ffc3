"""Movement policies: per-variant shape legality, independent of occupancy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from chessmove.core.enums import PieceVariant, Team
from chessmove.core.position import Position

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


class Landing(IntEnum):
    """What the target square may hold for a route to succeed."""

    ANY = 0
    EMPTY_ONLY = 1  # pawn advances
    CAPTURE_ONLY = 2  # pawn diagonals


@dataclass(frozen=True, slots=True)
class Route:
    """A shape-legal route: squares that must be empty, and the landing rule."""

    path: tuple[Position, ...] = ()
    landing: Landing = Landing.ANY


class MovementPolicy(Protocol):
    """Geometry rule for one piece variant."""

    @property
    def ally_is_obstruction(self) -> bool: ...

    def route(self, origin: Position, target: Position, team: Team) -> Route | None:
        """Route from *origin* to *target*, or None if the shape is not legal."""
        ...

    def is_legal(self, origin: Position, target: Position, team: Team) -> bool: ...


@dataclass(frozen=True, slots=True)
class RayPolicy:
    """Moves along fixed vectors: one step each, or sliding any distance."""

    directions: tuple[tuple[int, int], ...]
    sliding: bool

    @property
    def ally_is_obstruction(self) -> bool:
        return False

    def route(self, origin: Position, target: Position, team: Team) -> Route | None:
        delta = target - origin
        for df, dr in self.directions:
            steps = delta.steps_along(df, dr)
            if steps == 0 or (steps > 1 and not self.sliding):
                continue
            return Route(origin.between(target))
        return None

    def is_legal(self, origin: Position, target: Position, team: Team) -> bool:
        return self.route(origin, target, team) is not None


@dataclass(frozen=True, slots=True)
class PawnPolicy:
    """Team-relative pawn geometry; *double_step* is the unmoved privilege."""

    double_step: bool

    @property
    def ally_is_obstruction(self) -> bool:
        # Pawn landing squares ahead are never capture squares.
        return True

    def route(self, origin: Position, target: Position, team: Team) -> Route | None:
        delta = target - origin
        forward = team.forward

        if delta.d_file == 0:
            if delta.d_rank == forward:
                return Route((), Landing.EMPTY_ONLY)
            if self.double_step and delta.d_rank == 2 * forward:
                return Route((origin.shifted(0, forward),), Landing.EMPTY_ONLY)
            return None

        if abs(delta.d_file) == 1 and delta.d_rank == forward:
            return Route((), Landing.CAPTURE_ONLY)
        return None

    def is_legal(self, origin: Position, target: Position, team: Team) -> bool:
        return self.route(origin, target, team) is not None


_POLICIES: dict[PieceVariant, MovementPolicy] = {
    PieceVariant.NOT_MOVED_PAWN: PawnPolicy(double_step=True),
    PieceVariant.MOVED_PAWN: PawnPolicy(double_step=False),
    PieceVariant.KNIGHT: RayPolicy(KNIGHT_OFFSETS, sliding=False),
    PieceVariant.BISHOP: RayPolicy(BISHOP_DIRS, sliding=True),
    PieceVariant.ROOK: RayPolicy(ROOK_DIRS, sliding=True),
    PieceVariant.QUEEN: RayPolicy(QUEEN_DIRS, sliding=True),
    PieceVariant.KING: RayPolicy(KING_OFFSETS, sliding=False),
}


def policy_for(variant: PieceVariant) -> MovementPolicy:
    """Movement policy for *variant*."""
    return _POLICIES[variant]
