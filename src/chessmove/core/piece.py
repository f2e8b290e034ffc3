"""Piece value object and the move legality check."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessmove.core.board_state import BoardState
from chessmove.core.enums import PieceKind, PieceVariant, Team
from chessmove.core.errors import (
    InvalidDirectionError,
    MoveError,
    MoveResult,
    ObstructedPathError,
    OccupiedByAllyError,
)
from chessmove.core.occupant import Occupant
from chessmove.core.policy import Landing, policy_for
from chessmove.core.position import Position

_LOGGER = logging.getLogger(__name__)

# Variants whose kind changes after a successful move.
_SUCCESSOR: dict[PieceVariant, PieceVariant] = {
    PieceVariant.NOT_MOVED_PAWN: PieceVariant.MOVED_PAWN,
}

_KIND_VARIANT: dict[PieceKind, PieceVariant] = {
    PieceKind.KNIGHT: PieceVariant.KNIGHT,
    PieceKind.BISHOP: PieceVariant.BISHOP,
    PieceKind.ROOK: PieceVariant.ROOK,
    PieceKind.QUEEN: PieceVariant.QUEEN,
    PieceKind.KING: PieceVariant.KING,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece: variant, team and current position.

    :meth:`move` never mutates; it returns the successor piece, which the
    caller substitutes into its own board.
    """

    variant: PieceVariant
    team: Team
    position: Position

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def of(
        cls, kind: PieceKind, team: Team, position: Position, *, moved: bool = False
    ) -> Piece:
        """Create a piece by kind; *moved* only matters for pawns."""
        if kind == PieceKind.PAWN:
            variant = PieceVariant.MOVED_PAWN if moved else PieceVariant.NOT_MOVED_PAWN
        else:
            variant = _KIND_VARIANT[kind]
        return cls(variant, team, position)

    @classmethod
    def pawn(cls, team: Team, position: Position) -> Piece:
        return cls(PieceVariant.NOT_MOVED_PAWN, team, position)

    @classmethod
    def moved_pawn(cls, team: Team, position: Position) -> Piece:
        return cls(PieceVariant.MOVED_PAWN, team, position)

    @classmethod
    def knight(cls, team: Team, position: Position) -> Piece:
        return cls(PieceVariant.KNIGHT, team, position)

    @classmethod
    def bishop(cls, team: Team, position: Position) -> Piece:
        return cls(PieceVariant.BISHOP, team, position)

    @classmethod
    def rook(cls, team: Team, position: Position) -> Piece:
        return cls(PieceVariant.ROOK, team, position)

    @classmethod
    def queen(cls, team: Team, position: Position) -> Piece:
        return cls(PieceVariant.QUEEN, team, position)

    @classmethod
    def king(cls, team: Team, position: Position) -> Piece:
        return cls(PieceVariant.KING, team, position)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def kind(self) -> PieceKind:
        return self.variant.kind

    @property
    def occupant(self) -> Occupant:
        """Descriptor of this piece as a BoardState would hold it."""
        return Occupant(self.kind, self.team)

    @property
    def can_double_step(self) -> bool:
        return self.variant == PieceVariant.NOT_MOVED_PAWN

    def __str__(self) -> str:
        return f"{self.team} {self.variant.name.lower()} {self.position}"

    # ── Moving ───────────────────────────────────────────────────────────

    def move(self, target: Position, board_state: BoardState) -> Piece:
        """Return the piece after moving to *target*.

        Checks run in a fixed order: direction, path, then the target square.
        The first failure is raised as a :class:`MoveError` subclass.
        """
        policy = policy_for(self.variant)
        route = policy.route(self.position, target, self.team)
        if route is None:
            raise self._rejected(target, InvalidDirectionError())

        if not board_state.all_empty(route.path):
            raise self._rejected(target, ObstructedPathError())

        occupant = board_state.occupant_at(target)
        if occupant is None:
            if route.landing == Landing.CAPTURE_ONLY:
                raise self._rejected(target, InvalidDirectionError())
        elif route.landing == Landing.EMPTY_ONLY:
            raise self._rejected(target, ObstructedPathError())
        elif occupant.team == self.team:
            if policy.ally_is_obstruction:
                raise self._rejected(target, ObstructedPathError())
            raise self._rejected(target, OccupiedByAllyError())

        successor = Piece(
            _SUCCESSOR.get(self.variant, self.variant), self.team, target
        )
        _LOGGER.debug(
            "%s -> %s%s",
            self,
            target,
            " (capture)" if occupant is not None else "",
        )
        return successor

    def try_move(self, target: Position, board_state: BoardState) -> MoveResult:
        """Like :meth:`move`, but report rejection as a value."""
        try:
            return MoveResult(piece=self.move(target, board_state))
        except MoveError as exc:
            return MoveResult(error=exc)

    def can_move(self, target: Position, board_state: BoardState) -> bool:
        return self.try_move(target, board_state).ok

    def legal_targets(self, board_state: BoardState) -> list[Position]:
        """All squares :meth:`move` would accept, in board order."""
        return [p for p in Position.all() if self.can_move(p, board_state)]

    def _rejected(self, target: Position, error: MoveError) -> MoveError:
        _LOGGER.debug("Rejected %s -> %s: %s", self, target, error.reason)
        return error
