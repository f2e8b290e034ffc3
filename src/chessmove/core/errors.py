"""Move rejection errors and the result value returned by ``try_move``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmove.core.piece import Piece


class MoveErrorKind(IntEnum):
    """Why a move was rejected."""

    INVALID_DIRECTION = 1
    OBSTRUCTED_PATH = 2
    OCCUPIED_BY_ALLY = 3


class MoveError(ValueError):
    """A requested move is not legal. Never fatal; the caller decides."""

    kind: MoveErrorKind
    default_reason = "Illegal move."

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason or self.default_reason
        super().__init__(self.reason)


class InvalidDirectionError(MoveError):
    """Displacement shape is not one the piece can make."""

    kind = MoveErrorKind.INVALID_DIRECTION
    default_reason = "Invalid move direction."


class ObstructedPathError(MoveError):
    """A square on the path, or a pawn's advance square, is occupied."""

    kind = MoveErrorKind.OBSTRUCTED_PATH
    default_reason = "Path is obstructed."


class OccupiedByAllyError(MoveError):
    kind = MoveErrorKind.OCCUPIED_BY_ALLY
    default_reason = "Cannot move onto an allied piece."


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a move attempt: exactly one of *piece* / *error* is set."""

    piece: Piece | None = None
    error: MoveError | None = None

    def __post_init__(self) -> None:
        if (self.piece is None) == (self.error is None):
            raise ValueError("MoveResult needs exactly one of piece or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> MoveErrorKind | None:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> Piece:
        """Return the successor piece or raise the stored error."""
        if self.error is not None:
            raise self.error
        assert self.piece is not None
        return self.piece
