"""Core domain layer: piece movement legality with zero external dependencies.

Quick start::

    from chessmove.core import Piece, Team, board_state_from_fen, parse_position

    state = board_state_from_fen("8/8/8/8/2Q5/8/8/8")
    queen = Piece.queen(Team.WHITE, parse_position("C4"))
    queen = queen.move(parse_position("E6"), state)
"""

from chessmove.core.board_state import BoardState
from chessmove.core.enums import PieceKind, PieceVariant, Team
from chessmove.core.errors import (
    InvalidDirectionError,
    MoveError,
    MoveErrorKind,
    MoveResult,
    ObstructedPathError,
    OccupiedByAllyError,
)
from chessmove.core.notation import (
    STARTING_PLACEMENT,
    board_state_from_fen,
    board_state_to_fen,
)
from chessmove.core.occupant import Occupant
from chessmove.core.piece import Piece
from chessmove.core.policy import (
    Landing,
    MovementPolicy,
    PawnPolicy,
    RayPolicy,
    Route,
    policy_for,
)
from chessmove.core.position import Displacement, Position, parse_position

__all__ = [
    # Enums
    "PieceKind",
    "PieceVariant",
    "Team",
    # Coordinates
    "Displacement",
    "Position",
    "parse_position",
    # Domain objects
    "BoardState",
    "Occupant",
    "Piece",
    # Movement policies
    "Landing",
    "MovementPolicy",
    "PawnPolicy",
    "RayPolicy",
    "Route",
    "policy_for",
    # Errors
    "InvalidDirectionError",
    "MoveError",
    "MoveErrorKind",
    "MoveResult",
    "ObstructedPathError",
    "OccupiedByAllyError",
    # Notation
    "STARTING_PLACEMENT",
    "board_state_from_fen",
    "board_state_to_fen",
]
