"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessmove.core.board_state import BoardState
from chessmove.core.enums import PieceKind, Team
from chessmove.core.occupant import Occupant

BoardFactory = Callable[..., BoardState]


@pytest.fixture
def empty_board() -> BoardState:
    return BoardState()


@pytest.fixture
def board_with() -> BoardFactory:
    """Build a snapshot from ``label=team`` pairs, e.g. ``board_with(B4=Team.BLACK)``.

    Every occupant is a pawn unless *kind* is given.
    """

    def build(kind: PieceKind = PieceKind.PAWN, **placements: Team) -> BoardState:
        return BoardState.from_labels(
            {label: Occupant(kind, team) for label, team in placements.items()}
        )

    return build
