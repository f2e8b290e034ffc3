"""Tests for MoveResult, error kinds and check ordering."""

import logging

import pytest

from chessmove.core.enums import PieceKind, PieceVariant, Team
from chessmove.core.errors import (
    InvalidDirectionError,
    MoveError,
    MoveErrorKind,
    MoveResult,
    ObstructedPathError,
    OccupiedByAllyError,
)
from chessmove.core.piece import Piece
from chessmove.core.position import A1, A8, B3, C4, D4, D5, E6, H1


class TestErrors:
    def test_all_errors_are_value_errors(self) -> None:
        for cls in (InvalidDirectionError, ObstructedPathError, OccupiedByAllyError):
            assert issubclass(cls, MoveError)
            assert issubclass(cls, ValueError)

    def test_kinds_and_reasons(self) -> None:
        assert InvalidDirectionError().kind == MoveErrorKind.INVALID_DIRECTION
        assert ObstructedPathError().kind == MoveErrorKind.OBSTRUCTED_PATH
        assert OccupiedByAllyError().kind == MoveErrorKind.OCCUPIED_BY_ALLY
        assert str(OccupiedByAllyError()) == "Cannot move onto an allied piece."

    def test_custom_reason(self) -> None:
        err = ObstructedPathError("D5 is taken")
        assert err.reason == "D5 is taken"
        assert str(err) == "D5 is taken"


class TestMoveResult:
    def test_success(self, empty_board) -> None:
        result = Piece.rook(Team.WHITE, A1).try_move(A8, empty_board)
        assert result.ok
        assert result.error is None
        assert result.error_kind is None
        assert result.unwrap() == Piece.rook(Team.WHITE, A8)

    def test_failure(self, board_with) -> None:
        board = board_with(kind=PieceKind.ROOK, A8=Team.WHITE)
        result = Piece.rook(Team.WHITE, A1).try_move(A8, board)
        assert not result.ok
        assert result.piece is None
        assert result.error_kind == MoveErrorKind.OCCUPIED_BY_ALLY
        with pytest.raises(OccupiedByAllyError):
            result.unwrap()

    def test_requires_exactly_one_field(self) -> None:
        with pytest.raises(ValueError):
            MoveResult()
        with pytest.raises(ValueError):
            MoveResult(Piece.rook(Team.WHITE, A1), InvalidDirectionError())

    def test_can_move(self, empty_board) -> None:
        rook = Piece.rook(Team.WHITE, A1)
        assert rook.can_move(H1, empty_board)
        assert not rook.can_move(B3, empty_board)


class TestCheckOrder:
    def test_direction_checked_before_path(self, board_with) -> None:
        # B2 would block a diagonal, but A1 -> B3 is not a rook shape at all.
        board = board_with(B2=Team.BLACK, B3=Team.BLACK)
        result = Piece.rook(Team.WHITE, A1).try_move(B3, board)
        assert result.error_kind == MoveErrorKind.INVALID_DIRECTION

    def test_path_checked_before_target(self, board_with) -> None:
        board = board_with(D5=Team.BLACK, E6=Team.WHITE)
        result = Piece.bishop(Team.WHITE, C4).try_move(E6, board)
        assert result.error_kind == MoveErrorKind.OBSTRUCTED_PATH

    @pytest.mark.parametrize(
        "variant",
        [
            PieceVariant.ROOK,
            PieceVariant.BISHOP,
            PieceVariant.QUEEN,
            PieceVariant.KING,
            PieceVariant.KNIGHT,
            PieceVariant.NOT_MOVED_PAWN,
            PieceVariant.MOVED_PAWN,
        ],
    )
    def test_zero_displacement_is_invalid(self, empty_board, variant) -> None:
        piece = Piece(variant, Team.WHITE, D4)
        with pytest.raises(InvalidDirectionError):
            piece.move(D4, empty_board)


class TestLogging:
    def test_rejection_logged_at_debug(self, empty_board, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessmove.core.piece"):
            Piece.rook(Team.WHITE, A1).try_move(B3, empty_board)
        assert "Rejected" in caplog.text
        assert "Invalid move direction." in caplog.text

    def test_success_logged_at_debug(self, empty_board, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessmove.core.piece"):
            Piece.rook(Team.WHITE, A1).move(A8, empty_board)
        assert "white rook A1 -> A8" in caplog.text
