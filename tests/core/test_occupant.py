"""Tests for Occupant and the enums it is built from."""

import pytest

from chessmove.core.enums import PieceKind, PieceVariant, Team
from chessmove.core.occupant import Occupant


class TestOccupant:
    def test_fen_char(self) -> None:
        assert str(Occupant(PieceKind.KNIGHT, Team.WHITE)) == "N"
        assert str(Occupant(PieceKind.QUEEN, Team.BLACK)) == "q"

    def test_from_char(self) -> None:
        assert Occupant.from_char("k") == Occupant(PieceKind.KING, Team.BLACK)
        assert Occupant.from_char("P") == Occupant(PieceKind.PAWN, Team.WHITE)

    def test_from_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Occupant.from_char("x")

    def test_symbols(self) -> None:
        assert Occupant(PieceKind.KING, Team.WHITE).symbol == "♔"
        assert Occupant(PieceKind.KNIGHT, Team.BLACK).symbol == "♞"
        assert Occupant(PieceKind.PAWN, Team.BLACK).symbol == "♟"

    def test_is_ally_of(self) -> None:
        assert Occupant(PieceKind.ROOK, Team.BLACK).is_ally_of(Team.BLACK)
        assert not Occupant(PieceKind.ROOK, Team.BLACK).is_ally_of(Team.WHITE)


class TestEnums:
    def test_team_opposite(self) -> None:
        assert Team.WHITE.opposite == Team.BLACK
        assert Team.BLACK.opposite == Team.WHITE

    def test_team_forward(self) -> None:
        assert Team.WHITE.forward == 1
        assert Team.BLACK.forward == -1

    def test_pawn_start_rank(self) -> None:
        assert Team.WHITE.pawn_start_rank == 2
        assert Team.BLACK.pawn_start_rank == 7

    def test_variant_kind(self) -> None:
        assert PieceVariant.NOT_MOVED_PAWN.kind == PieceKind.PAWN
        assert PieceVariant.MOVED_PAWN.kind == PieceKind.PAWN
        assert PieceVariant.QUEEN.kind == PieceKind.QUEEN
        assert all(v.kind is not None for v in PieceVariant)

    def test_variant_is_pawn(self) -> None:
        assert PieceVariant.MOVED_PAWN.is_pawn
        assert not PieceVariant.KING.is_pawn

    def test_str(self) -> None:
        assert str(Team.WHITE) == "white"
        assert str(PieceKind.BISHOP) == "bishop"
