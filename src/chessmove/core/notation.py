"""FEN piece-placement parsing and serialisation for BoardState snapshots."""

from __future__ import annotations

from chessmove.core.board_state import BoardState
from chessmove.core.occupant import Occupant
from chessmove.core.position import BOARD_SIZE, Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_state_from_fen(fen: str) -> BoardState:
    """Parse the placement field of *fen* into a :class:`BoardState`.

    Accepts either a bare placement or a full FEN string; fields after the
    first are ignored.
    """
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    occupants: dict[Position, Occupant] = {}
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - rank_idx
        file = 1
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file > BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                occupants[Position(file, rank)] = Occupant.from_char(ch)
                file += 1
            if file > BOARD_SIZE + 1:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != BOARD_SIZE + 1:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    return BoardState(occupants)


def board_state_to_fen(state: BoardState) -> str:
    """Serialise *state* to a FEN placement field."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE, 0, -1):
        empty = 0
        row = ""
        for file in range(1, BOARD_SIZE + 1):
            occupant = state.occupant_at(Position(file, rank))
            if occupant is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(occupant)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
