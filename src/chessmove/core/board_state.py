"""BoardState - read-only snapshot of board occupancy."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from chessmove.core.enums import Team
from chessmove.core.occupant import Occupant
from chessmove.core.position import BOARD_SIZE, Position


class BoardState(Mapping[Position, Occupant]):
    """Immutable mapping of occupied squares to their occupants.

    Squares without an entry are empty. The input mapping is copied, so the
    snapshot never changes after construction.
    """

    __slots__ = ("_occupants", "_hash")

    def __init__(self, occupants: Mapping[Position, Occupant] | None = None) -> None:
        table: dict[Position, Occupant] = {}
        for position, occupant in (occupants or {}).items():
            if not isinstance(position, Position):
                raise TypeError(f"BoardState keys must be Position, got {position!r}")
            if not isinstance(occupant, Occupant):
                raise TypeError(
                    f"BoardState values must be Occupant, got {occupant!r}"
                )
            table[position] = occupant
        self._occupants = table
        self._hash: int | None = None

    @classmethod
    def from_labels(cls, occupants: Mapping[str, Occupant]) -> BoardState:
        """Build from algebraic labels, e.g. ``{"E4": Occupant(...)}``."""
        return cls({Position.from_label(k): v for k, v in occupants.items()})

    # -- Mapping protocol ---------------------------------------------------

    def __getitem__(self, position: Position) -> Occupant:
        return self._occupants[position]

    def __iter__(self) -> Iterator[Position]:
        return iter(self._occupants)

    def __len__(self) -> int:
        return len(self._occupants)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._occupants.items()))
        return self._hash

    # -- Query helpers ------------------------------------------------------

    def occupant_at(self, position: Position) -> Occupant | None:
        return self._occupants.get(position)

    def is_empty(self, position: Position) -> bool:
        return position not in self._occupants

    def all_empty(self, positions: Iterable[Position]) -> bool:
        return all(p not in self._occupants for p in positions)

    def is_occupied_by(self, position: Position, team: Team) -> bool:
        occupant = self._occupants.get(position)
        return occupant is not None and occupant.team == team

    def positions(self, team: Team | None = None) -> list[Position]:
        """Occupied squares in board order, optionally limited to *team*."""
        return sorted(
            p for p, occ in self._occupants.items() if team is None or occ.team == team
        )

    # -- Functional update --------------------------------------------------

    def moved(self, origin: Position, target: Position) -> BoardState:
        """New snapshot with the occupant of *origin* relocated to *target*.

        Whatever stood on *target* is replaced. Legality is not checked here.
        """
        occupant = self._occupants.get(origin)
        if occupant is None:
            raise ValueError(f"No piece on {origin}")
        table = dict(self._occupants)
        del table[origin]
        table[target] = occupant
        return BoardState(table)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE, 0, -1):
            row = []
            for file in range(1, BOARD_SIZE + 1):
                occ = self._occupants.get(Position(file, rank))
                row.append(str(occ) if occ else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
