"""Game state read from the referee each turn."""

from __future__ import annotations

from itertools import islice
from typing import TextIO

from arena_bots.grid import Cell, Map, Player

_FIELDS_PER_CELL = 7


def _read_ints(stream: TextIO, count: int) -> list[int]:
    """Read exactly ``count`` whitespace-separated integers, line by line."""
    tokens: list[str] = []
    while len(tokens) < count:
        line = stream.readline()
        if not line:
            raise EOFError(f"expected {count} values, got {len(tokens)}")
        tokens.extend(line.split())
    if len(tokens) > count:
        raise ValueError(f"expected {count} values, got {len(tokens)}")
    return [int(token) for token in tokens]


class State:
    """Board, cell ownership, units and matter of both players."""

    def __init__(self, width: int, height: int) -> None:
        self.map = Map(width, height)
        self._cells: dict[Player, list[Cell]] = {player: [] for player in Player}
        self._units: dict[Player, list[Cell]] = {player: [] for player in Player}
        self._matter: dict[Player, int] = {Player.OPPONENT: 0, Player.ME: 0}
        self._cells[Player.NO_ONE] = [
            self.map.cell(x, y) for x in range(width) for y in range(height)
        ]

    def player_cells(self, player: Player) -> tuple[Cell, ...]:
        """Cells owned by ``player``."""
        return tuple(self._cells[player])

    def player_units(self, player: Player) -> tuple[Cell, ...]:
        """Cells owned by ``player`` that hold at least one unit."""
        return tuple(self._units[player])

    def matter_count(self, player: Player) -> int:
        """Matter held by ``player``; raise KeyError for a player without matter."""
        try:
            return self._matter[player]
        except KeyError:
            raise KeyError(f"{player.name} holds no matter") from None

    def update(self, stream: TextIO) -> None:
        """Read one turn's input from ``stream`` and refresh the state.

        Raises EOFError when the stream ends before the turn is complete.
        """
        values = _read_ints(stream, 2 + _FIELDS_PER_CELL * self.map.cell_count)
        self._matter[Player.ME], self._matter[Player.OPPONENT] = values[:2]

        for player in Player:
            self._cells[player].clear()
            self._units[player].clear()

        fields = iter(values[2:])
        for cell in self.map.cells:
            (
                scrap,
                owner,
                units,
                recycler,
                can_build,
                can_spawn,
                in_range_of_recycler,
            ) = islice(fields, _FIELDS_PER_CELL)

            cell.scrap_count = scrap
            cell.owner = Player(owner)
            cell.unit_count = units
            cell.has_recycler = recycler > 0
            cell.is_buildable = can_build > 0
            cell.is_spawnable = can_spawn > 0
            cell.is_recycled = in_range_of_recycler > 0

            self._cells[cell.owner].append(cell)
            if cell.unit_count > 0:
                self._units[cell.owner].append(cell)