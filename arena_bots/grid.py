"""Rectangular game board made of cells linked to their orthogonal neighbours."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class Direction(Enum):
    """Orthogonal directions on the board."""

    EAST = "east"
    NORTH = "north"
    SOUTH = "south"
    WEST = "west"


class Player(IntEnum):
    """Owner of a cell, with the game's numeric codes."""

    NO_ONE = -1
    OPPONENT = 0
    ME = 1


@dataclass(eq=False)
class Cell:
    """A single board cell with its game attributes and neighbour links."""

    x: int
    y: int
    owner: Player = Player.NO_ONE
    has_recycler: bool = False
    is_buildable: bool = False
    is_recycled: bool = False
    scrap_count: int = 0
    is_spawnable: bool = False
    unit_count: int = 0
    _neighbors: list[Cell] = field(default_factory=list, init=False, repr=False)
    _by_direction: dict[Direction, Cell] = field(
        default_factory=dict, init=False, repr=False
    )

    def add_neighbor(self, cell: Cell, direction: Direction) -> None:
        """Link ``cell`` as the neighbour lying in ``direction``.

        A direction already linked keeps its first neighbour.
        """
        self._by_direction.setdefault(direction, cell)
        self._neighbors.append(cell)

    def neighbor(self, direction: Direction) -> Cell:
        """Return the neighbour in ``direction``; raise KeyError if there is none."""
        try:
            return self._by_direction[direction]
        except KeyError:
            raise KeyError(
                f"cell ({self.x}, {self.y}) has no neighbor to the {direction.value}"
            ) from None

    @property
    def neighbors(self) -> tuple[Cell, ...]:
        """Neighbours in the order they were linked."""
        return tuple(self._neighbors)

    @property
    def neighbor_count(self) -> int:
        return len(self._neighbors)


class Map:
    """A width x height board of linked cells, stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells = [Cell(x, y) for y in range(height) for x in range(width)]

        for cell in self._cells:
            x, y = cell.x, cell.y
            if x + 1 < width:
                cell.add_neighbor(self.cell(x + 1, y), Direction.EAST)
            if y - 1 >= 0:
                cell.add_neighbor(self.cell(x, y - 1), Direction.NORTH)
            if y + 1 < height:
                cell.add_neighbor(self.cell(x, y + 1), Direction.SOUTH)
            if x - 1 >= 0:
                cell.add_neighbor(self.cell(x - 1, y), Direction.WEST)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def cells(self) -> tuple[Cell, ...]:
        """All cells, row by row."""
        return tuple(self._cells)

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at row-major position ``y * width + x``."""
        index = y * self.width + x
        if not 0 <= index < len(self._cells):
            raise IndexError(f"coordinates ({x}, {y}) are outside the map")
        return self._cells[index]