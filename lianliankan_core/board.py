from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

Coord = Tuple[int, int]  # (row, col)


def as_coord(pos: Any) -> Optional[Coord]:
    """(row, col) tuple for any two-item sequence of ints; None for anything else."""
    try:
        r, c = pos
    except (TypeError, ValueError):
        return None
    if isinstance(r, bool) or isinstance(c, bool) or not isinstance(r, int) or not isinstance(c, int):
        return None
    return (r, c)


@dataclass(frozen=True)
class Tile:
    """A single tile. `kind` is the category id shared by exactly one partner per pair."""
    kind: int
    id: int
    position: Coord

    def moved_to(self, position: Coord) -> 'Tile':
        return replace(self, position=position)


@dataclass(frozen=True)
class Board:
    """Immutable grid of tiles. Cells hold a Tile or None when empty."""
    width: int
    height: int
    grid: Tuple[Optional[Tile], ...]  # row-major, length == width * height

    @classmethod
    def empty(cls, width: int, height: Optional[int] = None) -> 'Board':
        h = width if height is None else height
        return cls(width=width, height=h, grid=(None,) * (width * h))

    def index(self, r: int, c: int) -> int:
        """Offset of (r, c) in the flat row-major grid tuple."""
        return r * self.width + c

    def in_bounds(self, coord: Any) -> bool:
        """False for malformed positions as well as positions off the grid."""
        normalized = as_coord(coord)
        if normalized is None:
            return False
        r, c = normalized
        return 0 <= r < self.height and 0 <= c < self.width

    def at(self, r: int, c: int) -> Optional[Tile]:
        """Gets the tile at a given row and column; None when empty or off the grid."""
        if not self.in_bounds((r, c)):
            return None
        return self.grid[self.index(r, c)]

    def is_empty(self, coord: Any) -> bool:
        """True for empty cells. Cells outside the grid, and malformed positions, count as empty."""
        normalized = as_coord(coord)
        return normalized is None or self.at(*normalized) is None

    def coords(self) -> Iterable[Coord]:
        """Every cell position, top row first; pair scans rely on this order."""
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def occupied(self) -> List[Coord]:
        return [coord for coord in self.coords() if not self.is_empty(coord)]

    def tiles(self) -> Iterator[Tile]:
        for cell in self.grid:
            if cell is not None:
                yield cell

    def kind_counts(self) -> Dict[int, int]:
        return dict(Counter(tile.kind for tile in self.tiles()))

    def is_balanced(self) -> bool:
        """Every remaining kind appears an even number of times."""
        return all(n % 2 == 0 for n in self.kind_counts().values())

    def with_cells(self, updates: Mapping[Coord, Optional[Tile]]) -> 'Board':
        """Returns a copy with the given cells replaced; off-grid keys are ignored."""
        cells = list(self.grid)
        for coord, tile in updates.items():
            if self.in_bounds(coord):
                cells[self.index(*coord)] = tile
        return Board(width=self.width, height=self.height, grid=tuple(cells))

    def pretty(self, path: Optional[Iterable[Coord]] = None) -> str:
        """Generates a human-readable grid; path cells that are empty are drawn as '*'."""
        marks = set(path or ())
        lines: List[str] = []
        cell_w = max([len(str(t.kind)) for t in self.tiles()] + [1])
        for r in range(self.height):
            row: List[str] = []
            for c in range(self.width):
                tile = self.at(r, c)
                if tile is not None:
                    row.append(str(tile.kind).rjust(cell_w))
                elif (r, c) in marks:
                    row.append('*'.rjust(cell_w))
                else:
                    row.append('·'.rjust(cell_w))
            lines.append(" ".join(row))
        return "\n".join(lines)
