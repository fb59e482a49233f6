from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .board import Board, Coord, Tile
from .scoring import GameConfig, GameResult

# Wire format shared with the browser client:
#   board    -> list of rows, each cell null or {"type", "id", "position": {"row", "col"}}
#   position -> {"row": int, "col": int}


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'{what} must be an integer, got {value!r}')
    return value


def position_to_json(c: Coord) -> Dict[str, int]:
    return {"row": int(c[0]), "col": int(c[1])}


def position_from_json(obj: Any) -> Coord:
    if isinstance(obj, dict):
        return (_as_int(obj["row"], "row"), _as_int(obj["col"], "col"))
    if isinstance(obj, (list, tuple)) and len(obj) == 2:
        return (_as_int(obj[0], "row"), _as_int(obj[1], "col"))
    raise ValueError(f'bad position: {obj!r}')


def path_to_json(path: Optional[Sequence[Coord]]) -> Optional[List[Dict[str, int]]]:
    if path is None:
        return None
    return [position_to_json(p) for p in path]


def tile_to_json(t: Tile) -> Dict[str, Any]:
    return {"type": int(t.kind), "id": int(t.id), "position": position_to_json(t.position)}


def board_to_json(b: Board) -> List[List[Optional[Dict[str, Any]]]]:
    rows: List[List[Optional[Dict[str, Any]]]] = []
    for r in range(b.height):
        row: List[Optional[Dict[str, Any]]] = []
        for c in range(b.width):
            tile = b.at(r, c)
            row.append(tile_to_json(tile) if tile is not None else None)
        rows.append(row)
    return rows


def board_from_json(rows: Any) -> Board:
    """Decodes a board; each tile's position is taken from the cell it sits in."""
    if not isinstance(rows, list) or not rows or not all(isinstance(r, list) for r in rows):
        raise ValueError('board must be a non-empty list of rows')
    width = len(rows[0])
    if width == 0 or any(len(r) != width for r in rows):
        raise ValueError('board rows must be non-empty and of equal length')
    cells: List[Optional[Tile]] = []
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell is None:
                cells.append(None)
                continue
            if not isinstance(cell, dict):
                raise ValueError(f'bad cell at {r},{c}: {cell!r}')
            cells.append(Tile(kind=_as_int(cell["type"], "type"), id=_as_int(cell["id"], "id"), position=(r, c)))
    return Board(width=width, height=len(rows), grid=tuple(cells))


def config_to_json(cfg: GameConfig) -> Dict[str, Any]:
    return {"size": cfg.size, "tileTypes": cfg.tile_types, "difficulty": cfg.difficulty}


def result_from_json(obj: Dict[str, Any]) -> GameResult:
    """Builds a GameResult without coercing types; scoring decides what is acceptable."""
    return GameResult(
        time_seconds=obj.get("timeSeconds"),
        moves=obj.get("moves"),
        board_size=obj.get("boardSize"),
        difficulty=obj.get("difficulty"),
        completed=obj.get("completed"),
    )
