from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, List, Optional, Tuple

from .board import Board, Coord, Tile, as_coord
from .deal import fisher_yates, lay_out, resolve_rng
from .moves import can_connect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchOutcome:
    """Result of one match attempt: the board to continue with and what happened to it."""
    valid: bool
    path: Optional[List[Coord]]
    board: Board
    completed: bool = False
    reshuffled: bool = False


def remove_tiles(board: Board, positions: Iterable[Coord]) -> Board:
    """Returns a new board with the given cells emptied. Empty, off-grid or malformed positions are left alone."""
    coords = [as_coord(pos) for pos in positions]
    return board.with_cells({c: None for c in coords if c is not None and not board.is_empty(c)})


def is_game_completed(board: Board) -> bool:
    return all(cell is None for cell in board.grid)


def find_move(board: Board) -> Optional[Tuple[Coord, Coord]]:
    """First connectable same-kind pair, scanning occupied cells in row-major order."""
    for a, b in combinations(board.occupied(), 2):
        tile_a = board.at(*a)
        tile_b = board.at(*b)
        if tile_a is None or tile_b is None or tile_a.kind != tile_b.kind:
            continue
        if can_connect(board, a, b):
            return a, b
    return None


def has_possible_moves(board: Board) -> bool:
    return find_move(board) is not None


def shuffle_board(
    board: Board,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """Re-deals the remaining tiles into the leading cells of an empty grid of the same size."""
    tiles: List[Tile] = list(board.tiles())
    fisher_yates(tiles, resolve_rng(seed, rng))
    return lay_out(tiles, board.width, board.height)


def attempt_match(
    board: Board,
    start: Coord,
    end: Coord,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> MatchOutcome:
    """
    One player action: connect, remove, and reshuffle if the remaining tiles
    are deadlocked. An invalid attempt hands back the caller's board unchanged.
    """
    path = can_connect(board, start, end)
    if path is None:
        return MatchOutcome(valid=False, path=None, board=board)

    next_board = remove_tiles(board, path)
    reshuffled = False
    if not is_game_completed(next_board) and not has_possible_moves(next_board):
        logger.info('deadlock with %d tiles left, reshuffling', len(next_board.occupied()))
        next_board = shuffle_board(next_board, seed=seed, rng=rng)
        reshuffled = True

    return MatchOutcome(
        valid=True,
        path=path,
        board=next_board,
        completed=is_game_completed(next_board),
        reshuffled=reshuffled,
    )
