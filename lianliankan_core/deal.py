from __future__ import annotations

import logging
import random
from typing import List, MutableSequence, Optional, Sequence, TypeVar

from .board import Board, Tile

logger = logging.getLogger(__name__)

T = TypeVar('T')


def resolve_rng(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> random.Random:
    """An explicit rng wins over a seed; with neither, a fresh unseeded Random is used."""
    if rng is not None:
        return rng
    return random.Random(seed)


def fisher_yates(items: MutableSequence[T], rng: random.Random) -> None:
    """In-place uniform permutation: walk from the last index down, swapping with j in [0, i]."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def lay_out(tiles: Sequence[Tile], width: int, height: int) -> Board:
    """Places tiles row-major into an empty grid, rewriting each tile's position."""
    if len(tiles) > width * height:
        raise ValueError(f'{len(tiles)} tiles do not fit a {width}x{height} grid')
    cells: List[Optional[Tile]] = [None] * (width * height)
    for idx, tile in enumerate(tiles):
        cells[idx] = tile.moved_to(divmod(idx, width))
    return Board(width=width, height=height, grid=tuple(cells))


def generate_board(
    size: int,
    tile_types: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """Creates a fully populated size x size board of randomly placed pairs.

    Pair i gets kind ``i % tile_types``, so kinds repeat cyclically once the
    pair count exceeds the number of kinds.
    """
    if size <= 0 or (size * size) % 2 != 0:
        raise ValueError(f'Invalid board size {size}: size*size must be a positive even number')
    if tile_types <= 0:
        raise ValueError(f'Invalid tile type count {tile_types}')
    pairs = size * size // 2
    tiles: List[Tile] = []
    for i in range(pairs):
        kind = i % tile_types
        tiles.append(Tile(kind=kind, id=i * 2, position=(0, 0)))
        tiles.append(Tile(kind=kind, id=i * 2 + 1, position=(0, 0)))
    fisher_yates(tiles, resolve_rng(seed, rng))
    logger.debug('generated %dx%d board with %d pairs over %d kinds', size, size, pairs, tile_types)
    return lay_out(tiles, size, size)
