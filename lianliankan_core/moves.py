from __future__ import annotations

from typing import List, Optional, Sequence

from .board import Board, Coord, as_coord


def straight_reachable(board: Board, a: Coord, b: Coord) -> bool:
    """True when a and b share a row or column and every cell strictly between them is empty."""
    (ar, ac), (br, bc) = a, b
    if ar == br:
        lo, hi = min(ac, bc), max(ac, bc)
        return all(board.is_empty((ar, c)) for c in range(lo + 1, hi))
    if ac == bc:
        lo, hi = min(ar, br), max(ar, br)
        return all(board.is_empty((r, ac)) for r in range(lo + 1, hi))
    return False


def direct_path(board: Board, start: Coord, end: Coord) -> Optional[List[Coord]]:
    if straight_reachable(board, start, end):
        return [start, end]
    return None


def one_turn_path(board: Board, start: Coord, end: Coord) -> Optional[List[Coord]]:
    """L-shaped path; the row-aligned corner is tried before the column-aligned one."""
    for corner in ((start[0], end[1]), (end[0], start[1])):
        if not board.is_empty(corner):
            continue
        if straight_reachable(board, start, corner) and straight_reachable(board, corner, end):
            return [start, corner, end]
    return None


def _three_legs(board: Board, start: Coord, mid1: Coord, mid2: Coord, end: Coord) -> bool:
    if not (board.is_empty(mid1) and board.is_empty(mid2)):
        return False
    return (
        straight_reachable(board, start, mid1)
        and straight_reachable(board, mid1, mid2)
        and straight_reachable(board, mid2, end)
    )


def two_turn_path(board: Board, start: Coord, end: Coord) -> Optional[List[Coord]]:
    """
    Path with two bends. Columns are scanned left to right first (the middle
    leg runs vertically), then rows top to bottom (the middle leg runs
    horizontally). Only in-grid lines are scanned.
    """
    for col in range(board.width):
        if col == start[1] or col == end[1]:
            continue
        mid1 = (start[0], col)
        mid2 = (end[0], col)
        if _three_legs(board, start, mid1, mid2, end):
            return [start, mid1, mid2, end]

    for row in range(board.height):
        if row == start[0] or row == end[0]:
            continue
        mid1 = (row, start[1])
        mid2 = (row, end[1])
        if _three_legs(board, start, mid1, mid2, end):
            return [start, mid1, mid2, end]

    return None


def can_connect(board: Board, start: Coord, end: Coord) -> Optional[List[Coord]]:
    """
    Finds a legal connecting path between two tiles of the same kind.
    Returns the ordered list of path points (endpoints plus turning points), or
    None when the cells are empty, of different kinds, identical, or not
    connectable with at most two turns. Positions may be any two-item
    sequence of ints; anything else counts as a missing tile.
    """
    start = as_coord(start)
    end = as_coord(end)
    if start is None or end is None:
        return None
    start_tile = board.at(*start)
    end_tile = board.at(*end)
    if start_tile is None or end_tile is None:
        return None
    if start_tile.kind != end_tile.kind:
        return None
    if start == end:
        return None

    return (
        direct_path(board, start, end)
        or one_turn_path(board, start, end)
        or two_turn_path(board, start, end)
    )


def count_turns(path: Sequence[Coord]) -> int:
    """Number of right-angle bends in a path made of straight legs."""
    turns = 0
    for a, b, c in zip(path, path[1:], path[2:]):
        horizontal_in = a[0] == b[0]
        horizontal_out = b[0] == c[0]
        if horizontal_in != horizontal_out:
            turns += 1
    return turns
