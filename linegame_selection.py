"""Straight-line selection rules"""
from typing import List

from linegame_config import MAX_LINE_LENGTH
from linegame_tile import Grid, Pos

Selection = List[Pos]


def in_bounds(grid: Grid, pos: Pos) -> bool:
    r, c = pos
    return 0 <= r < len(grid) and 0 <= c < len(grid[r])


def is_adjacent(a: Pos, b: Pos) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def keeps_straight(selection: Selection, pos: Pos) -> bool:
    """The whole selection plus pos must share one row or one column."""
    row, col = pos
    return all(r == row for r, _ in selection) or all(c == col for _, c in selection)


def can_extend(selection: Selection, pos: Pos, max_len: int = MAX_LINE_LENGTH) -> bool:
    """Admission test for adding pos to an active selection."""
    if not selection:
        return False
    if not is_adjacent(selection[-1], pos):
        return False
    if not keeps_straight(selection, pos):
        return False
    if pos in selection:
        return False
    return len(selection) < max_len


def mark(grid: Grid, selection: Selection, flag: bool = True):
    for r, c in selection:
        grid[r][c].selected = flag
