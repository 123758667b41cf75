"""Board helpers: generate, refill, gravity, run scan"""
from typing import Iterable, Iterator, List, Sequence, Set

from linegame_config import (GRID_SIZE, MIN_NUMBER, MAX_NUMBER,
                             MIN_LINE_LENGTH, MAX_LINE_LENGTH)
from linegame_rng import TileRandom
from linegame_tile import Grid, Pos, Tile


def generate_grid(rng: TileRandom, size: int = GRID_SIZE) -> Grid:
    """Fill a size x size grid with fresh tiles."""
    if size < 1:
        raise ValueError(f"grid size must be positive, got {size}")
    return [[Tile.spawn(rng) for _ in range(size)] for _ in range(size)]


def refill_column(column: List[Tile], size: int, rng: TileRandom) -> List[Tile]:
    """Pad a bottom-to-top column of survivors with new tiles up to size.

    Survivors keep their order at the bottom; spawned tiles land on top.
    A full column comes back unchanged.
    """
    out = list(column)
    while len(out) < size:
        out.append(Tile.spawn(rng))
    return out


def apply_gravity(grid: Grid, removed: Iterable[Pos], rng: TileRandom) -> Set[int]:
    """Drop the tiles at removed positions and refill every column in place.

    Returns the indices of columns that lost at least one tile.
    """
    size = len(grid)
    gone = set(removed)
    for col in range(size):
        survivors = [grid[row][col] for row in range(size - 1, -1, -1) if (row, col) not in gone]
        column = refill_column(survivors, size, rng)
        for i, tile in enumerate(column):
            grid[size - 1 - i][col] = tile
    return {col for _, col in gone}


def _run_sums(line: Sequence[Tile], min_len: int, max_len: int) -> Iterator[int]:
    n = len(line)
    for start in range(n - min_len + 1):
        for length in range(min_len, min(max_len, n - start) + 1):
            yield sum(t.value for t in line[start:start + length])


def has_run_with_sum(grid: Grid, lo: int, hi: int,
                     min_len: int = MIN_LINE_LENGTH, max_len: int = MAX_LINE_LENGTH) -> bool:
    """True if any straight contiguous run of allowed length sums into [lo, hi]."""
    for line in list(grid) + [list(c) for c in zip(*grid)]:
        for s in _run_sums(line, min_len, max_len):
            if lo <= s <= hi:
                return True
    return False


def has_viable_line(grid: Grid) -> bool:
    # Checks the global achievable range, not the live target.
    return has_run_with_sum(grid, MIN_LINE_LENGTH * MIN_NUMBER, MAX_LINE_LENGTH * MAX_NUMBER)
