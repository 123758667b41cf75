"""
Game session: one explicit state record and the transitions a caller drives.

Each transition mutates the GameState in place and returns it, so a
presentation layer can simply redraw from the result. Invalid gestures
(out-of-grid positions, broken lines, anything while the game is over)
are ignored rather than raised.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from linegame_config import (CONFIG, GRID_SIZE, SCORE_TABLE,
                             MIN_LINE_LENGTH, MAX_LINE_LENGTH)
from linegame_board import generate_grid, apply_gravity, has_run_with_sum, has_viable_line
from linegame_rng import TileRandom
from linegame_selection import Selection, can_extend, in_bounds, mark
from linegame_tile import Grid

logger = logging.getLogger("linegame.game")


@dataclass
class GameState:
    rng: TileRandom
    size: int = GRID_SIZE
    grid: Grid = field(default_factory=list)
    target_sum: int = 0
    selection: Selection = field(default_factory=list)
    current_sum: int = 0
    score: int = 0
    game_over: bool = False

    def snapshot(self) -> dict:
        """Plain-data view of everything a renderer needs."""
        return {
            "values": [[t.value for t in row] for row in self.grid],
            "selected": [[t.selected for t in row] for row in self.grid],
            "ids": [[t.id for t in row] for row in self.grid],
            "target_sum": self.target_sum,
            "current_sum": self.current_sum,
            "score": self.score,
            "game_over": self.game_over,
            "selection": list(self.selection),
        }


def new_game(state: Optional[GameState] = None, seed: Optional[int] = None,
             size: int = GRID_SIZE) -> GameState:
    """Start a fresh game, reusing state's random source when given one."""
    if state is None:
        state = GameState(TileRandom(seed if seed is not None else CONFIG["SEED"]), size)
    state.grid = generate_grid(state.rng, state.size)
    state.target_sum = state.rng.target_sum()
    state.selection = []
    state.current_sum = 0
    state.score = 0
    state.game_over = False
    logger.info("New %dx%d game, target %d", state.size, state.size, state.target_sum)
    return state


def begin_selection(state: GameState, row: int, col: int) -> GameState:
    if state.game_over or not in_bounds(state.grid, (row, col)):
        return state
    if state.selection:
        mark(state.grid, state.selection, False)
    tile = state.grid[row][col]
    tile.selected = True
    state.selection = [(row, col)]
    state.current_sum = tile.value
    return state


def extend_selection(state: GameState, row: int, col: int) -> GameState:
    pos = (row, col)
    if state.game_over or not in_bounds(state.grid, pos):
        return state
    if not can_extend(state.selection, pos):
        logger.debug("Rejected %s after %s", pos, state.selection)
        return state
    tile = state.grid[row][col]
    tile.selected = True
    state.selection.append(pos)
    state.current_sum += tile.value
    return state


def abort_selection(state: GameState) -> GameState:
    if state.selection:
        logger.debug("Selection %s dropped", state.selection)
    mark(state.grid, state.selection, False)
    state.selection = []
    state.current_sum = 0
    return state


def is_valid_line(state: GameState) -> bool:
    return (MIN_LINE_LENGTH <= len(state.selection) <= MAX_LINE_LENGTH
            and state.current_sum == state.target_sum)


def end_selection(state: GameState) -> GameState:
    if state.game_over or not state.selection:
        return state
    if not is_valid_line(state):
        logger.debug("No match: sum %d, target %d, length %d",
                     state.current_sum, state.target_sum, len(state.selection))
        return abort_selection(state)
    return _commit(state)


def _commit(state: GameState) -> GameState:
    length = len(state.selection)
    points = SCORE_TABLE.get(length, 0)
    state.score += points
    logger.info("Line of %d summing to %d: +%d (score %d)",
                length, state.current_sum, points, state.score)

    apply_gravity(state.grid, state.selection, state.rng)
    state.selection = []
    state.current_sum = 0
    state.target_sum = state.rng.target_sum()

    if CONFIG["STRICT_GAME_OVER"]:
        viable = has_run_with_sum(state.grid, state.target_sum, state.target_sum)
    else:
        viable = has_viable_line(state.grid)
    if not viable:
        state.game_over = True
        logger.info("Game over, final score %d", state.score)
    return state
