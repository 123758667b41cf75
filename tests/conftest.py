import pytest

from linegame_game import GameState
from linegame_rng import TileRandom
from linegame_tile import Tile


class FixedRandom(TileRandom):
    """Random source that spawns a fixed value and a fixed target."""

    def __init__(self, value=1, target=2):
        super().__init__(0)
        self.fixed_value = value
        self.fixed_target = target

    def value(self):
        return self.fixed_value

    def target_sum(self):
        return self.fixed_target


def make_grid(values):
    return [[Tile(v) for v in row] for row in values]


@pytest.fixture
def grid_from():
    return make_grid


@pytest.fixture
def scenario_state():
    """6x6 game whose top row is 1 1 2 1 1 1 over rows of 3s."""
    values = [[1, 1, 2, 1, 1, 1]] + [[3] * 6 for _ in range(5)]
    state = GameState(TileRandom(1234), 6)
    state.grid = make_grid(values)
    state.target_sum = 2
    return state
