"""Tile model and grid aliases"""
import uuid
from dataclasses import dataclass, field
from typing import List, Tuple

from linegame_rng import TileRandom

Pos = Tuple[int, int]  # (row, col), row 0 at the top


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Tile:
    value: int
    id: str = field(default_factory=_new_id)
    selected: bool = False

    @staticmethod
    def spawn(rng: TileRandom) -> "Tile":
        return Tile(rng.value())


Grid = List[List[Tile]]
