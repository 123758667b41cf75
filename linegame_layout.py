# linegame_layout.py
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from linegame_config import CONFIG, GRID_SIZE


@dataclass
class Dims:
    cell: int
    margin: int
    header_h: int
    footer_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    size: int

    @property
    def board_rect(self) -> pygame.Rect:
        return pygame.Rect(self.board_x, self.board_y, self.board_w, self.board_h)

    @property
    def new_game_rect(self) -> pygame.Rect:
        w, h = 140, 36
        return pygame.Rect((self.total_w - w) // 2, self.board_y + self.board_h + (self.footer_h - h) // 2, w, h)

    @property
    def play_again_rect(self) -> pygame.Rect:
        w, h = 160, 40
        return pygame.Rect(self.board_x + (self.board_w - w) // 2, self.board_y + self.board_h // 2 + 30, w, h)


def compute_dims(size: int = GRID_SIZE) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    header_h = 96
    footer_h = 64

    board_w = board_h = size * cell

    total_w = margin + board_w + margin
    total_h = header_h + board_h + footer_h

    return Dims(
        cell=cell, margin=margin, header_h=header_h, footer_h=footer_h,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=margin, board_y=header_h, size=size,
    )


def cell_at(dims: Dims, x: int, y: int) -> Optional[Tuple[int, int]]:
    """Map a pixel to (row, col), or None outside the board."""
    if not dims.board_rect.collidepoint(x, y):
        return None
    col = (x - dims.board_x) // dims.cell
    row = (y - dims.board_y) // dims.cell
    return row, col


def cell_rect(dims: Dims, row: int, col: int) -> pygame.Rect:
    return pygame.Rect(dims.board_x + col * dims.cell, dims.board_y + row * dims.cell, dims.cell, dims.cell)
