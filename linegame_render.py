"""
Rendering helpers for the line game.

- Pre-render tile sprites per (value, selected) and blit them.
- Pre-render the static background (header, board frame, grid lines).
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from linegame_layout import Dims, cell_rect
from linegame_tile import Grid

# Tile colors per value
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (102,224,255),
    2: (94,224,142),
    3: (255,224,102),
    4: (255,158,94),
}
SELECTED_COL = (255,255,255)
TEXT_COL = (200,210,240)

@dataclass
class HudCache:
    target: int = -1
    current: int = -1
    score: int = -1
    title: Optional[pygame.Surface] = None
    target_s: Optional[pygame.Surface] = None
    current_s: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_tiles()
        self.hud = HudCache()

    # ---------- Static background (header + grid) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (21,25,53), d.board_rect)
        grid_col = (40,50,90)
        for i in range(d.size+1):
            X = d.board_x + i*d.cell
            Y = d.board_y + i*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))

    # ---------- Tile sprites (plain + selected) ----------
    def _make_tiles(self):
        self.tile_surf: Dict[Tuple[int,bool], pygame.Surface] = {}
        c = self.dims.cell
        for v, col in COLORS.items():
            for sel in (False, True):
                s = pygame.Surface((c-4, c-4))
                s.fill(SELECTED_COL if sel else col)
                if sel:
                    pygame.draw.rect(s, col, (0,0,c-4,c-4), 4)
                label = self.big_font.render(str(v), True, (20,24,48))
                s.blit(label, label.get_rect(center=((c-4)//2, (c-4)//2)))
                self.tile_surf[(v, sel)] = s

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    def draw_grid(self, screen: pygame.Surface, grid: Grid):
        for r, row in enumerate(grid):
            for c, tile in enumerate(row):
                surf = self.tile_surf.get((tile.value, tile.selected))
                if surf is None: continue
                screen.blit(surf, cell_rect(self.dims, r, c).inflate(-4, -4).topleft)

    # ---------- HUD ----------
    def draw_hud(self, screen: pygame.Surface, target: int, current: int, score: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = self.big_font.render("Line Game", True, (197,202,233))
        if target != self.hud.target:
            self.hud.target = target
            self.hud.target_s = f.render(f"Target: {target}", True, TEXT_COL)
        if current != self.hud.current:
            self.hud.current = current
            self.hud.current_s = f.render(f"Current: {current}", True, TEXT_COL)
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT_COL)
        screen.blit(self.hud.title, (d.margin, 12))
        y = 56
        screen.blit(self.hud.target_s, (d.margin, y))
        screen.blit(self.hud.current_s, (d.margin + d.board_w // 3, y))
        screen.blit(self.hud.score_s, (d.margin + 2 * d.board_w // 3, y))

    def draw_button(self, screen: pygame.Surface, rect: pygame.Rect, text: str):
        pygame.draw.rect(screen, (50,60,100), rect, border_radius=6)
        pygame.draw.rect(screen, (90,100,150), rect, 1, border_radius=6)
        label = self.font.render(text, True, (230,240,255))
        screen.blit(label, label.get_rect(center=rect.center))

    def draw_game_over(self, screen: pygame.Surface, score: int):
        d = self.dims
        s = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        s.fill((20,25,40,220))
        screen.blit(s, (d.board_x, d.board_y))
        cx = d.board_x + d.board_w // 2
        msg = self.big_font.render("Game Over!", True, (255,220,220))
        screen.blit(msg, msg.get_rect(center=(cx, d.board_y + d.board_h // 2 - 40)))
        fs = self.font.render(f"Final Score: {score}", True, TEXT_COL)
        screen.blit(fs, fs.get_rect(center=(cx, d.board_y + d.board_h // 2)))
        self.draw_button(screen, d.play_again_rect, "Play Again")
