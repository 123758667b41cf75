"""Pointer drag controller: mouse events to selection operations"""
import pygame

from linegame_game import (GameState, abort_selection, begin_selection,
                           end_selection, extend_selection)
from linegame_layout import Dims, cell_at


class DragInput:
    def __init__(self):
        self.dragging = False
        self.last_cell = None

    def reset(self):
        self.dragging = False; self.last_cell = None

    def handle(self, e: pygame.event.Event, dims: Dims, state: GameState) -> bool:
        """Feed one event; returns True when the state may have changed."""
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            cell = cell_at(dims, *e.pos)
            if cell is None or state.game_over:
                return False
            self.dragging = True; self.last_cell = cell
            begin_selection(state, *cell)
            return True
        if not self.dragging:
            return False
        if e.type == pygame.MOUSEMOTION:
            cell = cell_at(dims, *e.pos)
            if cell is None:
                # left the board
                self.reset()
                abort_selection(state)
                return True
            if cell != self.last_cell:
                self.last_cell = cell
                extend_selection(state, *cell)
                return True
            return False
        if e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            cell = cell_at(dims, *e.pos)
            self.reset()
            if cell is None:
                abort_selection(state)
            else:
                end_selection(state)
            return True
        if e.type == pygame.WINDOWLEAVE:
            self.reset()
            abort_selection(state)
            return True
        return False
