import pygame
import pytest

from linegame_input import DragInput
from linegame_layout import cell_at, compute_dims


@pytest.fixture
def dims():
    return compute_dims(6)


def center(dims, row, col):
    return (dims.board_x + col * dims.cell + dims.cell // 2,
            dims.board_y + row * dims.cell + dims.cell // 2)


def down(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def move(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(1, 0, 0))


def up(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1)


def test_cell_at_maps_pixels(dims):
    assert cell_at(dims, *center(dims, 2, 4)) == (2, 4)
    assert cell_at(dims, dims.board_x - 1, dims.board_y) is None
    assert cell_at(dims, dims.board_x, dims.board_y + dims.board_h) is None


def test_drag_commits_matching_line(dims, scenario_state):
    drag = DragInput()
    drag.handle(down(center(dims, 0, 0)), dims, scenario_state)
    drag.handle(move(center(dims, 0, 0)), dims, scenario_state)
    drag.handle(move(center(dims, 0, 1)), dims, scenario_state)
    assert scenario_state.selection == [(0, 0), (0, 1)]
    drag.handle(up(center(dims, 0, 1)), dims, scenario_state)
    assert scenario_state.score == 10
    assert not drag.dragging


def test_leaving_board_aborts(dims, scenario_state):
    drag = DragInput()
    drag.handle(down(center(dims, 0, 0)), dims, scenario_state)
    drag.handle(move(center(dims, 0, 1)), dims, scenario_state)
    drag.handle(move((1, 1)), dims, scenario_state)
    assert scenario_state.selection == []
    assert not drag.dragging
    # the release that follows changes nothing
    assert not drag.handle(up(center(dims, 0, 1)), dims, scenario_state)
    assert scenario_state.score == 0


def test_release_outside_board_aborts(dims, scenario_state):
    drag = DragInput()
    drag.handle(down(center(dims, 0, 0)), dims, scenario_state)
    drag.handle(move(center(dims, 0, 1)), dims, scenario_state)
    drag.handle(up((1, 1)), dims, scenario_state)
    assert scenario_state.score == 0
    assert scenario_state.selection == []


def test_window_leave_aborts(dims, scenario_state):
    drag = DragInput()
    drag.handle(down(center(dims, 0, 0)), dims, scenario_state)
    drag.handle(pygame.event.Event(pygame.WINDOWLEAVE), dims, scenario_state)
    assert scenario_state.selection == []


def test_motion_without_press_ignored(dims, scenario_state):
    drag = DragInput()
    assert not drag.handle(move(center(dims, 0, 1)), dims, scenario_state)
    assert scenario_state.selection == []


def test_press_off_board_ignored(dims, scenario_state):
    drag = DragInput()
    assert not drag.handle(down((1, 1)), dims, scenario_state)
    assert not drag.dragging
