import numpy as np
import pygame
import pytest

from space_dodger.config import DEFAULT_CONFIG
from space_dodger.engine import Obstacle, Vector2, initial_state
from space_dodger.input_state import Direction, InputSnapshot
from space_dodger.render import ControlPad, Renderer


@pytest.fixture()
def renderer() -> Renderer:
    return Renderer(DEFAULT_CONFIG, seed=0)


def test_draw_produces_arena_sized_rgb_array(renderer: Renderer) -> None:
    surface = renderer.draw(initial_state())
    assert surface.get_size() == (800, 600)

    frame = renderer.to_array()
    assert frame.shape == (600, 800, 3)
    assert frame.dtype == np.uint8


def test_asteroids_and_ship_are_drawn(renderer: Renderer) -> None:
    empty = renderer.to_array(renderer.draw(initial_state()))
    rock = Obstacle("rock", Vector2(200, 300), Vector2(0, 2), 50.0)
    with_rock = renderer.to_array(renderer.draw(initial_state()._replace(obstacles=(rock,))))

    assert tuple(with_rock[300, 200]) == Renderer.COLOR_ASTEROID
    assert not np.array_equal(empty, with_rock)
    # ship body at its centre
    assert tuple(empty[500, 400]) == Renderer.COLOR_SHIP


def test_game_over_panel_changes_the_frame(renderer: Renderer) -> None:
    state = initial_state()._replace(score=123.4)
    playing = renderer.to_array(renderer.draw(state))
    over = renderer.to_array(renderer.draw(state._replace(terminal=True)))
    assert not np.array_equal(playing, over)


def test_starfield_is_seeded() -> None:
    assert Renderer(seed=3).stars == Renderer(seed=3).stars


def test_draw_onto_a_larger_surface(renderer: Renderer) -> None:
    window = pygame.Surface((800, 600 + ControlPad.HEIGHT))
    assert renderer.draw(initial_state(), window) is window


def test_control_pad_hit_testing() -> None:
    pad = ControlPad(top=600, width=800)
    for direction, rect in pad.buttons.items():
        assert pad.direction_at(rect.center) is direction
        assert rect.top >= 600
        assert rect.bottom <= 600 + ControlPad.HEIGHT
    assert pad.direction_at((10, 10)) is None
    assert pad.direction_at((400, 600 + ControlPad.HEIGHT - 1)) is None


def test_control_pad_highlights_held_buttons() -> None:
    pad = ControlPad(top=0, width=400)
    surface = pygame.Surface((400, ControlPad.HEIGHT))
    pad.draw(surface, InputSnapshot(up=True, down=False, left=False, right=False))

    up = pad.buttons[Direction.UP]
    down = pad.buttons[Direction.DOWN]
    corner = (up.left + 6, up.top + 6)
    assert tuple(surface.get_at(corner))[:3] == ControlPad.COLOR_BUTTON_HELD
    assert tuple(surface.get_at((down.left + 6, down.top + 6)))[:3] == ControlPad.COLOR_BUTTON
