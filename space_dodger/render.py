"""pygame drawing of session snapshots, plus the on-screen direction pad."""

import math

import numpy as np
import pygame
import pygame.gfxdraw

from space_dodger.config import DEFAULT_CONFIG
from space_dodger.input_state import Direction, NO_INPUT


# Star outline of the ship, as fractions of its bounding box
SHIP_OUTLINE = [
    (0.50, 0.00), (0.65, 0.20), (0.85, 0.20), (0.75, 0.40), (0.90, 0.60),
    (0.50, 0.80), (0.10, 0.60), (0.25, 0.40), (0.15, 0.20), (0.35, 0.20),
]


class Renderer:
    # --- Colors ---
    COLOR_BG = (17, 17, 17)
    COLOR_STAR = (255, 255, 255)
    COLOR_SHIP = (94, 174, 255)
    COLOR_ASTEROID = (136, 136, 136)
    COLOR_ASTEROID_SHADE = (80, 80, 80)
    COLOR_TEXT = (255, 255, 255)
    COLOR_PANEL = (0, 0, 0, 205)

    NUM_STARS = 100

    def __init__(self, config=DEFAULT_CONFIG, seed=None):
        self.config = config
        self.width, self.height = int(config.width), int(config.height)

        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.width, self.height))
        self.font_ui = pygame.font.Font(None, 28)
        self.font_large = pygame.font.Font(None, 56)
        self.font_small = pygame.font.Font(None, 22)

        self.stars = self._init_stars(np.random.default_rng(seed))

    def _init_stars(self, rng):
        stars = []
        for _ in range(self.NUM_STARS):
            stars.append({
                "pos": (int(rng.uniform(0, self.width)), int(rng.uniform(0, self.height))),
                "size": int(rng.integers(1, 4)),
                "brightness": rng.uniform(0.2, 1.0),
            })
        return stars

    def draw(self, state, surface=None):
        surface = surface if surface is not None else self.screen
        surface.fill(self.COLOR_BG, pygame.Rect(0, 0, self.width, self.height))
        self._render_stars(surface)
        self._render_asteroids(surface, state.obstacles)
        self._render_ship(surface, state.ship)
        self._render_ui(surface, state)
        if state.terminal:
            self._render_game_over(surface, state.score)
        return surface

    def to_array(self, surface=None):
        surface = surface if surface is not None else self.screen
        arr = pygame.surfarray.array3d(surface)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _render_stars(self, surface):
        for star in self.stars:
            color = tuple(int(c * star["brightness"]) for c in self.COLOR_STAR)
            pygame.draw.rect(surface, color, (*star["pos"], star["size"], star["size"]))

    def _render_asteroids(self, surface, obstacles):
        for obstacle in obstacles:
            x, y = int(obstacle.position.x), int(obstacle.position.y)
            r = max(1, int(obstacle.size / 2))
            pygame.gfxdraw.filled_circle(surface, x, y, r, self.COLOR_ASTEROID)
            pygame.gfxdraw.aacircle(surface, x, y, r, self.COLOR_ASTEROID_SHADE)
            # Crater
            pygame.gfxdraw.filled_circle(surface, x + r // 3, y - r // 3, max(1, r // 4), self.COLOR_ASTEROID_SHADE)

    def _render_ship(self, surface, ship):
        size = self.config.ship_size
        left, top = ship.x - size / 2, ship.y - size / 2
        points = [(int(left + fx * size), int(top + fy * size)) for fx, fy in SHIP_OUTLINE]

        glow_r = int(size * 0.8)
        glow = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        pygame.draw.circle(glow, (*self.COLOR_SHIP, 60), (glow_r, glow_r), glow_r)
        surface.blit(glow, (int(ship.x) - glow_r, int(ship.y) - glow_r))

        pygame.gfxdraw.filled_polygon(surface, points, self.COLOR_SHIP)
        pygame.gfxdraw.aapolygon(surface, points, self.COLOR_SHIP)

    def _render_ui(self, surface, state):
        score_text = self.font_ui.render(f"Score: {int(math.floor(state.score))}", True, self.COLOR_TEXT)
        surface.blit(score_text, (20, 20))
        level_text = self.font_ui.render(f"Level: {state.level}", True, self.COLOR_TEXT)
        surface.blit(level_text, (20, 20 + score_text.get_height() + 4))

        if not state.terminal and state.score == 0:
            hint = self.font_small.render("Use arrow keys or WASD to move. Dodge the asteroids!", True, self.COLOR_TEXT)
            surface.blit(hint, (20, self.height - 20 - hint.get_height()))

    def _render_game_over(self, surface, score):
        panel = pygame.Rect(0, 0, 300, 170)
        panel.center = (self.width // 2, self.height // 2)
        overlay = pygame.Surface(panel.size, pygame.SRCALPHA)
        pygame.draw.rect(overlay, self.COLOR_PANEL, overlay.get_rect(), border_radius=8)
        surface.blit(overlay, panel.topleft)

        lines = [
            (self.font_large, "Game Over", self.COLOR_TEXT),
            (self.font_ui, f"Your score: {int(math.floor(score))}", self.COLOR_TEXT),
            (self.font_small, "Play Again: press R or click", self.COLOR_SHIP),
        ]
        y = panel.top + 25
        for font, text, color in lines:
            rendered = font.render(text, True, color)
            surface.blit(rendered, rendered.get_rect(midtop=(panel.centerx, y)))
            y += rendered.get_height() + 18


class ControlPad:
    """Up/Left/Right/Down buttons laid out as a cross in a strip below the arena."""

    BUTTON_SIZE = (80, 40)
    MARGIN = 5
    HEIGHT = 3 * (40 + 2 * 5) + 10

    COLOR_BG = (34, 34, 40)
    COLOR_BUTTON = (70, 70, 80)
    COLOR_BUTTON_HELD = (94, 174, 255)
    COLOR_TEXT = (240, 240, 240)

    LABELS = {
        Direction.UP: "Up",
        Direction.LEFT: "Left",
        Direction.RIGHT: "Right",
        Direction.DOWN: "Down",
    }

    def __init__(self, top, width):
        self.top = top
        self.width = width
        pygame.font.init()
        self.font = pygame.font.Font(None, 24)
        self.buttons = self._layout()
        self.pressed = {}  # pointer ("mouse" or ("finger", id)) -> button it holds

    def _layout(self):
        bw, bh = self.BUTTON_SIZE
        m = self.MARGIN
        cx = self.width // 2
        row = bh + 2 * m
        y0 = self.top + 5 + m
        return {
            Direction.UP: pygame.Rect(cx - bw // 2, y0, bw, bh),
            Direction.LEFT: pygame.Rect(cx - bw - m, y0 + row, bw, bh),
            Direction.RIGHT: pygame.Rect(cx + m, y0 + row, bw, bh),
            Direction.DOWN: pygame.Rect(cx - bw // 2, y0 + 2 * row, bw, bh),
        }

    def direction_at(self, pos):
        for direction, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return direction
        return None

    def draw(self, surface, inputs=NO_INPUT):
        surface.fill(self.COLOR_BG, pygame.Rect(0, self.top, self.width, self.HEIGHT))
        for direction, rect in self.buttons.items():
            held = getattr(inputs, direction.value)
            color = self.COLOR_BUTTON_HELD if held else self.COLOR_BUTTON
            pygame.draw.rect(surface, color, rect, border_radius=4)
            label = self.font.render(self.LABELS[direction], True, self.COLOR_TEXT)
            surface.blit(label, label.get_rect(center=rect.center))
