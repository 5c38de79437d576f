"""Per-frame simulation: ship movement, asteroid spawning, culling, collisions and scoring.

The session is an immutable ``SessionState`` snapshot. ``advance`` is a pure
transition ``(state, inputs, delta_ms) -> state'``; ``SimulationEngine`` only
holds the current snapshot and the random source between calls.

The random source must provide ``random()`` and ``uniform(low, high)``
(``numpy.random.Generator`` and ``random.Random`` both do). A spawning tick
draws, in order: the spawn decision, size, fall speed, x position, drift.
"""

from collections import namedtuple
import logging
import math

import numpy as np

from space_dodger.config import DEFAULT_CONFIG
from space_dodger.input_state import NO_INPUT

logger = logging.getLogger(__name__)


Vector2 = namedtuple("Vector2", ["x", "y"])
Obstacle = namedtuple("Obstacle", ["id", "position", "velocity", "size"])
SessionState = namedtuple("SessionState", ["ship", "obstacles", "score", "level", "terminal", "spawned"])


def initial_state(config=DEFAULT_CONFIG):
    return SessionState(
        ship=Vector2(*config.spawn_point),
        obstacles=(),
        score=0.0,
        level=1,
        terminal=False,
        spawned=0,
    )


def level_for_score(score, config=DEFAULT_CONFIG):
    return int(math.floor(score / config.points_per_level)) + 1


def spawn_chance(level, config=DEFAULT_CONFIG):
    return config.spawn_base_chance + level * config.spawn_level_chance


def move_ship(ship, inputs, config=DEFAULT_CONFIG):
    (min_x, max_x), (min_y, max_y) = config.ship_bounds
    step = config.move_speed
    x, y = ship

    # Each held direction is applied and clamped on its own; the browser
    # version let right override left (and down override up) instead
    if inputs.left:
        x = max(min_x, x - step)
    if inputs.right:
        x = min(max_x, x + step)
    if inputs.up:
        y = max(min_y, y - step)
    if inputs.down:
        y = min(max_y, y + step)

    return Vector2(x, y)


def create_obstacle(rng, level, obstacle_id, config=DEFAULT_CONFIG):
    size = rng.uniform(config.asteroid_min_size, config.asteroid_max_size)
    speed = rng.uniform(config.asteroid_speed_min, config.asteroid_speed_max)
    x = rng.uniform(0, config.width)
    drift = rng.uniform(-config.asteroid_drift, config.asteroid_drift)

    return Obstacle(
        id=obstacle_id,
        position=Vector2(x, -size),
        velocity=Vector2(drift, speed + level * config.level_speed_bonus),
        size=size,
    )


def advance_obstacles(obstacles, config=DEFAULT_CONFIG):
    moved = (
        o._replace(position=Vector2(o.position.x + o.velocity.x, o.position.y + o.velocity.y))
        for o in obstacles
    )
    return tuple(o for o in moved if o.position.y <= config.height + o.size)


def collides(ship, obstacle, config=DEFAULT_CONFIG):
    distance = math.hypot(ship.x - obstacle.position.x, ship.y - obstacle.position.y)
    return distance < config.ship_radius + obstacle.size / 2


def advance(state, inputs, delta_ms, rng, config=DEFAULT_CONFIG):
    """Advance ``state`` by one frame and return the new snapshot.

    Terminal states are returned unchanged. Movement and the spawn roll are
    per call; only the score depends on ``delta_ms``. Negative deltas count
    as zero.
    """
    if state.terminal:
        return state

    ship = move_ship(state.ship, inputs, config)

    obstacles = state.obstacles
    spawned = state.spawned
    if rng.random() < spawn_chance(state.level, config):
        spawned += 1
        obstacle = create_obstacle(rng, state.level, f"asteroid-{spawned}", config)
        logger.debug(
            "spawned %s size=%.1f velocity=(%.2f, %.2f)",
            obstacle.id, obstacle.size, obstacle.velocity.x, obstacle.velocity.y,
        )
        obstacles = obstacles + (obstacle,)

    obstacles = advance_obstacles(obstacles, config)

    terminal = any(collides(ship, o, config) for o in obstacles)

    # Scoring runs on the colliding tick as well
    score = state.score + max(0.0, delta_ms) * config.score_rate

    return SessionState(
        ship=ship,
        obstacles=obstacles,
        score=score,
        level=level_for_score(score, config),
        terminal=terminal,
        spawned=spawned,
    )


class SimulationEngine:
    def __init__(self, config=DEFAULT_CONFIG, rng=None, seed=None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._state = initial_state(config)

    @property
    def state(self):
        return self._state

    @property
    def terminal(self):
        return self._state.terminal

    def start(self):
        self._state = initial_state(self.config)
        logger.info("session started at (%.0f, %.0f)", *self._state.ship)
        return self._state

    def tick(self, inputs=NO_INPUT, delta_ms=0.0):
        was_terminal = self._state.terminal
        self._state = advance(self._state, inputs, delta_ms, self.rng, self.config)
        if self._state.terminal and not was_terminal:
            logger.info(
                "game over: score=%d level=%d asteroids spawned=%d",
                int(self._state.score), self._state.level, self._state.spawned,
            )
        return self._state
