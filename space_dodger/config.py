"""Game constants, bundled so the engine can be built with alternative values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    # --- Arena ---
    width: float = 800
    height: float = 600

    # --- Ship ---
    ship_size: float = 30
    ship_spawn_offset: float = 100  # distance of the spawn point from the bottom edge
    move_speed: float = 5  # pixels per tick, independent of elapsed time

    # --- Asteroids ---
    asteroid_min_size: float = 20
    asteroid_max_size: float = 60
    asteroid_speed_min: float = 1
    asteroid_speed_max: float = 4
    asteroid_drift: float = 1
    level_speed_bonus: float = 0.2

    # --- Difficulty / scoring ---
    spawn_base_chance: float = 0.02
    spawn_level_chance: float = 0.005
    score_rate: float = 0.01  # points per elapsed millisecond
    points_per_level: float = 1000

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"arena must have a positive size, got {self.width}x{self.height}")
        if self.ship_size <= 0:
            raise ValueError(f"ship_size must be positive, got {self.ship_size}")
        if self.ship_size > self.width or self.ship_size > self.height:
            raise ValueError("ship does not fit inside the arena")
        if not 0 < self.asteroid_min_size <= self.asteroid_max_size:
            raise ValueError(
                f"invalid asteroid size range [{self.asteroid_min_size}, {self.asteroid_max_size}]"
            )
        if self.asteroid_speed_min > self.asteroid_speed_max:
            raise ValueError(
                f"invalid asteroid speed range [{self.asteroid_speed_min}, {self.asteroid_speed_max}]"
            )
        if not self.ship_radius <= self.height - self.ship_spawn_offset <= self.height - self.ship_radius:
            raise ValueError(f"ship_spawn_offset {self.ship_spawn_offset} puts the ship outside the arena")
        if self.points_per_level <= 0:
            raise ValueError(f"points_per_level must be positive, got {self.points_per_level}")

    @property
    def ship_radius(self):
        return self.ship_size / 2

    @property
    def spawn_point(self):
        return (self.width / 2, self.height - self.ship_spawn_offset)

    @property
    def ship_bounds(self):
        """``((min_x, max_x), (min_y, max_y))`` for the ship centre."""
        r = self.ship_radius
        return (r, self.width - r), (r, self.height - r)


DEFAULT_CONFIG = GameConfig()
