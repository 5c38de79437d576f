import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from space_dodger.config import DEFAULT_CONFIG
from space_dodger.engine import SimulationEngine
from space_dodger.input_state import InputSnapshot
from space_dodger.render import Renderer

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class DodgerEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    user_guide = (
        "Controls: arrow keys or WASD to move the ship. Several directions can be held at once."
    )

    game_description = (
        "Dodge the falling asteroids. Score grows with survival time; "
        "asteroids spawn more often and fall faster every level."
    )

    auto_advance = True

    MAX_STEPS = 10000
    COLLISION_REWARD = -10.0

    def __init__(self, render_mode="rgb_array", config=DEFAULT_CONFIG):
        super().__init__()
        self.render_mode = render_mode
        self.config = config
        self.WIDTH, self.HEIGHT = int(config.width), int(config.height)
        self.frame_ms = 1000.0 / self.metadata["render_fps"]

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.HEIGHT, self.WIDTH, 3), dtype=np.uint8
        )
        # up, down, left, right: 0 = released, 1 = held
        self.action_space = MultiDiscrete([2, 2, 2, 2])

        self.renderer = Renderer(config)

        # Initialize state variables
        self.engine = None
        self.steps = 0
        self._last_obs = None
        self.reset()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.engine = SimulationEngine(self.config, rng=self.np_random)
        self.engine.start()
        self.steps = 0

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.engine.terminal:
            return self._get_observation(), 0.0, True, False, self._get_info()

        inputs = InputSnapshot(*(bool(a) for a in action))
        score_before = self.engine.state.score
        state = self.engine.tick(inputs, self.frame_ms)
        self.steps += 1

        reward = state.score - score_before
        terminated = state.terminal
        if terminated:
            reward = self.COLLISION_REWARD

        truncated = not terminated and self.steps >= self.MAX_STEPS

        return self._get_observation(), float(reward), terminated, truncated, self._get_info()

    def render(self):
        return self._last_obs

    def _get_observation(self):
        self.renderer.draw(self.engine.state)
        self._last_obs = self.renderer.to_array()
        return self._last_obs

    def _get_info(self):
        state = self.engine.state
        return {
            "score": state.score,
            "level": state.level,
            "steps": self.steps,
            "asteroids": len(state.obstacles),
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (4,)
        assert self.action_space.nvec.tolist() == [2, 2, 2, 2]

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(reward, float)
        assert isinstance(term, bool)
        assert trunc is False
        assert isinstance(info, dict)
