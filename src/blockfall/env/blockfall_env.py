from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from blockfall.game import Command, GameConfig, GamePhase, GameSession
from blockfall.visualization.palette import PALETTE


# Discrete action index -> session command; None lets gravity act alone.
ACTIONS: Tuple[Optional[Command], ...] = (
    Command.MOVE_LEFT,
    Command.MOVE_RIGHT,
    Command.ROTATE,
    Command.SOFT_DROP,
    None,
)


class BlockfallEnv(gym.Env):
    """One agent step is one input command followed by one frame of gravity.

    ``frame_ms`` is the simulated time per step, so with the default the
    piece is pulled down one row every 17 steps.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(self, render_mode: Optional[str] = None, frame_ms: float = 60.0,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"unsupported render_mode {render_mode!r}")
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)
        self.max_episode_steps = int(max_episode_steps)
        self.session = GameSession(GameConfig(auto_start=True))

        rows, columns = self.session.board.rows, self.session.board.columns
        self.observation_space = spaces.Box(low=0, high=len(PALETTE) - 1, shape=(rows, columns), dtype=np.int8)
        self.action_space = spaces.Discrete(len(ACTIONS))
        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.session.snapshot()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.session.score,
            "phase": self.session.phase.value,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            config = GameConfig(random_seed=seed, auto_start=True)
        else:
            config = GameConfig(random_seed=int(self.np_random.integers(2**31)), auto_start=True)
        self.session = GameSession(config)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        command = ACTIONS[int(action)]
        score_before = self.session.score

        if command is not None:
            self.session.handle(command)
        self.session.tick(self.frame_ms)

        self._steps += 1
        reward = float(self.session.score - score_before)
        terminated = self.session.phase is GamePhase.GAME_OVER
        truncated = self._steps >= self.max_episode_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self._get_obs()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = PALETTE[int(grid[y, x])]
        return img

    def close(self) -> None:
        pass
