from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from blockfall.game import Action, BlockfallGame, GameConfig, Tetromino


class BlockfallEnv(gym.Env):
    """One action followed by one gravity tick per step.

    Observation is the board with the falling piece drawn in, cell values
    0 (empty) to 7 (Tetromino kinds). Reward is the number of rows cleared.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.game = BlockfallGame(config)
        self.render_mode = render_mode

        size = self.game.size
        self.observation_space = spaces.Box(
            low=0, high=int(max(Tetromino)), shape=(size.height, size.width), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

        self._last_obs: Optional[np.ndarray] = None

    def _get_info(self) -> Dict[str, Any]:
        active = self.game.match.active
        return {
            "lines_cleared_total": self.game.lines_cleared_total,
            "game_over": self.game.game_over,
            "piece": None if active is None else active.piece.kind.name,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        # First tick spawns the opening piece.
        self.game.tick()
        obs = self.game.get_state()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int):
        self.game.step(Action(int(action)))
        cleared = self.game.tick()

        obs = self.game.get_state()
        self._last_obs = obs
        terminated = bool(self.game.game_over)
        truncated = False
        info = self._get_info()
        info["lines_cleared"] = cleared
        return obs, float(cleared), terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            from blockfall.visualization.palette import color_for_value

            state = self._last_obs if self._last_obs is not None else self.game.get_state()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(state[y, x]))
            return img
        return None

    def close(self) -> None:
        pass
