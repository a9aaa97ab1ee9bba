"""
Gymnasium environment wrapper for Minesweeper.

Each episode is one Engine game. Actions reveal a single cell and the
observation is the engine's visible board, so agents never see mines
before they are revealed.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import MINE_OBSERVATION, QUESTIONED_OBSERVATION
from .engine import Engine, GameOutcome
from .errors import InvalidArgumentError, InvalidStateError
from .grid import Grid
from .levels import BoardConfig


# Largest seed drawn from the env's generator for the grid's random source
_MAX_GRID_SEED = 2**31 - 1

SAFE_REWARD = 1.0
WIN_REWARD = 10.0
MINE_REWARD = -10.0
INVALID_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment driving an Engine.

    Observation:
        int8 array of shape (height, width), indexed [y, x], holding
        CellView.to_observation() codes: -1 hidden, -2 flagged,
        -3 questioned, 0-8 revealed count, 9 revealed mine. Agents only
        reveal, so -2 and -3 appear only if the engine is driven
        directly.

    Actions:
        Discrete(width * height). Action a reveals (a % width, a // width).

    Rewards:
        SAFE_REWARD for a reveal that keeps the game going, WIN_REWARD
        and MINE_REWARD on the terminal reveal, INVALID_REWARD when the
        engine refuses the reveal with InvalidStateError (cell already
        open).
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Args:
            config: Board shape and mine count; defaults to BoardConfig().
            render_mode: "ansi" returns Engine.render() text, "human"
                prints it after every step.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.engine = self._new_engine(None)

        self.observation_space = spaces.Box(
            low=QUESTIONED_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def _new_engine(self, seed: Optional[int]) -> Engine:
        grid = Grid(
            self.config.width,
            self.config.height,
            self.config.num_mines,
            rng=random.Random(seed),
        )
        return Engine(grid)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined grid.

        The grid's random.Random is seeded from np_random, so the same
        seed always produces the same mine layout.
        """
        super().reset(seed=seed)
        grid_seed = int(self.np_random.integers(0, _MAX_GRID_SEED))
        self.engine = self._new_engine(grid_seed)
        self._steps = 0

        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell for action; terminated once the engine reports
        an outcome. Episodes are never truncated.
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)

        observation = self.engine.get_observation()
        terminated = not self.engine.is_in_progress()

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        return int(action) % self.config.width, int(action) // self.config.width

    def _calculate_reward(self, x: int, y: int) -> float:
        try:
            self.engine.reveal(x, y)
        except InvalidStateError:
            return INVALID_REWARD

        outcome = self.engine.outcome()
        if outcome == GameOutcome.WON:
            return WIN_REWARD
        if outcome == GameOutcome.LOST:
            return MINE_REWARD
        return SAFE_REWARD

    def _get_info(self) -> Dict[str, Any]:
        outcome = self.engine.outcome()
        concealed = self.engine.stats.concealed
        return {
            "steps": self._steps,
            "revealed": self.config.total_cells - concealed,
            "total_safe": self.config.safe_cells,
            "game_state": outcome.name if outcome else "PLAYING",
            "mines_remaining": self.engine.remaining_mines(),
            "elapsed": self.engine.elapsed_seconds(),
            "valid_actions": concealed,
        }

    def render(self) -> Optional[str]:
        if self.render_mode == "ansi":
            return self.engine.render()
        if self.render_mode == "human":
            print(self.engine.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        int8 mask over actions, 1 where the cell is still concealed.

        Suitable for action_space.sample(mask=...).
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for location in self.engine.get_valid_actions():
            mask[location.y * self.config.width + location.x] = 1
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
    asynchronous: bool = False,
) -> gym.vector.VectorEnv:
    """
    Batch several MinesweeperEnv games with one shared BoardConfig.

    Args:
        n_envs: Number of games stepped together.
        config: Board shape for every game.
        asynchronous: Run each game in a subprocess (AsyncVectorEnv)
            instead of in-process (SyncVectorEnv).

    Raises:
        InvalidArgumentError: If n_envs is not positive.
    """
    if n_envs < 1:
        raise InvalidArgumentError(f"n_envs must be positive, got {n_envs}")

    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    vector_cls = gym.vector.AsyncVectorEnv if asynchronous else gym.vector.SyncVectorEnv
    return vector_cls([make_env for _ in range(n_envs)])
