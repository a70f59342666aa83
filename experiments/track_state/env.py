"""Contextual bandit: match the action to a uniformly drawn state."""

from typing import Sequence

import numpy as np

from wirefit import Transition


class TrackStateEnv:
    """State ``s ~ U[0, 1]``, action in [0, 1], reward ``1 - |a - s|``.

    Every episode is one step; the next state is a fresh draw.
    """

    state_dimensions = 1
    action_dimensions = 1

    def __init__(self, seed: int = 0, eval_points: int = 5):
        self.min_action = [0.0]
        self.max_action = [1.0]
        self.eval_points = eval_points
        self._rng = np.random.default_rng(seed)
        self._state = self._draw()

    def _draw(self) -> list[float]:
        return [float(self._rng.uniform(0.0, 1.0))]

    def reset(self) -> list[float]:
        self._state = self._draw()
        return list(self._state)

    def step(self, action: Sequence[float]) -> Transition:
        reward = self.score(self._state, action)
        self._state = self._draw()
        return Transition(reward=reward, state=list(self._state), done=True)

    def evaluation_states(self) -> list[list[float]]:
        return [[float(s)] for s in np.linspace(0.0, 1.0, self.eval_points)]

    def score(self, state: Sequence[float], action: Sequence[float]) -> float:
        return 1.0 - abs(float(action[0]) - float(state[0]))
