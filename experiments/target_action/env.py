"""One-state bandit over the action interval [0, 1]."""

from typing import Sequence

from wirefit import Transition


class TargetActionEnv:
    """Reward is ``1 - |action - target|``; the state never changes.

    With the default target of 1.0 the reward equals the action.
    """

    state_dimensions = 1
    action_dimensions = 1

    def __init__(self, state: float = 0.5, target: float = 1.0):
        self.state = [float(state)]
        self.target = float(target)
        self.min_action = [0.0]
        self.max_action = [1.0]

    def reset(self) -> list[float]:
        return list(self.state)

    def step(self, action: Sequence[float]) -> Transition:
        return Transition(reward=self.score(self.state, action), state=list(self.state))

    def evaluation_states(self) -> list[list[float]]:
        return [list(self.state)]

    def score(self, state: Sequence[float], action: Sequence[float]) -> float:
        return 1.0 - abs(float(action[0]) - self.target)
