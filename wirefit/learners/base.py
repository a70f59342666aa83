"""Learner abstraction.

A Learner owns the choose/reinforce cycle for one agent: pick an action for a
state, then receive the reward and next state that action produced. The
experiment runner drives learners only through this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class UpdateResult:
    """Returned by Learner.apply_reinforcement_to_last_action().

    Carries the training target and diagnostics for display and sinks.
    """
    q_value: float                                            # Bellman target for the taken action
    loss: float | None = None                                 # approximator loss after training, if reported
    metrics: dict[str, float] = field(default_factory=dict)   # learner-specific metrics


class Learner(ABC):
    """Reinforcement learner over continuous states and actions.

    Selection calls record the state and chosen action; the next
    ``apply_reinforcement_to_last_action`` consumes them.
    """

    @abstractmethod
    def choose_best_action(self, state: Sequence[float]) -> list[float]:
        """Greedy action for ``state``."""
        ...

    @abstractmethod
    def best_action(self, state: Sequence[float]) -> list[float]:
        """Greedy action for ``state`` without recording it as the last action."""
        ...

    @abstractmethod
    def choose_boltzmann_action(self, state: Sequence[float], exploration_constant: float) -> list[float]:
        """Exploratory action for ``state``, sampled at temperature
        ``exploration_constant``."""
        ...

    @abstractmethod
    def apply_reinforcement_to_last_action(self, reward: float, new_state: Sequence[float]) -> UpdateResult:
        """Learn from the reward observed after the last chosen action."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Return to an untrained state and forget the last action."""
        ...

    @property
    def name(self) -> str:
        """Human-readable name for display."""
        return self.__class__.__name__
