"""Wire-fitted Q-learning (Gaskett, Wettergreen & Zelinsky).

Q-learning over continuous states and actions. A function approximator maps a
state to a handful of wires (action, expected long-term reward); an
interpolator turns those wires into a continuous reward-over-action surface.

One update:

1. Decode the wires for the last state.
2. Compute the Bellman target for the action that was taken.
3. Fit the wire rewards by gradient descent until the interpolated surface
   passes through the target at that action. Wire actions stay where they are.
4. Train the approximator toward the corrected wires.
"""

from __future__ import annotations

import itertools
from typing import Sequence

import numpy as np

from ..approximators import FunctionApproximator, MLPApproximator
from ..config import WireFitConfig
from ..errors import InvalidArgumentError, InvalidSequenceError
from ..interpolators import Interpolator, WireFitInterpolator
from ..registry import InterpolatorRegistry
from ..wire import Wire, wires_from_raw, wires_to_raw
from .base import Learner, UpdateResult


def grid_actions(min_action: Sequence[float], max_action: Sequence[float], base: int) -> list[list[float]]:
    """All ``base ** len(min_action)`` points of the evenly spaced action grid.

    The first action dimension varies slowest.
    """
    if base < 1:
        raise InvalidArgumentError(f"base must be >= 1, got {base}")
    if base == 1 and any(lo != hi for lo, hi in zip(min_action, max_action)):
        raise InvalidArgumentError("base must be >= 2 to span a non-degenerate action range")
    axes = [np.linspace(lo, hi, base) for lo, hi in zip(min_action, max_action)]
    return [[float(a) for a in point] for point in itertools.product(*axes)]


def _spread(items: list, count: int) -> list:
    """``count`` evenly spaced entries of ``items``, ends included."""
    if count <= 0:
        return []
    picks = np.linspace(0, len(items) - 1, count).round().astype(int)
    return [items[i] for i in picks]


class WireFitQLearn(Learner):
    """Continuous-action Q-learner built on wire fitting.

    Args:
        config: Learner hyperparameters.
        approximator: Maps a state to ``config.output_size`` raw values and
            can be trained toward a target output.
        interpolator: Interpolator instance or registered name. Defaults to
            ``WireFitInterpolator()``.

    Not thread-safe. Use one instance per agent.
    """

    def __init__(
        self,
        config: WireFitConfig,
        approximator: FunctionApproximator,
        interpolator: Interpolator | str | None = None,
    ):
        self.config = config
        self.approximator = approximator
        if interpolator is None:
            interpolator = WireFitInterpolator()
        elif isinstance(interpolator, str):
            interpolator = InterpolatorRegistry.create(interpolator)
        self.interpolator = interpolator

        self.last_state: list[float] | None = None
        self.last_action: list[float] | None = None
        self._rng = np.random.default_rng(config.seed)

    @classmethod
    def from_dimensions(
        cls,
        state_dimensions: int,
        action_dimensions: int,
        hidden_layers: int,
        neurons_per_layer: int,
        number_of_wires: int,
        min_action: Sequence[float],
        max_action: Sequence[float],
        base_of_dimensions: int = 2,
        interpolator: Interpolator | str | None = None,
        learning_rate: float = 0.95,
        devaluation_factor: float = 0.4,
        seed: int = 42,
        **config_kwargs,
    ) -> WireFitQLearn:
        """Build a learner with a fresh ``MLPApproximator``.

        The network starts out predicting ``seed_wires(config)`` for every
        state, so the initial wires cover the whole action box.
        Extra keyword arguments go to ``WireFitConfig``.
        """
        config = WireFitConfig(
            state_dimensions=state_dimensions,
            action_dimensions=action_dimensions,
            number_of_wires=number_of_wires,
            min_action=list(min_action),
            max_action=list(max_action),
            base_of_dimensions=base_of_dimensions,
            learning_rate=learning_rate,
            devaluation_factor=devaluation_factor,
            seed=seed,
            **config_kwargs,
        )
        approximator = MLPApproximator(
            input_size=state_dimensions,
            output_size=config.output_size,
            hidden_layers=hidden_layers,
            neurons_per_layer=neurons_per_layer,
            output_bias=wires_to_raw(cls.seed_wires(config)),
            seed=seed,
        )
        return cls(config, approximator, interpolator)

    @staticmethod
    def seed_wires(config: WireFitConfig) -> list[Wire]:
        """``number_of_wires`` zero-reward wires spread over the action box.

        The ``base_of_dimensions`` grid comes first: with fewer wires than
        grid points the wires take evenly spaced grid points, with more they
        take all of them. Extra wires go on the points the grid gains when
        each step is halved, evenly spaced, until every wire is placed.
        Wires are returned in grid order, first action dimension slowest.
        """
        n, d = config.number_of_wires, config.action_dimensions
        lo = np.array(config.min_action)
        hi = np.array(config.max_action)
        if np.array_equal(lo, hi):
            return [Wire(list(config.min_action), 0.0) for _ in range(n)]

        base = config.base_of_dimensions
        fine = max(base, 2)
        while fine ** d < n:
            fine = 2 * fine - 1
        # a coarse point sits on every `stride`-th index of the fine grid
        stride = (fine - 1) // (base - 1) if base > 1 else fine

        coarse, extra = [], []
        for index in itertools.product(range(fine), repeat=d):
            (coarse if all(i % stride == 0 for i in index) else extra).append(index)

        if n <= len(coarse):
            chosen = _spread(coarse, n)
        else:
            chosen = sorted(coarse + _spread(extra, n - len(coarse)))
        return [
            Wire([float(a) for a in lo + (hi - lo) * np.array(index) / (fine - 1)], 0.0)
            for index in chosen
        ]

    # --- Wire access ---

    def get_wires(self, state: Sequence[float]) -> list[Wire]:
        """Decode the approximator output for ``state`` into clamped wires."""
        state = self._check_state(state)
        raw = self.approximator.predict(state)
        if len(raw) != self.config.output_size:
            raise InvalidArgumentError(
                f"approximator returned {len(raw)} values, expected {self.config.output_size}"
            )
        return wires_from_raw(
            raw, self.config.action_dimensions,
            self.config.min_action, self.config.max_action,
        )

    def get_set_of_wires(self, state: Sequence[float], base_of_dimensions: int) -> list[Wire]:
        """Wires on the ``base_of_dimensions`` action grid, each labeled with
        the interpolated reward of the live wires for ``state``."""
        wires = self.get_wires(state)
        return [
            Wire(action, self.interpolator.reward(wires, action))
            for action in grid_actions(self.config.min_action, self.config.max_action, base_of_dimensions)
        ]

    # --- Action selection ---

    def choose_best_action(self, state: Sequence[float]) -> list[float]:
        state = self._check_state(state)
        action = self.best_action(state)
        self.last_state = state
        self.last_action = action
        return list(action)

    def choose_boltzmann_action(self, state: Sequence[float], exploration_constant: float) -> list[float]:
        """Sample a wire's action with probability proportional to
        ``exp(reward / exploration_constant)``.

        Raises:
            InvalidArgumentError: If ``exploration_constant`` is not positive.
        """
        if not exploration_constant > 0:
            raise InvalidArgumentError(
                f"exploration_constant must be > 0, got {exploration_constant}"
            )
        state = self._check_state(state)
        wires = self.get_wires(state)
        rewards = np.array([w.reward for w in wires], dtype=np.float64)
        weights = np.exp((rewards - rewards.max()) / exploration_constant)
        probabilities = weights / weights.sum()
        index = int(self._rng.choice(len(wires), p=probabilities))

        action = list(wires[index].action)
        self.last_state = state
        self.last_action = action
        return list(action)

    def best_action(self, state: Sequence[float]) -> list[float]:
        """Action of the highest-reward wire (first one on ties)."""
        wires = self.get_wires(state)
        return list(wires[self._best_index(wires)].action)

    def highest_reward(self, state: Sequence[float]) -> float:
        """Interpolated reward of the best action: the value estimate of ``state``."""
        wires = self.get_wires(state)
        best = wires[self._best_index(wires)]
        return self.interpolator.reward(wires, best.action)

    # --- Learning ---

    def get_q_value(
        self,
        reward: float,
        old_state: Sequence[float],
        new_state: Sequence[float],
        action: Sequence[float],
        control_wires: Sequence[Wire],
    ) -> float:
        """Bellman target ``reward + devaluation_factor * highest_reward(new_state)``."""
        return float(reward) + self.config.devaluation_factor * self.highest_reward(new_state)

    def new_control_wires(self, correct_wire: Wire, control_wires: Sequence[Wire]) -> list[Wire]:
        """Adjust wire rewards so the surface takes ``correct_wire.reward`` at
        ``correct_wire.action``. Wire actions are left unchanged."""
        wires, _, _, _ = self._fit_rewards(correct_wire, control_wires)
        return wires

    def apply_reinforcement_to_last_action(self, reward: float, new_state: Sequence[float]) -> UpdateResult:
        """Train toward the Bellman target of the last chosen action.

        Raises:
            InvalidSequenceError: If no action has been chosen since the last
                update or reset.
        """
        if self.last_state is None or self.last_action is None:
            raise InvalidSequenceError(
                "apply_reinforcement_to_last_action called before choosing an action"
            )
        new_state = self._check_state(new_state)
        wires = self.get_wires(self.last_state)
        q_value = self.get_q_value(reward, self.last_state, new_state, self.last_action, wires)
        correct_wire = Wire(self.last_action, q_value)
        updated, iterations, initial_error, final_error = self._fit_rewards(correct_wire, wires)

        loss = self.approximator.train(self.last_state, wires_to_raw(updated), self.config.learning_rate)

        self.last_state = None
        self.last_action = None

        metrics = {
            'q_value': q_value,
            'gd_iterations': iterations,
            'gd_initial_error': initial_error,
            'gd_final_error': final_error,
            'gd_converged': final_error < self.config.control_points_gd_error_target,
        }
        if loss is not None:
            metrics['train_loss'] = float(loss)
        return UpdateResult(
            q_value=q_value,
            loss=float(loss) if loss is not None else None,
            metrics=metrics,
        )

    def reset(self) -> None:
        self.approximator.reset()
        self._rng = np.random.default_rng(self.config.seed)
        self.last_state = None
        self.last_action = None

    # --- Internals ---

    def _fit_rewards(self, correct_wire: Wire, control_wires: Sequence[Wire]):
        """Gradient descent on ``0.5 * (Q(correct.action) - correct.reward)^2``
        over the wire rewards.

        Returns (lowest-error wires, iterations run, initial squared error,
        lowest squared error).
        """
        cfg = self.config
        query = correct_wire.action
        target = correct_wire.reward

        wires = list(control_wires)
        error = self.interpolator.reward(wires, query) - target
        initial_error = error ** 2
        best_wires, best_error = wires, initial_error

        iterations = 0
        while error ** 2 >= cfg.control_points_gd_error_target and iterations < cfg.control_points_gd_max_iterations:
            gradient = self.interpolator.reward_gradient(wires, query)
            step = cfg.control_points_gd_learning_rate * error
            wires = [wire.with_reward(float(wire.reward - step * g)) for wire, g in zip(wires, gradient)]
            iterations += 1
            error = self.interpolator.reward(wires, query) - target
            if error ** 2 < best_error:
                best_wires, best_error = wires, error ** 2

        return best_wires, iterations, initial_error, best_error

    @staticmethod
    def _best_index(wires: Sequence[Wire]) -> int:
        # np.argmax returns the first index among equal maxima
        return int(np.argmax([w.reward for w in wires]))

    def _check_state(self, state: Sequence[float]) -> list[float]:
        values = [float(s) for s in np.asarray(state, dtype=np.float64).reshape(-1)]
        if len(values) != self.config.state_dimensions:
            raise InvalidArgumentError(
                f"state must have {self.config.state_dimensions} components, got {len(values)}"
            )
        return values
