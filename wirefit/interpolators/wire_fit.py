"""Wire-fitting interpolator (Baird & Klopf; Gaskett, Wettergreen & Zelinsky).

The interpolated reward at a query action u is the inverse-distance weighted
mean of the wire rewards:

    d_i(u) = scale * ||u - u_i||^2 + smoothing * (q_max - q_i) + epsilon
    Q(u)   = sum_i q_i / d_i  /  sum_i 1 / d_i

The ``smoothing * (q_max - q_i)`` term pushes wires with low reward away from
every query, so the surface peaks at the best wire's action and the best wire
is always the continuous maximizer. ``epsilon`` keeps d_i positive when the
query sits exactly on the best wire. With smoothing and epsilon both near
zero the nearest wire takes all of the weight.

The reward-maximizing wire is the first wire holding the maximum reward;
derivatives are taken on that branch.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..errors import InvalidArgumentError
from ..registry import InterpolatorRegistry
from ..wire import Wire


@InterpolatorRegistry.register
class WireFitInterpolator:
    """Smooth, differentiable interpolation over a set of wires.

    Args:
        smoothing: Weight of the reward gap to the best wire in each wire's
            distance. Must be >= 0.
        epsilon: Constant added to every distance. Must be > 0.
        scale: Multiplier on the squared action distance. Must be > 0.
    """

    def __init__(self, smoothing: float = 0.01, epsilon: float = 1e-6, scale: float = 1.0):
        if smoothing < 0:
            raise InvalidArgumentError(f"smoothing must be >= 0, got {smoothing}")
        if epsilon <= 0:
            raise InvalidArgumentError(f"epsilon must be > 0, got {epsilon}")
        if scale <= 0:
            raise InvalidArgumentError(f"scale must be > 0, got {scale}")
        self.smoothing = float(smoothing)
        self.epsilon = float(epsilon)
        self.scale = float(scale)

    @property
    def name(self) -> str:
        return "wirefit"

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(smoothing={self.smoothing}, "
                f"epsilon={self.epsilon}, scale={self.scale})")

    # --- Public contract ---

    def reward(self, control_wires: Sequence[Wire], action: Sequence[float]) -> float:
        """Interpolated reward of ``action`` given ``control_wires``.

        Raises:
            InvalidArgumentError: If ``control_wires`` is empty or ``action``
                does not match the wires' action dimensions.
        """
        actions, rewards, query = self._as_arrays(control_wires, action)
        weights = 1.0 / self._distances(actions, rewards, query)
        return float(weights @ rewards / weights.sum())

    def reward_derivative(
        self,
        action: Sequence[float],
        wire: Wire,
        control_wires: Sequence[Wire],
    ) -> float:
        """Partial derivative of ``reward(control_wires, action)`` with respect
        to ``wire.reward``, all other rewards and all actions held fixed.

        A wire's reward enters the surface twice: as the value being averaged,
        and through the smoothing term of every wire's distance. For the best
        wire the second path runs through q_max and therefore touches every
        other wire's weight.

        Raises:
            InvalidArgumentError: If ``wire`` is not one of ``control_wires``,
                or for the conditions listed on ``reward``.
        """
        index = self._index_of(wire, control_wires)
        actions, rewards, query = self._as_arrays(control_wires, action)
        return float(self._reward_gradient(actions, rewards, query)[index])

    def action_term_derivative(
        self,
        action_term: float,
        wire_action_term: float,
        action: Sequence[float],
        wire: Wire,
        control_wires: Sequence[Wire],
    ) -> float:
        """Partial derivative of ``reward(control_wires, action)`` with respect
        to one component of ``wire.action``.

        ``action_term`` and ``wire_action_term`` are the values of that
        component in the query action and in the wire respectively. Only the
        differentiated wire's distance depends on its own action, so

            dQ/du_kj = (q_k - Q) * (-w_k^2) * 2 * scale * (u_kj - u_j) / sum_i w_i

        Raises:
            InvalidArgumentError: If ``wire`` is not one of ``control_wires``,
                or for the conditions listed on ``reward``.
        """
        index = self._index_of(wire, control_wires)
        actions, rewards, query = self._as_arrays(control_wires, action)
        weights = 1.0 / self._distances(actions, rewards, query)
        total = weights.sum()
        value = weights @ rewards / total
        distance_term = 2.0 * self.scale * (wire_action_term - action_term)
        weight_term = -weights[index] ** 2 * distance_term
        return float((rewards[index] - value) * weight_term / total)

    # --- Vectorized helpers ---

    def reward_gradient(self, control_wires: Sequence[Wire], action: Sequence[float]) -> np.ndarray:
        """``reward_derivative`` for every wire at once, in wire order."""
        actions, rewards, query = self._as_arrays(control_wires, action)
        return self._reward_gradient(actions, rewards, query)

    def _reward_gradient(self, actions: np.ndarray, rewards: np.ndarray, query: np.ndarray) -> np.ndarray:
        # dw_i/dq_k = -w_i^2 * smoothing * ([k is best] - [i == k])
        best = int(np.argmax(rewards))
        weights = 1.0 / self._distances(actions, rewards, query)
        total = weights.sum()
        value = weights @ rewards / total
        residual = (rewards - value) * weights ** 2
        gradient = weights + self.smoothing * residual
        gradient[best] -= self.smoothing * residual.sum()
        return gradient / total

    def _distances(self, actions: np.ndarray, rewards: np.ndarray, query: np.ndarray) -> np.ndarray:
        squared = self.scale * np.sum((query - actions) ** 2, axis=1)
        return squared + self.smoothing * (rewards.max() - rewards) + self.epsilon

    @staticmethod
    def _as_arrays(control_wires: Sequence[Wire], action: Sequence[float]):
        if len(control_wires) == 0:
            raise InvalidArgumentError("control_wires must contain at least one wire")
        actions = np.array([w.action for w in control_wires], dtype=np.float64)
        rewards = np.array([w.reward for w in control_wires], dtype=np.float64)
        query = np.asarray(action, dtype=np.float64).reshape(-1)
        if actions.ndim != 2 or actions.shape[1] != query.shape[0]:
            raise InvalidArgumentError(
                f"action has {query.shape[0]} components but wires have "
                f"{actions.shape[1] if actions.ndim == 2 else 'inconsistent'} action dimensions"
            )
        return actions, rewards, query

    @staticmethod
    def _index_of(wire: Wire, control_wires: Sequence[Wire]) -> int:
        for i, candidate in enumerate(control_wires):
            if candidate is wire:
                return i
        for i, candidate in enumerate(control_wires):
            if candidate == wire:
                return i
        raise InvalidArgumentError(f"{wire!r} is not one of the control wires")
