"""Interpolator capability.

An interpolator turns a finite set of wires into a continuous
reward-over-action surface and exposes the partial derivatives the control
loop needs to fit wire rewards by gradient descent. Any object providing
these members can be handed to a learner, including test doubles.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..wire import Wire


@runtime_checkable
class Interpolator(Protocol):
    """Structural interface for reward interpolation schemes.

    All operations are pure functions of their arguments.
    """

    @property
    def name(self) -> str:
        """Identifier of the scheme (used for registry lookup and display)."""
        ...

    def reward(self, control_wires: Sequence[Wire], action: Sequence[float]) -> float:
        """Interpolated reward at ``action``."""
        ...

    def reward_derivative(
        self,
        action: Sequence[float],
        wire: Wire,
        control_wires: Sequence[Wire],
    ) -> float:
        """∂reward(control_wires, action) / ∂wire.reward."""
        ...

    def reward_gradient(self, control_wires: Sequence[Wire], action: Sequence[float]) -> Sequence[float]:
        """``reward_derivative`` for every wire of ``control_wires``, in order."""
        ...

    def action_term_derivative(
        self,
        action_term: float,
        wire_action_term: float,
        action: Sequence[float],
        wire: Wire,
        control_wires: Sequence[Wire],
    ) -> float:
        """∂reward(control_wires, action) / ∂(one component of wire.action)."""
        ...
