"""Function approximator capability.

The learner treats its approximator as a black box mapping a state vector
to a flat vector of ``number_of_wires * (action_dimensions + 1)`` values,
and trainable toward a target vector for a given state. Anything with these
members can be plugged in, including fixed-output test doubles.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class FunctionApproximator(Protocol):
    """Structural interface for state -> raw wire output models."""

    def predict(self, state: Sequence[float]) -> Sequence[float]:
        """Raw output for ``state``."""
        ...

    def train(self, state: Sequence[float], target: Sequence[float], rate: float) -> float | None:
        """Move ``predict(state)`` toward ``target``.

        ``rate`` in (0, 1] is the fraction of the distance to ``target`` the
        output should cover. Returns the final training loss, if the model
        tracks one.
        """
        ...

    def reset(self) -> None:
        """Return to the freshly initialized, untrained parameters."""
        ...
