"""Wire record and the flat encoding used at the approximator boundary.

A wire is one labeled control point: an action vector paired with the
long-term reward the approximator expects for taking it. Approximators deal
in flat numeric vectors; the canonical layout is wires 0..n-1 in order, each
as ``[action_0, ..., action_{d-1}, reward]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Wire:
    """An action vector and its estimated reward.

    Immutable: corrected wires are new instances (see ``with_reward``).
    """
    action: tuple[float, ...]
    reward: float

    def __post_init__(self):
        # Normalize lists and numpy arrays to a hashable tuple of floats.
        object.__setattr__(self, 'action', tuple(float(a) for a in self.action))
        object.__setattr__(self, 'reward', float(self.reward))

    def with_reward(self, reward: float) -> Wire:
        """Same action, new reward."""
        return Wire(self.action, reward)

    @property
    def dimensions(self) -> int:
        return len(self.action)


def wires_from_raw(
    raw: Sequence[float],
    action_dimensions: int,
    min_action: Sequence[float] | None = None,
    max_action: Sequence[float] | None = None,
) -> list[Wire]:
    """Decode a flat approximator output into wires.

    When bounds are given, each action component is clamped into
    ``[min_action[i], max_action[i]]``.

    Raises:
        InvalidArgumentError: If ``raw`` is not a whole number of wires.
    """
    stride = action_dimensions + 1
    if len(raw) == 0 or len(raw) % stride != 0:
        raise InvalidArgumentError(
            f"raw output of length {len(raw)} is not a whole number of "
            f"wires of size {stride}"
        )
    wires = []
    for start in range(0, len(raw), stride):
        action = [float(v) for v in raw[start:start + action_dimensions]]
        if min_action is not None and max_action is not None:
            action = [
                min(max(a, lo), hi)
                for a, lo, hi in zip(action, min_action, max_action)
            ]
        wires.append(Wire(action, raw[start + action_dimensions]))
    return wires


def wires_to_raw(wires: Sequence[Wire]) -> list[float]:
    """Encode wires into the flat approximator layout."""
    raw: list[float] = []
    for wire in wires:
        raw.extend(wire.action)
        raw.append(wire.reward)
    return raw
