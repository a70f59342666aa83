"""Configuration for the fixed-state target action experiment."""

from dataclasses import dataclass

from wirefit import ExperimentConfig


@dataclass
class TargetActionConfig(ExperimentConfig):
    """Single fixed state; reward grows linearly toward ``target``."""
    state: float = 0.5
    target: float = 1.0      # action with the highest reward, inside [0, 1]

    def __post_init__(self):
        super().__post_init__()
        if not 0 <= self.target <= 1:
            raise ValueError(f"target must be in [0, 1], got {self.target}")
