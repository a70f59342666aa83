"""Configuration for the state tracking experiment."""

from dataclasses import dataclass

from wirefit import ExperimentConfig


@dataclass
class TrackStateConfig(ExperimentConfig):
    """Random state each episode; the best action equals the state."""
    episodes: int = 2000
    eval_every: int = 200
    number_of_wires: int = 6
    neurons_per_layer: int = 16
    eval_points: int = 5     # evenly spaced states used for greedy evaluation

    def __post_init__(self):
        super().__post_init__()
        if self.eval_points <= 0:
            raise ValueError(f"eval_points must be > 0, got {self.eval_points}")
