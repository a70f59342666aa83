"""Configuration dataclasses for learners and experiments.

``WireFitConfig`` holds everything a ``WireFitQLearn`` needs that is not a
collaborator object. ``ExperimentConfig`` is the base for demo experiment
configs and carries the loop-level settings the runner depends on.
"""

from dataclasses import dataclass


@dataclass
class WireFitConfig:
    """Hyperparameters of a wire-fitted Q-learner. Immutable by convention
    once handed to a learner."""
    state_dimensions: int
    action_dimensions: int
    number_of_wires: int
    min_action: list[float]
    max_action: list[float]
    base_of_dimensions: int = 2

    learning_rate: float = 0.95       # fraction of the gap to the corrected wires closed per update
    devaluation_factor: float = 0.4   # discount on the best reward of the next state

    # Reward-fitting gradient descent (new_control_wires)
    control_points_gd_error_target: float = 0.001
    control_points_gd_learning_rate: float = 0.1
    control_points_gd_max_iterations: int = 10000

    seed: int = 42  # Boltzmann sampling

    def __post_init__(self):
        self.min_action = [float(a) for a in self.min_action]
        self.max_action = [float(a) for a in self.max_action]
        if self.state_dimensions <= 0:
            raise ValueError(f"state_dimensions must be > 0, got {self.state_dimensions}")
        if self.action_dimensions <= 0:
            raise ValueError(f"action_dimensions must be > 0, got {self.action_dimensions}")
        if self.number_of_wires <= 0:
            raise ValueError(f"number_of_wires must be > 0, got {self.number_of_wires}")
        if len(self.min_action) != self.action_dimensions:
            raise ValueError(
                f"min_action must have {self.action_dimensions} components, "
                f"got {len(self.min_action)}"
            )
        if len(self.max_action) != self.action_dimensions:
            raise ValueError(
                f"max_action must have {self.action_dimensions} components, "
                f"got {len(self.max_action)}"
            )
        for i, (lo, hi) in enumerate(zip(self.min_action, self.max_action)):
            if lo > hi:
                raise ValueError(f"min_action[{i}] must be <= max_action[{i}], got {lo} > {hi}")
        if self.base_of_dimensions < 1:
            raise ValueError(f"base_of_dimensions must be >= 1, got {self.base_of_dimensions}")
        if not 0 < self.learning_rate <= 1:
            raise ValueError(f"learning_rate must be in (0, 1], got {self.learning_rate}")
        if not 0 <= self.devaluation_factor <= 1:
            raise ValueError(f"devaluation_factor must be in [0, 1], got {self.devaluation_factor}")
        if self.control_points_gd_error_target < 0:
            raise ValueError(
                f"control_points_gd_error_target must be >= 0, "
                f"got {self.control_points_gd_error_target}"
            )
        if self.control_points_gd_learning_rate <= 0:
            raise ValueError(
                f"control_points_gd_learning_rate must be > 0, "
                f"got {self.control_points_gd_learning_rate}"
            )
        if self.control_points_gd_max_iterations <= 0:
            raise ValueError(
                f"control_points_gd_max_iterations must be > 0, "
                f"got {self.control_points_gd_max_iterations}"
            )
        if self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")

    @property
    def output_size(self) -> int:
        """Length of the flat approximator output."""
        return self.number_of_wires * (self.action_dimensions + 1)


@dataclass
class ExperimentConfig:
    """Common configuration fields. Experiment configs inherit from this."""
    seed: int = 42
    experiment_name: str = ""

    # Episodes
    episodes: int = 300
    steps_per_episode: int = 1

    # Boltzmann exploration schedule
    exploration: float = 0.5
    exploration_decay: float = 0.99     # multiplied in after every episode
    min_exploration: float = 0.05

    # Learner
    number_of_wires: int = 4
    base_of_dimensions: int = 2
    learning_rate: float = 0.95
    devaluation_factor: float = 0.0
    hidden_layers: int = 1
    neurons_per_layer: int = 12

    # Periodicity
    eval_every: int = 50               # metric table + greedy evaluation interval (episodes)

    def __post_init__(self):
        if self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")
        if self.episodes <= 0:
            raise ValueError(f"episodes must be > 0, got {self.episodes}")
        if self.steps_per_episode <= 0:
            raise ValueError(f"steps_per_episode must be > 0, got {self.steps_per_episode}")
        if self.exploration <= 0:
            raise ValueError(f"exploration must be > 0, got {self.exploration}")
        if not 0 < self.exploration_decay <= 1:
            raise ValueError(f"exploration_decay must be in (0, 1], got {self.exploration_decay}")
        if self.min_exploration <= 0:
            raise ValueError(f"min_exploration must be > 0, got {self.min_exploration}")
        if self.eval_every <= 0:
            raise ValueError(f"eval_every must be > 0, got {self.eval_every}")
        if self.hidden_layers < 0:
            raise ValueError(f"hidden_layers must be >= 0, got {self.hidden_layers}")
        if self.neurons_per_layer <= 0:
            raise ValueError(f"neurons_per_layer must be > 0, got {self.neurons_per_layer}")
