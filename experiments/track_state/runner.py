"""Experiment runner for the state tracking task."""

from wirefit import ExperimentRunner, ExperimentRegistry

from .config import TrackStateConfig
from .env import TrackStateEnv


@ExperimentRegistry.register("track_state")
class TrackStateRunner(ExperimentRunner):
    """Learn a state-dependent policy: the best action equals the state.

    Exercises generalization across states through the approximator.
    Greedy evaluation averages the reward over evenly spaced states.
    """

    config_class = TrackStateConfig

    @classmethod
    def add_args(cls, parser):
        defaults = TrackStateConfig()
        parser.add_argument('--eval-points', type=int, default=defaults.eval_points,
                            help='Evenly spaced states used for greedy evaluation')

    @classmethod
    def build_config(cls, args):
        return TrackStateConfig(
            seed=args.seed,
            episodes=args.episodes,
            eval_every=args.eval_every,
            exploration=args.exploration,
            exploration_decay=args.exploration_decay,
            number_of_wires=args.wires,
            base_of_dimensions=args.base,
            learning_rate=args.learning_rate,
            devaluation_factor=args.devaluation,
            hidden_layers=args.hidden_layers,
            neurons_per_layer=args.neurons,
            eval_points=args.eval_points,
        )

    def create_environment(self):
        return TrackStateEnv(seed=self.config.seed, eval_points=self.config.eval_points)
