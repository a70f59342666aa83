"""Experiment runner for the fixed-state target action task."""

from wirefit import ExperimentRunner, ExperimentRegistry

from .config import TargetActionConfig
from .env import TargetActionEnv


@ExperimentRegistry.register("target_action")
class TargetActionRunner(ExperimentRunner):
    """Learn the best action for one fixed state (reward = action by default).

    The smallest end-to-end check of wire fitting: the greedy action should
    settle on the wire nearest ``target``.
    """

    config_class = TargetActionConfig

    @classmethod
    def add_args(cls, parser):
        defaults = TargetActionConfig()
        parser.add_argument('--state', type=float, default=defaults.state,
                            help='Value of the fixed state')
        parser.add_argument('--target', type=float, default=defaults.target,
                            help='Action with the highest reward')

    @classmethod
    def build_config(cls, args):
        return TargetActionConfig(
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
            state=args.state,
            target=args.target,
        )

    def create_environment(self):
        return TargetActionEnv(state=self.config.state, target=self.config.target)
