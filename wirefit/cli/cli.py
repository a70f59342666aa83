"""Shared CLI argument groups for experiment entry points."""

from console import ConsoleConfig, ConsoleMode
from ..registry import InterpolatorRegistry


def add_common_args(parser, defaults=None):
    """Add arguments shared by all experiments.

    Args:
        parser: argparse.ArgumentParser instance.
        defaults: Optional config dataclass supplying default values.
    """
    d = defaults if defaults is not None and hasattr(defaults, '__dataclass_fields__') else None

    group = parser.add_argument_group('Common Options')
    group.add_argument('--seed', type=int, default=getattr(d, 'seed', 42),
                       help='Random seed')
    group.add_argument('--episodes', type=int, default=getattr(d, 'episodes', 300),
                       help='Number of training episodes')
    group.add_argument('--eval-every', type=int, default=getattr(d, 'eval_every', 50),
                       help='Episodes between metric tables and greedy evaluations')
    group.add_argument('--exploration', type=float, default=getattr(d, 'exploration', 0.5),
                       help='Initial Boltzmann exploration constant')
    group.add_argument('--exploration-decay', type=float, default=getattr(d, 'exploration_decay', 0.99),
                       help='Multiplier applied to the exploration constant after each episode')
    group.add_argument('--silent', action='store_true', default=False,
                       help='Show only the progress bar; suppress all other output')
    group.add_argument('--no-console-output', action='store_true', default=False,
                       help='Suppress all console output')
    group.add_argument('--log-file', type=str, default=None, metavar='PATH',
                       help='Write plain-text console output to PATH instead of the terminal')


def add_learner_args(parser, defaults=None):
    """Add wire-fit learner and network arguments."""
    d = defaults if defaults is not None and hasattr(defaults, '__dataclass_fields__') else None

    group = parser.add_argument_group('Learner Options')
    group.add_argument('--wires', type=int, default=getattr(d, 'number_of_wires', 4),
                       help='Number of wires output per state')
    group.add_argument('--base', type=int, default=getattr(d, 'base_of_dimensions', 2),
                       help='Grid points per action dimension')
    group.add_argument('--learning-rate', type=float, default=getattr(d, 'learning_rate', 0.95),
                       help='Fraction of the gap to the corrected wires closed per update')
    group.add_argument('--devaluation', type=float, default=getattr(d, 'devaluation_factor', 0.0),
                       help='Discount on the next state\'s best reward')
    group.add_argument('--hidden-layers', type=int, default=getattr(d, 'hidden_layers', 1),
                       help='Hidden layers in the approximator network')
    group.add_argument('--neurons', type=int, default=getattr(d, 'neurons_per_layer', 12),
                       help='Neurons per hidden layer')
    group.add_argument('--interpolator', type=str, default='wirefit',
                       choices=InterpolatorRegistry.list_all(),
                       help='Reward interpolation scheme')


def console_config_from_args(args) -> ConsoleConfig:
    """Pick the console mode from parsed args.

    Priority: --no-console-output, then --log-file, then --silent.
    """
    if getattr(args, 'no_console_output', False):
        return ConsoleConfig(mode=ConsoleMode.NULL, show_time=False)
    log_file = getattr(args, 'log_file', None)
    if log_file:
        return ConsoleConfig(mode=ConsoleMode.LOGGING, log_file=log_file)
    if getattr(args, 'silent', False):
        return ConsoleConfig(mode=ConsoleMode.SILENT, show_time=False)
    return ConsoleConfig(mode=ConsoleMode.NORMAL, show_time=False)
