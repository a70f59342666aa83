"""CLI argument helpers and the Rich-formatted argument parser."""

from .cli import add_common_args, add_learner_args, console_config_from_args
from .cli_parser import WFArgumentParser

__all__ = [
    'add_common_args', 'add_learner_args', 'console_config_from_args',
    'WFArgumentParser',
]
