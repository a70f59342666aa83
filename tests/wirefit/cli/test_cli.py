"""Tests for wirefit/cli/cli.py: shared argument groups and console mode selection."""

import argparse

from console import ConsoleMode
from wirefit import ExperimentConfig
from wirefit.cli import add_common_args, add_learner_args, console_config_from_args


def make_parser(defaults=None):
    parser = argparse.ArgumentParser()
    add_common_args(parser, defaults)
    add_learner_args(parser, defaults)
    return parser


class TestArgs:

    def test_defaults_without_config(self):
        args = make_parser().parse_args([])
        assert args.seed == 42
        assert args.episodes == 300
        assert args.wires == 4
        assert args.interpolator == 'wirefit'
        assert args.log_file is None

    def test_defaults_from_config(self):
        args = make_parser(ExperimentConfig(episodes=12, number_of_wires=6)).parse_args([])
        assert args.episodes == 12
        assert args.wires == 6

    def test_overrides(self):
        args = make_parser().parse_args(
            ['--episodes', '7', '--exploration', '0.2', '--hidden-layers', '2', '--devaluation', '0.5']
        )
        assert args.episodes == 7
        assert args.exploration == 0.2
        assert args.hidden_layers == 2
        assert args.devaluation == 0.5


class TestConsoleConfigFromArgs:

    def _args(self, *argv):
        return make_parser().parse_args(list(argv))

    def test_normal_by_default(self):
        assert console_config_from_args(self._args()).mode == ConsoleMode.NORMAL

    def test_silent(self):
        assert console_config_from_args(self._args('--silent')).mode == ConsoleMode.SILENT

    def test_no_console_output_wins(self):
        cfg = console_config_from_args(self._args('--silent', '--no-console-output'))
        assert cfg.mode == ConsoleMode.NULL

    def test_log_file(self):
        cfg = console_config_from_args(self._args('--log-file', 'run.log'))
        assert cfg.mode == ConsoleMode.LOGGING
        assert cfg.log_file == 'run.log'
