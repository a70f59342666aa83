"""Command-line entry point: train a wire-fit Q-learner on a registered experiment.

    python run_experiment.py target_action
    python run_experiment.py target_action --episodes 500 --exploration 0.3
    python run_experiment.py track_state --wires 8 --silent
    python run_experiment.py track_state --log-file track_state.log
    python run_experiment.py --list
"""

import sys

from console import WFConsole, ConsoleConfig, ConsoleMode
from wirefit import ExperimentRegistry
from wirefit.cli import (
    add_common_args, add_learner_args, console_config_from_args,
    WFArgumentParser,
)


def _normal_console():
    return WFConsole(ConsoleConfig(mode=ConsoleMode.NORMAL, show_time=False))


def _load_experiments():
    import experiments  # noqa: F401  (registers every runner)


def list_experiments():
    """Print each registered experiment with the first line of its docstring."""
    _load_experiments()
    console = _normal_console()
    console.print("\n[bold]Experiments:[/bold]")
    for name, runner_cls in sorted(ExperimentRegistry.get_all().items()):
        summary = (runner_cls.__doc__ or "").strip().splitlines()
        console.print(f"  [metric.value]{name:20s}[/metric.value]  {summary[0] if summary else ''}")
    console.print()


def print_usage():
    console = _normal_console()
    console.print("\n  [bold]Usage:[/bold]")
    for tail in ("<experiment> [args...]", "--list"):
        console.print(f"    [metric.value]python run_experiment.py[/metric.value] [detail]{tail}[/detail]")
    console.print()


def build_parser(experiment_name, runner_cls):
    """Parser with the shared, learner and experiment-specific option groups."""
    defaults = runner_cls.config_class()
    parser = WFArgumentParser(
        experiment_name=experiment_name,
        description=f"Train a wire-fit Q-learner on {experiment_name}",
    )
    add_common_args(parser, defaults)
    add_learner_args(parser, defaults)
    runner_cls.add_args(parser)
    return parser


def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)

    if "--list" in argv:
        list_experiments()
        return None

    if not argv or argv[0].startswith("-"):
        print_usage()
        list_experiments()
        sys.exit(0 if {"-h", "--help"} & set(argv) else 1)

    name, rest = argv[0], argv[1:]
    _load_experiments()
    try:
        runner_cls = ExperimentRegistry.get(name)
    except ValueError as e:
        _normal_console().print_error(str(e))
        sys.exit(1)

    args = build_parser(name, runner_cls).parse_args(rest)
    console = WFConsole(console_config_from_args(args))
    try:
        config = runner_cls.build_config(args)
    except ValueError as e:
        console.print_error(str(e))
        sys.exit(1)
    config.experiment_name = config.experiment_name or name

    return runner_cls.build_runner(config, args).run()


if __name__ == "__main__":
    main()
