"""ArgumentParser with Rich-formatted help and error output.

Help and errors go through WFConsole instead of argparse's plain-text
formatter and stderr, so command-line output matches the rest of the
console styling.
"""

import argparse

from rich.table import Table


class WFArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that renders help and errors through WFConsole.

    - ``--help`` prints one aligned table per argument group, with defaults
      appended to each help line.
    - Errors print a single line via ``print_error()`` and exit with code 1.
    - Usage is never dumped on error.
    """

    # argparse's built-in group titles; None hides the group
    _GROUP_TITLES = {
        'positional arguments': None,
        'options': 'General',
        'optional arguments': 'General',
    }

    def __init__(self, experiment_name=None, **kwargs):
        kwargs.setdefault('add_help', False)
        super().__init__(**kwargs)
        self.experiment_name = experiment_name
        self.add_argument(
            '-h', '--help',
            action='help',
            default=argparse.SUPPRESS,
            help='Show this help message and exit',
        )

    def error(self, message):
        self._console().print_error(message)
        raise SystemExit(1)

    def exit(self, status=0, message=None):
        if message:
            console = self._console()
            if status != 0:
                console.print_error(message.strip())
            else:
                console.print(message.strip())
        raise SystemExit(status)

    def print_help(self, file=None):
        console = self._console()
        console.rule(self.experiment_name or 'wirefit')
        if self.description:
            console.print(f'  {self.description}')
        console.print()
        for group in self._action_groups:
            self._print_group(console, group)
        if self.epilog:
            console.print(f'  [detail]{self.epilog}[/detail]')
            console.print()

    def print_usage(self, file=None):
        pass

    def _print_group(self, console, group):
        actions = [a for a in group._group_actions
                   if not isinstance(a, argparse._HelpAction)]
        if not actions:
            return
        title = self._GROUP_TITLES.get(group.title, group.title or 'Options')
        if title is None:
            return

        console.print(f'  [bold]{title.upper()}[/bold]')
        table = Table(box=None, show_header=False, padding=(0, 2), pad_edge=False)
        table.add_column('flags', no_wrap=True)
        table.add_column('help')
        for action in actions:
            table.add_row(
                f'    [metric.value]{self._flags(action)}[/metric.value]',
                f'[detail]{self._help_text(action)}[/detail]',
            )
        console.print(table)
        console.print()

    @staticmethod
    def _help_text(action):
        text = action.help or ''
        show_default = (
            action.default is not None
            and action.default is not argparse.SUPPRESS
            and not isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction))
        )
        if show_default and 'default' not in text:
            text = f'{text} (default: {action.default})'
        return text

    @staticmethod
    def _flags(action):
        flags = ', '.join(action.option_strings) if action.option_strings else action.dest
        if action.choices:
            return flags + ' {' + ','.join(str(c) for c in action.choices) + '}'
        if action.nargs == 0:
            return flags
        meta = action.metavar or (action.type.__name__.upper() if action.type else action.dest.upper())
        if action.nargs == '+':
            return f'{flags} {meta} [{meta} ...]'
        if action.nargs == '*':
            return f'{flags} [{meta} ...]'
        return f'{flags} {meta}'

    @staticmethod
    def _console():
        """NORMAL-mode console for help and error paths.

        These paths exit before run_experiment.py configures the console
        for the requested mode.
        """
        from console import WFConsole, ConsoleConfig, ConsoleMode
        return WFConsole(ConsoleConfig(mode=ConsoleMode.NORMAL, show_time=False))
