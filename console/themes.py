from rich.style import Style
from rich.theme import Theme


class WFDarkTheme(Theme):
    """
    Dark theme holding every named style the project prints with.

    Message styles come in icon/content pairs (``warning.icon``,
    ``warning.content``); metric tables use ``table.header``, ``sink.name``,
    ``label`` and ``metric.value``; progress bars use the ``bar.*`` and
    ``progress.*`` names Rich looks up by default.
    """
    PALETTE = {
        "blue": "#61AFEF",
        "indigo": "#4B6BFF",
        "cyan": "#56B6C2",
        "green": "#98C379",
        "yellow": "#E5C07B",
        "red": "#E06C75",
        "orange": "#D19A66",
        "grey": "#8A8F98",
        "purple": "#663399",
        "lavender": "#B87FD9",
        "pink": "#FF69B4",
    }

    def __init__(self):
        c = self.PALETTE
        super().__init__({
            "notification.icon": Style(color=c["purple"]),
            "notification.content": Style(color=c["blue"]),
            "warning.icon": Style(color=c["orange"]),
            "warning.content": Style(color=c["yellow"]),
            "error.icon": Style(color=c["red"]),
            "error.content": Style(color=c["red"]),

            "rule.text": Style(color=c["orange"]),
            "rule.line": Style(color=c["blue"]),
            "time.numbers": Style(color=c["orange"]),
            "time.brackets": Style(color=c["purple"]),

            "bar.complete": Style(color=c["indigo"]),
            "bar.finished": Style(color=c["green"]),
            "bar.pulse": Style(color=c["pink"]),
            "progress.description": Style(color=c["indigo"]),
            "progress.elapsed": Style(color=c["yellow"]),
            "progress.percentage": Style(color=c["indigo"]),
            "progress.remaining": Style(color=c["pink"]),
            "progress.spinner": Style(color=c["pink"]),

            "metric.value": Style(color=c["cyan"]),
            "label": Style(color=c["grey"]),
            "detail": Style(color=c["grey"]),
            "table.header": Style(color=c["lavender"], bold=True),
            "sink.name": Style(color=c["lavender"]),
        })
