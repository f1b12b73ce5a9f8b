"""Output reporters for parsed and checked ads.txt files."""

from rich.console import Console

from adstxt.actions.reporters.base import BaseReporter
from adstxt.actions.reporters.json_reporter import JsonReporter, YamlReporter
from adstxt.actions.reporters.plain_reporter import PlainReporter
from adstxt.actions.reporters.rich_reporter import RichReporter

REPORTERS: dict[str, type[BaseReporter]] = {
    "rich": RichReporter,
    "plain": PlainReporter,
    "json": JsonReporter,
    "yaml": YamlReporter,
}


def get_reporter(fmt: str, console: Console, show_comments: bool = True) -> BaseReporter:
    """Build the reporter registered for an output format."""
    try:
        reporter_cls = REPORTERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt}") from None
    return reporter_cls(console, show_comments=show_comments)


__all__ = [
    "BaseReporter",
    "JsonReporter",
    "PlainReporter",
    "REPORTERS",
    "RichReporter",
    "YamlReporter",
    "get_reporter",
]
