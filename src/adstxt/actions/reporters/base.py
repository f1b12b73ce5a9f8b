"""Base Reporter Interface."""

from abc import ABC, abstractmethod

from rich.console import Console

from adstxt.actions.check import CheckReport
from adstxt.model.document import AdsTxt


class BaseReporter(ABC):
    """Abstract base class for all output reporters."""

    def __init__(self, console: Console, show_comments: bool = True) -> None:
        self.console = console
        self.show_comments = show_comments

    @abstractmethod
    def report_document(self, ads_txt: AdsTxt) -> None:
        """Display parsed records and variables."""
        pass

    @abstractmethod
    def report_check(self, report: CheckReport) -> None:
        """Display the diagnosis of a checked file."""
        pass
