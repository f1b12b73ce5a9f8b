"""Plain Text Reporter Implementation."""

from adstxt.actions.check import CheckReport
from adstxt.actions.reporters.base import BaseReporter
from adstxt.model.document import AdsTxt


class PlainReporter(BaseReporter):
    """Generates clean, text-only output."""

    def _line(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False)

    def report_document(self, ads_txt: AdsTxt) -> None:
        """Print one line per record and variable."""
        self._line("RECORDS")
        for entry in ads_txt.records:
            text = f"{entry.line_number}: {entry.record.to_line()}"
            if entry.extension is not None:
                text += f" ; {entry.extension}"
            if self.show_comments and entry.comment:
                text += f" # {entry.comment}"
            self._line(text)

        self._line()
        self._line("VARIABLES")
        for entry in ads_txt.variables:
            text = f"{entry.line_number}: {entry.variable.to_line()}"
            if self.show_comments and entry.comment:
                text += f" # {entry.comment}"
            self._line(text)

    def report_check(self, report: CheckReport) -> None:
        """Print a summary line followed by every problem found."""
        self._line("CHECK RESULTS")
        self._line(
            f"Summary: {report.total_lines} lines, {len(report.ads_txt.records)} records, "
            f"{len(report.ads_txt.variables)} variables, {len(report.issues)} malformed, "
            f"{len(report.duplicates)} duplicates"
        )
        for issue in report.issues:
            self._line(f"[MALFORMED] line={issue.line_number} reason=\"{issue.reason}\"")
        for dup in report.duplicates:
            self._line(
                f"[DUPLICATE] line={dup.duplicate.line_number} first={dup.first.line_number}"
            )
