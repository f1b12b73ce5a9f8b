"""Rich Reporter Implementation."""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from adstxt.actions.check import CheckReport
from adstxt.actions.reporters.base import BaseReporter
from adstxt.model.document import AdsTxt
from adstxt.model.records import Relation


class RichReporter(BaseReporter):
    """Generates high-fidelity terminal output using Rich."""

    def report_document(self, ads_txt: AdsTxt) -> None:
        """Print records and variables as tables."""
        if ads_txt.is_empty():
            self.console.print("[yellow]No records or variables found.[/]")
            return

        if ads_txt.records:
            self.console.print(self._records_table(ads_txt))
        if ads_txt.variables:
            self.console.print(self._variables_table(ads_txt))

        direct = sum(1 for e in ads_txt.records if e.record.relation == Relation.DIRECT)
        self.console.print(
            f"   [dim]Summary:[/] {len(ads_txt.records)} records "
            f"({direct} direct, {len(ads_txt.records) - direct} reseller), "
            f"{len(ads_txt.variables)} variables"
        )

    def _records_table(self, ads_txt: AdsTxt) -> Table:
        table = Table(title="Records", title_justify="left")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Domain", style="cyan")
        table.add_column("Account ID")
        table.add_column("Relation")
        table.add_column("Authority ID")
        if self.show_comments:
            table.add_column("Comment", style="italic dim")

        for entry in ads_txt.records:
            r = entry.record
            color = "green" if r.relation == Relation.DIRECT else "blue"
            row = [
                str(entry.line_number),
                escape(r.domain),
                escape(r.account_id),
                f"[{color}]{r.relation.value}[/]",
                escape(r.authority_id or ""),
            ]
            if self.show_comments:
                row.append(escape(entry.comment or ""))
            table.add_row(*row)
        return table

    def _variables_table(self, ads_txt: AdsTxt) -> Table:
        table = Table(title="Variables", title_justify="left")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Name", style="magenta")
        table.add_column("Value")
        if self.show_comments:
            table.add_column("Comment", style="italic dim")

        for entry in ads_txt.variables:
            row = [str(entry.line_number), escape(entry.variable.name), escape(entry.variable.value)]
            if self.show_comments:
                row.append(escape(entry.comment or ""))
            table.add_row(*row)
        return table

    def report_check(self, report: CheckReport) -> None:
        """Print malformed lines and duplicates."""
        color = "green" if report.is_valid else "red"
        self.console.print(
            Panel(
                f"{report.total_lines} lines, "
                f"{len(report.ads_txt.records)} records, "
                f"{len(report.ads_txt.variables)} variables, "
                f"[red]{len(report.issues)} malformed[/], "
                f"[yellow]{len(report.duplicates)} duplicates[/]",
                title=f"[{color}]ads.txt check[/]",
                border_style=color,
            )
        )

        for issue in report.issues:
            self.console.print(f"[red]x[/] line {issue.line_number}: {escape(issue.reason)}")
            self.console.print(f"      {issue.line.strip()}", style="italic", markup=False)

        for dup in report.duplicates:
            self.console.print(
                f"[yellow]![/] line {dup.duplicate.line_number}: duplicate of line "
                f"{dup.first.line_number} ({escape(dup.duplicate.record.to_line())})"
            )

        if report.is_valid and not report.duplicates:
            self.console.print("   [green][bold]PASS:[/] No issues found.[/]")
