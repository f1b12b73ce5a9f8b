"""JSON and YAML Reporter Implementations."""

import json
from typing import Any

import yaml

from adstxt.actions.check import CheckReport
from adstxt.actions.reporters.base import BaseReporter
from adstxt.model.document import AdsTxt


class JsonReporter(BaseReporter):
    """Generates machine-readable JSON output."""

    def _dump(self, data: Any) -> str:
        return json.dumps(data, indent=2)

    def _emit(self, data: Any) -> None:
        # out() skips wrapping, which would corrupt long values
        self.console.out(self._dump(data), highlight=False)

    def report_document(self, ads_txt: AdsTxt) -> None:
        data = ads_txt.to_dict()
        if not self.show_comments:
            for item in data["records"] + data["variables"]:
                item.pop("comment", None)
        self._emit(data)

    def report_check(self, report: CheckReport) -> None:
        self._emit(
            {
                "valid": report.is_valid,
                "total_lines": report.total_lines,
                "records": len(report.ads_txt.records),
                "variables": len(report.ads_txt.variables),
                "issues": [
                    {
                        "line_number": issue.line_number,
                        "kind": type(issue).__name__,
                        "reason": issue.reason,
                        "line": issue.line,
                    }
                    for issue in report.issues
                ],
                "duplicates": [
                    {
                        "line_number": dup.duplicate.line_number,
                        "first_line_number": dup.first.line_number,
                        "record": dup.duplicate.record.to_line(),
                    }
                    for dup in report.duplicates
                ],
            }
        )


class YamlReporter(JsonReporter):
    """Same payload as JsonReporter, rendered as YAML."""

    def _dump(self, data: Any) -> str:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
