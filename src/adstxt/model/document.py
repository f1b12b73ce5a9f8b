"""AdsTxt document model - The parsed contents of one ads.txt file."""

from dataclasses import dataclass, field
from typing import Any

from adstxt.model.records import Record, Variable


@dataclass(frozen=True)
class RecordEntry:
    """A record together with the trailing data found on its line.

    Attributes:
        record: The parsed record.
        comment: Text after the inline '#', without the marker.
        extension: Text after ';' on the record line (ads.txt extension data).
        line_number: 1-based line number in the source text.
    """

    record: Record
    comment: str | None = None
    extension: str | None = None
    line_number: int = 0


@dataclass(frozen=True)
class VariableEntry:
    """A variable together with its trailing comment."""

    variable: Variable
    comment: str | None = None
    line_number: int = 0


# ads.txt v1.0.2 variable names
CONTACT = "contact"
SUBDOMAIN = "subdomain"


@dataclass
class AdsTxt:
    """Structured ads.txt data.

    Records and variables are kept in file order. A variable name that
    appears more than once keeps every occurrence.
    """

    records: list[RecordEntry] = field(default_factory=list)
    variables: list[VariableEntry] = field(default_factory=list)

    def values(self, name: str) -> list[str]:
        """All values declared for a variable name, matched case-insensitively."""
        wanted = name.lower()
        return [e.variable.value for e in self.variables if e.variable.name.lower() == wanted]

    def variables_by_name(self) -> dict[str, list[str]]:
        """Group variable values by name as written in the file."""
        grouped: dict[str, list[str]] = {}
        for entry in self.variables:
            grouped.setdefault(entry.variable.name, []).append(entry.variable.value)
        return grouped

    @property
    def contacts(self) -> list[str]:
        return self.values(CONTACT)

    @property
    def subdomains(self) -> list[str]:
        return self.values(SUBDOMAIN)

    def is_empty(self) -> bool:
        return not self.records and not self.variables

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form used by the JSON and YAML exporters."""
        return {
            "records": [
                {
                    "domain": e.record.domain,
                    "account_id": e.record.account_id,
                    "relation": e.record.relation.value,
                    "authority_id": e.record.authority_id,
                    "comment": e.comment,
                    "extension": e.extension,
                    "line_number": e.line_number,
                }
                for e in self.records
            ],
            "variables": [
                {
                    "name": e.variable.name,
                    "value": e.variable.value,
                    "comment": e.comment,
                    "line_number": e.line_number,
                }
                for e in self.variables
            ],
        }
