"""Check Action - Line-level diagnosis of an ads.txt file.

Read-only: the action only parses the text it is given and reports
malformed lines and repeated records. It never fetches or resolves
anything.
"""

from dataclasses import dataclass, field

from adstxt.errors import AdsTxtParseError
from adstxt.model.document import AdsTxt, RecordEntry
from adstxt.parser.ads_txt import AdsTxtParser


@dataclass(frozen=True)
class Duplicate:
    """A record that repeats an earlier one."""

    first: RecordEntry
    duplicate: RecordEntry


@dataclass
class CheckReport:
    """Outcome of checking one ads.txt file."""

    ads_txt: AdsTxt
    issues: list[AdsTxtParseError] = field(default_factory=list)
    duplicates: list[Duplicate] = field(default_factory=list)
    total_lines: int = 0

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def exit_code(self, fail_on_duplicates: bool = False) -> int:
        if self.issues:
            return 1
        if fail_on_duplicates and self.duplicates:
            return 1
        return 0


class CheckAction:
    """Parse leniently and collect everything worth reporting."""

    def __init__(self, parser: AdsTxtParser | None = None) -> None:
        self.parser = parser or AdsTxtParser()

    def run(self, data: str | bytes) -> CheckReport:
        lines = self.parser.parse_lines(data)
        ads_txt = self.parser.collect(lines)
        return CheckReport(
            ads_txt=ads_txt,
            issues=list(self.parser.errors),
            duplicates=find_duplicates(ads_txt.records),
            total_lines=len(lines),
        )


def find_duplicates(entries: list[RecordEntry]) -> list[Duplicate]:
    """Find records declared more than once.

    Domains and authority IDs compare case-insensitively; account IDs are
    compared exactly since exchanges may treat them as case-sensitive.
    """
    seen: dict[tuple, RecordEntry] = {}
    duplicates: list[Duplicate] = []
    for entry in entries:
        r = entry.record
        key = (r.domain.lower(), r.account_id, r.relation, (r.authority_id or "").lower())
        if key in seen:
            duplicates.append(Duplicate(first=seen[key], duplicate=entry))
        else:
            seen[key] = entry
    return duplicates
