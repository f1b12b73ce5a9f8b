"""Per-line classification of an ads.txt file."""

from dataclasses import dataclass
from enum import Enum

from adstxt.errors import AdsTxtParseError
from adstxt.model.records import Record, Variable


class LineKind(Enum):
    """What a single source line turned out to be."""

    EMPTY = "empty"
    COMMENT = "comment"
    RECORD = "record"
    VARIABLE = "variable"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParsedLine:
    """One source line and what the parser made of it.

    Exactly one of record / variable / error is set for RECORD, VARIABLE
    and INVALID lines. For COMMENT lines the whole-line comment text is in
    comment.
    """

    kind: LineKind
    line_number: int
    raw: str
    record: Record | None = None
    variable: Variable | None = None
    comment: str | None = None
    extension: str | None = None
    error: AdsTxtParseError | None = None

    @property
    def is_data(self) -> bool:
        return self.kind in (LineKind.RECORD, LineKind.VARIABLE)
