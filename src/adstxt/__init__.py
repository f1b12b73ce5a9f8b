"""adstxt: parser for the ads.txt authorized-sellers format (IAB v1.0.2)."""

__version__ = "0.3.0"

from adstxt.errors import AdsTxtParseError, MalformedRecordError, MalformedVariableError
from adstxt.model import (
    AdsTxt,
    LineKind,
    ParsedLine,
    Record,
    RecordEntry,
    Relation,
    Variable,
    VariableEntry,
)
from adstxt.parser import AdsTxtParser, parse, parse_lines, parse_strict

__all__ = [
    "AdsTxt",
    "AdsTxtParseError",
    "AdsTxtParser",
    "LineKind",
    "MalformedRecordError",
    "MalformedVariableError",
    "ParsedLine",
    "Record",
    "RecordEntry",
    "Relation",
    "Variable",
    "VariableEntry",
    "__version__",
    "parse",
    "parse_lines",
    "parse_strict",
]
