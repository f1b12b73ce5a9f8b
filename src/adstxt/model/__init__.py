"""Model package - Core data structures for adstxt."""

from adstxt.model.document import AdsTxt, RecordEntry, VariableEntry
from adstxt.model.line import LineKind, ParsedLine
from adstxt.model.records import Record, Relation, Variable

__all__ = [
    "AdsTxt",
    "LineKind",
    "ParsedLine",
    "Record",
    "RecordEntry",
    "Relation",
    "Variable",
    "VariableEntry",
]
