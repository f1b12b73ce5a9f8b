"""Parse errors for malformed ads.txt lines.

The lenient parser collects these instead of raising them; the strict
parser raises the first one it meets.
"""


class AdsTxtParseError(ValueError):
    """A single line could not be turned into a record or variable.

    Attributes:
        line_number: 1-based line number in the source text.
        line: The raw line as it appeared in the file.
        reason: Short description of what is wrong.
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class MalformedRecordError(AdsTxtParseError):
    """Wrong field count, empty required field or unknown relation."""


class MalformedVariableError(AdsTxtParseError):
    """Empty variable name or value."""
