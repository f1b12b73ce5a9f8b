"""ads.txt Parser.

Parses the text of an ads.txt file (IAB v1.0.2) into an AdsTxt structure.
Every line is handled on its own, so one malformed line never spoils the
rest of the file.

LINE GRAMMAR:
1. Blank lines and lines starting with '#' carry no data
2. The first '#' on any other line starts a trailing comment
3. '=' before the first ',' makes the line a variable (name=value)
4. Otherwise the line is a record: domain, account id, relation[, authority id]
5. Record lines may carry extension data after ';'
"""

import logging
from collections.abc import Iterable, Iterator

from adstxt.errors import AdsTxtParseError, MalformedRecordError, MalformedVariableError
from adstxt.model.document import AdsTxt, RecordEntry, VariableEntry
from adstxt.model.line import LineKind, ParsedLine
from adstxt.model.records import Record, Relation, Variable

logger = logging.getLogger(__name__)


class AdsTxtParser:
    """Parser for ads.txt contents.

    parse() is lenient: malformed lines are skipped and collected in
    self.errors. parse_strict() raises the first malformed line instead.
    """

    COMMENT_MARKER = "#"
    EXTENSION_MARKER = ";"
    VARIABLE_DELIMITER = "="
    FIELD_DELIMITER = ","

    def __init__(self) -> None:
        self.errors: list[AdsTxtParseError] = []

    def parse(self, data: str | bytes, strict: bool = False) -> AdsTxt:
        """Parse ads.txt contents into records and variables.

        Args:
            data: Complete file contents. Bytes are decoded as UTF-8.
            strict: Raise on the first malformed line instead of skipping it.

        Returns:
            AdsTxt with records and variables in file order.

        Raises:
            MalformedRecordError: In strict mode, for a bad record line.
            MalformedVariableError: In strict mode, for a bad variable line.
        """
        return self.collect(self.iter_lines(data), strict=strict)

    def collect(self, lines: Iterable[ParsedLine], strict: bool = False) -> AdsTxt:
        """Build an AdsTxt from already classified lines.

        Invalid lines go to self.errors, or are raised when strict is set.
        """
        self.errors = []
        result = AdsTxt()

        for line in lines:
            if line.kind == LineKind.RECORD:
                result.records.append(
                    RecordEntry(
                        record=line.record,
                        comment=line.comment,
                        extension=line.extension,
                        line_number=line.line_number,
                    )
                )
            elif line.kind == LineKind.VARIABLE:
                result.variables.append(
                    VariableEntry(
                        variable=line.variable,
                        comment=line.comment,
                        line_number=line.line_number,
                    )
                )
            elif line.kind == LineKind.INVALID:
                if strict:
                    raise line.error
                logger.debug("Skipping line %d: %s", line.line_number, line.error.reason)
                self.errors.append(line.error)

        logger.debug(
            "Parsed %d records, %d variables (%d lines skipped)",
            len(result.records),
            len(result.variables),
            len(self.errors),
        )
        return result

    def parse_strict(self, data: str | bytes) -> AdsTxt:
        """Parse, failing on the first malformed line."""
        return self.parse(data, strict=True)

    def parse_lines(self, data: str | bytes) -> list[ParsedLine]:
        """Classify every line, including blanks, comments and invalid lines."""
        return list(self.iter_lines(data))

    def iter_lines(self, data: str | bytes) -> Iterator[ParsedLine]:
        text = self._decode(data)
        for line_num, line in enumerate(text.split("\n"), start=1):
            yield self._parse_line(line.rstrip("\r"), line_num)

    @staticmethod
    def _decode(data: str | bytes) -> str:
        if isinstance(data, bytes):
            # utf-8-sig drops a leading BOM
            return data.decode("utf-8-sig", errors="replace")
        if data.startswith("\ufeff"):
            return data[1:]
        return data

    def _parse_line(self, line: str, line_num: int) -> ParsedLine:
        """Parse a single raw line.

        Args:
            line: The line without its line ending.
            line_num: 1-based line number.
        """
        stripped = line.strip()
        if not stripped:
            return ParsedLine(kind=LineKind.EMPTY, line_number=line_num, raw=line)

        if stripped.startswith(self.COMMENT_MARKER):
            return ParsedLine(
                kind=LineKind.COMMENT,
                line_number=line_num,
                raw=line,
                comment=stripped[1:].strip(),
            )

        body, marker, comment_text = stripped.partition(self.COMMENT_MARKER)
        body = body.strip()
        comment = comment_text.strip() if marker else None

        eq_pos = body.find(self.VARIABLE_DELIMITER)
        comma_pos = body.find(self.FIELD_DELIMITER)
        if eq_pos != -1 and (comma_pos == -1 or eq_pos < comma_pos):
            return self._parse_variable(body, line, line_num, comment)
        return self._parse_record(body, line, line_num, comment)

    def _parse_variable(
        self, body: str, line: str, line_num: int, comment: str | None
    ) -> ParsedLine:
        name, _, value = body.partition(self.VARIABLE_DELIMITER)
        name = name.strip()
        value = value.strip()

        if not name:
            return self._invalid(MalformedVariableError(line_num, line, "empty variable name"))
        if not value:
            return self._invalid(MalformedVariableError(line_num, line, "empty variable value"))

        return ParsedLine(
            kind=LineKind.VARIABLE,
            line_number=line_num,
            raw=line,
            variable=Variable(name=name, value=value),
            comment=comment,
        )

    def _parse_record(
        self, body: str, line: str, line_num: int, comment: str | None
    ) -> ParsedLine:
        body, marker, extension_text = body.partition(self.EXTENSION_MARKER)
        extension = extension_text.strip() if marker else None

        fields = [f.strip() for f in body.split(self.FIELD_DELIMITER)]
        if len(fields) not in (3, 4):
            return self._invalid(
                MalformedRecordError(
                    line_num, line, f"expected 3 or 4 comma-separated fields, found {len(fields)}"
                )
            )

        domain, account_id, relation_text = fields[:3]
        for value, label in ((domain, "domain"), (account_id, "account id"), (relation_text, "relation")):
            if not value:
                return self._invalid(MalformedRecordError(line_num, line, f"empty {label}"))

        relation = Relation.parse(relation_text)
        if relation is None:
            return self._invalid(
                MalformedRecordError(line_num, line, f"unknown relation {relation_text!r}")
            )

        authority_id = fields[3] if len(fields) == 4 and fields[3] else None

        return ParsedLine(
            kind=LineKind.RECORD,
            line_number=line_num,
            raw=line,
            record=Record(
                domain=domain,
                account_id=account_id,
                relation=relation,
                authority_id=authority_id,
            ),
            comment=comment,
            extension=extension,
        )

    @staticmethod
    def _invalid(error: AdsTxtParseError) -> ParsedLine:
        return ParsedLine(
            kind=LineKind.INVALID,
            line_number=error.line_number,
            raw=error.line,
            error=error,
        )


def parse(data: str | bytes) -> AdsTxt:
    """Parse ads.txt contents, skipping malformed lines."""
    return AdsTxtParser().parse(data)


def parse_strict(data: str | bytes) -> AdsTxt:
    """Parse ads.txt contents, raising on the first malformed line."""
    return AdsTxtParser().parse_strict(data)


def parse_lines(data: str | bytes) -> list[ParsedLine]:
    """Classify every line of ads.txt contents."""
    return AdsTxtParser().parse_lines(data)
