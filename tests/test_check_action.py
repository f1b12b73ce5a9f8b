"""Tests for the check action."""

from adstxt.actions.check import CheckAction, find_duplicates
from adstxt.errors import MalformedRecordError, MalformedVariableError
from adstxt.parser.ads_txt import AdsTxtParser, parse


class TestCheckAction:
    def test_mixed_fixture(self, mixed_ads_txt):
        report = CheckAction().run(mixed_ads_txt)

        assert not report.is_valid
        assert report.total_lines == 13
        assert [i.line_number for i in report.issues] == [10, 11, 12]
        assert isinstance(report.issues[0], MalformedRecordError)
        assert isinstance(report.issues[2], MalformedVariableError)
        assert report.exit_code() == 1

    def test_valid_file(self, sample_ads_txt):
        report = CheckAction().run(sample_ads_txt)

        assert report.is_valid
        assert report.duplicates == []
        assert report.exit_code() == 0

    def test_duplicates_only_fail_when_asked(self):
        report = CheckAction().run("a.com, 1, DIRECT\nA.COM, 1, direct\n")

        assert report.is_valid
        assert len(report.duplicates) == 1
        assert report.exit_code() == 0
        assert report.exit_code(fail_on_duplicates=True) == 1


class TestFindDuplicates:
    def test_domain_case_ignored(self):
        ads_txt = parse("a.com, 1, DIRECT\nA.com, 1, DIRECT\n")

        dups = find_duplicates(ads_txt.records)

        assert len(dups) == 1
        assert dups[0].first.line_number == 1
        assert dups[0].duplicate.line_number == 2

    def test_account_case_matters(self):
        ads_txt = parse("a.com, abc, DIRECT\na.com, ABC, DIRECT\n")

        assert find_duplicates(ads_txt.records) == []

    def test_relation_distinguishes(self):
        ads_txt = parse("a.com, 1, DIRECT\na.com, 1, RESELLER\n")

        assert find_duplicates(ads_txt.records) == []

    def test_authority_compared(self):
        ads_txt = parse("a.com, 1, DIRECT, tag\na.com, 1, DIRECT\na.com, 1, DIRECT, TAG\n")

        dups = find_duplicates(ads_txt.records)

        assert [(d.first.line_number, d.duplicate.line_number) for d in dups] == [(1, 3)]


class CountingParser(AdsTxtParser):
    """Parser that counts how often the input is split into lines."""

    def __init__(self):
        super().__init__()
        self.passes = 0

    def iter_lines(self, data):
        self.passes += 1
        return super().iter_lines(data)


class TestSinglePass:
    def test_document_classified_once(self, mixed_ads_txt):
        parser = CountingParser()

        report = CheckAction(parser).run(mixed_ads_txt)

        assert parser.passes == 1
        assert report.total_lines == 13
        assert len(report.ads_txt.records) == 4
        assert [i.line_number for i in report.issues] == [10, 11, 12]

    def test_collect_matches_parse(self, parser, mixed_ads_txt):
        collected = parser.collect(parser.parse_lines(mixed_ads_txt))

        assert collected == parse(mixed_ads_txt)
        assert [e.line_number for e in parser.errors] == [10, 11, 12]
