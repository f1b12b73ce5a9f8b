"""Tests for output reporters."""

import io
import json

import pytest
import yaml
from rich.console import Console

from adstxt.actions.check import CheckAction
from adstxt.actions.reporters import (
    JsonReporter,
    PlainReporter,
    RichReporter,
    YamlReporter,
    get_reporter,
)
from adstxt.parser.ads_txt import parse


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


def output(console):
    return console.file.getvalue()


class TestGetReporter:
    @pytest.mark.parametrize(
        "fmt, cls",
        [("rich", RichReporter), ("plain", PlainReporter), ("json", JsonReporter), ("yaml", YamlReporter)],
    )
    def test_known_formats(self, console, fmt, cls):
        assert isinstance(get_reporter(fmt, console), cls)

    def test_unknown_format(self, console):
        with pytest.raises(ValueError, match="Unknown output format"):
            get_reporter("html", console)


class TestRichReporter:
    def test_document_tables(self, console, mixed_ads_txt):
        RichReporter(console).report_document(parse(mixed_ads_txt))

        text = output(console)
        assert "greenadexchange.com" in text
        assert "via partner" in text
        assert "adops@example.com" in text
        assert "4 records (2 direct, 2 reseller), 3 variables" in text

    def test_hides_comments(self, console, mixed_ads_txt):
        RichReporter(console, show_comments=False).report_document(parse(mixed_ads_txt))

        assert "via partner" not in output(console)

    def test_empty_document(self, console):
        RichReporter(console).report_document(parse("# nothing\n"))

        assert "No records or variables found." in output(console)

    def test_markup_in_values_is_escaped(self, console):
        RichReporter(console).report_document(parse("contact=[bold]ops[/bold]"))

        assert "[bold]ops[/bold]" in output(console)

    def test_check_lists_issues(self, console, mixed_ads_txt):
        RichReporter(console).report_check(CheckAction().run(mixed_ads_txt))

        text = output(console)
        assert "line 11: unknown relation 'PARTNER'" in text
        assert "orangeexchange.com, 45678, PARTNER" in text

    def test_check_pass(self, console, sample_ads_txt):
        RichReporter(console).report_check(CheckAction().run(sample_ads_txt))

        assert "PASS: No issues found." in output(console)


class TestPlainReporter:
    def test_document_lines(self, console, mixed_ads_txt):
        PlainReporter(console).report_document(parse(mixed_ads_txt))

        lines = output(console).splitlines()
        assert "4: silverssp.com, 9675, RESELLER # via partner" in lines
        assert "5: redssp.com, 4536, RESELLER, f08c47fec0942fa0 ; ext-data" in lines
        assert "7: contact=adops@example.com" in lines

    def test_check_lines(self, console, mixed_ads_txt):
        PlainReporter(console).report_check(CheckAction().run(mixed_ads_txt))

        text = output(console)
        assert "3 malformed" in text
        assert '[MALFORMED] line=10 reason="expected 3 or 4 comma-separated fields, found 1"' in text


class TestJsonReporter:
    def test_document(self, console, sample_ads_txt):
        JsonReporter(console).report_document(parse(sample_ads_txt))

        data = json.loads(output(console))
        assert data["records"][0]["authority_id"] == "d75815a79"
        assert [v["value"] for v in data["variables"]][:2] == [
            "adops@example.com",
            "http://example.com/contact-us",
        ]

    def test_document_without_comments(self, console):
        JsonReporter(console, show_comments=False).report_document(parse("a.com, 1, DIRECT # c"))

        data = json.loads(output(console))
        assert "comment" not in data["records"][0]

    def test_check(self, console, mixed_ads_txt):
        JsonReporter(console).report_check(CheckAction().run(mixed_ads_txt))

        data = json.loads(output(console))
        assert data["valid"] is False
        assert [i["kind"] for i in data["issues"]] == [
            "MalformedRecordError",
            "MalformedRecordError",
            "MalformedVariableError",
        ]


class TestYamlReporter:
    def test_document(self, console, sample_ads_txt):
        YamlReporter(console).report_document(parse(sample_ads_txt))

        data = yaml.safe_load(output(console))
        assert data["records"][1]["domain"] == "blueadexchange.com"
        assert data["variables"][2]["name"] == "subdomain"
