"""Tests for sht_colour.core.report and the Report accumulator."""

import json

from sht_colour.core.errors import ParseError, ParseErrorKind
from sht_colour.core.report import format_json, format_text
from sht_colour.core.types import Report


def _report() -> Report:
    report = Report(command='to-rgb', precision=1)
    report.add('r', {'code': 'r', 'hex': '#F00', 'rgb': ['1', '0', '0']})
    report.add_error('rt s', ParseError(ParseErrorKind.TRAILING_GARBAGE, 'rt s', 2))
    return report


class TestReport:
    def test_counts(self):
        report = _report()
        assert report.ok_count == 1
        assert report.error_count == 1
        assert report.failed

    def test_error_row(self):
        row = _report().rows[1]
        assert row['ok'] is False
        assert row['error'] == 'ParseError'
        assert row['kind'] == 'trailing-garbage'

    def test_error_without_kind(self):
        report = Report(command='ramp')
        report.add_error('rs', ValueError('steps must be non-negative'))
        assert report.rows[0]['kind'] is None


class TestFormatText:
    def test_header_and_rows(self):
        text = format_text(_report())
        lines = text.splitlines()
        assert lines[0] == 'sht-colour to-rgb (precision 1)'
        assert '#F00' in text
        assert 'rgb(1, 0, 0)' in text
        assert '✗ trailing-garbage' in text

    def test_summary(self):
        assert format_text(_report()).splitlines()[-1] == 'OK 1/2  FAIL 1/2'

    def test_empty_report_has_no_summary(self):
        assert format_text(Report(command='parse')) == 'sht-colour parse\n'

    def test_generic_fallback(self):
        report = Report(command='other')
        report.add('x', {'answer': 42})
        assert 'answer=42' in format_text(report)


class TestFormatJson:
    def test_structure(self):
        obj = json.loads(format_json(_report()))
        assert obj['command'] == 'to-rgb'
        assert obj['precision'] == 1
        assert obj['rows'][0]['hex'] == '#F00'
        assert obj['summary'] == {'total': 2, 'ok': 1, 'fail': 1}

    def test_precision_omitted_when_unset(self):
        obj = json.loads(format_json(Report(command='parse')))
        assert 'precision' not in obj
