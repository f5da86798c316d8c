"""Tests for log line decoding."""

from datetime import datetime, timezone

import pytest

from src.gotest_stats.exceptions import RecordDecodeError
from src.gotest_stats.models import RawEvent
from src.gotest_stats.parser import parse_line


class TestParseLine:
    """Tests for parse_line."""

    def test_full_record(self):
        event = parse_line(
            '{"Time":"2023-05-01T10:00:00.123456789Z","Action":"pass",'
            '"Package":"example.com/pkgA","Test":"TestFoo","Output":"ok\\n","Elapsed":0.25}'
        )
        assert event.action == "pass"
        assert event.package == "example.com/pkgA"
        assert event.test == "TestFoo"
        assert event.output == "ok\n"
        assert event.elapsed == 0.25
        assert event.time == datetime(2023, 5, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)

    def test_missing_fields_take_zero_values(self):
        event = parse_line('{"Action":"run"}')
        assert event == RawEvent(action="run")
        assert event.time is None
        assert event.elapsed == 0.0

    def test_unknown_fields_ignored(self):
        event = parse_line('{"Action":"pass","Package":"p","Extra":{"nested":[1,2]}}')
        assert event.package == "p"

    def test_keys_match_case_insensitively(self):
        event = parse_line('{"action":"fail","PACKAGE":"p","elapsed":1}')
        assert event.action == "fail"
        assert event.package == "p"
        assert event.elapsed == 1.0

    def test_duplicate_keys_last_wins(self):
        event = parse_line('{"package":"lower","Package":"exact"}')
        assert event.package == "exact"
        event = parse_line('{"Action":"pass","action":"fail"}')
        assert event.action == "fail"

    def test_null_duplicate_keeps_value(self):
        event = parse_line('{"Action":"pass","action":null}')
        assert event.action == "pass"

    def test_null_fields(self):
        event = parse_line('{"Action":null,"Time":null,"Elapsed":null}')
        assert event == RawEvent()

    def test_null_document(self):
        assert parse_line("null") == RawEvent()

    def test_time_with_offset(self):
        event = parse_line('{"Time":"2023-05-01T12:00:00+02:00"}')
        assert event.time == datetime(2023, 5, 1, 10, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "line",
        [
            '{"Action":"pass"',
            "not json",
            "[1, 2]",
            '"text"',
            '{"Action":1}',
            '{"Elapsed":"1.5"}',
            '{"Elapsed":true}',
            '{"Time":12345}',
            '{"Time":"yesterday"}',
            '{"Time":"2023-05-01T10:00:00"}',
            '{"Elapsed":NaN}',
            '{"Elapsed":Infinity}',
            '{"Elapsed":-Infinity}',
            '{"Action":"run","Extra":NaN}',
            '{"Time":"2023-05-01 10:00:00Z"}',
            '{"Time":"2023-05-01T10:00Z"}',
            '{"Time":"20230501T100000Z"}',
            '{"Time":"2023-05-01"}',
            '{"Time":"2023-05-01T10:00:00Z\\n"}',
            '{"Time":"2023-05-01T25:00:00Z"}',
            "   ",
        ],
    )
    def test_invalid_lines(self, line):
        with pytest.raises(RecordDecodeError):
            parse_line(line)

    def test_error_message_has_reason(self):
        with pytest.raises(RecordDecodeError) as exc_info:
            parse_line("{")
        assert "malformed JSON" in str(exc_info.value)

    def test_non_finite_number_reason(self):
        with pytest.raises(RecordDecodeError) as exc_info:
            parse_line('{"Action":"pass","Package":"p","Elapsed":Infinity}')
        assert "malformed JSON" in str(exc_info.value)

    def test_fractional_time_with_lowercase_key(self):
        event = parse_line('{"time":"2023-05-01T10:00:00.5+00:00"}')
        assert event.time == datetime(2023, 5, 1, 10, 0, 0, 500000, tzinfo=timezone.utc)
