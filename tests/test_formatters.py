from datetime import date

import pytest

from models.call_data import DateRange, ProcessedCallData
from utils.dateparse import parse_date
from utils.formatters import export_filename, format_duration, summarize_calls


def test_format_duration():
    assert format_duration(0) == "0m 0s"
    assert format_duration(59) == "0m 59s"
    assert format_duration(125) == "2m 5s"


def test_export_filename():
    name = export_filename(DateRange(start_date="2024-01-01", end_date="2024-01-08"))
    assert name == "call-data-2024-01-01-to-2024-01-08.json"


def test_summarize_calls_counts_recordings():
    calls = [
        ProcessedCallData(call_id="a", recording_url="https://rec/a"),
        ProcessedCallData(call_id="b"),
        ProcessedCallData(call_id="c", recording_url="https://rec/c"),
    ]
    assert summarize_calls(calls) == {"processed_calls": 3, "with_recordings": 2}


def test_parse_date():
    assert parse_date("2024-01-05") == date(2024, 1, 5)


def test_parse_date_rejects_garbage():
    with pytest.raises(ValueError):
        parse_date("not-a-date")
