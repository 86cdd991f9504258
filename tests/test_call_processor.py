from services.call_processor import (
    BROKER_MATCHERS,
    deduplicate_calls,
    extract_broker_id,
    prefer,
    process_call_data,
)
from models.call_data import ProcessedCallData


# ── NORMALIZE ────────────────────────────────────────────────────────────────

def test_process_call_data_maps_fields(entry_factory):
    [call] = process_call_data([entry_factory()])

    assert call.call_id == "call-1"
    assert call.from_number == "+15551230000"
    assert call.to_number == "sip:2001@pbx.example"
    assert call.from_username == "3001@pbx.example"
    assert call.from_name == "Jane Broker"
    assert call.start_time == "2024-01-01T15:04:05Z"
    assert call.duration == 42
    assert call.recording_url == "https://rec.example/1.mp3"
    assert call.date == "2024-01-01"


def test_process_call_data_defaults_for_missing_fields():
    [call] = process_call_data([{}])

    assert call == ProcessedCallData()
    assert call.duration == 0
    assert call.date == ""
    assert call.broker_id == ""


def test_process_call_data_uses_first_recording(entry_factory):
    entry = entry_factory()
    entry["from"]["recordings"] = [{"url": "first"}, {"url": "second"}]

    [call] = process_call_data([entry])

    assert call.recording_url == "first"


def test_process_call_data_one_record_per_entry(entry_factory):
    calls = process_call_data([entry_factory(call_id="a"), entry_factory(call_id="a")])
    assert [c.call_id for c in calls] == ["a", "a"]


# ── BROKER ID ────────────────────────────────────────────────────────────────

def test_matcher_order():
    assert [m.name for m in BROKER_MATCHERS] == ["to.user", "to.value", "from.username", "by.username"]


def test_broker_id_to_user_wins_over_sip_value(entry_factory):
    entry = entry_factory(to_user="broker-77", to_value="sip:2001@pbx.example")
    assert extract_broker_id(entry) == "broker-77"


def test_broker_id_from_sip_value(entry_factory):
    assert extract_broker_id(entry_factory(to_value="sip:2001@pbx.example")) == "2001"


def test_broker_id_falls_back_to_from_username(entry_factory):
    entry = entry_factory(to_value="+15559990000", from_username="3001@pbx.example")
    assert extract_broker_id(entry) == "3001"


def test_broker_id_falls_back_to_by_username(entry_factory):
    entry = entry_factory(to_value="+15559990000", from_username="jane", by_username="4001@pbx.example")
    assert extract_broker_id(entry) == "4001"


def test_broker_id_empty_when_nothing_matches(entry_factory):
    entry = entry_factory(to_value="+15559990000", from_username="jane", by_username="front-desk")
    assert extract_broker_id(entry) == ""


def test_broker_id_skips_empty_to_user(entry_factory):
    assert extract_broker_id(entry_factory(to_user="", to_value="sip:2001@pbx.example")) == "2001"


# ── DEDUPLICATE ──────────────────────────────────────────────────────────────

def _call(call_id, name="", recording="", number=""):
    return ProcessedCallData(call_id=call_id, from_name=name, recording_url=recording, from_number=number)


def test_dedup_complete_record_replaces_incomplete():
    first = _call("a", number="1")
    second = _call("a", name="Jane", recording="https://rec/1", number="2")

    assert deduplicate_calls([first, second]) == [second]


def test_dedup_last_complete_record_wins():
    first = _call("a", name="Jane", recording="https://rec/1", number="1")
    second = _call("a", name="Jane", recording="https://rec/2", number="2")

    assert deduplicate_calls([first, second]) == [second]


def test_dedup_keeps_incumbent_when_candidate_incomplete():
    first = _call("a", name="Jane", recording="https://rec/1", number="1")
    second = _call("a", name="Jane", number="2")

    assert deduplicate_calls([first, second]) == [first]


def test_dedup_blank_name_is_not_complete():
    first = _call("a", number="1")
    second = _call("a", name="   ", recording="https://rec/1", number="2")

    assert prefer(first, second) is first


def test_dedup_preserves_first_insertion_order():
    calls = [_call("b"), _call("a"), _call("b", name="Jane", recording="r"), _call("c")]

    result = deduplicate_calls(calls)

    assert [c.call_id for c in result] == ["b", "a", "c"]
    assert result[0].from_name == "Jane"


def test_broker_id_sip_without_digits_falls_through(entry_factory):
    entry = entry_factory(to_value="sip:front@pbx", from_username="3001@x")
    assert extract_broker_id(entry) == "3001"
