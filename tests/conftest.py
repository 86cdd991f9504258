"""
Shared fixtures: raw Net2Phone CDR entries and a stubbed provider client.
"""
from datetime import date
from unittest.mock import AsyncMock

import pytest

from models.call_data import Net2PhoneApiResponse


def make_entry(
    call_id="call-1",
    name="Jane Broker",
    recording="https://rec.example/1.mp3",
    to_user=None,
    to_value="sip:2001@pbx.example",
    from_username="3001@pbx.example",
    by_username=None,
    start_time="2024-01-01T15:04:05Z",
    duration=42,
):
    """Build a raw CDR entry shaped like the Net2Phone /cdrs/users/ payload."""
    from_party = {
        "call_id": call_id,
        "value": "+15551230000",
        "username": from_username,
        "name": name,
    }
    if recording:
        from_party["recordings"] = [{"url": recording}]
    to_party = {"value": to_value}
    if to_user is not None:
        to_party["user"] = to_user
    entry = {"from": from_party, "to": to_party, "start_time": start_time, "duration": duration}
    if by_username is not None:
        entry["by"] = {"username": by_username}
    return entry


@pytest.fixture
def entry_factory():
    return make_entry


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def fake_sleep(sleeps):
    async def _sleep(seconds):
        sleeps.append(seconds)
    return _sleep


@pytest.fixture
def one_call_per_day_client():
    """Provider stub returning a single distinct call for every requested day."""
    client = AsyncMock()

    def _logs(day: date):
        entry = make_entry(call_id=f"call-{day.isoformat()}", start_time=f"{day.isoformat()}T10:00:00Z")
        return Net2PhoneApiResponse(result=[entry], count=1)

    client.get_call_logs.side_effect = _logs
    return client
