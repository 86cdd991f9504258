import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Pattern

from models.call_data import ProcessedCallData

logger = logging.getLogger(__name__)


def _party(entry: Dict[str, Any], name: str) -> Dict[str, Any]:
    return entry.get(name) or {}


# ---------- BROKER ID ----------
@dataclass(frozen=True)
class BrokerMatcher:
    """Reads one address field and optionally captures digits from it."""

    name: str
    source: Callable[[Dict[str, Any]], Optional[str]]
    pattern: Optional[Pattern] = None

    def extract(self, entry: Dict[str, Any]) -> str:
        value = self.source(entry)
        if not value:
            return ""
        if self.pattern is None:
            return str(value)
        match = self.pattern.search(str(value))
        return match.group(1) if match else ""


# Order decides which broker a call is attributed to.
BROKER_MATCHERS = (
    BrokerMatcher("to.user", lambda e: _party(e, "to").get("user")),
    BrokerMatcher("to.value", lambda e: _party(e, "to").get("value"), re.compile(r"sip:(\d+)@")),
    BrokerMatcher("from.username", lambda e: _party(e, "from").get("username"), re.compile(r"(\d+)@")),
    BrokerMatcher("by.username", lambda e: _party(e, "by").get("username"), re.compile(r"(\d+)@")),
)


def extract_broker_id(entry: Dict[str, Any]) -> str:
    for matcher in BROKER_MATCHERS:
        broker_id = matcher.extract(entry)
        if broker_id:
            return broker_id
    return ""


# ---------- NORMALIZE ----------
def process_call_entry(entry: Dict[str, Any]) -> ProcessedCallData:
    from_party = _party(entry, "from")
    to_party = _party(entry, "to")
    recordings = from_party.get("recordings") or []
    recording = recordings[0] if recordings else None
    start_time = entry.get("start_time") or ""

    return ProcessedCallData(
        call_id=from_party.get("call_id") or "",
        from_number=from_party.get("value") or "",
        to_number=to_party.get("value") or "",
        from_username=from_party.get("username") or "",
        from_name=from_party.get("name") or "",
        start_time=start_time,
        duration=entry.get("duration") or 0,
        recording_url=(recording or {}).get("url") or "",
        broker_id=extract_broker_id(entry),
        date=start_time.split("T")[0] if start_time else "",
    )


def process_call_data(raw_entries: Iterable[Dict[str, Any]]) -> List[ProcessedCallData]:
    """Map raw Net2Phone CDR entries to flat call records, one per entry."""
    return [process_call_entry(entry) for entry in raw_entries]


# ---------- DEDUPLICATE ----------
def is_complete(call: ProcessedCallData) -> bool:
    """A record with both a caller name and a recording."""
    return bool(call.from_name.strip() and call.recording_url.strip())


def prefer(incumbent: ProcessedCallData, candidate: ProcessedCallData) -> ProcessedCallData:
    """
    Tie-break for two records sharing a call_id.

    Only the candidate's completeness counts: a complete candidate always
    replaces the incumbent, even one that is itself complete, so the last
    complete record wins. Otherwise the incumbent stays.
    """
    return candidate if is_complete(candidate) else incumbent


def deduplicate_calls(calls: Iterable[ProcessedCallData]) -> List[ProcessedCallData]:
    """Collapse records by call_id, keeping first-seen order of ids."""
    kept: Dict[str, ProcessedCallData] = {}
    for call in calls:
        incumbent = kept.get(call.call_id)
        kept[call.call_id] = call if incumbent is None else prefer(incumbent, call)
    return list(kept.values())
