import logging
from typing import Dict, List, Union

from models.call_data import DateRange, ProcessedCallData

logger = logging.getLogger("utils.formatters")


def format_duration(seconds: Union[int, float]) -> str:
    """125 -> '2m 5s'"""
    seconds = int(seconds or 0)
    minutes, remaining = divmod(seconds, 60)
    return f"{minutes}m {remaining}s"


def export_filename(date_range: DateRange) -> str:
    return f"call-data-{date_range.start_date}-to-{date_range.end_date}.json"


def summarize_calls(calls: List[ProcessedCallData]) -> Dict[str, int]:
    """Counts shown above the preview table."""
    with_recordings = sum(1 for call in calls if call.recording_url)
    logger.debug("Summarized calls", extra={"count": len(calls), "with_recordings": with_recordings})
    return {
        "processed_calls": len(calls),
        "with_recordings": with_recordings,
    }
