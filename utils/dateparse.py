from dateparser import parse as dateparse
from datetime import date
import logging

logger = logging.getLogger("utils.dateparse")

DATE_FORMAT = "%Y-%m-%d"


def parse_date(raw_date: str) -> date:
    """
    Parse a YYYY-MM-DD (or other absolute) date string into a calendar date.
    Relative phrases like "yesterday" are rejected.
    """
    dt = dateparse(
        raw_date,
        date_formats=[DATE_FORMAT],
        settings={
            "PARSERS": ["custom-formats", "absolute-time"],
            "TIMEZONE": "UTC",
            "TO_TIMEZONE": "UTC",
            "RETURN_AS_TIMEZONE_AWARE": False,
        },
    )

    if not dt:
        logger.warning("Cannot parse date", extra={"raw_date": raw_date})
        raise ValueError(f"Cannot parse date: {raw_date}")

    return dt.date()
