"""
Run Stage 1 from the command line and write the JSON export.

    python -m scripts.fetch_call_ids 2024-01-01 2024-01-08 --output exports/
"""
import argparse
import asyncio
import json
import logging
from pathlib import Path

from log_config.logging_config import setup_logging
from models.call_data import DateRange
from services.net2phone_client import Net2PhoneClient
from services.pipeline_service import CallPipelineService
from utils.dateparse import parse_date
from utils.formatters import export_filename, format_duration, summarize_calls

logger = logging.getLogger(__name__)

PREVIEW_ROWS = 10


async def fetch_call_ids(date_range: DateRange, output_dir: Path) -> Path:
    start = parse_date(date_range.start_date)
    end = parse_date(date_range.end_date)
    if start >= end:
        raise ValueError("start_date must be before end_date")

    client = Net2PhoneClient()
    try:
        result = await CallPipelineService(client).run(start, end)
    finally:
        await client.aclose()

    summary = summarize_calls(result.calls)
    logger.info(
        "Total calls found: %s, processed: %s, with recordings: %s",
        result.total_calls,
        summary["processed_calls"],
        summary["with_recordings"],
    )
    for error in result.errors:
        logger.warning("Warning: %s", error)
    for call in result.calls[:PREVIEW_ROWS]:
        logger.info(
            "%s | %s - %s | %s | %s | %s",
            call.call_id,
            call.broker_id,
            call.from_name,
            call.from_number,
            format_duration(call.duration),
            "Available" if call.recording_url else "None",
        )

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / export_filename(date_range)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([call.model_dump() for call in result.calls], f, indent=2)
    logger.info("Exported %s calls to %s", len(result.calls), path)
    return path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Fetch Net2Phone call IDs for a date range")
    parser.add_argument("start_date", help="first day, YYYY-MM-DD")
    parser.add_argument("end_date", help="day after the last day, YYYY-MM-DD")
    parser.add_argument("--output", default=".", help="directory for the JSON export")
    args = parser.parse_args(argv)

    setup_logging(name="fetch_call_ids")
    date_range = DateRange(start_date=args.start_date, end_date=args.end_date)
    asyncio.run(fetch_call_ids(date_range, Path(args.output)))


if __name__ == "__main__":
    main()
