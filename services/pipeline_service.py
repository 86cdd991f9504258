import asyncio
import logging
from datetime import date, timedelta
from typing import Awaitable, Callable, List

from configuration.net2phone_config import (
    PACING_DELAY_SECONDS,
    RATE_LIMIT_BATCH_SIZE,
    RATE_LIMIT_PAUSE_SECONDS,
)
from models.call_data import PipelineResult, ProcessedCallData
from services.call_processor import deduplicate_calls, process_call_data
from services.net2phone_client import Net2PhoneClient

logger = logging.getLogger(__name__)


def get_date_range(start_date: date, end_date: date) -> List[date]:
    """Every calendar day from start_date up to, not including, end_date."""
    days = []
    current = start_date
    while current < end_date:
        days.append(current)
        current += timedelta(days=1)
    return days


def pause_after(index: int, total: int) -> float:
    """Seconds to wait after the day at ``index`` (0-based) of ``total`` days."""
    if index >= total - 1:
        return 0
    if (index + 1) % RATE_LIMIT_BATCH_SIZE == 0:
        return RATE_LIMIT_PAUSE_SECONDS
    return PACING_DELAY_SECONDS


class CallPipelineService:
    """Stage 1: fetch, normalize and deduplicate call records day by day."""

    def __init__(
        self,
        client: Net2PhoneClient,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.client = client
        self._sleep = sleep

    async def process_day(self, day: date) -> List[ProcessedCallData]:
        call_data = await self.client.get_call_logs(day)
        calls = process_call_data(call_data.result or [])
        return deduplicate_calls(calls)

    async def run(self, start_date: date, end_date: date) -> PipelineResult:
        days = get_date_range(start_date, end_date)
        logger.info("Processing %s days", len(days), extra={"start_date": str(start_date), "end_date": str(end_date)})

        result = PipelineResult()
        for i, day in enumerate(days):
            date_str = day.isoformat()
            logger.info("Processing date: %s (%s/%s)", date_str, i + 1, len(days))
            try:
                deduped = await self.process_day(day)
                if deduped:
                    result.total_calls += len(deduped)
                    result.calls.extend(deduped)
                    logger.info("%s: %s calls found", date_str, len(deduped))
                else:
                    logger.info("%s: no calls found", date_str)
            except Exception as e:
                message = f"Failed to process {date_str}: {str(e) or 'Unknown error'}"
                logger.error(message)
                result.errors.append(message)

            delay = pause_after(i, len(days))
            if delay == RATE_LIMIT_PAUSE_SECONDS:
                logger.info("Rate limiting pause: %s seconds...", delay)
            if delay:
                await self._sleep(delay)

        logger.info(
            "Stage 1 completed",
            extra={"total_calls": result.total_calls, "errors": len(result.errors)},
        )
        return result
