import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

import httpx

from configuration.net2phone_config import Net2PhoneConfig
from models.call_data import CallIdFetchRequest, Net2PhoneApiResponse
from services.token_manager import TokenManager
from utils.errors import FetchError, describe_provider_error

logger = logging.getLogger(__name__)


def _iso_instant(moment: datetime) -> str:
    """UTC instant with millisecond precision, e.g. 2024-01-01T00:00:00.000Z"""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def day_window(day: date) -> CallIdFetchRequest:
    """Request window covering [day 00:00Z, day+1 00:00Z)."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    end = start + timedelta(days=1)
    return CallIdFetchRequest(start_date=_iso_instant(start), end_date=_iso_instant(end))


class Net2PhoneClient:
    """Net2Phone CDR API: token handling plus one-page call log fetches per day."""

    def __init__(
        self,
        config: Optional[Net2PhoneConfig] = None,
        http: Optional[httpx.AsyncClient] = None,
        token_manager: Optional[TokenManager] = None,
    ):
        self.config = config or Net2PhoneConfig()
        self._http = http or httpx.AsyncClient()
        self.tokens = token_manager or TokenManager(self._http, self.config)

    async def get_access_token(self) -> str:
        return await self.tokens.get_access_token()

    async def get_call_logs(self, day: date) -> Net2PhoneApiResponse:
        # AuthError from the token grant propagates as-is
        token = await self.get_access_token()

        params = day_window(day)
        params.page_size = self.config.page_size
        params.min_duration = self.config.min_duration
        query = params.model_dump()

        logger.info("CDR request %s params=%s", self.config.calls_url, query)
        try:
            response = await self._http.get(
                self.config.calls_url,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Accept": self.config.accept,
                    "Content-Type": "application/json; charset=utf-8",
                },
                params=query,
                timeout=self.config.calls_timeout,
            )
            response.raise_for_status()
            data = Net2PhoneApiResponse(**response.json())
        except (httpx.HTTPError, ValueError, TypeError) as e:
            logger.error("CDR request failed for %s: %s", day.isoformat(), e)
            raise FetchError(f"Failed to fetch call logs: {describe_provider_error(e)}") from e

        # `next` is not followed, only the first page is used
        logger.info(
            "CDR response status=%s results=%s total=%s",
            response.status_code,
            len(data.result or []),
            data.count,
        )
        return data

    async def aclose(self):
        await self._http.aclose()
