import asyncio
import logging
import time
from typing import Callable, Optional

import httpx

from configuration.net2phone_config import Net2PhoneConfig, TOKEN_EXPIRY_MARGIN_SECONDS
from models.call_data import Net2PhoneTokenResponse
from utils.errors import AuthError, describe_provider_error

logger = logging.getLogger(__name__)


class TokenManager:
    """Caches the Net2Phone OAuth2 client-credentials token for one service instance."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        config: Net2PhoneConfig,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._http = http
        self._config = config
        self._clock = clock
        self._access_token: Optional[str] = None
        self._expires_at: Optional[float] = None
        # one refresh at a time, waiters reuse the fresh token
        self._lock = asyncio.Lock()

    def _cached(self) -> Optional[str]:
        if self._access_token and self._expires_at is not None and self._clock() < self._expires_at:
            return self._access_token
        return None

    async def get_access_token(self) -> str:
        token = self._cached()
        if token:
            return token

        async with self._lock:
            token = self._cached()
            if token:
                return token
            return await self._request_token()

    async def _request_token(self) -> str:
        if not self._config.client_id or not self._config.client_secret:
            logger.error("Net2Phone client credentials are not configured")
            raise AuthError("Failed to get access token: NET2PHONE_CLIENT_ID and NET2PHONE_CLIENT_SECRET must be set")

        data = {
            "grant_type": "client_credentials",
            "client_id": self._config.client_id,
            "client_secret": self._config.client_secret,
        }
        try:
            response = await self._http.post(
                self._config.token_url,
                data=data,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self._config.token_timeout,
            )
            response.raise_for_status()
            payload = Net2PhoneTokenResponse(**response.json())
        except (httpx.HTTPError, ValueError, TypeError) as e:
            logger.error("Failed to get access token: %s", e)
            raise AuthError(f"Failed to get access token: {describe_provider_error(e)}") from e

        self._access_token = payload.access_token
        self._expires_at = self._clock() + (payload.expires_in - TOKEN_EXPIRY_MARGIN_SECONDS)
        logger.info("Obtained Net2Phone access token", extra={"expires_in": payload.expires_in})
        return self._access_token
