import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

# --------------------------------
# Net2Phone API
# --------------------------------
NET2PHONE_BASE_URL = "https://integrate.versature.com/api"
NET2PHONE_ACCEPT = "application/vnd.integrate.v1.10.0+json"


class Net2PhoneConfig(BaseModel):
    base_url: str = NET2PHONE_BASE_URL
    token_endpoint: str = "/oauth/token/"
    calls_endpoint: str = "/cdrs/users/"
    page_size: int = 1000
    min_duration: int = 15  # seconds, shorter calls are filtered server side
    token_timeout: float = 30.0
    calls_timeout: float = 60.0
    accept: str = NET2PHONE_ACCEPT
    client_id: Optional[str] = Field(default_factory=lambda: os.getenv("NET2PHONE_CLIENT_ID"))
    client_secret: Optional[str] = Field(default_factory=lambda: os.getenv("NET2PHONE_CLIENT_SECRET"))

    @property
    def token_url(self) -> str:
        return self.base_url + self.token_endpoint

    @property
    def calls_url(self) -> str:
        return self.base_url + self.calls_endpoint


# --------------------------------
# Pacing (provider rate limits)
# --------------------------------
TOKEN_EXPIRY_MARGIN_SECONDS = 60
PACING_DELAY_SECONDS = 1
RATE_LIMIT_BATCH_SIZE = 15
RATE_LIMIT_PAUSE_SECONDS = 60
