import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from configuration.net2phone_config import Net2PhoneConfig
from services.net2phone_client import Net2PhoneClient
from services.pipeline_service import CallPipelineService

logger = logging.getLogger(__name__)


# --------------------------------
# Net2Phone client (Lifespan)
# --------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    config = Net2PhoneConfig()
    if not config.client_id or not config.client_secret:
        logger.critical("NET2PHONE_CLIENT_ID / NET2PHONE_CLIENT_SECRET are not set in .env")

    app.net2phone_client = Net2PhoneClient(config=config, http=httpx.AsyncClient())
    app.pipeline_service = CallPipelineService(app.net2phone_client)
    logger.info("Net2Phone client ready for %s", config.base_url)
    try:
        yield
    finally:
        await app.net2phone_client.aclose()
        logger.warning("Net2Phone client closed.")


# --------------------------------
# Dependency
# --------------------------------
async def get_pipeline_service(request: Request) -> CallPipelineService:
    return request.app.pipeline_service
