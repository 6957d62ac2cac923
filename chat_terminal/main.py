"""
FastAPI application exposing the simulated terminal to a browser front end.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from chat_terminal.api.routers import router as api_router
from chat_terminal.config.settings import settings
from chat_terminal.container import container

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    outcome = await container.get_bootstrap_use_case().execute()
    logger.info(f"Filesystem ready ({outcome})")
    yield


# Create FastAPI app
app = FastAPI(title="ChatGPT Terminal API", lifespan=lifespan)
app.include_router(api_router)
