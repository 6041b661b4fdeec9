import logging
import os

from fastapi import FastAPI

LOG_LEVEL_STR = os.getenv("LOG_LEVEL")
if not LOG_LEVEL_STR:
    raise ValueError("LOG_LEVEL is required")

LOG_LEVEL = getattr(logging, LOG_LEVEL_STR.upper(), None)
if not isinstance(LOG_LEVEL, int):
    raise ValueError(f"Invalid LOG_LEVEL: {LOG_LEVEL_STR}")

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)

from app.api.mp4_link import router as mp4_link_router
from app.core.config import get_settings
from app.core.cors import CORSHeadersMiddleware

logger = logging.getLogger(__name__)

settings = get_settings()
logger.info(f"Player base: {settings.player_base_url} (max_attempts={settings.max_attempts})")

app = FastAPI(
    title="MP4 Link Fetcher API",
    description="Extracts the direct MP4 link from an external player page by movie/episode ID",
    version="1.0.0",
)

app.add_middleware(CORSHeadersMiddleware)

app.include_router(mp4_link_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
