"""Resolve a movie/episode ID to the direct MP4 link embedded in its player page.

GET /api/get-mp4-link?id=<id> (also served at /api/?id=<id>)
"""

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.core.http_client import get_http_client
from app.schemas.mp4_link import Mp4LinkResponse
from app.services.link_extractor import extract_media_url
from app.services.resilient_fetcher import FetchError, SleepFunc, fetch_with_retry, get_sleep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["mp4-link"])

MISSING_ID_MESSAGE = "Movie/episode ID not provided. Use the route /api/?id=YOUR_ID"
NOT_FOUND_MESSAGE = "MP4 link not found in the player. The player HTML may have changed."


def build_player_url(base_url: str, media_id: str) -> str:
    return f"{base_url}/e/{media_id}"


def _respond(status_code: int, body: Mp4LinkResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.to_body())


@router.get("/get-mp4-link")
@router.get("/")
async def get_mp4_link(
    media_id: Optional[str] = Query(default=None, alias="id"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
    sleep: SleepFunc = Depends(get_sleep),
):
    if not media_id:
        return _respond(400, Mp4LinkResponse(success=False, message=MISSING_ID_MESSAGE))

    player_url = build_player_url(settings.player_base_url, media_id)

    try:
        html = await fetch_with_retry(client, player_url, settings.max_attempts, sleep=sleep)
    except FetchError as e:
        logger.error(f"Player fetch failed for ID {media_id!r}: {e}")
        return _respond(500, Mp4LinkResponse(
            success=False,
            message=f"Internal server error while processing the request for ID {media_id}.",
            details=str(e),
        ))

    mp4_link = extract_media_url(html)
    if not mp4_link:
        logger.warning(f"No MP4 link in player page for ID {media_id!r}")
        return _respond(404, Mp4LinkResponse(success=False, message=NOT_FOUND_MESSAGE))

    logger.info(f"Resolved ID {media_id!r} -> {mp4_link}")
    return _respond(200, Mp4LinkResponse(success=True, id=media_id, mp4_link=mp4_link))
