from typing import AsyncIterator, Dict

import httpx
from fastapi import Depends

from app.core.config import Settings, get_settings


def build_client(settings: Settings) -> httpx.AsyncClient:
    headers: Dict[str, str] = {
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent
    return httpx.AsyncClient(
        timeout=settings.request_timeout,
        follow_redirects=True,
        headers=headers,
    )


async def get_http_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """One client per request, closed when the response has been sent."""
    async with build_client(settings) as client:
        yield client
