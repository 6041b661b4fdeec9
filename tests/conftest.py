import os

os.environ.setdefault("LOG_LEVEL", "DEBUG")

from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.core.http_client import get_http_client
from app.main import app
from app.services.resilient_fetcher import get_sleep

PLAYER_BASE = "https://player.test"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def sleep_delays() -> List[float]:
    """Delays the handler asked to sleep for; nothing actually waits."""
    return []


@pytest.fixture
def make_client(sleep_delays):
    """Build a TestClient whose outbound player requests are served by handler."""

    async def _record_sleep(delay: float) -> None:
        sleep_delays.append(delay)

    def _make(handler: Handler, max_attempts: int = 1) -> TestClient:
        settings = Settings(PLAYER_BASE_URL=PLAYER_BASE, FETCH_MAX_ATTEMPTS=max_attempts)

        async def _override_client():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                yield client

        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_http_client] = _override_client
        app.dependency_overrides[get_sleep] = lambda: _record_sleep
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
