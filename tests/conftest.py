"""
Pytest fixtures for content seeder tests.
"""

import io
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from rich.console import Console

from content_seeder.client import ContentApiClient
from content_seeder.config import Settings
from content_seeder.console import SeedConsole

from fake_api import FakeContentApi


FAKE_BASE_URL = "http://test"


@pytest.fixture
def fake_api() -> FakeContentApi:
    """Fresh fake API (12 character password minimum)."""
    return FakeContentApi()


@pytest.fixture
def transport(fake_api: FakeContentApi) -> httpx.ASGITransport:
    """Route client traffic into the fake API in-process."""
    return httpx.ASGITransport(app=fake_api.app)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at the fake API, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        api_base_url=FAKE_BASE_URL,
        output_file=str(tmp_path / "content-ids.json"),
    )


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def quiet_console(console_buffer: io.StringIO) -> SeedConsole:
    """Banner sink writing into a buffer instead of stdout."""
    return SeedConsole(Console(file=console_buffer, width=120, color_system=None))


@pytest_asyncio.fixture
async def api_client(settings: Settings, transport: httpx.ASGITransport):
    """Content API client bound to the fake API."""
    async with ContentApiClient(settings.api_root, transport=transport) as client:
        yield client


def clock_at(seconds: float):
    """Fixed time source for credential generation."""
    return lambda: seconds


@pytest.fixture
def fixed_clock():
    return clock_at(1700000000.5)
