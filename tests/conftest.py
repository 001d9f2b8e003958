"""
Shared test fixtures.

The HTTP adapter is exercised in-process through httpx's ASGI transport,
so no server is started.  The rate limiter is switched off for the test
session.
"""

import io
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from PIL import Image

from devtoolkit.api.app import create_app
from devtoolkit.api.middleware import limiter
from devtoolkit.domain.entities import IconSpec
from devtoolkit.domain.enums import IconShape
from devtoolkit.domain.icons import generate_icon

BLUE = "#3498db"
WHITE_HEX = "#ffffff"


def decode_png(data: bytes) -> Image.Image:
    """Decode image bytes fully so the returned object outlives the buffer."""
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture(autouse=True, scope="session")
def _disable_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def icon_spec() -> IconSpec:
    return IconSpec(
        text="AB",
        shape=IconShape.CIRCLE,
        size=128,
        background_color=BLUE,
        text_color=WHITE_HEX,
    )


@pytest.fixture
def icon_png(icon_spec: IconSpec) -> bytes:
    return generate_icon(icon_spec)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
