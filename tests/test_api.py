"""
Integration tests for the REST API endpoints.

Requests go through the full FastAPI stack in-process; responses are
decoded with Pillow where they carry image data.
"""

import base64
import struct
import threading

import pytest
from httpx import AsyncClient

from devtoolkit.api.routes import icons as icon_routes

from tests.conftest import BLUE, WHITE_HEX, decode_png

ICON_BODY = {
    "text": "AB",
    "shape": "circle",
    "size": 128,
    "background_color": BLUE,
    "text_color": WHITE_HEX,
}


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# ── Distance ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_distance(client: AsyncClient):
    resp = await client.post(
        "/api/v1/distance",
        json={"lat1": 40.7128, "lon1": -74.0060, "lat2": 34.0522, "lon2": -118.2437},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert abs(data["kilometers"] - 3944) < 50
    assert data["display"].endswith("miles)")


@pytest.mark.asyncio
async def test_distance_invalid_latitude(client: AsyncClient):
    resp = await client.post(
        "/api/v1/distance", json={"lat1": 91, "lon1": 0, "lat2": 0, "lon2": 0}
    )
    assert resp.status_code == 422
    assert "latitude" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_distance_non_numeric(client: AsyncClient):
    resp = await client.post(
        "/api/v1/distance", json={"lat1": "north", "lon1": 0, "lat2": 0, "lon2": 0}
    )
    assert resp.status_code == 422


# ── Icons ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_icon_png(client: AsyncClient):
    resp = await client.post("/api/v1/icons", json=ICON_BODY)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"
    assert decode_png(resp.content).size == (128, 128)


@pytest.mark.asyncio
async def test_create_icon_defaults(client: AsyncClient):
    resp = await client.post("/api/v1/icons", json={"text": "Z"})
    assert resp.status_code == 200
    assert decode_png(resp.content).size == (128, 128)


@pytest.mark.asyncio
async def test_create_icon_size_as_text(client: AsyncClient):
    resp = await client.post("/api/v1/icons", json={**ICON_BODY, "size": "32"})
    assert resp.status_code == 200
    assert decode_png(resp.content).size == (32, 32)


@pytest.mark.asyncio
async def test_create_icon_identical_colors(client: AsyncClient):
    resp = await client.post(
        "/api/v1/icons", json={**ICON_BODY, "text_color": BLUE.upper()}
    )
    assert resp.status_code == 422
    assert "different" in resp.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.parametrize("size", [15, 2000])
async def test_create_icon_invalid_size(client: AsyncClient, size):
    resp = await client.post("/api/v1/icons", json={**ICON_BODY, "size": size})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Size must be a number between 16 and 1024"


@pytest.mark.asyncio
async def test_create_icon_unknown_shape(client: AsyncClient):
    resp = await client.post("/api/v1/icons", json={**ICON_BODY, "shape": "hexagon"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_icon_base64(client: AsyncClient):
    resp = await client.post("/api/v1/icons/base64", json=ICON_BODY)
    assert resp.status_code == 200
    data = resp.json()
    png = base64.b64decode(data["base64"])
    assert decode_png(png).size == (128, 128)
    assert data["data_url"] == f"data:image/png;base64,{data['base64']}"


@pytest.mark.asyncio
async def test_icon_preview(client: AsyncClient):
    resp = await client.post("/api/v1/icons/preview", json=ICON_BODY)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("image/svg+xml")
    assert "<circle" in resp.text


@pytest.mark.asyncio
async def test_export_png(client: AsyncClient):
    resp = await client.post("/api/v1/icons/export", json=ICON_BODY)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"
    disposition = resp.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="img_generated_')
    assert disposition.endswith('.png"')


@pytest.mark.asyncio
async def test_export_ico(client: AsyncClient):
    resp = await client.post(
        "/api/v1/icons/export", params={"format": "ico", "size": 48}, json=ICON_BODY
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/x-icon"
    assert struct.unpack("<HHH", resp.content[:6]) == (0, 1, 1)
    assert resp.content[6] == 48


@pytest.mark.asyncio
async def test_export_ico_caps_default_size(client: AsyncClient):
    resp = await client.post(
        "/api/v1/icons/export", params={"format": "ico"}, json={**ICON_BODY, "size": 512}
    )
    assert resp.status_code == 200
    # 256 is stored as 0 in the width byte
    assert resp.content[6] == 0


@pytest.mark.asyncio
async def test_export_ico_too_large(client: AsyncClient):
    resp = await client.post(
        "/api/v1/icons/export", params={"format": "ico", "size": 512}, json=ICON_BODY
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_export_unknown_format(client: AsyncClient):
    resp = await client.post(
        "/api/v1/icons/export", params={"format": "gif"}, json=ICON_BODY
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, params",
    [
        ("/api/v1/icons", None),
        ("/api/v1/icons/base64", None),
        ("/api/v1/icons/export", {"format": "ico", "size": 64}),
    ],
)
async def test_rendering_runs_off_the_event_loop(client: AsyncClient, monkeypatch, path, params):
    loop_thread = threading.get_ident()
    seen = []

    def recording(fn):
        def wrapper(*args, **kwargs):
            seen.append(threading.get_ident())
            return fn(*args, **kwargs)

        return wrapper

    monkeypatch.setattr(icon_routes, "generate_icon", recording(icon_routes.generate_icon))
    monkeypatch.setattr(icon_routes, "encode_for_format", recording(icon_routes.encode_for_format))

    resp = await client.post(path, params=params, json=ICON_BODY)
    assert resp.status_code == 200
    assert seen
    assert loop_thread not in seen
