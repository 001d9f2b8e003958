"""
Icon endpoints
==============

POST /api/v1/icons          -- render an icon, returns image/png
POST /api/v1/icons/base64   -- render an icon, returns Base64 text + data URL
POST /api/v1/icons/preview  -- vector live preview, returns image/svg+xml
POST /api/v1/icons/export   -- render and re-encode as PNG or ICO for download
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from devtoolkit.api.dependencies import get_settings
from devtoolkit.api.middleware import limiter
from devtoolkit.api.schemas import ErrorResponse, IconBase64Response, IconRequest
from devtoolkit.config import Settings, settings
from devtoolkit.domain.enums import ExportFormat
from devtoolkit.domain.errors import (
    GenerationFailed,
    IconEncodeError,
    IconError,
    IconValidationError,
)
from devtoolkit.domain.export import (
    encode_for_format,
    icon_to_base64,
    icon_to_data_url,
    suggested_filename,
)
from devtoolkit.domain.icons import generate_icon
from devtoolkit.domain.preview import render_preview_svg

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/icons", tags=["icons"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Image could not be encoded."},
    422: {"model": ErrorResponse, "description": "Request failed validation."},
    500: {"model": ErrorResponse, "description": "Rendering failed unexpectedly."},
}

_MEDIA_TYPES = {ExportFormat.PNG: "image/png", ExportFormat.ICO: "image/x-icon"}


def _to_http(exc: IconError) -> HTTPException:
    if isinstance(exc, IconValidationError):
        return HTTPException(status_code=422, detail=str(exc))
    if isinstance(exc, IconEncodeError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, GenerationFailed):
        return HTTPException(status_code=500, detail=str(exc))
    logger.error("Unmapped icon error: %r", exc)
    return HTTPException(status_code=500, detail=str(exc))


def _render(body: IconRequest, cfg: Settings) -> bytes:
    try:
        return generate_icon(
            body.to_spec(), min_size=cfg.icon_min_size, max_size=cfg.icon_max_size
        )
    except IconError as exc:
        raise _to_http(exc) from exc


@router.post(
    "",
    summary="Generate an icon as PNG",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}, **_ERROR_RESPONSES},
)
@limiter.limit(settings.rate_limit)
def create_icon(
    request: Request,
    body: IconRequest,
    cfg: Settings = Depends(get_settings),
):
    return Response(content=_render(body, cfg), media_type="image/png")


@router.post(
    "/base64",
    response_model=IconBase64Response,
    summary="Generate an icon and return it as Base64 text",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(settings.rate_limit)
def create_icon_base64(
    request: Request,
    body: IconRequest,
    cfg: Settings = Depends(get_settings),
):
    png = _render(body, cfg)
    return IconBase64Response(base64=icon_to_base64(png), data_url=icon_to_data_url(png))


@router.post(
    "/preview",
    summary="Vector live preview",
    response_class=Response,
    responses={200: {"content": {"image/svg+xml": {}}}},
)
@limiter.limit(settings.rate_limit)
async def preview_icon(request: Request, body: IconRequest):
    try:
        size = int(body.size)
    except ValueError:
        size = settings.default_icon_size
    svg = render_preview_svg(
        body.text, body.shape, size, body.background_color, body.text_color
    )
    return Response(content=svg, media_type="image/svg+xml")


@router.post(
    "/export",
    summary="Generate an icon and download it as PNG or ICO",
    description=(
        "ICO exports are resampled to `size` (default: the icon size, "
        "capped at the ICO limit). PNG exports are returned as rendered."
    ),
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}, "image/x-icon": {}}},
        **_ERROR_RESPONSES,
    },
)
@limiter.limit(settings.rate_limit)
def export_icon(
    request: Request,
    body: IconRequest,
    format: ExportFormat = Query(ExportFormat.PNG),
    size: Optional[int] = Query(None, ge=1),
    cfg: Settings = Depends(get_settings),
):
    png = _render(body, cfg)
    if size is None:
        size = int(body.size)
        if format is ExportFormat.ICO:
            size = min(size, cfg.ico_max_size)

    try:
        payload = encode_for_format(png, format, size)
    except IconError as exc:
        raise _to_http(exc) from exc

    filename = suggested_filename(body.text, format)
    return Response(
        content=payload,
        media_type=_MEDIA_TYPES[format],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
