"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

from devtoolkit.config import settings
from devtoolkit.domain.entities import IconSpec
from devtoolkit.domain.enums import IconShape


# ── Requests ──────────────────────────────────────────────────────────


class DistanceRequest(BaseModel):
    # Range checks live in the domain so the caller gets its messages verbatim.
    lat1: float
    lon1: float
    lat2: float
    lon2: float


class IconRequest(BaseModel):
    text: str = Field(..., description="Up to 3 characters are rendered.")
    shape: IconShape = IconShape.CIRCLE
    size: Union[int, str] = Field(
        settings.default_icon_size,
        description="Edge length in pixels; accepts a number or numeric text.",
    )
    background_color: str = Field(settings.default_background_color, examples=["#3498db"])
    text_color: str = Field(settings.default_text_color, examples=["#ffffff"])

    def to_spec(self) -> IconSpec:
        return IconSpec(
            text=self.text,
            shape=self.shape,
            size=self.size,
            background_color=self.background_color,
            text_color=self.text_color,
        )


# ── Responses ─────────────────────────────────────────────────────────


class DistanceResponse(BaseModel):
    kilometers: float
    miles: float
    display: str


class IconBase64Response(BaseModel):
    base64: str
    data_url: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
