"""
Distance endpoint
=================

POST /api/v1/distance -- great-circle distance between two lat/lon points
"""

from fastapi import APIRouter, HTTPException, Request

from devtoolkit.api.middleware import limiter
from devtoolkit.api.schemas import DistanceRequest, DistanceResponse, ErrorResponse
from devtoolkit.config import settings
from devtoolkit.domain.distance import (
    DistanceError,
    calculate_with_validation,
    format_distance,
)

router = APIRouter(prefix="/distance", tags=["distance"])


@router.post(
    "",
    response_model=DistanceResponse,
    summary="Haversine distance between two points",
    responses={422: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def calculate(request: Request, body: DistanceRequest):
    try:
        distance = calculate_with_validation(body.lat1, body.lon1, body.lat2, body.lon2)
    except DistanceError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return DistanceResponse(
        kilometers=distance.kilometers,
        miles=distance.miles,
        display=format_distance(distance),
    )
