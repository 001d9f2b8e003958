"""
FastAPI application factory.

* Registers routes for distance, icons and health.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.

This is one thin adapter over ``devtoolkit.domain``; the command-line
adapter in ``generate_icon.py`` drives the same functions.
"""

import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from devtoolkit.api.middleware import limiter
from devtoolkit.api.routes import distance, health, icons
from devtoolkit.config import settings

logging.basicConfig(level=settings.log_level)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Developer Toolkit API",
        description=(
            "Stateless developer utilities: great-circle distance between "
            "two coordinates and procedural text icons exported as PNG or ICO."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(health.router, prefix="/api/v1")
    app.include_router(distance.router, prefix="/api/v1")
    app.include_router(icons.router, prefix="/api/v1")

    return app
