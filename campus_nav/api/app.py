"""
FastAPI application factory.

* Registers routes for roads, locations, routing and admin.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from campus_nav.api.middleware import limiter
from campus_nav.api.routes import admin, locations, roads, routing
from campus_nav.config import settings

logging.basicConfig(level=settings.log_level)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Campus Navigation API",
        description=(
            "Stores user-drawn campus roads and points of interest and "
            "computes walking routes along them, with turn-by-turn "
            "directions and a straight-line fallback."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(roads.router, prefix="/api/v1")
    app.include_router(locations.router, prefix="/api/v1")
    app.include_router(routing.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
