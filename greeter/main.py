"""Greeter: single-route HTTP service."""

import logging
import sys

from fastapi import FastAPI

from greeter.api.routes_root import router as root_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logging.getLogger("greeter").setLevel(logging.INFO)


def create_app() -> FastAPI:
    """Build the ASGI application; one instance per server."""
    app = FastAPI(
        title="Greeter",
        description="Answers GET / with a fixed greeting.",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Mount routers
    app.include_router(root_router)

    return app
