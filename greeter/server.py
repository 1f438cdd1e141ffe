"""uvicorn server wrapper that reports the listening address once bound."""

import logging

import uvicorn

from greeter.config import Settings, load_settings
from greeter.main import create_app

logger = logging.getLogger(__name__)


class GreeterServer(uvicorn.Server):
    """uvicorn.Server that logs a single line after the socket is bound.

    Bind failures are left to uvicorn, which logs the OSError and exits
    with status 1.
    """

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"App listening at http://localhost:{self.config.port}")


def build_server(settings: Settings) -> GreeterServer:
    """Create the app and a server bound to the configured host/port.

    log_level applies to uvicorn's loggers only; greeter loggers follow the
    root configuration from greeter.main.
    """
    config = uvicorn.Config(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
    return GreeterServer(config)


def serve(settings: Settings | None = None) -> None:
    """Resolve settings, bind, and serve until the process is signalled."""
    settings = settings or load_settings()
    build_server(settings).run()


def main() -> None:
    serve()
