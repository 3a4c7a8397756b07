"""Entry point for running the Team Step Counter API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables via ``Settings``.  Defaults are ``0.0.0.0`` and ``7777``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from step_counter_api.app.core.config import settings
from step_counter_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
