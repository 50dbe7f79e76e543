"""CLI command that runs the HTTP API."""

from __future__ import annotations

import click
import uvicorn

from grubdash.infrastructure.config import get_settings, setup_logging


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default from settings).")
@click.option("--port", type=int, default=None, help="Port to listen on (default from settings).")
@click.option("--reload", is_flag=True, help="Restart on code changes (development only).")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the dishes and orders API."""
    settings = get_settings()
    setup_logging(settings)

    uvicorn.run(
        "grubdash.infrastructure.web.app:create_app",
        factory=True,
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
        log_config=None,
    )
