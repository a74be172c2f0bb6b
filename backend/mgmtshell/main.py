"""
mgmtshell management service: command execution over HTTP.
"""

from typing import Optional

from fastapi import FastAPI

from . import __version__
from .commands import CommandRegistry, create_default_registry
from .config import ShellSettings
from .routes import commands as command_routes


def create_app(
    settings: Optional[ShellSettings] = None,
    registry: Optional[CommandRegistry] = None,
) -> FastAPI:
    app = FastAPI(title="mgmtshell", version=__version__)
    app.state.settings = settings or ShellSettings.from_env()
    app.state.command_registry = registry or create_default_registry()
    app.include_router(command_routes.router)
    return app


app = create_app()


def run_server(host: str = "127.0.0.1", port: int = 8090, settings: Optional[ShellSettings] = None) -> None:
    """Serve the management endpoints with uvicorn (blocking)."""
    import uvicorn

    server_app = create_app(settings=settings)
    print(f"Starting mgmtshell management service on {host}:{port}")
    uvicorn.run(server_app, host=host, port=port)
