"""Web server command."""

import click

from ..config import get_log_level
from .base import ensure_initialized, setup_logging


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the API server.

    Examples:

        # Start on default port (8000)
        ring-tracker serve

        # Expose to network (all interfaces)
        ring-tracker serve --host 0.0.0.0

        # Development mode with auto-reload
        ring-tracker serve --reload
    """
    ensure_initialized(ctx)
    setup_logging()

    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting ring-tracker API server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Health:  http://{host}:{port}/health")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "ring_tracker.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=get_log_level().lower(),
    )
