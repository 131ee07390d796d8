"""Checkout server command."""

from typing import Optional

import click
from rich.console import Console

from midi_configurator.config import get_settings

console = Console()


@click.command()
@click.option("--host", default=None, help="Bind host (defaults to settings)")
@click.option("--port", "-p", type=int, default=None, help="Bind port (defaults to settings)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Run the checkout backend."""
    import uvicorn

    settings = get_settings()
    host = host or settings.web_host
    port = port or settings.web_port

    console.print(f"[bold]Starting MIDI configurator API[/bold] on http://{host}:{port}")
    uvicorn.run(
        "midi_configurator.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_level=settings.log_level.lower(),
    )
