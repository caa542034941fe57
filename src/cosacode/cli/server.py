"""CLI command: cosacode server — start the analysis HTTP API."""

from __future__ import annotations

import click
from rich.console import Console

from cosacode.config import CosaCodeConfig

console = Console(stderr=True)


@click.command()
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to listen on (default: 8471).",
)
def server(port: int | None) -> None:
    """Start the CosaCode analysis API."""
    try:
        import uvicorn
    except ImportError:
        console.print(
            "[red]Web dependencies not installed.[/red]\n"
            "Install with: pip install cosacode\\[web]"
        )
        raise SystemExit(1)

    config = CosaCodeConfig.load()
    if port is not None:
        config.web_port = port

    console.print(
        f"[bold]CosaCode[/bold] API starting on "
        f"[cyan]http://{config.web_host}:{config.web_port}[/cyan]"
    )

    from cosacode.web.app import create_app

    uvicorn.run(
        create_app(config),
        host=config.web_host,
        port=config.web_port,
        log_level="info",
    )
