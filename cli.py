"""
CLI tool for running and inspecting the bookstore service.

Provides commands to serve the API, create the database tables and list
the registered HTTP routes.
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bookstore.routing import list_http_routes
from bookstore.storage.db import create_tables, engine

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="bookstore-cli",
    help="Bookstore API Management CLI - Serve the API and manage its database",
    add_completion=False,
)
console = Console()


@typer_app.command(name="serve")
def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(
        False, "--reload", help="Restart the server on code changes"
    ),
):
    """
    Run the API with uvicorn.

    Example:
        python cli.py serve --port 8080
    """
    import uvicorn

    uvicorn.run(
        "bookstore:application",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@typer_app.command(name="init-db")
def init_db():
    """
    Create every missing table from the model metadata.

    Example:
        python cli.py init-db
    """

    async def _run() -> None:
        try:
            await create_tables()
        finally:
            await engine.dispose()

    asyncio.run(_run())
    console.print(
        Panel.fit(
            "[green]✓ Database tables created[/green]",
            border_style="green",
            title="Success",
        )
    )


@typer_app.command(name="routes")
def routes():
    """
    Display a table of all registered HTTP routes.

    Example:
        python cli.py routes
    """
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Registered HTTP Routes[/bold cyan]",
            border_style="cyan",
        )
    )
    console.print()

    table = Table(
        "Methods",
        "Path",
        "Handler",
        title="HTTP Routes",
        show_lines=True,
    )

    api_routes = list_http_routes()
    for path, route in api_routes:
        table.add_row(
            f"[green]{', '.join(sorted(route.methods))}[/green]",
            path,
            f"{route.endpoint.__module__}.[yellow]{route.endpoint.__name__}[/yellow]",
        )

    console.print(table)
    console.print()
    console.print(f"[bold]Summary:[/bold] {len(api_routes)} routes registered")
    console.print()


if __name__ == "__main__":
    typer_app()
