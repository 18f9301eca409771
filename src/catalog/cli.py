"""Command line entry point for the catalog service."""

import typer
from rich.console import Console
from rich.panel import Panel

from src.catalog.core.services import DatabaseConnectionError
from src.catalog.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="📚 Library catalog service",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
) -> None:
    """
    🚀 Start the catalog API server.

    Startup aborts if the database cannot be reached.
    """
    import uvicorn

    from src.catalog.api.http.app import app as api

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Library Catalog API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")

    uvicorn.run(api, host=host, port=port, access_log=False)


@app.command(name="init-db")
def init_db() -> None:
    """
    🗄️  Create or update the catalog tables, then exit.
    """
    from src.catalog.runtime.init_db import init_db as reconcile

    try:
        reconcile()
    except DatabaseConnectionError as e:
        console.print(f"[red]❌ Could not connect to the database: {e}[/red]")
        raise typer.Exit(1) from e

    console.print("[green]✅ Database schema is up to date[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
