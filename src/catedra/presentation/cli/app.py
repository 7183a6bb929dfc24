"""Catedra CLI application using Typer.

This module provides command-line utilities for the Catedra backend:
secret generation, schema creation and running the API server.
"""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console

from catedra.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
    create_tables,
)
from catedra_config.settings import get_settings

app = typer.Typer(
    name="catedra",
    help="Catedra - profesor registration and login service",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Catedra configuration.

    Generates the two secrets required outside development:
    - JWT_SECRET: Secret for signing session tokens
    - DB_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Catedra Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]DB_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]\n"
    )


@db_app.command("init")
def init_db() -> None:
    """Create the profesor table if it does not exist."""

    async def _run() -> None:
        engine = create_engine_from_settings()
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    console.print("[green]Database schema is up to date[/green]")


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int = typer.Option(None, help="Listening port (default: PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.port

    console.print(f"[green]Catedra API listening on http://{host}:{port}[/green]")
    uvicorn.run(
        "catedra.presentation.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
