"""TaskHub CLI application using Typer.

This module provides command-line utilities for the TaskHub backend:
serving the API, managing the database schema and generating secrets
for deployment configuration.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from taskhub.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    describe_database,
    drop_tables,
    reset_database,
)
from taskhub_config.settings import get_settings

app = typer.Typer(
    name="taskhub",
    help="TaskHub - multi-user task tracking backend CLI",
    no_args_is_help=True,
)
console = Console()


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "taskhub.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


def _print_database() -> None:
    url = get_settings().database_url
    console.print(f"Database: [bold]{describe_database(url)}[/bold]")


def _confirm_data_loss(force: bool) -> None:
    if force:
        return
    console.print("[red]WARNING: This will DELETE ALL DATA in the database![/red]")
    if not typer.confirm("Continue?"):
        console.print("Aborted.")
        raise typer.Exit(code=1)


@db_app.command("init")
def db_init() -> None:
    """Create missing tables. Existing data is left untouched."""
    _print_database()
    asyncio.run(create_tables())
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all database tables."""
    _print_database()
    _confirm_data_loss(force)
    asyncio.run(drop_tables())
    console.print("[green]Database tables dropped.[/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate all database tables."""
    _print_database()
    _confirm_data_loss(force)
    asyncio.run(reset_database())
    console.print("[green]Database recreated.[/green]")


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for TaskHub configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing bearer tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]TaskHub Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
