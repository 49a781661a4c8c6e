"""credgate CLI application using Typer.

This module provides command-line utilities for the credgate service:
secret generation, configuration checks, password hashing for the
account administration process, and running the API server.
"""

import secrets

import typer
import uvicorn
from pydantic import ValidationError
from rich.console import Console

from credgate_auth import PasswordHashingService, SigningConfigurationError, digest
from credgate_config import get_settings

app = typer.Typer(
    name="credgate",
    help="credgate - login and identity token service CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

config_app = typer.Typer(
    name="config",
    help="Configuration utilities",
    no_args_is_help=True,
)
app.add_typer(config_app)

password_app = typer.Typer(
    name="password",
    help="Password hashing utilities",
    no_args_is_help=True,
)
app.add_typer(password_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a JWT signing secret for credgate configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]credgate Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes is well above the 32 byte HS256 minimum
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]⚠  Keep this secret secure and never commit it "
        "to version control![/yellow]\n"
    )


@config_app.command("check")
def check_config() -> None:
    """Load settings and validate the token signing configuration."""
    try:
        settings = get_settings()
        signing = settings.signing_context()
    except ValidationError as e:
        console.print(f"[red]Invalid settings:[/red]\n{e}")
        raise typer.Exit(code=1) from e
    except SigningConfigurationError as e:
        console.print(f"[red]Invalid signing configuration:[/red] {e.message}")
        raise typer.Exit(code=1) from e

    minutes = int(signing.token_lifetime.total_seconds() // 60)
    console.print("[green]✓[/green] Signing configuration OK")
    console.print(f"  issuer: [cyan]{signing.issuer}[/cyan]")
    console.print(f"  token lifetime: [cyan]{minutes} min[/cyan]")


@password_app.command("hash")
def hash_password(
    legacy: bool = typer.Option(
        False,
        "--legacy",
        help="Print an unsalted SHA-256 hex digest instead of bcrypt",
    ),
    rounds: int = typer.Option(12, min=4, max=31, help="bcrypt work factor"),
) -> None:
    """Hash a password for storing in the credentials table."""
    password = typer.prompt("Password", hide_input=True, confirmation_prompt=True)

    if legacy:
        console.print(
            "[yellow]Legacy digests are unsalted and fast to brute-force.[/yellow]",
        )
        typer.echo(digest(password))
        return

    try:
        hashed = PasswordHashingService(rounds=rounds).hash(password)
    except ValueError as e:
        console.print(f"[red]Cannot hash password:[/red] {e}")
        raise typer.Exit(code=1) from e

    typer.echo(hashed)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the credgate API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "credgate.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
