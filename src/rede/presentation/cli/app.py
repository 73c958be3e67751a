"""Rede CLI application using Typer.

Command-line utilities for running the API and preparing a database.
"""

import asyncio
import random

import typer
from rich.console import Console
from rich.table import Table

from rede.application.services import AccountService
from rede.domain.user import User, UserRole
from rede.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from rede.presentation.api.dependencies import (
    create_tables,
    get_engine,
    get_session_maker,
)
from rede_auth import PasswordHashingService
from rede_config.settings import get_settings

app = typer.Typer(
    name="rede",
    help="Rede Community accounts CLI",
    no_args_is_help=True,
)
console = Console()

FIRST_NAMES = [
    "Ana", "Bruno", "Carla", "Diego", "Eduarda", "Felipe", "Gabriela",
    "Henrique", "Isabela", "João", "Larissa", "Mateus", "Natália", "Otávio",
    "Paula", "Rafael", "Sofia", "Thiago", "Valentina", "Yuri",
]  # fmt: skip
LAST_NAMES = [
    "Almeida", "Barbosa", "Cardoso", "Costa", "Ferreira", "Gomes", "Lima",
    "Martins", "Oliveira", "Pereira", "Ribeiro", "Rocha", "Santos", "Silva",
    "Souza",
]  # fmt: skip
HANDLE_WORDS = [
    "creeper", "ender", "blaze", "golem", "nether", "pixel", "redstone",
    "slime", "warden", "wither",
]  # fmt: skip


def _fake_user_payload(rng: random.Random, password: str) -> dict:
    name = rng.choice(FIRST_NAMES)
    surname = rng.choice(LAST_NAMES)
    handle = f"{rng.choice(HANDLE_WORDS)}_{rng.randrange(10_000, 99_999)}"
    return {
        "name": name,
        "surname": surname,
        "discord": f"{handle}#{rng.randrange(1000, 9999)}",
        "ign": handle,
        "email": f"{handle}@example.com",
        "password": password,
        "role": rng.choice(list(UserRole)).value,
    }


async def _seed(count: int, password: str, seed: int | None) -> list[User]:
    settings = get_settings()
    await create_tables()

    rng = random.Random(seed)
    password_service = PasswordHashingService(rounds=settings.password_hash_rounds)
    created: list[User] = []

    async with get_session_maker()() as session:
        service = AccountService(
            user_repository=UserRepositorySQLAlchemy(session),
            password_service=password_service,
        )
        for _ in range(count):
            created.append(await service.create_user(_fake_user_payload(rng, password)))
        await session.commit()

    await get_engine().dispose()
    return created


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "rede.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


@app.command("init-db")
def init_db() -> None:
    """Create missing database tables."""

    async def _run() -> None:
        await create_tables()
        await get_engine().dispose()

    asyncio.run(_run())
    console.print("[bold green]Database schema is up to date[/bold green]")


@app.command("seed")
def seed(
    count: int = typer.Option(30, min=1, help="Number of users to create"),
    password: str = typer.Option("123456", help="Password shared by all users"),
    random_seed: int = typer.Option(None, "--seed", help="Seed for reproducible data"),
) -> None:
    """Insert generated users for local development."""
    users = asyncio.run(_seed(count, password, random_seed))

    table = Table(title=f"{len(users)} users created")
    table.add_column("id", style="dim")
    table.add_column("ign", style="cyan")
    table.add_column("name")
    table.add_column("role", style="magenta")
    for user in users:
        table.add_row(str(user.id), user.ign, user.name_with_surname, user.role.value)
    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
