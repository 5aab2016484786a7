#!/usr/bin/env python3
"""
CLI для обслуживания базы inno-fair.

Использование:
    python cli.py init-db
    python cli.py seed
    python cli.py create-admin --email admin@gmail.com --password secret --full-name "Bosh admin"
    python cli.py stats
"""

import asyncio

import click
from rich.console import Console
from rich.table import Table

from src.infrastructure.config.logging_config import setup_logging
from src.infrastructure.config.settings import get_settings

console = Console()

DEFAULT_CATEGORIES = (
    ("Texnologiya", "texnologiya"),
    ("Tibbiyot", "tibbiyot"),
    ("Ta'lim", "talim"),
    ("Energetika", "energetika"),
    ("Startap", "startap"),
    ("Qishloq xo'jaligi", "qishloq-xojaligi"),
)


async def _init_db() -> None:
    from src.infrastructure.config.database import init_models
    await init_models()


async def _seed() -> int:
    from src.domain.entities.category import Category
    from src.infrastructure.config.database import AsyncSessionLocal
    from src.infrastructure.persistence.category_repository_impl import CategoryRepositoryImpl

    created = 0
    async with AsyncSessionLocal() as session:
        repository = CategoryRepositoryImpl(session)
        for name, slug in DEFAULT_CATEGORIES:
            if await repository.find_by_slug(slug):
                continue
            await repository.save(Category(name=name, slug=slug))
            created += 1
    return created


async def _create_admin(email: str, password: str, full_name: str):
    from src.application.services.statistics_service import StatisticsService
    from src.application.services.user_service import UserService
    from src.domain.value_objects.user_role import UserRole
    from src.infrastructure.config.database import AsyncSessionLocal
    from src.infrastructure.persistence.statistics_repository_impl import StatisticsRepositoryImpl
    from src.infrastructure.persistence.user_repository_impl import UserRepositoryImpl

    async with AsyncSessionLocal() as session:
        service = UserService(
            UserRepositoryImpl(session),
            StatisticsService(StatisticsRepositoryImpl(session)),
        )
        return await service.create_staff_user(
            full_name=full_name,
            email=email,
            password=password,
            role=UserRole.SUPER_ADMIN,
        )


async def _recompute_stats():
    from src.application.services.statistics_service import StatisticsService
    from src.infrastructure.config.database import AsyncSessionLocal
    from src.infrastructure.persistence.statistics_repository_impl import StatisticsRepositoryImpl

    async with AsyncSessionLocal() as session:
        return await StatisticsService(StatisticsRepositoryImpl(session)).recompute()


@click.group()
def cli():
    """inno-fair CLI."""
    setup_logging(get_settings().log_level)


@cli.command("init-db")
def init_db():
    """Создать таблицы, если их нет."""
    asyncio.run(_init_db())
    console.print("✅ [bold green]Схема БД создана[/bold green]")


@cli.command()
def seed():
    """Добавить категории по умолчанию."""
    created = asyncio.run(_seed())
    console.print(f"✅ [bold green]Категорий добавлено:[/bold green] {created}")


@cli.command("create-admin")
@click.option('--email', required=True, help='Gmail администратора')
@click.option('--password', required=True, help='Пароль')
@click.option('--full-name', default='Bosh administrator', help='Полное имя')
def create_admin(email: str, password: str, full_name: str):
    """
    Создать аккаунт super_admin.

    Пример:
        python cli.py create-admin --email admin@gmail.com --password secret
    """
    from src.shared.exceptions.domain_exceptions import DomainException

    try:
        user = asyncio.run(_create_admin(email, password, full_name))
    except DomainException as e:
        console.print(f"❌ [bold red]{e}[/bold red]")
        raise SystemExit(1)

    console.print(f"✅ [bold green]Администратор создан:[/bold green] {user.email} ({user.id})")


@cli.command()
def stats():
    """Пересчитать и показать статистику."""
    snapshot = asyncio.run(_recompute_stats())

    table = Table(title="inno-fair statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Articles", str(snapshot.total_articles))
    table.add_row("News", str(snapshot.total_news))
    table.add_row("Innovations", str(snapshot.total_innovations))
    table.add_row("Users", str(snapshot.total_users))
    table.add_row("Views", str(snapshot.total_views))
    console.print(table)


if __name__ == '__main__':
    cli()
