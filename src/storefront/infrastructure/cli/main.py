from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click
import uvicorn

from storefront.application.store import Store
from storefront.domain.exceptions import SeedError
from storefront.infrastructure.bootstrap import build_store
from storefront.infrastructure.cli.menu import display_products, run_menu
from storefront.infrastructure.http.app import create_app
from storefront.utils.log import configure_logging
from storefront.infrastructure.settings import SettingsError, load_settings

seed_file_option = click.option(
    "--seed-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON product seed (overrides STOREFRONT_SEED_FILE).",
)
seed_option = click.option(
    "--seed",
    type=click.Choice(["web", "menu"]),
    default=None,
    help="Built-in product seed (overrides STOREFRONT_SEED).",
)


def _store(ctx: click.Context, seed_file: Path | None, seed: str | None) -> Store:
    settings = ctx.obj
    try:
        return build_store(
            seed_file=seed_file or settings.seed_file,
            seed=seed or settings.seed,
        )
    except SeedError as exc:
        raise click.ClickException(str(exc))


@click.group()
@click.option("--log-level", default=None, help="Log level (overrides STOREFRONT_LOG_LEVEL).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Storefront — in-memory catalog and shopping cart"""
    try:
        settings = load_settings()
    except SettingsError as exc:
        raise click.ClickException(str(exc))
    if log_level:
        settings = replace(settings, log_level=log_level.upper())
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.command("menu")
@seed_file_option
@seed_option
@click.pass_context
def menu(ctx: click.Context, seed_file: Path | None, seed: str | None) -> None:
    """Run the interactive shopping menu."""
    run_menu(_store(ctx, seed_file, seed))


@cli.command("products")
@seed_file_option
@seed_option
@click.pass_context
def products(ctx: click.Context, seed_file: Path | None, seed: str | None) -> None:
    """List the seeded catalog and exit."""
    display_products(_store(ctx, seed_file, seed))


@cli.command("serve")
@click.option("--host", default=None, help="Bind host (overrides STOREFRONT_HOST).")
@click.option("--port", default=None, type=int, help="Bind port (overrides STOREFRONT_PORT).")
@seed_file_option
@seed_option
@click.pass_context
def serve(
    ctx: click.Context,
    host: str | None,
    port: int | None,
    seed_file: Path | None,
    seed: str | None,
) -> None:
    """Serve the cart over HTTP."""
    settings = ctx.obj
    app = create_app(_store(ctx, seed_file, seed))
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )
