"""Click CLI entry point for the storefront."""

from __future__ import annotations

import json

import click

from littleorigins.config import Settings
from littleorigins.db import Database
from littleorigins.identity import to_backend_user_id
from littleorigins.logging import configure_logging
from littleorigins.models.account import Role
from littleorigins.models.book import ChildAge, ConceptionType, FamilyStructure


def _get_db(settings: Settings) -> Database:
    settings.ensure_data_dir()
    db = Database(settings.db_path)
    db.init_schema()
    return db


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Little Origins: personalized children's book storefront."""
    ctx.ensure_object(dict)
    settings = Settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, log_format=settings.log_format)
    ctx.obj["settings"] = settings


@cli.command("init-db")
@click.pass_context
def init_db(ctx: click.Context) -> None:
    """Create all tables in the configured database."""
    settings = ctx.obj["settings"]
    db = _get_db(settings)
    db.close()
    click.echo(f"Database ready at {settings.db_path}")


@cli.command()
@click.option("--name", "child_name", default="", help="Child's name (blank for 'you')")
@click.option(
    "--age",
    "child_age",
    type=click.Choice([a.value for a in ChildAge]),
    default=ChildAge.PRESCHOOL.value,
    help="Child's age range",
)
@click.option(
    "--family",
    "family_structure",
    type=click.Choice([f.value for f in FamilyStructure]),
    default=FamilyStructure.HETERO_COUPLE.value,
    help="Family structure",
)
@click.option(
    "--conception",
    "conception_type",
    type=click.Choice([c.value for c in ConceptionType]),
    default=ConceptionType.IVF.value,
    help="Conception method",
)
@click.option("--json", "as_json", is_flag=True, help="Print pages as JSON")
def preview(
    child_name: str,
    child_age: str,
    family_structure: str,
    conception_type: str,
    as_json: bool,
) -> None:
    """Print the preview pages for a book configuration."""
    from littleorigins.pages import generate_pages

    pages = generate_pages(child_name, child_age, family_structure, conception_type)
    if as_json:
        click.echo(json.dumps([p.model_dump() for p in pages], indent=2, ensure_ascii=False))
        return

    for number, page in enumerate(pages, start=1):
        click.echo(f"--- Page {number}: {page.emoji} {page.title}")
        click.echo(page.content)
        click.echo()


@cli.command("grant-role")
@click.argument("identity_user_id")
@click.argument("role", type=click.Choice([r.value for r in Role]))
@click.pass_context
def grant_role(ctx: click.Context, identity_user_id: str, role: str) -> None:
    """Grant ROLE to the user with IDENTITY_USER_ID (e.g. to edit the blog)."""
    db = _get_db(ctx.obj["settings"])
    try:
        backend_id = to_backend_user_id(identity_user_id)
        db.grant_role(backend_id, Role(role))
        click.echo(f"Granted {role} to {identity_user_id} ({backend_id})")
    finally:
        db.close()


@cli.command()
def coloring() -> None:
    """List the free coloring pages."""
    from littleorigins.coloring import list_pages

    for page in list_pages():
        click.echo(f"{page.id:>3}  {page.title:<16} {page.image_url}")


@cli.command()
@click.pass_context
def serve(ctx: click.Context) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = ctx.obj["settings"]
    uvicorn.run(
        "littleorigins.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )
