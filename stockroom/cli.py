# stockroom/cli.py
"""Database maintenance commands, available as ``flask --app stockroom.wsgi <command>``."""
import click
from flask.cli import with_appcontext

from stockroom.extensions import db
from stockroom.services.categories import seed_default_categories


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables and insert the default categories."""
    db.create_all()
    added = seed_default_categories()
    click.echo(f"[OK] Tables created, {added} default categories added.")


@click.command("seed-categories")
@with_appcontext
def seed_categories_command():
    """Insert the default categories that are missing."""
    added = seed_default_categories()
    if added:
        click.echo(f"[OK] {added} default categories added.")
    else:
        click.echo("[OK] Default categories already present.")


def register_commands(app) -> None:
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_categories_command)
