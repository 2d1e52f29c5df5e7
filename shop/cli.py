# shop/cli.py
import click
import pandas as pd
from flask import current_app
from flask.cli import with_appcontext

from .extensions import db
from .services.schema import ensure_schema


@click.command("init-db")
@with_appcontext
def init_db():
    """Create missing tables and seed the catalog."""
    failed = ensure_schema(
        db.engine,
        db.session,
        fail_fast=current_app.config["SCHEMA_FAIL_FAST"],
        seed=current_app.config["SEED_CATALOG"],
    )
    if failed:
        click.echo(f"Tables not created: {', '.join(failed)}")
    else:
        click.echo("Database ready")


@click.command("export-products")
@click.option("--out", "out_path", default="products_export.csv", show_default=True)
@with_appcontext
def export_products(out_path):
    """Write the catalog to a CSV file."""
    products = current_app.extensions["shop"].catalog.list_products()
    df = pd.DataFrame(
        [
            {
                "ID": p.id,
                "Name": p.name,
                "Price": p.price,
                "Description": p.description,
                "Image URL": p.image_url,
            }
            for p in products
        ],
        columns=["ID", "Name", "Price", "Description", "Image URL"],
    )
    df.to_csv(out_path, index=False)
    click.echo(f"{len(df)} products exported to {out_path}")


def register_cli(app):
    app.cli.add_command(init_db)
    app.cli.add_command(export_products)
