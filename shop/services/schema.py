# shop/services/schema.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError
from ..model import User, Product, Order, OrderItem

log = logging.getLogger(__name__)

# created in this order; products is followed by seeding
SCHEMA_MODELS = (User, Product, Order, OrderItem)

CATALOG_SEED = [
    {"id": "p1", "name": "Classic Tee", "price": 499, "description": "A comfortable and stylish tee for everyday wear.", "imageUrl": "https://placehold.co/600x400/6366f1/ffffff?text=Classic+Tee"},
    {"id": "p2", "name": "Denim Jeans", "price": 1999, "description": "Perfectly fitted denim jeans for any occasion.", "imageUrl": "https://placehold.co/600x400/3b82f6/ffffff?text=Denim+Jeans"},
    {"id": "p3", "name": "Leather Jacket", "price": 4999, "description": "A timeless leather jacket that adds an edge to your look.", "imageUrl": "https://placehold.co/600x400/1f2937/ffffff?text=Leather+Jacket"},
    {"id": "p4", "name": "Running Sneakers", "price": 2499, "description": "Lightweight and supportive sneakers for your daily run.", "imageUrl": "https://placehold.co/600x400/10b981/ffffff?text=Sneakers"},
    {"id": "p5", "name": "Stylish Watch", "price": 7999, "description": "An elegant watch to complete your sophisticated look.", "imageUrl": "https://placehold.co/600x400/8b5cf6/ffffff?text=Watch"},
    {"id": "p6", "name": "Wool Scarf", "price": 799, "description": "A warm and cozy scarf for chilly days.", "imageUrl": "https://placehold.co/600x400/ef4444/ffffff?text=Scarf"},
    {"id": "p7", "name": "Canvas Backpack", "price": 1499, "description": "A durable and spacious backpack for all your essentials.", "imageUrl": "https://placehold.co/600x400/f97316/ffffff?text=Backpack"},
    {"id": "p8", "name": "Sunglasses", "price": 999, "description": "Protect your eyes in style with these modern sunglasses.", "imageUrl": "https://placehold.co/600x400/f59e0b/ffffff?text=Sunglasses"},
]


def _create_table(model, engine):
    model.__table__.create(bind=engine, checkfirst=True)


def ensure_schema(engine, session, fail_fast=False, seed=True):
    """
    Create each table if it is missing; never drops or alters anything.

    A failed table is logged and skipped so the process can still start;
    requests touching it will fail on their own. With ``fail_fast`` the first
    failure raises StorageError instead. The catalog is seeded right after the
    products table is in place. Returns the names of the tables that failed.
    """
    failed = []
    for model in SCHEMA_MODELS:
        name = model.__tablename__
        try:
            _create_table(model, engine)
        except SQLAlchemyError as e:
            log.error("Error creating %s table: %s", name, e)
            if fail_fast:
                raise StorageError(f"Error creating {name} table") from e
            failed.append(name)
            continue
        if model is Product and seed:
            try:
                seed_catalog(session)
            except StorageError:
                if fail_fast:
                    raise
    return failed


def seed_catalog(session) -> int:
    """Insert-if-absent by id. Existing rows are left untouched."""
    try:
        ids = [p["id"] for p in CATALOG_SEED]
        existing = {pid for (pid,) in session.query(Product.id).filter(Product.id.in_(ids)).all()}
        added = 0
        for p in CATALOG_SEED:
            if p["id"] in existing:
                continue
            session.add(Product(
                id=p["id"],
                name=p["name"],
                price=p["price"],
                description=p["description"],
                image_url=p["imageUrl"],
            ))
            added += 1
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        log.exception("Catalog seeding failed")
        raise StorageError("Error seeding products") from e
    log.info("Products seeded: %d new of %d", added, len(CATALOG_SEED))
    return added
