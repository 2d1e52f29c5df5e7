from shop.extensions import db
from shop.model import Product
from shop.services.schema import CATALOG_SEED, seed_catalog


def test_list_products_returns_seeded_catalog(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    body = r.get_json()
    assert len(body) == 8
    by_id = {p["id"]: p for p in body}
    for seed in CATALOG_SEED:
        assert by_id[seed["id"]] == seed


def test_get_product(client):
    r = client.get("/api/products/p1")
    assert r.status_code == 200
    body = r.get_json()
    assert body["price"] == 499
    assert body["name"] == "Classic Tee"
    assert body["imageUrl"] == "https://placehold.co/600x400/6366f1/ffffff?text=Classic+Tee"


def test_get_unknown_product(client):
    r = client.get("/api/products/unknown")
    assert r.status_code == 404
    assert r.get_json()["message"] == "Product not found"


def test_seeding_twice_does_not_duplicate_or_mutate(app):
    with app.app_context():
        p = db.session.get(Product, "p3")
        p.price = 1
        db.session.commit()

        assert seed_catalog(db.session) == 0
        assert seed_catalog(db.session) == 0

        assert db.session.query(Product).count() == 8
        assert db.session.get(Product, "p3").price == 1


def test_seeding_restores_missing_rows_only(app):
    with app.app_context():
        db.session.delete(db.session.get(Product, "p8"))
        db.session.commit()

        assert seed_catalog(db.session) == 1
        assert db.session.query(Product).count() == 8
        assert db.session.get(Product, "p8").name == "Sunglasses"


def test_catalog_storage_failures(app, client):
    with app.app_context():
        Product.__table__.drop(db.engine)

    r = client.get("/api/products")
    assert r.status_code == 500
    assert r.get_json()["message"] == "Error fetching products"

    r = client.get("/api/products/p1")
    assert r.status_code == 500
    assert r.get_json()["message"] == "Error fetching product"
