import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from shop import create_app
from shop.errors import StorageError
from shop.extensions import db
from shop.model import Product
from shop.services import schema


def test_all_tables_created(app):
    with app.app_context():
        names = set(inspect(db.engine).get_table_names())
    assert {"users", "products", "orders", "order_items"} <= names


def test_ensure_schema_is_repeatable(app):
    with app.app_context():
        assert schema.ensure_schema(db.engine, db.session) == []
        assert db.session.query(Product).count() == 8


def _failing_for(table_name):
    real = schema._create_table

    def fake(model, engine):
        if model.__tablename__ == table_name:
            raise OperationalError("CREATE TABLE", {}, Exception("disk on fire"))
        return real(model, engine)

    return fake


def test_table_failure_is_not_fatal(monkeypatch, tmp_path):
    monkeypatch.setattr(schema, "_create_table", _failing_for("orders"))
    app = create_app({"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'a.db'}"})
    with app.app_context():
        names = set(inspect(db.engine).get_table_names())
        assert "orders" not in names
        assert {"users", "products", "order_items"} <= names

    r = app.test_client().post("/api/orders", json={"userEmail": "a@x.com", "cart": {"p1": 1}})
    assert r.status_code == 500
    # catalog still works
    assert app.test_client().get("/api/products/p1").status_code == 200


def test_products_failure_skips_seeding(monkeypatch, app):
    monkeypatch.setattr(schema, "_create_table", _failing_for("products"))
    called = []
    monkeypatch.setattr(schema, "seed_catalog", lambda session: called.append(1))
    with app.app_context():
        assert schema.ensure_schema(db.engine, db.session) == ["products"]
    assert called == []


def test_fail_fast(monkeypatch, tmp_path):
    monkeypatch.setattr(schema, "_create_table", _failing_for("users"))
    with pytest.raises(StorageError):
        create_app({
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'b.db'}",
            "SCHEMA_FAIL_FAST": True,
        })
