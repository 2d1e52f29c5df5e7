# shop/product/routes.py
from flask import current_app

from . import bp
from ..utils.api import ok


def _catalog():
    return current_app.extensions["shop"].catalog


# GET /api/products
@bp.get("")
def list_products():
    return ok([p.as_api() for p in _catalog().list_products()])


# GET /api/products/<id>
@bp.get("/<product_id>")
def get_product(product_id):
    return ok(_catalog().get_product(product_id).as_api())
