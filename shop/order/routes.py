# shop/order/routes.py
from flask import current_app

from . import bp
from ..utils.api import ok
from ..utils.net import get_json_object


def _orders():
    return current_app.extensions["shop"].orders


@bp.post("")
def create_order():
    """
    Body:
      - userEmail: who placed the order (not checked against users)
      - cart: {productId: quantity, ...}
    """
    payload = get_json_object()
    order = _orders().place_order(payload.get("userEmail"), payload.get("cart"))
    return ok({"message": "Order created successfully", "orderId": order.id}, 201)


@bp.get("/<int:order_id>")
def get_order(order_id: int):
    return ok(_orders().get_order(order_id).as_api())
