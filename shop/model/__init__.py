# ------ shop/model/__init__.py ------

from .user import User
from .product import Product
from .order import Order, OrderItem

__all__ = [
    "User",
    "Product",
    "Order",
    "OrderItem",
]
