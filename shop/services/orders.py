# shop/services/orders.py
import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from ..errors import EmptyCart, InvalidRequest, NotFound, StorageError
from ..model import Order, OrderItem, Product
from ..utils.money import D, Money, round_money

log = logging.getLogger(__name__)

TAX_RATE = D("0.08")

# largest value an INTEGER column can hold
MAX_QTY = 2**63 - 1


def _order_timestamp() -> str:
    # e.g. "2025-01-31T09:15:00.123Z"
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _parse_qty(v):
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    if isinstance(v, str) and v.strip().isdigit():
        return int(v.strip())
    return None


def normalize_cart(cart) -> dict:
    """Validate a client cart ``{productId: quantity}`` and coerce quantities to int."""
    if cart is None:
        raise EmptyCart()
    if not isinstance(cart, dict):
        raise InvalidRequest("cart must be an object of productId to quantity")
    if not cart:
        raise EmptyCart()

    out = {}
    for pid, qty in cart.items():
        q = _parse_qty(qty)
        if q is None or q < 1 or q > MAX_QTY:
            raise InvalidRequest(f"invalid quantity for {pid}")
        out[str(pid)] = q
    return out


def compute_totals(products, cart) -> tuple[Money, Money, Money]:
    """Returns (subtotal, tax, total) over the products that were found."""
    subtotal = D(0)
    for p in products:
        subtotal += D(p.price) * cart[p.id]
    tax = round_money(subtotal * TAX_RATE)
    return round_money(subtotal), tax, round_money(subtotal + tax)


class OrderService:
    def __init__(self, session):
        self.session = session

    def place_order(self, user_email, cart) -> Order:
        """
        Price the cart against the catalog and persist the order.

        Cart ids with no matching product are dropped from both the total and
        the line items. The header and all line items are written in a single
        transaction: any failure rolls back everything, so an order never
        exists without its items.
        """
        cart = normalize_cart(cart)

        try:
            products = (
                self.session.query(Product)
                .filter(Product.id.in_(list(cart.keys())))
                .all()
            )
        except SQLAlchemyError as e:
            self.session.rollback()
            log.exception("Error fetching product details for order")
            raise StorageError("Error fetching product details for order.") from e

        _, _, total = compute_totals(products, cart)

        order = Order(
            user_email=user_email,
            order_date=_order_timestamp(),
            total_amount=total,
        )
        try:
            self.session.add(order)
            self.session.flush()
        except SQLAlchemyError as e:
            self.session.rollback()
            log.exception("Failed to create order")
            raise StorageError("Failed to create order.") from e

        try:
            for p in products:
                self.session.add(OrderItem(
                    order_id=order.id,
                    product_id=p.id,
                    quantity=cart[p.id],
                    price=D(p.price),  # snapshot from the lookup above
                ))
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            log.exception("Failed to save order items")
            raise StorageError("Failed to save order items.") from e

        log.info("Order %s created: %d item(s), total %s", order.id, len(products), total)
        return order

    def get_order(self, order_id) -> Order:
        try:
            o = self.session.get(Order, order_id)
        except SQLAlchemyError as e:
            self.session.rollback()
            log.exception("Error fetching order %s", order_id)
            raise StorageError("Error fetching order") from e
        if o is None:
            raise NotFound("Order not found")
        return o
