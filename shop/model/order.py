from ..extensions import db
from ..utils.money import to_float

class Order(db.Model):
    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_email = db.Column("userEmail", db.Text)
    order_date = db.Column("orderDate", db.Text)  # ISO-8601 UTC, e.g. "2025-01-31T09:15:00.123Z"
    total_amount = db.Column("totalAmount", db.Numeric(12, 2))

    items = db.relationship(
        "OrderItem",
        backref="order",
        lazy="selectin",
        order_by="OrderItem.id.asc()",
    )

    def as_api(self):
        return {
            "id": self.id,
            "userEmail": self.user_email,
            "orderDate": self.order_date,
            "totalAmount": to_float(self.total_amount),
            "items": [i.as_api() for i in self.items],
        }

class OrderItem(db.Model):
    __tablename__ = "order_items"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    order_id = db.Column("orderId", db.Integer, db.ForeignKey("orders.id"))
    product_id = db.Column("productId", db.Text, db.ForeignKey("products.id"))
    quantity = db.Column(db.Integer)
    # price at time of purchase, copied from the product row
    price = db.Column(db.Numeric(12, 2))

    def as_api(self):
        return {
            "id": self.id,
            "orderId": self.order_id,
            "productId": self.product_id,
            "quantity": self.quantity,
            "price": to_float(self.price),
        }
