# shop/model/product.py
from ..extensions import db

class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Text, primary_key=True)
    name = db.Column(db.Text)
    price = db.Column(db.Float)
    description = db.Column(db.Text)
    image_url = db.Column("imageUrl", db.Text)

    def as_api(self):
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "description": self.description,
            "imageUrl": self.image_url,
        }
