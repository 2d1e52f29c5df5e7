# shop/services/catalog.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from ..errors import NotFound, StorageError
from ..model import Product

log = logging.getLogger(__name__)


class CatalogService:
    """Read-only access to the product catalog."""

    def __init__(self, session):
        self.session = session

    def list_products(self):
        # storage order; no ORDER BY on purpose
        try:
            return self.session.query(Product).all()
        except SQLAlchemyError as e:
            self.session.rollback()
            log.exception("Error fetching products")
            raise StorageError("Error fetching products") from e

    def get_product(self, product_id):
        try:
            p = self.session.get(Product, product_id)
        except SQLAlchemyError as e:
            self.session.rollback()
            log.exception("Error fetching product %s", product_id)
            raise StorageError("Error fetching product") from e
        if p is None:
            raise NotFound()
        return p
