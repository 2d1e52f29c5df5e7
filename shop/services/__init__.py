# shop/services/__init__.py
from .accounts import AccountService
from .catalog import CatalogService
from .orders import OrderService


class Services:
    """Service objects bound to one storage session, built once per app."""

    def __init__(self, session):
        self.accounts = AccountService(session)
        self.catalog = CatalogService(session)
        self.orders = OrderService(session)
