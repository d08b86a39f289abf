"""Nettbutikk: product list, cart and stub session for a single-screen shop."""
from .cart import CartStore
from .catalog import CatalogClient, ProductListStore, decode_products
from .config import Settings
from .context import ShopContext, create_shop_context
from .models import Product, User
from .session import SessionStore

__all__ = [
    "CartStore",
    "CatalogClient",
    "Product",
    "ProductListStore",
    "SessionStore",
    "Settings",
    "ShopContext",
    "User",
    "create_shop_context",
    "decode_products",
]
