"""Catalog package: HTTP client and product list store."""
from .client import CatalogClient, decode_products
from .state import FetchProducts, ProductListStore

__all__ = [
    "CatalogClient",
    "FetchProducts",
    "ProductListStore",
    "decode_products",
]
