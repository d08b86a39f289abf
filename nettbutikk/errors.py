"""
Shop errors.

Message constants are centralized here to avoid string duplication between
the core and the HTTP layer.
"""

# Catalog errors
ERROR_CATALOG_UNAVAILABLE = "Catalog unavailable"
ERROR_CATALOG_DECODE = "Catalog response could not be decoded"

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Cart messages
MESSAGE_CART_EMPTY = "Your cart is empty!"


class ShopError(Exception):
    """Base class for all shop errors."""


class CatalogError(ShopError):
    """Catalog fetch failed; the product list is left as it was."""


class CatalogUnavailableError(CatalogError):
    """Network failure or non-success HTTP status from the catalog endpoint."""

    def __init__(self, detail: str, status_code: int | None = None):
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"{ERROR_CATALOG_UNAVAILABLE}: {detail}")


class CatalogDecodeError(CatalogError):
    """Catalog body is not a JSON array of well-formed products."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{ERROR_CATALOG_DECODE}: {detail}")


class ProductNotFoundError(ShopError):
    """Product id is not part of the currently loaded product list."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"{ERROR_PRODUCT_NOT_FOUND}: {product_id}")
