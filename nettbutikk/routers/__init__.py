"""HTTP routers."""
from .shop import get_shop_context, router as shop_router

__all__ = ["get_shop_context", "shop_router"]
