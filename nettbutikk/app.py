"""
Shop FastAPI Application

create_app() wires a ShopContext onto app.state and mounts the shop router.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nettbutikk.context import ShopContext, create_shop_context
from nettbutikk.errors import CatalogError
from nettbutikk.logging import get_logger
from nettbutikk.routers import shop_router

logger = get_logger(__name__)


def create_app(context: Optional[ShopContext] = None, preload_catalog: bool = False) -> FastAPI:
    """
    Build the shop app.

    Args:
        context: Shop context to serve; a default one fetching from the
            configured catalog is created when omitted
        preload_catalog: Fetch the catalog on startup. A failed fetch is
            logged and the app starts with an empty product list.
    """
    shop = context if context is not None else create_shop_context()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler"""
        if preload_catalog:
            try:
                await shop.load_products()
            except CatalogError as e:
                logger.warning(f"Starting with empty product list: {e}")
        yield

    app = FastAPI(
        title="Nettbutikk",
        description="Single-screen shop: catalog, cart and stub login",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.shop = shop

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(shop_router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "service": "nettbutikk"}

    return app
