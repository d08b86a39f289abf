"""
Shop Router

JSON view of the shop context: product list, product detail, cart and
session. Prices are returned both as numbers and formatted for display.
"""
from fastapi import APIRouter, Depends, HTTPException, Request

from nettbutikk.context import ShopContext
from nettbutikk.errors import MESSAGE_CART_EMPTY, CatalogError, ProductNotFoundError
from nettbutikk.logging import get_logger
from nettbutikk.models import Product
from nettbutikk.money import format_money, to_float
from .models import AddToCartRequest, LoginRequest

logger = get_logger(__name__)

router = APIRouter(tags=["shop"])


def get_shop_context(request: Request) -> ShopContext:
    """Context created by the app factory and kept on app.state."""
    return request.app.state.shop


def _product_summary(product: Product) -> dict:
    return {
        "id": product.id,
        "title": product.title,
        "price": to_float(product.price),
        "price_display": format_money(product.price),
    }


def _product_detail(product: Product) -> dict:
    return {**_product_summary(product), "description": product.description}


def _format_cart_response(ctx: ShopContext) -> dict:
    items = ctx.cart.items()
    total = ctx.cart.total()
    return {
        "items": [_product_summary(item) for item in items],
        "count": len(items),
        "total": to_float(total),
        "total_display": format_money(total),
        "is_empty": not items,
        "message": MESSAGE_CART_EMPTY if not items else None,
    }


def _format_session_response(ctx: ShopContext) -> dict:
    user = ctx.session.current_user()
    return {
        "authenticated": user is not None,
        "username": user.username if user else None,
    }


# ==================== PRODUCTS ====================

@router.get("/products")
async def list_products(ctx: ShopContext = Depends(get_shop_context)):
    """Currently loaded product list."""
    return [_product_summary(p) for p in ctx.products.items()]


@router.post("/products/refresh")
async def refresh_products(ctx: ShopContext = Depends(get_shop_context)):
    """Fetch the catalog. On failure the previous list stays in place."""
    try:
        products = await ctx.load_products()
    except CatalogError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [_product_summary(p) for p in products]


@router.get("/products/{product_id}")
async def get_product(product_id: int, ctx: ShopContext = Depends(get_shop_context)):
    try:
        product = ctx.get_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _product_detail(product)


# ==================== DETAIL SHEET ====================

@router.post("/products/{product_id}/select")
async def select_product(product_id: int, ctx: ShopContext = Depends(get_shop_context)):
    """Open the detail sheet for a product."""
    try:
        product = ctx.select_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _product_detail(product)


@router.get("/selection")
async def get_selection(ctx: ShopContext = Depends(get_shop_context)):
    product = ctx.selected_product
    return {"product": _product_detail(product) if product else None}


@router.delete("/selection")
async def clear_selection(ctx: ShopContext = Depends(get_shop_context)):
    ctx.clear_selection()
    return {"product": None}


# ==================== CART ====================

@router.get("/cart")
async def get_cart(ctx: ShopContext = Depends(get_shop_context)):
    return _format_cart_response(ctx)


@router.post("/cart")
async def add_to_cart(request: AddToCartRequest, ctx: ShopContext = Depends(get_shop_context)):
    try:
        ctx.add_to_cart(request.product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _format_cart_response(ctx)


@router.delete("/cart/{product_id}")
async def remove_from_cart(product_id: int, ctx: ShopContext = Depends(get_shop_context)):
    """Remove one entry for the product; removing a product not in the cart is a no-op."""
    ctx.remove_from_cart(product_id)
    return _format_cart_response(ctx)


# ==================== SESSION ====================

@router.get("/session")
async def get_session(ctx: ShopContext = Depends(get_shop_context)):
    return _format_session_response(ctx)


@router.post("/session/login")
async def login(request: LoginRequest, ctx: ShopContext = Depends(get_shop_context)):
    ctx.login(request.username, request.password)
    return _format_session_response(ctx)


@router.post("/session/logout")
async def logout(ctx: ShopContext = Depends(get_shop_context)):
    """Log out; the cart is emptied as well."""
    ctx.logout()
    return {**_format_session_response(ctx), "cart": _format_cart_response(ctx)}
