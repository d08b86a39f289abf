"""Tests for ShopContext: cross-store policies and product resolution"""
import pytest

from nettbutikk.catalog import CatalogClient
from nettbutikk.config import Settings
from nettbutikk.context import ShopContext, create_shop_context
from nettbutikk.errors import CatalogError, ProductNotFoundError


@pytest.fixture
def ctx(fetch_ok):
    return ShopContext(fetch_products=fetch_ok)


@pytest.mark.asyncio
async def test_load_products(ctx, fetch_ok, sample_products):
    await ctx.load_products()

    assert ctx.products.items() == tuple(sample_products)
    assert fetch_ok.calls == 1


@pytest.mark.asyncio
async def test_load_products_failure_propagates(fetch_failing):
    ctx = ShopContext(fetch_products=fetch_failing)

    with pytest.raises(CatalogError):
        await ctx.load_products()

    assert ctx.products.items() == ()


@pytest.mark.asyncio
async def test_logout_clears_cart(ctx):
    await ctx.load_products()
    ctx.login("aksel", "hunter2")
    ctx.add_to_cart(1)
    ctx.add_to_cart(2)

    ctx.logout()

    assert ctx.session.current_user() is None
    assert ctx.cart.items() == ()


def test_login_does_not_touch_cart(ctx, product_factory):
    ctx.cart.add_to_cart(product_factory(1))
    ctx.login("aksel", "hunter2")

    assert len(ctx.cart) == 1


@pytest.mark.asyncio
async def test_add_to_cart_by_id(ctx, sample_products):
    await ctx.load_products()

    product = ctx.add_to_cart(2)

    assert product == sample_products[1]
    assert ctx.cart.items() == (sample_products[1],)


def test_add_unknown_product_raises(ctx):
    with pytest.raises(ProductNotFoundError) as exc_info:
        ctx.add_to_cart(42)

    assert exc_info.value.product_id == 42
    assert ctx.cart.is_empty


@pytest.mark.asyncio
async def test_remove_from_cart_by_id(ctx):
    await ctx.load_products()
    ctx.add_to_cart(1)
    ctx.add_to_cart(2)

    ctx.remove_from_cart(1)

    assert [p.id for p in ctx.cart.items()] == [2]


def test_remove_unknown_product_is_noop(ctx):
    ctx.remove_from_cart(42)
    assert ctx.cart.is_empty


@pytest.mark.asyncio
async def test_remove_after_catalog_refresh(product_factory):
    """Products stay removable after they disappear from the catalog."""
    results = [[product_factory(1)], [product_factory(2)]]

    async def fetch():
        return results.pop(0)

    ctx = ShopContext(fetch_products=fetch)
    await ctx.load_products()
    ctx.add_to_cart(1)
    await ctx.load_products()

    ctx.remove_from_cart(1)

    assert ctx.cart.is_empty


@pytest.mark.asyncio
async def test_select_product(ctx, sample_products):
    await ctx.load_products()

    assert ctx.select_product(3) == sample_products[2]
    assert ctx.selected_product == sample_products[2]

    ctx.clear_selection()
    assert ctx.selected_product is None


def test_select_unknown_product(ctx):
    with pytest.raises(ProductNotFoundError):
        ctx.select_product(7)
    assert ctx.selected_product is None


def test_stores_are_per_context(fetch_ok):
    first = ShopContext(fetch_products=fetch_ok)
    second = ShopContext(fetch_products=fetch_ok)

    first.login("a", "b")

    assert second.session.current_user() is None
    assert first.cart is not second.cart


def test_create_shop_context_uses_catalog_client():
    settings = Settings(catalog_url="https://catalog.test/other")
    ctx = create_shop_context(settings)

    client = ctx.fetch_products.__self__
    assert isinstance(client, CatalogClient)
    assert client.settings.catalog_url == "https://catalog.test/other"
