"""
Shop Context

Bundles the stores a screen needs and is passed explicitly to whoever uses
them. Cross-store policies (logout empties the cart) live here, not in the
stores.
"""
from typing import Optional, Tuple

from nettbutikk.cart import CartStore
from nettbutikk.catalog import CatalogClient, FetchProducts, ProductListStore
from nettbutikk.config import Settings
from nettbutikk.errors import ProductNotFoundError
from nettbutikk.logging import get_logger
from nettbutikk.models import Product
from nettbutikk.session import SessionStore

logger = get_logger(__name__)


class ShopContext:
    """Session, cart and product list for one running app."""

    def __init__(
        self,
        fetch_products: FetchProducts,
        session: Optional[SessionStore] = None,
        cart: Optional[CartStore] = None,
        products: Optional[ProductListStore] = None,
    ):
        self.fetch_products = fetch_products
        self.session = session or SessionStore()
        self.cart = cart or CartStore()
        self.products = products or ProductListStore()
        self.selected_product: Optional[Product] = None

    async def load_products(self) -> Tuple[Product, ...]:
        """View activation: fetch the catalog into the product list."""
        return await self.products.refresh(self.fetch_products)

    def login(self, username: str, password: str) -> None:
        self.session.login(username, password)

    def logout(self) -> None:
        """Log out and empty the cart."""
        self.session.logout()
        self.cart.remove_all()

    def get_product(self, product_id: int) -> Product:
        product = self.products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def select_product(self, product_id: int) -> Product:
        self.selected_product = self.get_product(product_id)
        return self.selected_product

    def clear_selection(self) -> None:
        self.selected_product = None

    def add_to_cart(self, product_id: int) -> Product:
        product = self.get_product(product_id)
        self.cart.add_to_cart(product)
        return product

    def remove_from_cart(self, product_id: int) -> None:
        # Resolve against the cart, not the catalog: the list may have been
        # refreshed since the product was added
        product = next((item for item in self.cart.items() if item.id == product_id), None)
        if product is not None:
            self.cart.remove_from_cart(product)


def create_shop_context(settings: Optional[Settings] = None) -> ShopContext:
    """Build a context that fetches from the configured catalog endpoint."""
    settings = settings or Settings.from_env()
    client = CatalogClient(settings)
    logger.info(f"Shop context created (catalog: {settings.catalog_url})")
    return ShopContext(fetch_products=client.fetch_products)
