"""Product list of the current view activation."""
from typing import Awaitable, Callable, Iterable, Optional, Sequence, Tuple

from nettbutikk.errors import CatalogError
from nettbutikk.logging import get_logger
from nettbutikk.models import Product
from nettbutikk.observable import Observable

logger = get_logger(__name__)

FetchProducts = Callable[[], Awaitable[Sequence[Product]]]


class ProductListStore(Observable[Tuple[Product, ...]]):
    """
    Observable product list, replaced wholesale by each successful fetch.

    Overlapping refreshes are not sequenced: whichever completes last
    determines the list.
    """

    def __init__(self) -> None:
        super().__init__()
        self._products: Tuple[Product, ...] = ()

    def snapshot(self) -> Tuple[Product, ...]:
        return self._products

    def items(self) -> Tuple[Product, ...]:
        return self._products

    def get(self, product_id: int) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def replace(self, products: Iterable[Product]) -> None:
        self._products = tuple(products)
        self._publish()

    async def refresh(self, fetch: FetchProducts) -> Tuple[Product, ...]:
        """
        Fetch and replace the list.

        Raises:
            CatalogError: fetch failed; the current list is left untouched
        """
        try:
            products = await fetch()
        except CatalogError as e:
            logger.warning(f"Product list not updated: {e}")
            raise

        self.replace(products)
        return self._products
