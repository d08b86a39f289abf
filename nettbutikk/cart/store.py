"""In-memory cart store."""
from decimal import Decimal
from typing import List, Tuple

from nettbutikk.logging import get_logger
from nettbutikk.models import Product
from nettbutikk.money import sum_money
from nettbutikk.observable import Observable

logger = get_logger(__name__)


class CartStore(Observable[Tuple[Product, ...]]):
    """
    Ordered collection of products in the cart.

    add_to_cart appends without checking for an existing entry with the same
    product id, so the cart may hold duplicates. remove_from_cart takes out
    one entry per call (the first with a matching id).
    """

    def __init__(self) -> None:
        super().__init__()
        self._items: List[Product] = []

    def snapshot(self) -> Tuple[Product, ...]:
        return tuple(self._items)

    def items(self) -> Tuple[Product, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def total(self) -> Decimal:
        """Sum of entry prices, rounded to cents."""
        return sum_money(item.price for item in self._items)

    def add_to_cart(self, product: Product) -> None:
        self._items.append(product)
        logger.debug(f"Added product {product.id} to cart ({len(self._items)} items)")
        self._publish()

    def remove_from_cart(self, product: Product) -> None:
        index = next(
            (i for i, item in enumerate(self._items) if item.id == product.id),
            None
        )
        if index is None:
            return

        del self._items[index]
        logger.debug(f"Removed product {product.id} from cart ({len(self._items)} items)")
        self._publish()

    def remove_all(self) -> None:
        self._items.clear()
        logger.debug("Cart cleared")
        self._publish()
