"""
Catalog Client

One HTTP GET against the catalog endpoint, decoded into Product records.
No retry, no caching: a failed fetch is reported to the caller as a
CatalogError and the caller decides what to show.
"""
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from nettbutikk.config import Settings
from nettbutikk.errors import CatalogDecodeError, CatalogUnavailableError
from nettbutikk.logging import get_logger
from nettbutikk.models import Product

logger = get_logger(__name__)

_PRODUCT_FIELDS = tuple(Product.model_fields)


def decode_products(payload: Any, strict: bool = True) -> List[Product]:
    """
    Decode a parsed JSON body into products.

    Args:
        payload: Parsed JSON (must be a list of objects)
        strict: If True, records with fields beyond the Product shape are rejected

    Raises:
        CatalogDecodeError: payload is not an array or any record is invalid
    """
    if not isinstance(payload, list):
        raise CatalogDecodeError(f"expected a JSON array, got {type(payload).__name__}")

    products = []
    for index, record in enumerate(payload):
        if not isinstance(record, dict):
            raise CatalogDecodeError(f"record {index} is not an object")
        if not strict:
            record = {key: value for key, value in record.items() if key in _PRODUCT_FIELDS}
        try:
            products.append(Product.model_validate(record))
        except ValidationError as e:
            raise CatalogDecodeError(f"record {index}: {e.error_count()} validation error(s)") from e
    return products


class CatalogClient:
    """Fetches the product catalog over HTTP."""

    def __init__(self, settings: Optional[Settings] = None, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or Settings.from_env()
        # Injected client is owned by the caller; otherwise one client per fetch
        self._http_client = http_client

    async def fetch_products(self) -> List[Product]:
        """
        GET the catalog and decode it.

        Raises:
            CatalogUnavailableError: transport failure or non-2xx status
            CatalogDecodeError: body is not valid JSON or not a product array
        """
        if self._http_client is not None:
            return await self._fetch(self._http_client)

        async with httpx.AsyncClient(timeout=self.settings.catalog_timeout) as client:
            return await self._fetch(client)

    async def _fetch(self, client: httpx.AsyncClient) -> List[Product]:
        url = self.settings.catalog_url
        try:
            response = await client.get(url)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout fetching catalog from {url}")
            raise CatalogUnavailableError("timeout") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Error fetching catalog from {url}: {e}")
            raise CatalogUnavailableError(str(e) or type(e).__name__) from e

        if response.is_error:
            logger.warning(f"Catalog returned HTTP {response.status_code}")
            raise CatalogUnavailableError(f"HTTP {response.status_code}", status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Error decoding catalog JSON: {e}")
            raise CatalogDecodeError("invalid JSON") from e

        try:
            products = decode_products(payload, strict=self.settings.decode_strict)
        except CatalogDecodeError as e:
            logger.warning(f"Error decoding catalog: {e.detail}")
            raise

        logger.info(f"Fetched {len(products)} products from catalog")
        return products
