# src/clients/catalog_client.py

"""HTTP client for the remote product catalog API."""

import logging
import math
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.product import Product


class CatalogFetchError(Exception):
    """Raised when a catalog request fails for any reason.

    Network errors, non-200 responses and malformed payloads are not
    distinguished; the original cause is chained as ``__cause__``.
    """


class CatalogClient:
    """Read-only client for the categories and search endpoints.

    Requests are made once: no retries and, by default, no timeout.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger("storefront.client")
        self.settings = Settings()
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )

    def _get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET ``API_BASE_URL + path`` and decode the JSON body."""
        url = f"{self.settings.API_BASE_URL}{path}"
        try:
            resp = self.session.get(
                url,
                params=params,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except Exception as exc:
            raise CatalogFetchError(
                f"Request to {url} failed: {exc}"
            ) from exc

        if resp.status_code != 200:
            raise CatalogFetchError(
                f"HTTP {resp.status_code} from {url}"
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise CatalogFetchError(
                f"Malformed JSON from {url}: {exc}"
            ) from exc

    @staticmethod
    def _parse_category(entry: Any) -> str:
        """Use an object entry's ``name`` field, else the entry itself."""
        if isinstance(entry, dict):
            return str(entry.get("name") or "")
        return str(entry)

    @staticmethod
    def _parse_product(raw: dict[str, Any]) -> Product:
        """Parse a single API product record into a Product.

        Non-finite ratings (JSON ``NaN``/``Infinity``) become 0.0.
        """
        rating = float(raw.get("rating") or 0.0)
        return Product(
            id=int(raw["id"]),
            title=str(raw["title"]),
            price=float(raw["price"]),
            rating=rating if math.isfinite(rating) else 0.0,
            brand=str(raw.get("brand") or ""),
            category=str(raw.get("category") or ""),
            thumbnail=str(raw.get("thumbnail") or ""),
        )

    def fetch_categories(self) -> list[str]:
        """Return the first ``MAX_CATEGORIES`` category names.

        A payload that is not a JSON array yields an empty list.
        """
        data = self._get_json(self.settings.CATEGORIES_PATH)
        if not isinstance(data, list):
            self.logger.warning(
                "Categories payload is %s, not a list",
                type(data).__name__,
            )
            return []

        categories = [
            self._parse_category(entry)
            for entry in data[: self.settings.MAX_CATEGORIES]
        ]
        self.logger.info(
            "Loaded %d categories (of %d offered)",
            len(categories),
            len(data),
        )
        return categories

    def search_products(self, query: str) -> list[Product]:
        """Search the catalog, returning up to ``SEARCH_LIMIT`` products.

        Empty *query* is still sent; the server decides what it means.
        """
        data = self._get_json(
            self.settings.SEARCH_PATH,
            params={"q": query, "limit": self.settings.SEARCH_LIMIT},
        )
        try:
            hits: list[dict[str, Any]] = data["products"]
            products = [self._parse_product(hit) for hit in hits]
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogFetchError(
                f"Unexpected search payload for '{query}': {exc!r}"
            ) from exc

        self.logger.info(
            "Search '%s' returned %d products", query, len(products)
        )
        return products
