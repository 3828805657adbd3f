# src/services/catalog_service.py

"""Catalog fetcher: loads categories and recomputes the visible page."""

import asyncio
import logging
from dataclasses import dataclass, field

from src.clients.catalog_client import CatalogClient, CatalogFetchError
from src.filters.product_filter import ProductFilter
from src.models.filter_state import CatalogQuery
from src.models.product import Product

logger = logging.getLogger("storefront.catalog")


@dataclass
class RefreshResult:
    """Outcome of one product query cycle."""

    query: CatalogQuery
    ok: bool
    fetched_count: int = 0
    matched_count: int = 0
    products: list[Product] = field(
        default_factory=lambda: list[Product]()
    )


class CatalogService:
    """Owns the category list and the visible product slice.

    Refreshes are independent: nothing is cancelled or debounced, and
    each successful response overwrites ``visible_products`` when it
    arrives. With several refreshes in flight the last one to *finish*
    wins, not the last one started. A failed refresh leaves the
    previous slice in place.
    """

    def __init__(self, client: CatalogClient | None = None) -> None:
        self.client = client or CatalogClient()
        self.categories: list[str] = []
        self.visible_products: list[Product] = []

    async def load_categories(self) -> list[str]:
        """Fetch the category list once; stays empty on failure."""
        try:
            self.categories = await asyncio.to_thread(
                self.client.fetch_categories
            )
        except CatalogFetchError as exc:
            logger.error(
                "Failed to fetch categories: %s", exc, exc_info=True
            )
        return self.categories

    async def refresh(self, query: CatalogQuery) -> RefreshResult:
        """Run one search, filter and paginate cycle for *query*."""
        try:
            fetched = await asyncio.to_thread(
                self.client.search_products, query.search
            )
        except CatalogFetchError as exc:
            logger.error(
                "Failed to fetch products for '%s' (page %d): %s",
                query.search,
                query.page,
                exc,
                exc_info=True,
            )
            return RefreshResult(
                query=query,
                ok=False,
                products=list(self.visible_products),
            )

        matched = ProductFilter.apply(fetched, query.filters)
        self.visible_products = ProductFilter.paginate(
            matched, query.page
        )
        logger.info(
            "Query '%s' page %d: %d fetched, %d matched, %d visible",
            query.search,
            query.page,
            len(fetched),
            len(matched),
            len(self.visible_products),
        )
        return RefreshResult(
            query=query,
            ok=True,
            fetched_count=len(fetched),
            matched_count=len(matched),
            products=list(self.visible_products),
        )
