# src/filters/product_filter.py

"""Client-side product filtering and pagination."""

import logging
import math

from src.config.settings import Settings
from src.models.filter_state import FilterState
from src.models.product import Product

logger = logging.getLogger("storefront.filters")


class ProductFilter:
    """Narrow a fetched product list down to the visible page."""

    @staticmethod
    def parse_price(text: str) -> float | None:
        """Parse a price bound typed by the user.

        Empty, non-numeric and non-finite input yields ``None`` so the
        bound is treated as absent.
        """
        try:
            value = float(text.strip())
        except ValueError:
            return None
        return value if math.isfinite(value) else None

    @staticmethod
    def apply(
        products: list[Product],
        filters: FilterState,
    ) -> list[Product]:
        """Apply category, price, brand and rating filters in that order."""
        filtered = products

        if filters.category:
            filtered = [
                p for p in filtered if p.category == filters.category
            ]

        min_price = ProductFilter.parse_price(filters.price_from)
        if min_price is not None:
            filtered = [p for p in filtered if p.price >= min_price]

        max_price = ProductFilter.parse_price(filters.price_to)
        if max_price is not None:
            filtered = [p for p in filtered if p.price <= max_price]

        if filters.brands:
            brands = set(filters.brands)
            filtered = [p for p in filtered if p.brand in brands]

        if filters.ratings:
            ratings = set(filters.ratings)
            filtered = [
                p for p in filtered if math.floor(p.rating) in ratings
            ]

        removed = len(products) - len(filtered)
        if removed:
            logger.debug(
                "Filters removed %d of %d products",
                removed,
                len(products),
            )
        return filtered

    @staticmethod
    def paginate(
        products: list[Product],
        page: int,
        page_size: int = Settings.PAGE_SIZE,
    ) -> list[Product]:
        """Return the zero-indexed slice for a 1-based *page*.

        Pages past the end yield an empty list.
        """
        start = (page - 1) * page_size
        return products[start:start + page_size]
