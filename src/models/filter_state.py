# src/models/filter_state.py

"""Immutable filter and query state for the catalog view.

Every transition returns a new instance via :func:`dataclasses.replace`,
so the UI can compare old and new state and hand a snapshot to a refresh
worker without it changing underneath.
"""

from dataclasses import dataclass, field, replace

VALID_RATINGS: frozenset[int] = frozenset({1, 2, 3, 4, 5})


def _toggle(values: tuple[str, ...] | tuple[int, ...], item: object) -> tuple:
    """Remove *item* if present, otherwise append it (keeps toggle order)."""
    if item in values:
        return tuple(v for v in values if v != item)
    return (*values, item)


@dataclass(frozen=True)
class FilterState:
    """User-selected filter criteria.

    ``price_from`` and ``price_to`` hold the raw text typed by the user;
    parsing happens at filter time. ``brands`` and ``ratings`` keep the
    order in which they were toggled on, but filtering treats them as sets.
    """

    category: str = ""
    price_from: str = ""
    price_to: str = ""
    brands: tuple[str, ...] = ()
    ratings: tuple[int, ...] = ()

    def toggle_category(self, category: str) -> "FilterState":
        """Select *category*, or clear it if it is already selected."""
        new_category = "" if self.category == category else category
        return replace(self, category=new_category)

    def toggle_brand(self, brand: str) -> "FilterState":
        """Add *brand* to the selection, or remove it if present."""
        return replace(self, brands=_toggle(self.brands, brand))

    def toggle_rating(self, rating: int) -> "FilterState":
        """Add *rating* to the selection, or remove it if present.

        Raises:
            ValueError: if *rating* is not one of 1 to 5.
        """
        if rating not in VALID_RATINGS:
            raise ValueError(f"Rating must be 1-5, got {rating!r}")
        return replace(self, ratings=_toggle(self.ratings, rating))

    def with_price_from(self, value: str) -> "FilterState":
        """Replace the lower price bound text."""
        return replace(self, price_from=value)

    def with_price_to(self, value: str) -> "FilterState":
        """Replace the upper price bound text."""
        return replace(self, price_to=value)


@dataclass(frozen=True)
class CatalogQuery:
    """Everything that determines the visible product slice."""

    search: str = ""
    filters: FilterState = field(default_factory=FilterState)
    page: int = 1

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"Page must be >= 1, got {self.page}")

    def with_search(self, search: str) -> "CatalogQuery":
        """Replace the search text."""
        return replace(self, search=search)

    def with_filters(self, filters: FilterState) -> "CatalogQuery":
        """Replace the filter state."""
        return replace(self, filters=filters)

    def next_page(self) -> "CatalogQuery":
        """Advance one page. There is no upper bound."""
        return replace(self, page=self.page + 1)

    def previous_page(self) -> "CatalogQuery":
        """Go back one page, never below page 1."""
        return replace(self, page=max(self.page - 1, 1))
