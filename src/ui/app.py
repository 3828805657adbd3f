# src/ui/app.py

"""Terminal UI for browsing the storefront catalog."""

import logging
import math
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.widgets import (
    Button,
    Checkbox,
    DataTable,
    Footer,
    Header,
    Input,
    Static,
)

from src.config.settings import Settings
from src.models.filter_state import CatalogQuery
from src.services.catalog_service import CatalogService

logger = logging.getLogger("storefront.ui")


def star_bar(filled: int, total: int = 5) -> str:
    """Render *filled* solid stars padded with hollow ones to *total*."""
    filled = max(0, min(filled, total))
    return "★" * filled + "☆" * (total - filled)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def format_price(price: float) -> str:
    """Render a price as $ plus its shortest form: $10, $1099.99."""
    if price.is_integer():
        return f"${int(price)}"
    return f"${price}"


class StorefrontApp(App[object]):
    """Single-screen storefront: category tabs, filters, grid, pager."""

    CSS_PATH = "styles.css"
    TITLE = "Devtools Tech Ecommerce Store"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("pageup", "previous_page", "Previous"),
        Binding("pagedown", "next_page", "Next"),
    ]

    def __init__(self, service: CatalogService | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        self.service = service or CatalogService()
        self.catalog_query = CatalogQuery()
        self._category_ids: dict[str, str] = {}
        self._brand_ids: dict[str, str] = {
            f"brand_{idx}": brand
            for idx, brand in enumerate(self.settings.BRANDS)
        }
        self._rating_ids: dict[str, int] = {
            f"rating_{r}": r for r in self.settings.RATINGS
        }

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        brand_boxes = [
            Checkbox(brand, value=False, id=cb_id)
            for cb_id, brand in self._brand_ids.items()
        ]
        rating_boxes = [
            Checkbox(star_bar(r), value=False, id=cb_id)
            for cb_id, r in self._rating_ids.items()
        ]

        yield Header()
        yield Container(
            Static(self.TITLE, id="title"),
            # Filled once the categories request resolves
            Horizontal(id="categories"),
            Horizontal(
                VerticalScroll(
                    Static("Price Range", classes="section_title"),
                    Input(
                        placeholder="FROM ($)",
                        type="number",
                        id="price_from",
                    ),
                    Input(
                        placeholder="TO ($)",
                        type="number",
                        id="price_to",
                    ),
                    Static("Brand", classes="section_title"),
                    *brand_boxes,
                    Static("Average Rating", classes="section_title"),
                    *rating_boxes,
                    id="sidebar",
                ),
                Container(
                    Input(
                        placeholder="Search products...",
                        id="search_input",
                    ),
                    DataTable(
                        id="products_table",
                        zebra_stripes=True,
                        cursor_type="row",
                    ),
                    Horizontal(
                        Button("Previous", id="prev_btn"),
                        Static("Page 1", id="page_label"),
                        Button("Next", id="next_btn"),
                        id="pagination",
                    ),
                    id="products",
                ),
                id="layout",
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Set up the grid and kick off the initial fetches."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        table.add_columns("Title", "Rating", "Price", "Brand", "Thumbnail")
        self.run_worker(self._load_categories(), group="categories")
        self._start_refresh()

    # ── State transitions ────────────────────────────────

    def set_catalog_query(self, query: CatalogQuery) -> None:
        """Replace the query state and requery if anything changed."""
        if query == self.catalog_query:
            return
        self.catalog_query = query
        self._sync_controls()
        self._start_refresh()

    def _start_refresh(self) -> None:
        """Start a product refresh for the current query.

        Workers are not exclusive: an earlier refresh still running
        keeps running and may overwrite the grid when it lands.
        """
        self.run_worker(
            self._refresh_products(self.catalog_query),
            group="products",
        )

    def _sync_controls(self) -> None:
        """Reflect the query state in the page label and category tabs."""
        self.query_one("#page_label", Static).update(
            f"Page {self.catalog_query.page}"
        )
        selected = self.catalog_query.filters.category
        for button_id, name in self._category_ids.items():
            self.query_one(f"#{button_id}", Button).set_class(
                name == selected, "active"
            )

    # ── Workers ──────────────────────────────────────────

    async def _load_categories(self) -> None:
        """Fetch categories and mount one tab button per entry."""
        categories = await self.service.load_categories()
        buttons: list[Button] = []
        for idx, name in enumerate(categories):
            button_id = f"category_{idx}"
            self._category_ids[button_id] = name
            buttons.append(Button(name, id=button_id, classes="category"))
        if buttons:
            await self.query_one("#categories", Horizontal).mount(*buttons)
            self._sync_controls()

    async def _refresh_products(self, query: CatalogQuery) -> None:
        """Run one refresh cycle and redraw the grid on success."""
        result = await self.service.refresh(query)
        if result.ok:
            self.populate_table()

    def populate_table(self) -> None:
        """Fill the grid with the service's visible product slice."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        table.clear()
        for idx, p in enumerate(self.service.visible_products):
            table.add_row(
                p.title[:60],
                Text(star_bar(round_half_up(p.rating)), style="yellow"),
                Text(format_price(p.price), style="bold green"),
                p.brand,
                p.thumbnail,
                key=f"{idx}:{p.id}",
            )

    # ── Event handlers ───────────────────────────────────

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route category tabs and pagination buttons."""
        button_id = event.button.id or ""
        query = self.catalog_query
        if button_id in self._category_ids:
            category = self._category_ids[button_id]
            self.set_catalog_query(
                query.with_filters(query.filters.toggle_category(category))
            )
        elif button_id == "prev_btn":
            self.action_previous_page()
        elif button_id == "next_btn":
            self.action_next_page()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Track search text and price bounds as they are typed."""
        query = self.catalog_query
        input_id = event.input.id
        if input_id == "search_input":
            self.set_catalog_query(query.with_search(event.value))
        elif input_id == "price_from":
            self.set_catalog_query(
                query.with_filters(query.filters.with_price_from(event.value))
            )
        elif input_id == "price_to":
            self.set_catalog_query(
                query.with_filters(query.filters.with_price_to(event.value))
            )

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Toggle brand and rating selections."""
        checkbox_id = event.checkbox.id or ""
        filters = self.catalog_query.filters
        if checkbox_id in self._brand_ids:
            brand = self._brand_ids[checkbox_id]
            if event.value != (brand in filters.brands):
                filters = filters.toggle_brand(brand)
        elif checkbox_id in self._rating_ids:
            rating = self._rating_ids[checkbox_id]
            if event.value != (rating in filters.ratings):
                filters = filters.toggle_rating(rating)
        self.set_catalog_query(self.catalog_query.with_filters(filters))

    def action_previous_page(self) -> None:
        """Go back one page (stops at page 1)."""
        self.set_catalog_query(self.catalog_query.previous_page())

    def action_next_page(self) -> None:
        """Advance one page."""
        self.set_catalog_query(self.catalog_query.next_page())
