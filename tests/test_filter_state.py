# tests/test_filter_state.py

"""Tests for FilterState toggles and CatalogQuery transitions."""

import unittest

from src.models.filter_state import CatalogQuery, FilterState


class TestToggleCategory(unittest.TestCase):
    """Single-select category toggle."""

    def test_select_from_empty(self) -> None:
        """Toggling a category with none selected selects it."""
        state = FilterState().toggle_category("laptops")
        self.assertEqual(state.category, "laptops")

    def test_same_category_twice_clears(self) -> None:
        """Selecting the active category again clears the filter."""
        state = (
            FilterState()
            .toggle_category("smartphones")
            .toggle_category("smartphones")
        )
        self.assertEqual(state.category, "")

    def test_other_category_replaces(self) -> None:
        """Selecting a different category replaces the old one."""
        state = (
            FilterState()
            .toggle_category("smartphones")
            .toggle_category("laptops")
        )
        self.assertEqual(state.category, "laptops")

    def test_original_is_unchanged(self) -> None:
        """Toggling returns a new instance and leaves the old one alone."""
        original = FilterState()
        updated = original.toggle_category("tops")
        self.assertEqual(original.category, "")
        self.assertIsNot(original, updated)


class TestToggleBrand(unittest.TestCase):
    """Multi-select brand toggle."""

    def test_add_brand(self) -> None:
        """An absent brand is added."""
        state = FilterState().toggle_brand("Apple")
        self.assertEqual(state.brands, ("Apple",))

    def test_toggle_twice_restores(self) -> None:
        """Toggling a brand twice restores the original selection."""
        start = FilterState().toggle_brand("Samsung")
        state = start.toggle_brand("Apple").toggle_brand("Apple")
        self.assertEqual(state.brands, start.brands)
        self.assertEqual(state, start)

    def test_keeps_toggle_order(self) -> None:
        """The brand sequence reflects the order brands were added."""
        state = (
            FilterState()
            .toggle_brand("OPPO")
            .toggle_brand("Apple")
            .toggle_brand("Huawei")
        )
        self.assertEqual(state.brands, ("OPPO", "Apple", "Huawei"))

    def test_remove_middle_brand(self) -> None:
        """Removing a brand keeps the remaining order intact."""
        state = (
            FilterState()
            .toggle_brand("OPPO")
            .toggle_brand("Apple")
            .toggle_brand("Huawei")
            .toggle_brand("Apple")
        )
        self.assertEqual(state.brands, ("OPPO", "Huawei"))


class TestToggleRating(unittest.TestCase):
    """Multi-select rating toggle."""

    def test_add_and_remove(self) -> None:
        """Ratings toggle on and off."""
        state = FilterState().toggle_rating(4).toggle_rating(5)
        self.assertEqual(state.ratings, (4, 5))
        self.assertEqual(state.toggle_rating(4).ratings, (5,))

    def test_all_valid_ratings_accepted(self) -> None:
        """Every whole star value 1 to 5 can be toggled."""
        for rating in (1, 2, 3, 4, 5):
            with self.subTest(rating=rating):
                state = FilterState().toggle_rating(rating)
                self.assertEqual(state.ratings, (rating,))

    def test_out_of_range_rejected(self) -> None:
        """Ratings outside 1 to 5 raise ValueError."""
        for rating in (0, 6, -1):
            with self.subTest(rating=rating):
                with self.assertRaises(ValueError):
                    FilterState().toggle_rating(rating)


class TestPriceBounds(unittest.TestCase):
    """Raw price bound setters."""

    def test_bounds_stored_verbatim(self) -> None:
        """Price text is kept as typed, without validation."""
        state = FilterState().with_price_from("10").with_price_to("abc")
        self.assertEqual(state.price_from, "10")
        self.assertEqual(state.price_to, "abc")


class TestCatalogQuery(unittest.TestCase):
    """Page and search transitions."""

    def test_defaults(self) -> None:
        """A fresh query starts on page 1 with no search or filters."""
        query = CatalogQuery()
        self.assertEqual(query.page, 1)
        self.assertEqual(query.search, "")
        self.assertEqual(query.filters, FilterState())

    def test_previous_page_floors_at_one(self) -> None:
        """Going back from page 1 stays on page 1."""
        self.assertEqual(CatalogQuery().previous_page().page, 1)

    def test_previous_page_decrements(self) -> None:
        """Going back from page 3 lands on page 2."""
        self.assertEqual(CatalogQuery(page=3).previous_page().page, 2)

    def test_next_page_unbounded(self) -> None:
        """Next keeps incrementing with no upper limit."""
        query = CatalogQuery()
        for _ in range(50):
            query = query.next_page()
        self.assertEqual(query.page, 51)

    def test_page_below_one_rejected(self) -> None:
        """A query cannot be constructed on page 0."""
        with self.assertRaises(ValueError):
            CatalogQuery(page=0)

    def test_equal_queries_compare_equal(self) -> None:
        """Identical state yields equal queries."""
        a = CatalogQuery(search="phone").with_filters(
            FilterState().toggle_brand("Apple")
        )
        b = CatalogQuery(search="phone").with_filters(
            FilterState().toggle_brand("Apple")
        )
        self.assertEqual(a, b)

    def test_with_search_keeps_page(self) -> None:
        """Changing the search text does not reset the page."""
        query = CatalogQuery(page=3).with_search("laptop")
        self.assertEqual(query.page, 3)
        self.assertEqual(query.search, "laptop")


if __name__ == "__main__":
    unittest.main()
