"""Tests for locators and closed-set keyed lookups."""

import pytest
from selenium.webdriver.common.by import By

from storefront_harness.core.exceptions import UnknownCategoryError
from storefront_harness.models.locator import Locator, LocatorTable, Strategy


@pytest.fixture
def categories() -> LocatorTable:
    return LocatorTable('menu category', {
        'pancakes': Locator.css("a[href*='pancakes']", "Pancakes category"),
        'combos': Locator.css("a[href*='combos']", "Combos category"),
        'burgers': Locator.css("a[href*='burgers']", "Burgers category"),
        'drinks': Locator.css("a[href*='drinks']", "Drinks category"),
    })


class TestLocator:
    def test_as_tuple_uses_selenium_by_values(self):
        assert Locator.css(".hero").as_tuple() == (By.CSS_SELECTOR, ".hero")
        assert Locator.tag("img").as_tuple() == (By.TAG_NAME, "img")
        assert Locator.by_id("zip").as_tuple() == (By.ID, "zip")
        assert Locator.xpath("//h1").as_tuple() == (By.XPATH, "//h1")

    def test_equality_ignores_description(self):
        assert Locator.css(".hero", "hero banner") == Locator.css(".hero", "banner")
        assert hash(Locator.css(".hero", "a")) == hash(Locator.css(".hero", "b"))
        assert Locator.css(".hero") != Locator(Strategy.XPATH, ".hero")

    def test_name_falls_back_to_strategy_and_selector(self):
        assert Locator.css(".hero", "hero banner").name == "hero banner"
        assert Locator.css(".hero").name == "css=.hero"


class TestLocatorTable:
    def test_lookup_known_key(self, categories):
        assert categories.lookup('pancakes').description == "Pancakes category"

    def test_lookup_is_case_insensitive(self, categories):
        assert categories.lookup('Burgers') == categories.lookup('burgers')

    def test_unknown_key_names_the_key(self, categories):
        with pytest.raises(UnknownCategoryError) as exc_info:
            categories.lookup('waffles')

        error = exc_info.value
        assert error.key == 'waffles'
        assert error.kind == 'menu category'
        assert error.valid_keys == ['burgers', 'combos', 'drinks', 'pancakes']
        assert 'waffles' in str(error)

    def test_unknown_category_is_a_lookup_error(self, categories):
        with pytest.raises(LookupError):
            categories.lookup('waffles')

    def test_non_string_key_is_unknown(self, categories):
        with pytest.raises(UnknownCategoryError):
            categories.lookup(None)

    def test_keys_and_membership(self, categories):
        assert categories.keys() == ['pancakes', 'combos', 'burgers', 'drinks']
        assert 'Drinks' in categories
        assert 'waffles' not in categories
        assert len(categories) == 4
