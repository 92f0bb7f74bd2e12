# pages/menu_page.py
import logging
from typing import List, Optional
from selenium.common.exceptions import NoSuchElementException, WebDriverException
from storefront_harness.config.settings import Config
from storefront_harness.core import conditions
from storefront_harness.core.exceptions import WaitTimeoutError
from storefront_harness.models.locator import Locator, LocatorTable
from storefront_harness.pages.support import PageSupport

IMAGE_SAMPLE_SIZE = 5
IMAGE_LOAD_TIMEOUT = 5
CATEGORY_SETTLE_TIMEOUT = 5
DEFAULT_CATEGORIES = ('pancakes', 'combos', 'burgers')


class MenuPage:
    _MENU_CATEGORIES = Locator.css(".menu-categories, .category-nav, .menu-nav", "menu categories")
    _MENU_ITEMS = Locator.css(".menu-item, .product-item, .dish", "menu items")
    _MENU_ITEM_NAME = Locator.css(".item-name, .product-name, h3", "menu item name")
    _MENU_ITEM_PRICE = Locator.css(".item-price, .product-price, .price", "menu item price")
    _MENU_ITEM_IMAGE = Locator.css(".item-image img, .product-image img", "menu item image")
    _ADD_TO_CART_BUTTON = Locator.css(".add-to-cart, .order-button, button[data-action='add']", "Add to Cart button")
    _SEARCH_BOX = Locator.css(".menu-search, input[placeholder*='search menu']", "menu search box")

    def __init__(self, session, waits, config=Config, logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.common = PageSupport(session, waits, 'MenuPage', config=config, logger=self.logger)
        self._categories = LocatorTable('menu category', {
            'pancakes': Locator.css("a[href*='pancakes'], .category[data-category='pancakes']", "Pancakes category"),
            'combos': Locator.css("a[href*='combos'], .category[data-category='combos']", "Combos category"),
            'burgers': Locator.css("a[href*='burgers'], .category[data-category='burgers']", "Burgers category"),
            'drinks': Locator.css("a[href*='drinks'], .category[data-category='drinks']", "Drinks category"),
        })
        self._dietary_filters = LocatorTable('dietary filter', {
            'vegetarian': Locator.css(".filter-vegetarian, [data-filter='vegetarian']", "vegetarian filter"),
            'gluten-free': Locator.css(".filter-gluten-free, [data-filter='gluten-free']", "gluten-free filter"),
        })

    @property
    def categories(self) -> List[str]:
        return self._categories.keys()

    @property
    def dietary_filters(self) -> List[str]:
        return self._dietary_filters.keys()

    def navigate_to(self) -> None:
        self.common.navigate(self.config.MENU_URL)

    def are_menu_categories_displayed(self) -> bool:
        return self.common.is_displayed(self._MENU_CATEGORIES)

    def navigate_to_category(self, category_name: str) -> None:
        locator = self._categories.lookup(category_name)
        self._click_and_settle(locator)
        self.logger.info(f"Navigated to {category_name} category")

    def apply_dietary_filter(self, filter_type: str) -> None:
        locator = self._dietary_filters.lookup(filter_type)
        self._click_and_settle(locator)
        self.logger.info(f"Applied {filter_type} filter")

    def _click_and_settle(self, locator: Locator) -> None:
        before = conditions.dom_fingerprint(self.common.session)
        self.common.click(locator)
        self.common.waits.wait_at_most(conditions.dom_changed(before), CATEGORY_SETTLE_TIMEOUT)
        self.common.wait_for_page_to_load()

    def get_menu_items_count(self) -> int:
        return self.common.count(self._MENU_ITEMS)

    def get_menu_item_names(self) -> List[str]:
        names = []
        try:
            for item in self.common.session.find_elements(self._MENU_ITEMS):
                text = self._child_text(item, self._MENU_ITEM_NAME)
                if text:
                    names.append(text)
        except WebDriverException as e:
            self.logger.error(f"Error retrieving menu item names: {e}")
            return []
        self.logger.info(f"Retrieved {len(names)} menu item names")
        return names

    def are_menu_item_images_loaded(self) -> bool:
        session = self.common.session
        try:
            images = session.find_elements(self._MENU_ITEM_IMAGE)[:IMAGE_SAMPLE_SIZE]
        except WebDriverException as e:
            self.logger.error(f"Error checking menu item images: {e}")
            return False
        loaded = 0
        for image in images:
            try:
                session.scroll_into_view(image)
                if self.common.waits.wait_at_most(conditions.image_loaded(image), IMAGE_LOAD_TIMEOUT) is not None:
                    loaded += 1
            except WebDriverException:
                continue
        self.logger.info(f"Menu item images loaded: {loaded}/{len(images)}")
        return loaded == len(images)

    def search_menu_item(self, search_term: str) -> None:
        self.common.type_into(self._SEARCH_BOX, search_term, submit=True)
        self.common.wait_for_page_to_load()
        self.logger.info(f"Searched for menu item: {search_term}")

    def add_first_item_to_cart(self) -> None:
        waits = self.common.waits
        try:
            first_item = waits.wait_until(conditions.element_exists(self._MENU_ITEMS))
            button = waits.wait_until(conditions.child_exists(first_item, self._ADD_TO_CART_BUTTON))
            self.common.click_element(button, self._ADD_TO_CART_BUTTON.name)
        except (WaitTimeoutError, WebDriverException) as e:
            self.logger.error(f"Failed to add first item to cart: {e}")
            raise
        self.logger.info("Added first menu item to cart")

    def validate_menu_item_details(self, item_index: int = 0) -> bool:
        session = self.common.session
        try:
            items = session.find_elements(self._MENU_ITEMS)
            if item_index >= len(items):
                self.logger.warning(f"Item index {item_index} is out of range. Total items: {len(items)}")
                return False
            item = items[item_index]
            session.scroll_into_view(item)
            has_name = bool(self._child_text(item, self._MENU_ITEM_NAME))
            has_price = bool(self._child_text(item, self._MENU_ITEM_PRICE))
            try:
                has_image = session.find_element(self._MENU_ITEM_IMAGE, scope=item).is_displayed()
            except NoSuchElementException:
                has_image = False
        except WebDriverException as e:
            self.logger.error(f"Error validating menu item details for item {item_index}: {e}")
            return False
        self.logger.info(f"Menu item {item_index} validation - Name: {has_name}, Price: {has_price}, Image: {has_image}")
        return has_name and has_price

    def _child_text(self, item, locator: Locator) -> str:
        try:
            return self.common.session.find_element(locator, scope=item).text
        except NoSuchElementException:
            return ''

    def validate_all_menu_categories(self, categories=DEFAULT_CATEGORIES) -> bool:
        all_valid = True
        for category in categories:
            try:
                self.navigate_to_category(category)
            except (WaitTimeoutError, WebDriverException) as e:
                self.logger.error(f"Error validating category {category}: {e}")
                all_valid = False
                continue
            has_items = self.common.waits.wait_at_most(
                conditions.element_exists(self._MENU_ITEMS), CATEGORY_SETTLE_TIMEOUT) is not None
            self.logger.info(f"Category '{category}' has {self.get_menu_items_count()} items")
            all_valid = all_valid and has_items
        return all_valid
