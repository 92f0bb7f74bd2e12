# pages/support.py
"""Shared page capability composed by every page object.

Query helpers (is_*, read_*, count) absorb synchronization failures into a
negative result. Action helpers (click, type_into, navigate) log and re-raise.
"""
import logging
from typing import Dict, List, Optional
from selenium.common.exceptions import ElementClickInterceptedException, WebDriverException
from selenium.webdriver.common.keys import Keys
from storefront_harness.config.settings import Config
from storefront_harness.core import conditions
from storefront_harness.core.exceptions import WaitTimeoutError
from storefront_harness.models.locator import Locator
from storefront_harness.utils.link_utils import get_status_chain

HEADER = Locator.css("header", "page header")
FOOTER = Locator.css("footer", "page footer")
NAVIGATION = Locator.css("nav, .navigation, .navbar", "navigation")
LOADING_INDICATOR = Locator.css(".loading, .spinner, [data-loading]", "loading indicator")
FOOTER_LINKS = Locator.css("footer a[href]", "footer links")

LOADING_TIMEOUT = 10
RESIZE_SETTLE_TIMEOUT = 3

QUERY_ERRORS = (WaitTimeoutError, WebDriverException)


class PageSupport:
    def __init__(self, session, waits, owner: str = 'Page', config=Config,
                 logger: Optional[logging.Logger] = None):
        self.session = session
        self.waits = waits
        self.owner = owner
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

    # --- loading ---

    def navigate(self, url: str) -> None:
        self.logger.info(f"{self.owner}: navigating to {url}")
        self.session.navigate(url)
        self.wait_for_page_to_load()

    def wait_for_page_to_load(self, timeout: Optional[float] = None) -> None:
        self.waits.wait_until(conditions.page_ready(), timeout=timeout)
        self.wait_for_loading_to_complete()
        self.logger.info(f"Page loaded: {self.owner}")

    def wait_for_loading_to_complete(self, locator: Locator = LOADING_INDICATOR,
                                     timeout: float = LOADING_TIMEOUT) -> bool:
        # A spinner may never have been rendered, so a timeout here is not an error.
        try:
            return self.waits.wait_until(conditions.element_absent(locator), timeout=timeout)
        except WaitTimeoutError:
            self.logger.info(f"{locator.name} still present after {timeout}s, continuing")
            return False

    # --- queries ---

    def is_element_present(self, locator: Locator) -> bool:
        try:
            return len(self.session.find_elements(locator)) > 0
        except WebDriverException as e:
            self.logger.error(f"Error checking presence of {locator.name}: {e}")
            return False

    def is_displayed(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        timeout = self.config.OPTIONAL_TIMEOUT if timeout is None else timeout
        try:
            element = self.waits.wait_until(conditions.element_exists(locator), timeout=timeout)
            displayed = element.is_displayed()
        except QUERY_ERRORS as e:
            self.logger.error(f"{locator.name} not found or not displayed: {e}")
            return False
        self.logger.info(f"{locator.name} displayed: {displayed}")
        return displayed

    def is_clickable(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        timeout = self.config.OPTIONAL_TIMEOUT if timeout is None else timeout
        try:
            element = self.waits.wait_until(conditions.element_exists(locator), timeout=timeout)
            clickable = element.is_displayed() and element.is_enabled()
        except QUERY_ERRORS as e:
            self.logger.error(f"{locator.name} not found or not clickable: {e}")
            return False
        self.logger.info(f"{locator.name} visible and clickable: {clickable}")
        return clickable

    def read_text(self, locator: Locator, timeout: Optional[float] = None, scope_locator: Locator = None) -> str:
        """Text of ``locator``, optionally looked up inside the first ``scope_locator`` match. Empty on failure."""
        try:
            if scope_locator is not None:
                scope = self.waits.wait_until(conditions.element_exists(scope_locator), timeout=timeout)
                text = self.session.find_element(locator, scope=scope).text
            else:
                text = self.waits.wait_until(conditions.element_exists(locator), timeout=timeout).text
        except QUERY_ERRORS as e:
            self.logger.error(f"Failed to read text of {locator.name}: {e}")
            return ''
        self.logger.info(f"{locator.name}: {text}")
        return text or ''

    def count(self, locator: Locator) -> int:
        try:
            found = len(self.session.find_elements(locator))
        except WebDriverException as e:
            self.logger.error(f"Error counting {locator.name}: {e}")
            return 0
        self.logger.info(f"Found {found} {locator.name}")
        return found

    # --- actions ---

    def click(self, locator: Locator, timeout: Optional[float] = None) -> None:
        try:
            element = self.waits.wait_until(conditions.element_clickable(locator), timeout=timeout)
            self.click_element(element, locator.name)
        except (WaitTimeoutError, WebDriverException) as e:
            self.logger.error(f"Failed to click {locator.name}: {e}")
            raise

    def click_element(self, element, name: str = 'element') -> None:
        self.session.scroll_into_view(element)
        try:
            element.click()
        except ElementClickInterceptedException:
            self.logger.info(f"Click intercepted on {name}, falling back to JS click")
            self.session.execute_script("arguments[0].click();", element)
        self.logger.info(f"Clicked {name}")

    def type_into(self, locator: Locator, text: str, submit: bool = False, timeout: Optional[float] = None) -> None:
        try:
            element = self.waits.wait_until(conditions.element_displayed(locator), timeout=timeout)
            self.session.scroll_into_view(element)
            element.clear()
            element.send_keys(text)
            if submit:
                element.send_keys(Keys.ENTER)
        except (WaitTimeoutError, WebDriverException) as e:
            self.logger.error(f"Failed to type into {locator.name}: {e}")
            raise
        self.logger.info(f"Typed into {locator.name}")

    def resize(self, width: int, height: int) -> bool:
        self.session.set_window_size(width, height)
        settled = self.waits.wait_at_most(conditions.viewport_width_is(width), RESIZE_SETTLE_TIMEOUT)
        self.logger.info(f"Resized window to {width}x{height} (viewport {settled or 'unsettled'})")
        return settled is not None

    # --- layout shared by every page ---

    def is_header_present(self) -> bool:
        return self.is_element_present(HEADER)

    def is_footer_present(self) -> bool:
        return self.is_element_present(FOOTER)

    def is_navigation_present(self) -> bool:
        return self.is_element_present(NAVIGATION)

    def page_title(self) -> str:
        return self.session.title

    def current_url(self) -> str:
        return self.session.current_url

    def footer_link_statuses(self, limit: int = 20) -> Dict[str, Optional[List[int]]]:
        statuses = {}
        try:
            links = self.session.find_elements(FOOTER_LINKS)[:limit]
            base_url = self.session.current_url
            for link in links:
                href = link.get_attribute('href') or ''
                if href and href not in statuses:
                    statuses[href] = get_status_chain(href, base_url)
        except WebDriverException as e:
            self.logger.error(f"Error collecting footer links: {e}")
        self.logger.info(f"Checked {len(statuses)} footer links")
        return statuses
