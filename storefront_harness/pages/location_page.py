# pages/location_page.py
import logging
from typing import Optional
from selenium.common.exceptions import WebDriverException
from storefront_harness.config.settings import Config
from storefront_harness.core import conditions
from storefront_harness.core.exceptions import WaitTimeoutError
from storefront_harness.models.locator import Locator
from storefront_harness.pages.support import PageSupport

SEARCH_START_GRACE = 5
RESULTS_TIMEOUT = 15


class LocationPage:
    _ZIP_CODE_INPUT = Locator.css("input[placeholder*='zip'], input[name*='zip'], .zip-input", "ZIP code input")
    _SEARCH_BUTTON = Locator.css(".search-button, button[type='submit'], .find-location-btn", "search button")
    _LOCATION_RESULTS = Locator.css(".location-results, .restaurant-list, .locations", "location results")
    _LOCATION_ITEMS = Locator.css(".location-item, .restaurant", "location items")
    _FIRST_LOCATION = Locator.css(".location-item:first-child, .restaurant:first-child", "first location")
    _LOCATION_NAME = Locator.css(".location-name, .restaurant-name, h3", "location name")
    _LOCATION_ADDRESS = Locator.css(".location-address, .restaurant-address, .address", "location address")
    _GET_DIRECTIONS_BUTTON = Locator.css(".directions-btn, a[href*='directions']", "Get Directions button")
    _ERROR_MESSAGE = Locator.css(".error-message, .alert-error, .validation-error", "error message")
    _LOADING_INDICATOR = Locator.css(".loading, .spinner, .searching", "search indicator")

    def __init__(self, session, waits, config=Config, logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.common = PageSupport(session, waits, 'LocationPage', config=config, logger=self.logger)

    def navigate_to(self) -> None:
        self.common.navigate(self.config.LOCATIONS_URL)

    def search_by_zip_code(self, zip_code: str) -> None:
        self.common.type_into(self._ZIP_CODE_INPUT, zip_code)
        self.common.click(self._SEARCH_BUTTON)
        self.logger.info(f"Searched for locations with ZIP code: {zip_code}")
        self._wait_for_search_to_complete()

    def _wait_for_search_to_complete(self) -> None:
        waits = self.common.waits
        appeared = waits.wait_at_most(conditions.element_exists(self._LOADING_INDICATOR), SEARCH_START_GRACE)
        if appeared is None:
            self.logger.info("Loading indicator not detected or completed quickly")
            return
        try:
            waits.wait_until(conditions.element_absent(self._LOADING_INDICATOR))
        except WaitTimeoutError:
            self.logger.info("Search indicator still visible, continuing")

    def are_location_results_displayed(self) -> bool:
        return self.common.is_displayed(self._LOCATION_RESULTS, timeout=RESULTS_TIMEOUT)

    def get_location_results_count(self) -> int:
        return self.common.count(self._LOCATION_ITEMS)

    def get_first_location_name(self) -> str:
        return self.common.read_text(self._LOCATION_NAME, scope_locator=self._FIRST_LOCATION)

    def get_first_location_address(self) -> str:
        return self.common.read_text(self._LOCATION_ADDRESS, scope_locator=self._FIRST_LOCATION)

    def click_get_directions(self) -> None:
        self.common.click(self._GET_DIRECTIONS_BUTTON)

    def is_error_message_displayed(self) -> bool:
        has_error = self.common.is_element_present(self._ERROR_MESSAGE)
        self.logger.info(f"Error message displayed: {has_error}")
        return has_error

    def get_error_message(self) -> str:
        if not self.is_error_message_displayed():
            return ''
        return self.common.read_text(self._ERROR_MESSAGE, timeout=0)

    def validate_zip_code_search(self, zip_code: str) -> bool:
        try:
            self.search_by_zip_code(zip_code)
        except (WaitTimeoutError, WebDriverException) as e:
            self.logger.error(f"Error validating ZIP code search for {zip_code}: {e}")
            return False
        outcome = self.common.waits.wait_at_most(
            conditions.any_element_exists(self._LOCATION_RESULTS, self._ERROR_MESSAGE), RESULTS_TIMEOUT)
        has_results = outcome is not None and self.common.is_displayed(self._LOCATION_RESULTS, timeout=0)
        has_error = self.is_error_message_displayed()
        self.logger.info(f"ZIP code {zip_code} search validation - Results: {has_results}, Error: {has_error}")
        return has_results and not has_error
