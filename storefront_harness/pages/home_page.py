# pages/home_page.py
import logging
from typing import Optional
from selenium.common.exceptions import WebDriverException
from storefront_harness.config.settings import Config
from storefront_harness.core import conditions
from storefront_harness.core.exceptions import WaitTimeoutError
from storefront_harness.models.locator import Locator, LocatorTable
from storefront_harness.pages.support import PageSupport

# Upper bound on how long a social link gets to open its tab; there is no event for it.
NEW_TAB_GRACE = 3


class HomePage:
    _HERO_BANNER = Locator.css(".hero-banner, .hero, .main-banner", "hero banner")
    _ORDER_NOW_BUTTON = Locator.css("[data-testid='order-now'], .order-now, a[href*='order']", "Order Now button")
    _MENU_BUTTON = Locator.css(".menu-button, a[href*='menu'], [data-testid='menu']", "Menu button")
    _FIND_LOCATION_BUTTON = Locator.css(".find-location, a[href*='location'], [data-testid='find-location']",
                                        "Find Location button")
    _NEWSLETTER_EMAIL_INPUT = Locator.css("input[type='email'], .newsletter input, .email-signup input",
                                          "newsletter email input")
    _NEWSLETTER_SUBMIT_BUTTON = Locator.css(".newsletter button, .email-signup button, button[type='submit']",
                                            "newsletter submit button")
    _LOGO = Locator.css(".logo, .brand-logo, img[alt*='IHOP']", "logo")

    def __init__(self, session, waits, config=Config, logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.common = PageSupport(session, waits, 'HomePage', config=config, logger=self.logger)
        self._menu_categories = LocatorTable('menu category', {
            'pancakes': Locator.css("a[href*='pancakes'], .menu-item[data-category='pancakes']", "Pancakes category"),
            'combos': Locator.css("a[href*='combos'], .menu-item[data-category='combos']", "Combos category"),
            'burgers': Locator.css("a[href*='burgers'], .menu-item[data-category='burgers']", "Burgers category"),
        })
        self._social_links = LocatorTable('social media platform', {
            'facebook': Locator.css("a[href*='facebook']", "Facebook link"),
            'twitter': Locator.css("a[href*='twitter'], a[href*='x.com']", "Twitter link"),
            'instagram': Locator.css("a[href*='instagram']", "Instagram link"),
        })

    @property
    def menu_categories(self):
        return self._menu_categories.keys()

    @property
    def social_platforms(self):
        return self._social_links.keys()

    def navigate_to(self) -> None:
        self.logger.info(f"Navigating to homepage: {self.config.BASE_URL}")
        self.common.navigate(self.config.BASE_URL)

    def is_hero_banner_displayed(self) -> bool:
        return self.common.is_displayed(self._HERO_BANNER)

    def is_order_now_button_visible(self) -> bool:
        return self.common.is_clickable(self._ORDER_NOW_BUTTON)

    def click_order_now(self) -> None:
        self.common.click(self._ORDER_NOW_BUTTON)

    def is_menu_button_visible(self) -> bool:
        return self.common.is_displayed(self._MENU_BUTTON)

    def click_menu_button(self) -> None:
        self.common.click(self._MENU_BUTTON)

    def click_find_location(self) -> None:
        self.common.click(self._FIND_LOCATION_BUTTON)

    def is_logo_displayed(self) -> bool:
        return self.common.is_displayed(self._LOGO)

    def subscribe_to_newsletter(self, email: str) -> None:
        self.common.type_into(self._NEWSLETTER_EMAIL_INPUT, email)
        self.common.click(self._NEWSLETTER_SUBMIT_BUTTON)
        self.logger.info(f"Subscribed to newsletter with email: {email}")

    def are_menu_categories_displayed(self) -> bool:
        visible = {key: self.common.is_element_present(self._menu_categories.lookup(key))
                   for key in self._menu_categories.keys()}
        self.logger.info(f"Menu categories displayed - {visible}")
        return all(visible.values())

    def navigate_to_menu_category(self, category: str) -> None:
        locator = self._menu_categories.lookup(category)
        self.common.click(locator)
        self.logger.info(f"Navigated to {category} menu category")

    def click_social_media_link(self, platform: str) -> bool:
        """Click a social link and return to the homepage window, closing any tab it opened.

        True when a new tab opened.
        """
        locator = self._social_links.lookup(platform)
        session = self.common.session
        original_window = session.current_window_handle
        known_handles = session.window_handles
        self.common.click(locator)
        self.logger.info(f"Clicked {platform} social media link")
        new_handle = self.common.waits.wait_at_most(conditions.new_window_opened(known_handles), NEW_TAB_GRACE)
        if session.current_window_handle != original_window:
            session.switch_to_window(original_window)
        if new_handle is None:
            return False
        with session.in_window(new_handle):
            session.close_window()
        self.logger.info(f"Closed {platform} tab")
        return True

    def validate_external_link_opens_in_new_tab(self, platform: str) -> bool:
        try:
            opened = self.click_social_media_link(platform)
        except (WaitTimeoutError, WebDriverException) as e:
            self.logger.error(f"Error validating {platform} link behavior: {e}")
            return False
        self.logger.info(f"{platform} link opened new tab: {opened}")
        return opened
