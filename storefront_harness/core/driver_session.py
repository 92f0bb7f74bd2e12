# core/driver_session.py
import logging
from contextlib import contextmanager
from typing import Dict, List, Optional, Union
from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.remote.webelement import WebElement
from storefront_harness.config.settings import Config
from storefront_harness.core.exceptions import ResourceError, SessionStateError
from storefront_harness.models.locator import Locator


def build_browser_options(config=Config):
    options = EdgeOptions() if config.BROWSER == 'edge' else ChromeOptions()
    if config.HEADLESS:
        options.add_argument("--headless=new")
    if config.START_MAXIMIZED:
        options.add_argument("--start-maximized")
    if config.NO_SANDBOX:
        options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-extensions")
    options.add_argument(f"--window-size={config.WINDOW_SIZE}")
    return options


class DriverSession:
    """One browser connection, owned by one test from launch to quit.

    Page objects and the wait engine hold a reference to the session but never
    close it; only the owner (TestSession or a service run) calls quit().
    """

    def __init__(self, driver, logger: Optional[logging.Logger] = None):
        self._driver = driver
        self._closed = False
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def launch(cls, config=Config, logger: Optional[logging.Logger] = None) -> 'DriverSession':
        logger = logger or logging.getLogger(__name__)
        options = build_browser_options(config)
        logger.info(f"Launching {config.BROWSER} (headless={config.HEADLESS})")
        try:
            if config.BROWSER == 'edge':
                driver = webdriver.Edge(options=options)
            else:
                driver = webdriver.Chrome(options=options)
        except Exception as e:
            logger.error(f"Error setting up {config.BROWSER} driver: {e}")
            raise ResourceError(f"Failed to launch {config.BROWSER} driver: {e}") from e
        logger.info(f"{config.BROWSER} driver initialized successfully")
        return cls(driver, logger=logger)

    @property
    def driver(self):
        if self._closed:
            raise SessionStateError("Driver session has already been quit")
        return self._driver

    @property
    def is_closed(self) -> bool:
        return self._closed

    # --- navigation ---

    def navigate(self, url: str) -> None:
        self.logger.info(f"Loading URL: {url}")
        self.driver.get(url)

    def back(self) -> None:
        self.driver.back()

    def forward(self) -> None:
        self.driver.forward()

    def refresh(self) -> None:
        self.driver.refresh()

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    @property
    def title(self) -> str:
        return self.driver.title

    # --- lookup and scripting ---

    def find_element(self, locator: Locator, scope: Optional[WebElement] = None) -> WebElement:
        return (scope or self.driver).find_element(*locator.as_tuple())

    def find_elements(self, locator: Locator, scope: Optional[WebElement] = None) -> List[WebElement]:
        return list((scope or self.driver).find_elements(*locator.as_tuple()))

    def execute_script(self, script: str, *args):
        return self.driver.execute_script(script, *args)

    def scroll_into_view(self, element: WebElement) -> None:
        self.execute_script("arguments[0].scrollIntoView({behavior: 'instant', block: 'center'});", element)

    def focus(self, element: WebElement) -> None:
        self.execute_script("arguments[0].focus();", element)

    @property
    def active_element(self) -> WebElement:
        return self.driver.switch_to.active_element

    def screenshot_png(self) -> bytes:
        return self.driver.get_screenshot_as_png()

    # --- windows and frames ---

    @property
    def window_handles(self) -> List[str]:
        return list(self.driver.window_handles)

    @property
    def current_window_handle(self) -> str:
        return self.driver.current_window_handle

    def switch_to_window(self, handle: str) -> None:
        self.driver.switch_to.window(handle)

    def close_window(self) -> None:
        self.driver.close()

    @contextmanager
    def in_window(self, handle: str):
        original = self.current_window_handle
        self.switch_to_window(handle)
        try:
            yield self
        finally:
            self.switch_to_window(original)

    def switch_to_frame(self, target: Union[Locator, WebElement, int, str]) -> None:
        if isinstance(target, Locator):
            target = self.find_element(target)
        self.driver.switch_to.frame(target)

    def switch_to_default_content(self) -> None:
        self.driver.switch_to.default_content()

    @contextmanager
    def in_frame(self, target: Union[Locator, WebElement, int, str]):
        self.switch_to_frame(target)
        try:
            yield self
        finally:
            self.switch_to_default_content()

    # --- cookies and window geometry ---

    def cookies(self) -> List[Dict]:
        return list(self.driver.get_cookies())

    def delete_all_cookies(self) -> None:
        self.driver.delete_all_cookies()

    def set_window_size(self, width: int, height: int) -> None:
        self.driver.set_window_size(width, height)

    def maximize(self) -> None:
        self.driver.maximize_window()

    def viewport_width(self) -> int:
        return int(self.execute_script("return window.innerWidth;") or 0)

    def quit(self) -> None:
        if self._closed:
            return
        try:
            self._driver.quit()
            self.logger.info("WebDriver quit successfully")
        except Exception as e:
            self.logger.error(f"Error occurred while quitting WebDriver: {e}")
        finally:
            self._closed = True
