# core/session.py
import logging
from enum import Enum
from pathlib import Path
from typing import Optional
from storefront_harness.config.settings import Config
from storefront_harness.core.accessibility import AccessibilityAuditor
from storefront_harness.core.driver_session import DriverSession
from storefront_harness.core.exceptions import SessionStateError
from storefront_harness.core.wait_engine import WaitEngine
from storefront_harness.pages.home_page import HomePage
from storefront_harness.pages.location_page import LocationPage
from storefront_harness.pages.menu_page import MenuPage
from storefront_harness.utils.artifacts import save_screenshot


class SessionState(Enum):
    UNINITIALIZED = 'uninitialized'
    READY = 'ready'
    TORN_DOWN = 'torn_down'


class TestSession:
    """Owns one browser session for one test: launch, page objects, failure screenshot, quit.

    Use as a context manager; the driver is quit on exit whether or not the
    body raised, and a raised body counts as a failure.
    """
    __test__ = False

    def __init__(self, name: str, config=Config, logger: Optional[logging.Logger] = None,
                 session_factory=DriverSession.launch):
        self.name = name
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.session_factory = session_factory
        self.state = SessionState.UNINITIALIZED
        self.failure_screenshot: Optional[Path] = None
        self._session = None
        self._waits = None
        self._home_page = None
        self._location_page = None
        self._menu_page = None
        self._auditor = None

    def start(self) -> 'TestSession':
        if self.state is not SessionState.UNINITIALIZED:
            raise SessionStateError(f"Cannot start test session '{self.name}' in state {self.state.value}")
        self.logger.info(f"Starting test: {self.name}")
        session = self.session_factory(self.config, self.logger)
        try:
            self._waits = WaitEngine(session, timeout=self.config.TIMEOUT, logger=self.logger)
            self._home_page = HomePage(session, self._waits, config=self.config, logger=self.logger)
            self._location_page = LocationPage(session, self._waits, config=self.config, logger=self.logger)
            self._menu_page = MenuPage(session, self._waits, config=self.config, logger=self.logger)
            self._auditor = AccessibilityAuditor(session, logger=self.logger)
        except Exception:
            session.quit()
            raise
        self._session = session
        self.state = SessionState.READY
        return self

    def finish(self, failed: bool = False) -> Optional[Path]:
        """Tear down the session, capturing one screenshot first when the test failed."""
        if self.state is not SessionState.READY:
            return None
        try:
            if failed:
                self.logger.error(f"Test failed: {self.name}")
                self.failure_screenshot = save_screenshot(
                    self._session, f"FAILED_{self.name}", self.config.SCREENSHOT_DIR, log=self.logger)
            else:
                self.logger.info(f"Test passed: {self.name}")
        finally:
            self._session.quit()
            self.state = SessionState.TORN_DOWN
            self.logger.info(f"Finished test: {self.name}")
        return self.failure_screenshot

    def __enter__(self) -> 'TestSession':
        return self.start()

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.finish(failed=exc_type is not None)
        return False

    def _require_ready(self, value):
        if self.state is not SessionState.READY:
            raise SessionStateError(f"Test session '{self.name}' is {self.state.value}, not ready")
        return value

    @property
    def session(self) -> DriverSession:
        return self._require_ready(self._session)

    @property
    def waits(self) -> WaitEngine:
        return self._require_ready(self._waits)

    @property
    def home_page(self) -> HomePage:
        return self._require_ready(self._home_page)

    @property
    def location_page(self) -> LocationPage:
        return self._require_ready(self._location_page)

    @property
    def menu_page(self) -> MenuPage:
        return self._require_ready(self._menu_page)

    @property
    def auditor(self) -> AccessibilityAuditor:
        return self._require_ready(self._auditor)
