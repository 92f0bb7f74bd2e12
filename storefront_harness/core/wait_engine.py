# core/wait_engine.py
"""Bounded polling on top of Selenium's WebDriverWait.

A condition is a callable ``condition(session) -> value or None``. ``None``
means "not yet"; any other value (including falsy ones such as ``0`` or
``""``) means ready and is returned to the caller without a further poll.
Not-found and stale-element errors raised by a condition are treated as
"not yet"; any other exception aborts the wait immediately.
"""
import logging
import time
from typing import Callable, Optional, TypeVar
from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.support.ui import WebDriverWait
from storefront_harness.core import conditions
from storefront_harness.core.exceptions import NotYetReady, WaitTimeoutError
from storefront_harness.models.locator import Locator

T = TypeVar('T')
WaitCondition = Callable[..., Optional[T]]

DEFAULT_TIMEOUT = 30
DEFAULT_POLL_INTERVAL = 0.25
NOT_YET_READY_ERRORS = (NoSuchElementException, StaleElementReferenceException, NotYetReady)


class _Ready:
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value


def describe(condition) -> str:
    return getattr(condition, 'description', None) or getattr(condition, '__name__', repr(condition))


class WaitEngine:
    def __init__(self, session, timeout: float = DEFAULT_TIMEOUT, poll_interval: float = DEFAULT_POLL_INTERVAL,
                 logger: Optional[logging.Logger] = None):
        self.session = session
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.logger = logger or logging.getLogger(__name__)

    def wait_until(self, condition: WaitCondition, timeout: Optional[float] = None,
                   poll_interval: Optional[float] = None, description: Optional[str] = None):
        timeout = self.timeout if timeout is None else timeout
        poll_interval = self.poll_interval if poll_interval is None else poll_interval
        description = description or describe(condition)

        def probe(_):
            value = condition(self.session)
            if value is None:
                return False
            return _Ready(value)

        wait = WebDriverWait(self.session, timeout, poll_frequency=poll_interval,
                             ignored_exceptions=NOT_YET_READY_ERRORS)
        start = time.monotonic()
        try:
            ready = wait.until(probe)
        except TimeoutException:
            elapsed = time.monotonic() - start
            self.logger.warning(f"Wait timed out after {elapsed:.2f}s: {description}")
            raise WaitTimeoutError(description, elapsed, timeout) from None
        self.logger.debug(f"Condition met after {time.monotonic() - start:.2f}s: {description}")
        return ready.value

    def wait_at_most(self, condition: WaitCondition, max_wait: float, description: Optional[str] = None):
        """Best-effort wait for a signal that has no completion event (a tab that may open, a spinner that may flash).

        Returns the condition's value, or None once ``max_wait`` elapses. Not a
        correctness guarantee: callers must treat None as "did not observe it".
        """
        try:
            return self.wait_until(condition, timeout=max_wait, description=description)
        except WaitTimeoutError:
            self.logger.info(f"Not observed within {max_wait}s: {description or describe(condition)}")
            return None

    def wait_for_element(self, locator: Locator, timeout: Optional[float] = None):
        return self.wait_until(conditions.element_exists(locator), timeout=timeout)

    def wait_for_clickable(self, locator: Locator, timeout: Optional[float] = None):
        return self.wait_until(conditions.element_clickable(locator), timeout=timeout)

    def wait_for_page_ready(self, timeout: Optional[float] = None) -> bool:
        return self.wait_until(conditions.page_ready(), timeout=timeout)

    def wait_for_absence(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        return self.wait_until(conditions.element_absent(locator), timeout=timeout)
