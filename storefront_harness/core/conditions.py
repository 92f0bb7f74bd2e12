# core/conditions.py
"""Read-only wait conditions. Each returns a value when ready and None when not."""
import hashlib
from typing import Iterable, Optional
from storefront_harness.models.locator import Locator


def _described(description: str):
    def decorate(condition):
        condition.description = description
        return condition
    return decorate


def element_exists(locator: Locator):
    @_described(f"{locator.name} to exist")
    def condition(session):
        return session.find_element(locator)
    return condition


def child_exists(scope, locator: Locator):
    @_described(f"{locator.name} to exist within its container")
    def condition(session):
        return session.find_element(locator, scope=scope)
    return condition


def element_displayed(locator: Locator):
    @_described(f"{locator.name} to be displayed")
    def condition(session):
        element = session.find_element(locator)
        return element if element.is_displayed() else None
    return condition


def element_clickable(locator: Locator):
    @_described(f"{locator.name} to be clickable")
    def condition(session):
        element = session.find_element(locator)
        return element if element.is_displayed() and element.is_enabled() else None
    return condition


def element_absent(locator: Locator):
    @_described(f"{locator.name} to disappear")
    def condition(session):
        return True if not session.find_elements(locator) else None
    return condition


def any_element_exists(*locators: Locator):
    @_described(f"any of {', '.join(locator.name for locator in locators)} to exist")
    def condition(session):
        for locator in locators:
            if session.find_elements(locator):
                return locator
        return None
    return condition


def page_ready():
    @_described("document.readyState to be complete")
    def condition(session):
        return True if session.execute_script("return document.readyState") == 'complete' else None
    return condition


def new_window_opened(known_handles: Iterable[str]):
    known = set(known_handles)

    @_described(f"a window beyond the {len(known)} already open")
    def condition(session):
        for handle in session.window_handles:
            if handle not in known:
                return handle
        return None
    return condition


def url_changed(from_url: str):
    @_described(f"URL to change from {from_url}")
    def condition(session):
        current = session.current_url
        return current if current != from_url else None
    return condition


def dom_fingerprint(session) -> str:
    html = session.execute_script("return document.body.innerHTML;") or ''
    return hashlib.md5(html.encode('utf-8')).hexdigest()


def dom_changed(from_fingerprint: str):
    @_described("document body to change")
    def condition(session):
        current = dom_fingerprint(session)
        return current if current != from_fingerprint else None
    return condition


def image_loaded(element):
    @_described("image to finish loading")
    def condition(session):
        width = session.execute_script("return arguments[0].complete && arguments[0].naturalWidth;", element)
        return width if width and int(width) > 0 else None
    return condition


def viewport_width_is(width: int, tolerance: int = 32):
    # innerWidth excludes the scrollbar and window chrome.
    @_described(f"viewport width near {width}px")
    def condition(session) -> Optional[int]:
        current = session.viewport_width()
        return current if abs(current - width) <= tolerance else None
    return condition
