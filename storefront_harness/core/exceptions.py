# core/exceptions.py
"""Error taxonomy shared by the wait engine, page objects and session plumbing."""
from typing import Iterable, Optional


class HarnessError(Exception):
    """Base exception for all harness failures."""


class NotYetReady(HarnessError):
    """A wait condition is not satisfied yet; the wait engine polls again."""


class WaitTimeoutError(HarnessError):
    """A condition never became satisfied before its deadline."""

    def __init__(self, description: str, elapsed: float, timeout: float):
        self.description = description
        self.elapsed = elapsed
        self.timeout = timeout
        super().__init__(f"Timed out after {elapsed:.2f}s waiting for {description} (timeout {timeout}s)")


class UnknownCategoryError(HarnessError, LookupError):
    """A keyed lookup (menu category, social platform, filter) received a key outside its closed set."""

    def __init__(self, key, kind: str = 'category', valid_keys: Optional[Iterable[str]] = None):
        self.key = key
        self.kind = kind
        self.valid_keys = sorted(valid_keys or [])
        super().__init__(f"Unknown {kind}: {key!r} (expected one of: {', '.join(self.valid_keys)})")


class ResourceError(HarnessError):
    """Browser launch or artifact write failure."""


class SessionStateError(HarnessError):
    """The driver session is not usable in its current lifecycle state."""
