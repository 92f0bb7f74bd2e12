# models/locator.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple
from selenium.webdriver.common.by import By
from storefront_harness.core.exceptions import UnknownCategoryError


class Strategy(str, Enum):
    CSS = By.CSS_SELECTOR
    TAG = By.TAG_NAME
    ID = By.ID
    XPATH = By.XPATH
    NAME = By.NAME
    LINK_TEXT = By.LINK_TEXT


@dataclass(frozen=True)
class Locator:
    strategy: Strategy
    selector: str
    description: str = field(default='', compare=False)

    @classmethod
    def css(cls, selector: str, description: str = '') -> 'Locator':
        return cls(Strategy.CSS, selector, description)

    @classmethod
    def tag(cls, name: str, description: str = '') -> 'Locator':
        return cls(Strategy.TAG, name, description)

    @classmethod
    def by_id(cls, element_id: str, description: str = '') -> 'Locator':
        return cls(Strategy.ID, element_id, description)

    @classmethod
    def xpath(cls, expression: str, description: str = '') -> 'Locator':
        return cls(Strategy.XPATH, expression, description)

    def as_tuple(self) -> Tuple[str, str]:
        return (self.strategy.value, self.selector)

    @property
    def name(self) -> str:
        return self.description or str(self)

    def __str__(self) -> str:
        return f"{self.strategy.name.lower()}={self.selector}"


class LocatorTable:
    """Closed set of logical keys (menu categories, platforms, filters) mapped to locators.

    Keys are matched case-insensitively. Anything outside the set is an
    UnknownCategoryError, never a default.
    """

    def __init__(self, kind: str, mapping: Dict[str, Locator]):
        self.kind = kind
        self._mapping = {key.lower(): locator for key, locator in mapping.items()}

    def lookup(self, key: str) -> Locator:
        try:
            return self._mapping[key.lower()]
        except (KeyError, AttributeError):
            raise UnknownCategoryError(key, self.kind, self.keys()) from None

    def keys(self) -> List[str]:
        return list(self._mapping)

    def __contains__(self, key) -> bool:
        return isinstance(key, str) and key.lower() in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)
