# utils/link_utils.py
import logging
from typing import List, Optional
from urllib.parse import urljoin
import requests

logger = logging.getLogger(__name__)

SKIPPED_PREFIXES = ('#', 'javascript:', 'mailto:', 'tel:')


def get_status_chain(href: str, base_url: str = None, timeout: float = 5) -> Optional[List[int]]:
    """Status codes along the redirect chain for ``href``, or None when it is not an HTTP link or unreachable."""
    if not href or href.startswith(SKIPPED_PREFIXES):
        return None
    try:
        if href.startswith('/') and base_url:
            href = urljoin(base_url, href)
        response = requests.head(href, allow_redirects=True, timeout=timeout)
        return [r.status_code for r in response.history] + [response.status_code]
    except requests.RequestException as e:
        logger.warning(f"Could not fetch status for {href}: {e}")
        return None


def is_broken(status_chain: Optional[List[int]]) -> bool:
    return bool(status_chain) and status_chain[-1] >= 400
