# utils/artifacts.py
import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional
from storefront_harness.config.settings import Config

logger = logging.getLogger(__name__)

_UNSAFE = re.compile(r'[^A-Za-z0-9._-]+')


def safe_name(context: str) -> str:
    return _UNSAFE.sub('_', context).strip('_') or 'screenshot'


def screenshot_path(context: str, directory=None, now: Optional[datetime] = None) -> Path:
    directory = Path(directory or Config.SCREENSHOT_DIR)
    now = now or datetime.now()
    return directory / f"{safe_name(context)}_{now:%Y%m%d_%H%M%S}.png"


def save_screenshot(session, context: str, directory=None, log=None) -> Optional[Path]:
    """Capture the current viewport as PNG. Best-effort: failures are logged and yield None."""
    log = log or logger
    try:
        path = screenshot_path(context, directory)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(session.screenshot_png())
    except Exception as e:
        log.error(f"Failed to take screenshot for {context}: {e}")
        return None
    log.info(f"Screenshot saved: {path}")
    return path


def write_accessibility_report(report, path=None, log=None) -> Optional[Path]:
    log = log or logger
    path = Path(path or Config.REPORT_PATH)
    try:
        if path.parent != Path('.'):
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report.summary(), encoding='utf-8')
    except OSError as e:
        log.warning(f"Could not save accessibility report: {e}")
        return None
    log.info(f"Accessibility report saved to: {path}")
    return path


def save_results_to_file(results: Dict, filename=None, directory=None, log=None) -> Optional[Path]:
    log = log or logger
    if not filename:
        safe_url = safe_name(results.get('url', 'unknown_url').replace('https://', '').replace('http://', ''))
        filename = f"{results.get('kind', 'run')}_{safe_url}_{datetime.now():%Y%m%d_%H%M%S}.json"
    path = Path(directory or Config.RESULTS_DIR) / filename
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
    except (OSError, TypeError) as e:
        log.error(f"Error saving results: {e}")
        return None
    log.info(f"Results saved to: {path}")
    return path
