# config/settings.py
import os


def _flag(name, default):
    return os.getenv(name, default).lower() == 'true'


class Config:
    TIMEOUT = int(os.getenv('TIMEOUT', 30))
    OPTIONAL_TIMEOUT = int(os.getenv('OPTIONAL_TIMEOUT', 10))
    HEADLESS = _flag('HEADLESS', 'true')
    START_MAXIMIZED = _flag('START_MAXIMIZED', 'true')
    NO_SANDBOX = _flag('NO_SANDBOX', 'true')
    BROWSER = os.getenv('BROWSER', 'chrome').lower()
    WINDOW_SIZE = os.getenv('WINDOW_SIZE', '1920,1080')
    BASE_URL = os.getenv('BASE_URL', 'https://www.ihop.com/en')
    MENU_URL = os.getenv('MENU_URL', 'https://www.ihop.com/en/menu')
    LOCATIONS_URL = os.getenv('LOCATIONS_URL', 'https://restaurants.ihop.com/en-us')
    SCREENSHOT_DIR = os.getenv('SCREENSHOT_DIR', 'Screenshots')
    REPORT_PATH = os.getenv('REPORT_PATH', 'accessibility-report.txt')
    RESULTS_DIR = os.getenv('RESULTS_DIR', 'results')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
