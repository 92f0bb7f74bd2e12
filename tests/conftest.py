"""Pytest fixtures for storefront harness unit tests."""

import logging

import pytest

from fakes import FakeDriver, FastConfig
from storefront_harness.core.driver_session import DriverSession
from storefront_harness.core.wait_engine import WaitEngine

pytest_plugins = ["pytester"]


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger('storefront_harness.tests')


@pytest.fixture
def config(tmp_path):
    class TmpConfig(FastConfig):
        SCREENSHOT_DIR = str(tmp_path / 'Screenshots')
        REPORT_PATH = str(tmp_path / 'accessibility-report.txt')
        RESULTS_DIR = str(tmp_path / 'results')
    return TmpConfig


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def session(driver, logger) -> DriverSession:
    return DriverSession(driver, logger=logger)


@pytest.fixture
def waits(session, logger) -> WaitEngine:
    return WaitEngine(session, timeout=FastConfig.TIMEOUT, poll_interval=0.01, logger=logger)
