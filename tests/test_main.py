"""
Tests for process-level logging setup.
"""

import logging

import pytest

from discussion_tools.infrastructure.config import Settings
from discussion_tools.main import configure_logging


@pytest.fixture
def restore_httpx_level():
    httpx_logger = logging.getLogger("httpx")
    level = httpx_logger.level
    yield httpx_logger
    httpx_logger.setLevel(level)


class TestConfigureLogging:

    def test_httpx_request_lines_muted_by_default(self, restore_httpx_level):
        configure_logging(Settings(log_level="INFO"))
        assert restore_httpx_level.level == logging.WARNING

    def test_httpx_request_lines_kept_when_enabled(self, restore_httpx_level):
        restore_httpx_level.setLevel(logging.NOTSET)
        configure_logging(Settings(log_level="DEBUG", log_http_requests=True))
        assert restore_httpx_level.level == logging.NOTSET
