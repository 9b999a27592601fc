"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching the network.
"""

from unittest.mock import MagicMock

import pytest

from httpreq.core.config import HttpMethod, RequestConfiguration


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def get_config() -> RequestConfiguration:
    """Minimal GET configuration."""
    return RequestConfiguration(method=HttpMethod.GET, url="https://example.test/items")


@pytest.fixture
def post_config() -> RequestConfiguration:
    """POST configuration with an inline JSON body."""
    return RequestConfiguration(
        method=HttpMethod.POST,
        url="https://example.test/items",
        body='{"a":1}',
        content_type="application/json",
    )


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                # Test code that logs
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger
