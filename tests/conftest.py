"""
Pytest configuration and fixtures for plot ownership tests.
"""

import sys
import os
from typing import Generator
from unittest.mock import patch

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Import after path setup
from tests.mocks.redis_mock import MockRedis, create_mock_redis
from tests.mocks.players import OWNER_A, TRUSTED_B, MEMBER_C, DENIED_D

from plot_ownership.core.plot import Plot


# ============================================================================
# Redis Mock Fixtures
# ============================================================================

@pytest.fixture
def mock_redis() -> Generator[MockRedis, None, None]:
    """Create a fresh MockRedis instance for each test."""
    redis = create_mock_redis()
    yield redis
    redis.clear_all()


@pytest.fixture
def mock_redis_with_plot(mock_redis: MockRedis) -> MockRedis:
    """MockRedis with plot ``p1`` mirrored under the default prefix."""
    mock_redis.sadd("plot:p1:owners", OWNER_A)
    mock_redis.sadd("plot:p1:trusted", TRUSTED_B)
    mock_redis.sadd("plot:p1:members", MEMBER_C)
    mock_redis.sadd("plot:p1:denied", DENIED_D)
    return mock_redis


@pytest.fixture
def mock_db_client(mock_redis: MockRedis):
    """Patch DBClient singleton with the mock Redis."""
    with patch('plot_ownership.data.db_client.DBClient._redis_instance', mock_redis):
        yield mock_redis


# ============================================================================
# Plot Fixtures
# ============================================================================

@pytest.fixture
def sample_plot() -> Plot:
    """owners={A}, trusted={B}, members={C}, denied={D}"""
    return Plot.from_ids(
        "p1",
        owners=[OWNER_A],
        trusted=[TRUSTED_B],
        members=[MEMBER_C],
        denied=[DENIED_D],
    )


@pytest.fixture
def open_plot() -> Plot:
    """A plot whose trusted list contains the everyone wildcard."""
    from plot_ownership.core.plot import EVERYONE

    return Plot.from_ids(
        "p2",
        owners=[OWNER_A],
        trusted=[EVERYONE],
        denied=[DENIED_D],
    )


@pytest.fixture
def overlapping_plot() -> Plot:
    """Trusted and member players who also appear on the denied list."""
    return Plot.from_ids(
        "p3",
        owners=[OWNER_A],
        trusted=[TRUSTED_B],
        members=[MEMBER_C],
        denied=[TRUSTED_B, MEMBER_C, DENIED_D],
    )


# ============================================================================
# Config Patches
# ============================================================================

@pytest.fixture
def mock_config():
    """Patch PLOT_CONFIG with test values."""
    from plot_ownership.config import settings
    original_config = settings.PLOT_CONFIG

    test_config = {
        "ownership": {
            "tier": "member",
        },
        "redis": {
            "host": "localhost",
            "port": 6379,
            "password": None,
            "db": 0,
            "key_prefix": "plot:",
        },
    }
    settings.PLOT_CONFIG = test_config

    yield test_config

    # Restore original config
    settings.PLOT_CONFIG = original_config


# ============================================================================
# Markers
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
