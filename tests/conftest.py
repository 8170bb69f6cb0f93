"""
Pytest configuration and fixtures for Instant Answer client tests.
"""

import copy
import os

import pytest

from tests.fixtures.data import DISAMBIGUATION_RESPONSE, make_response


# ============================================
# Sample Responses
# ============================================

@pytest.fixture
def article_payload():
    """Article answer with an image, a topic group and an external result."""
    return make_response()


@pytest.fixture
def disambiguation_payload():
    """Disambiguation answer made only of related topics."""
    return copy.deepcopy(DISAMBIGUATION_RESPONSE)


# ============================================
# Integration Test Markers
# ============================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (hits real APIs)"
    )
    config.addinivalue_line(
        "markers", "network: mark test as requiring network access"
    )


def pytest_collection_modifyitems(config, items):
    """Skip live API tests unless DDG_RUN_INTEGRATION is set."""
    if os.getenv("DDG_RUN_INTEGRATION"):
        return
    skip_live = pytest.mark.skip(reason="set DDG_RUN_INTEGRATION=1 to hit the live API")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_live)
