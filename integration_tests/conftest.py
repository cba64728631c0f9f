"""Pytest configuration for integration tests."""

import os

import pytest

from fittrack.config import Settings

API_URL_ENV = "FITTRACK_INTEGRATION_API_URL"


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def live_settings(tmp_path):
    """Settings for a live API; skips the test when none is configured."""
    api_url = os.environ.get(API_URL_ENV)
    if not api_url:
        pytest.skip(f"{API_URL_ENV} is not set")
    return Settings(api_url=api_url, data_dir=tmp_path, credential_backend="memory")


@pytest.fixture
def live_account():
    """Username and password of an existing, verified account."""
    username = os.environ.get("FITTRACK_INTEGRATION_USERNAME")
    password = os.environ.get("FITTRACK_INTEGRATION_PASSWORD")
    if not username or not password:
        pytest.skip("FITTRACK_INTEGRATION_USERNAME/PASSWORD are not set")
    return username, password
