"""
Test bootstrap:
- Provide fixture-backed clients and raw fixture loading
"""
import pytest

from helpers import load_fixture, mock_client, io_exception_client


@pytest.fixture
def fixture_text():
    """Load a JSON fixture by file name."""
    return load_fixture


@pytest.fixture
def client_for():
    """Factory for a client answering with the given fixture."""
    return mock_client


@pytest.fixture
def failing_client():
    """Client whose transport raises on every call."""
    return io_exception_client()
