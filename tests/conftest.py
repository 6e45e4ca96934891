"""Shared fixtures: fake requests responses and clean global headers."""

from unittest.mock import MagicMock

import pytest

from request_fu.config import clear_global_headers


def make_response(status_code=200, text="yeeeah", headers=None):
    """Stand-in for requests.Response with just the fields the client reads."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    resp.headers = headers or {"Content-Type": "text/html"}
    return resp


@pytest.fixture
def fake_response():
    """Factory for fake requests responses."""
    return make_response


@pytest.fixture(autouse=True)
def reset_global_headers():
    """Each test starts and ends with default global headers."""
    clear_global_headers()
    yield
    clear_global_headers()
