"""Pytest fixtures for testing."""
import pytest

from jwtreauth.utils.settings import ComparisonSettings
from jwtreauth.utils.url import URL


@pytest.fixture
def gopher_settings():
    return ComparisonSettings(default_ports={"gopher": 70})


@pytest.fixture
def file_url():
    return URL("file", host=None, path="/etc/passwd")
