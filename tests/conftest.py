"""
Pytest configuration and shared fixtures for goctl_auth tests.
"""
import logging

import pytest

from goctl_auth import read_config_from_string
from goctl_auth.constants import ALL_ENV_VARS, XDG_CONFIG_HOME


# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


NO_HOSTS_YAML = ""

SINGLE_HOST_YAML = """
hosts:
  enterprise.com:
    user: user2
    oauth_token: yyyyyyyyyyyyyyyyyyyy
    git_protocol: https
"""

HOSTS_YAML = """
hosts:
  github.com:
    user: user1
    oauth_token: xxxxxxxxxxxxxxxxxxxx
    git_protocol: ssh
  enterprise.com:
    user: user2
    oauth_token: yyyyyyyyyyyyyyyyyyyy
    git_protocol: https
"""


@pytest.fixture
def no_hosts_config():
    """Snapshot with no authenticated hosts."""
    return read_config_from_string(NO_HOSTS_YAML)


@pytest.fixture
def single_host_config():
    """Snapshot with only enterprise.com."""
    return read_config_from_string(SINGLE_HOST_YAML)


@pytest.fixture
def hosts_config():
    """Snapshot with github.com and enterprise.com, in that order."""
    return read_config_from_string(HOSTS_YAML)


@pytest.fixture
def clean_env(monkeypatch):
    """
    Fixture that clears every environment variable the resolver reads.
    Returns a function to set environment variables for testing.
    """
    for var in ALL_ENV_VARS + (XDG_CONFIG_HOME,):
        monkeypatch.delenv(var, raising=False)

    def set_env(**kwargs):
        """Set environment variables for testing."""
        for key, value in kwargs.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)

    return set_env
