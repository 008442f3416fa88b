"""
Shared constants for host and token resolution.

Environment variable names double as source labels: when a value is taken
from one of them, the variable name is reported as the source.
"""
from typing import Tuple

# Hosts
GITHUB_HOST = "github.com"
LOCALHOST_HOST = "github.localhost"
DEFAULT_HOST = GITHUB_HOST

# Token environment variables
GOCTL_TOKEN = "GOCTL_TOKEN"
GITHUB_TOKEN = "GITHUB_TOKEN"
GOCTL_ENTERPRISE_TOKEN = "GOCTL_ENTERPRISE_TOKEN"
GITHUB_ENTERPRISE_TOKEN = "GITHUB_ENTERPRISE_TOKEN"

# Host and config environment variables
GOCTL_HOST = "GOCTL_HOST"
GOCTL_CONFIG_DIR = "GOCTL_CONFIG_DIR"
XDG_CONFIG_HOME = "XDG_CONFIG_HOME"
APP_DATA = "AppData"

# Config keys / source labels
HOSTS_KEY = "hosts"
OAUTH_TOKEN_KEY = "oauth_token"
DEFAULT_SOURCE = "default"

# General-purpose token variables, tool-specific first
GENERAL_TOKEN_ENV_VARS: Tuple[str, ...] = (
    GOCTL_TOKEN,
    GITHUB_TOKEN,
)

# Enterprise-only token variables, tool-specific first
ENTERPRISE_TOKEN_ENV_VARS: Tuple[str, ...] = (
    GOCTL_ENTERPRISE_TOKEN,
    GITHUB_ENTERPRISE_TOKEN,
)

# Every variable the resolver reads
ALL_ENV_VARS: Tuple[str, ...] = (
    ENTERPRISE_TOKEN_ENV_VARS
    + GENERAL_TOKEN_ENV_VARS
    + (GOCTL_HOST, GOCTL_CONFIG_DIR)
)

# Config file names inside the config directory
CONFIG_FILE_NAME = "config.yml"
HOSTS_FILE_NAME = "hosts.yml"
