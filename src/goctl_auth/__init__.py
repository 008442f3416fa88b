"""
Host and token resolution for the goctl command-line tool.

This package provides:
- hostname: Host normalization and enterprise classification
- token_resolver: Precedence chain of environment and config token providers
- hosts: Known host enumeration and default host selection
- config: Read-only loader for the persisted host configuration
- sdk: Convenience functions that load the config themselves
"""
from .constants import DEFAULT_HOST
from .hostname import (
    normalize_hostname,
    is_enterprise,
)
from .token_resolver import (
    TokenProvider,
    ResolvedToken,
    token_providers,
    token_for_host,
)
from .hosts import (
    ResolvedHost,
    known_hosts,
    default_host,
)
from .config import (
    HostConfig,
    ConfigSnapshot,
    ConfigStore,
    LoadResult,
    ConfigLoadError,
    ConfigNotLoadedError,
    config_dir,
    read_config,
    read_config_from_string,
)
from .sdk import (
    load_config,
    get_token_for_host,
    get_known_hosts,
    get_default_host,
)

__all__ = [
    "DEFAULT_HOST",
    # Hostname
    "normalize_hostname",
    "is_enterprise",
    # Token resolution
    "TokenProvider",
    "ResolvedToken",
    "token_providers",
    "token_for_host",
    # Hosts
    "ResolvedHost",
    "known_hosts",
    "default_host",
    # Config
    "HostConfig",
    "ConfigSnapshot",
    "ConfigStore",
    "LoadResult",
    "ConfigLoadError",
    "ConfigNotLoadedError",
    "config_dir",
    "read_config",
    "read_config_from_string",
    # SDK
    "load_config",
    "get_token_for_host",
    "get_known_hosts",
    "get_default_host",
]

__version__ = "1.0.0"
