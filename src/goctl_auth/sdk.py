"""SDK utilities for host and token resolution.

High-level functions that read the persisted config themselves. Config load
failures propagate as ``ConfigLoadError`` instead of falling back to
environment-only resolution.
"""

import os
from typing import List, Mapping, Optional

from .config import ConfigSnapshot, read_config
from .hosts import ResolvedHost, default_host, known_hosts
from .token_resolver import ResolvedToken, token_for_host


def load_config(
    config_path: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ConfigSnapshot:
    """
    Load the config snapshot with sensible defaults.

    Args:
        config_path: Path to config directory (default: resolved from env)
        env: Environment mapping (default: os.environ)
    """
    return read_config(config_path=config_path, env=env)


def get_token_for_host(
    host: str,
    config: Optional[ConfigSnapshot] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ResolvedToken:
    """Resolve the token for ``host``, loading the config when not supplied."""
    env = os.environ if env is None else env
    if config is None:
        config = load_config(env=env)
    return token_for_host(config, host, env)


def get_known_hosts(
    config: Optional[ConfigSnapshot] = None,
    env: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """List known hosts, loading the config when not supplied."""
    env = os.environ if env is None else env
    if config is None:
        config = load_config(env=env)
    return known_hosts(config, env)


def get_default_host(
    config: Optional[ConfigSnapshot] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ResolvedHost:
    """Select the default host, loading the config when not supplied."""
    env = os.environ if env is None else env
    if config is None:
        config = load_config(env=env)
    return default_host(config, env)
