"""
Host enumeration and default host selection.

Hosts are reported as given: the override variable and config keys are not
normalized, and duplicates are dropped by exact string comparison.
"""
import logging
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .config import ConfigSnapshot
from .constants import (
    DEFAULT_HOST,
    DEFAULT_SOURCE,
    GENERAL_TOKEN_ENV_VARS,
    GOCTL_HOST,
    HOSTS_KEY,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedHost:
    """
    Result from default host selection.

    Attributes:
        value: The selected host
        source: ``GOCTL_HOST``, ``hosts`` or ``default``
        found: False when the host is the fallback default
    """

    value: str
    source: str
    found: bool


def _append_unique(hosts: List[str], host: str) -> None:
    if host not in hosts:
        hosts.append(host)


def known_hosts(
    config: Optional[ConfigSnapshot],
    env: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """
    List the hosts the caller is known to have credentials for.

    Order: the ``GOCTL_HOST`` override, then config hosts in file order. If
    neither contributed a host and a general token variable is set, the
    default host is reported so environment-only setups still list one host.

    Args:
        config: Parsed host configuration (may be None)
        env: Environment mapping (default: os.environ)

    Returns:
        Distinct host names, first occurrence keeps its position
    """
    env = os.environ if env is None else env
    hosts: List[str] = []

    override = env.get(GOCTL_HOST)
    if override:
        logger.debug(f"known_hosts: Adding '{override}' from {GOCTL_HOST}")
        _append_unique(hosts, override)

    if config is not None:
        for host in config.host_names():
            _append_unique(hosts, host)

    if not hosts:
        for name in GENERAL_TOKEN_ENV_VARS:
            if env.get(name):
                logger.debug(
                    f"known_hosts: No configured hosts, adding '{DEFAULT_HOST}' because {name} is set"
                )
                _append_unique(hosts, DEFAULT_HOST)
                break

    logger.debug(f"known_hosts: Returning {hosts}")
    return hosts


def default_host(
    config: Optional[ConfigSnapshot],
    env: Optional[Mapping[str, str]] = None,
) -> ResolvedHost:
    """
    Select the host commands should target when none is given.

    Args:
        config: Parsed host configuration (may be None)
        env: Environment mapping (default: os.environ)

    Returns:
        ResolvedHost from ``GOCTL_HOST``, the single configured host, or the
        default host (``found=False``) when there are zero or several hosts
    """
    env = os.environ if env is None else env

    override = env.get(GOCTL_HOST)
    if override:
        logger.debug(f"default_host: Using '{override}' from {GOCTL_HOST}")
        return ResolvedHost(value=override, source=GOCTL_HOST, found=True)

    names = config.host_names() if config is not None else []
    if len(names) == 1:
        logger.debug(f"default_host: Using only configured host '{names[0]}'")
        return ResolvedHost(value=names[0], source=HOSTS_KEY, found=True)

    logger.debug(
        f"default_host: {len(names)} configured host(s), falling back to '{DEFAULT_HOST}'"
    )
    return ResolvedHost(value=DEFAULT_HOST, source=DEFAULT_SOURCE, found=False)
