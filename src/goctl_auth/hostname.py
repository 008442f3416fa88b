"""
Host name normalization and classification.

Subdomains of the public host collapse onto the public host, subdomains of the
local development alias collapse onto the alias, and anything else is only
lower-cased.
"""
import logging

from .constants import GITHUB_HOST, LOCALHOST_HOST

logger = logging.getLogger(__name__)


def normalize_hostname(host: str) -> str:
    """
    Canonicalize a raw host string.

    Args:
        host: Host as supplied by the user, environment, or config

    Returns:
        Lower-cased host with ``*.github.com`` mapped to ``github.com`` and
        ``*.github.localhost`` mapped to ``github.localhost``

    Example:
        >>> normalize_hostname("api.GitHub.com")
        'github.com'
        >>> normalize_hostname("mygithub.com")
        'mygithub.com'
    """
    hostname = host.lower()

    if hostname.endswith("." + GITHUB_HOST):
        logger.debug(f"normalize_hostname: '{host}' is a subdomain of '{GITHUB_HOST}'")
        return GITHUB_HOST

    if hostname.endswith("." + LOCALHOST_HOST):
        logger.debug(f"normalize_hostname: '{host}' is a subdomain of '{LOCALHOST_HOST}'")
        return LOCALHOST_HOST

    return hostname


def is_enterprise(host: str) -> bool:
    """Return True unless ``host`` is the public host or its local alias."""
    return host != GITHUB_HOST and host != LOCALHOST_HOST
