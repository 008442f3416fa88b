"""
Token resolution for a host.

Walks the provider chain for the normalized host and returns the first
non-empty token together with the label of the provider that supplied it.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..config import ConfigSnapshot
from ..constants import OAUTH_TOKEN_KEY
from ..hostname import is_enterprise, normalize_hostname
from ..utils import mask_sensitive
from .providers import token_providers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedToken:
    """
    Result from token resolution.

    Attributes:
        value: The resolved token, empty when nothing was found
        source: Environment variable name, or ``oauth_token`` for config
        found: True if a non-empty token was resolved
    """

    value: str
    source: str
    found: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a log-safe dictionary."""
        return {
            "value_masked": mask_sensitive(self.value),
            "source": self.source,
            "found": self.found,
        }


def token_for_host(
    config: Optional[ConfigSnapshot],
    host: str,
    env: Optional[Mapping[str, str]] = None,
) -> ResolvedToken:
    """
    Resolve the token to use for ``host``.

    Enterprise-only environment variables are consulted first for enterprise
    hosts; the general variables apply to every host; the config token is the
    last resort.

    Args:
        config: Parsed host configuration (may be None)
        host: Raw host name, normalized before lookup
        env: Environment mapping (default: os.environ)

    Returns:
        ResolvedToken; when nothing is found the value is empty and the
        source is ``oauth_token``
    """
    hostname = normalize_hostname(host)
    enterprise = is_enterprise(hostname)
    logger.debug(
        f"token_for_host: Resolving token for '{hostname}' (enterprise={enterprise})"
    )

    for provider in token_providers(config, env):
        if not provider.applies_to(enterprise):
            continue

        token = provider.lookup(hostname)
        if token:
            logger.debug(
                f"token_for_host: Found token for '{hostname}' from '{provider.source}' "
                f"(length={len(token)}, masked={mask_sensitive(token)})"
            )
            return ResolvedToken(value=token, source=provider.source, found=True)

        logger.debug(f"token_for_host: '{provider.source}' has no token for '{hostname}'")

    logger.warning(f"token_for_host: No token found for '{hostname}'")
    return ResolvedToken(value="", source=OAUTH_TOKEN_KEY, found=False)
