"""
Token providers for host token resolution.

Each provider is one tier of the precedence chain: a source label plus a
lookup function ``(host) -> Optional[str]``. The chain is evaluated in order
and the first non-empty value wins.

Resolution priority:
1. GOCTL_ENTERPRISE_TOKEN (enterprise hosts only)
2. GITHUB_ENTERPRISE_TOKEN (enterprise hosts only)
3. GOCTL_TOKEN
4. GITHUB_TOKEN
5. oauth_token stored in the config for the host
"""
import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Tuple

from ..config import ConfigSnapshot
from ..constants import (
    ENTERPRISE_TOKEN_ENV_VARS,
    GENERAL_TOKEN_ENV_VARS,
    OAUTH_TOKEN_KEY,
)

logger = logging.getLogger(__name__)

# Type alias for provider lookup functions
LookupFunc = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class TokenProvider:
    """
    One tier of the token precedence chain.

    Attributes:
        source: Label reported when this provider supplies the token
        lookup: Function returning the token for a normalized host, or None
        enterprise_only: Consult this provider only for enterprise hosts
    """

    source: str
    lookup: LookupFunc
    enterprise_only: bool = False

    def applies_to(self, enterprise: bool) -> bool:
        """Check whether this provider is consulted for the host class."""
        return enterprise or not self.enterprise_only


def env_provider(
    name: str,
    env: Optional[Mapping[str, str]] = None,
    enterprise_only: bool = False,
) -> TokenProvider:
    """
    Create a provider reading a single environment variable.

    Args:
        name: Environment variable name, also used as the source label
        env: Environment mapping (default: os.environ at lookup time)
        enterprise_only: Restrict the provider to enterprise hosts

    Returns:
        TokenProvider for the variable
    """
    def lookup(host: str) -> Optional[str]:
        source = os.environ if env is None else env
        return source.get(name) or None

    return TokenProvider(source=name, lookup=lookup, enterprise_only=enterprise_only)


def config_provider(config: Optional[ConfigSnapshot]) -> TokenProvider:
    """
    Create a provider reading the stored token for the host from a snapshot.

    A missing snapshot behaves like an empty one.
    """
    def lookup(host: str) -> Optional[str]:
        if config is None:
            return None
        return config.token_for(host) or None

    return TokenProvider(source=OAUTH_TOKEN_KEY, lookup=lookup)


def token_providers(
    config: Optional[ConfigSnapshot],
    env: Optional[Mapping[str, str]] = None,
) -> Tuple[TokenProvider, ...]:
    """
    Build the ordered provider chain for a config snapshot.

    Args:
        config: Parsed host configuration (may be None)
        env: Environment mapping (default: os.environ)

    Returns:
        Providers from highest to lowest precedence
    """
    providers = tuple(
        env_provider(name, env, enterprise_only=True) for name in ENTERPRISE_TOKEN_ENV_VARS
    ) + tuple(
        env_provider(name, env) for name in GENERAL_TOKEN_ENV_VARS
    ) + (
        config_provider(config),
    )
    logger.debug(
        f"token_providers: Built chain {[p.source for p in providers]}"
    )
    return providers
