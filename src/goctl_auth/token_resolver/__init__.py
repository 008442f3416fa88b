"""
Token Resolver module exports.

    result = token_for_host(config, "github.com")
    if result.found:
        ...
"""

from .providers import (
    TokenProvider,
    config_provider,
    env_provider,
    token_providers,
)
from .resolver import (
    ResolvedToken,
    token_for_host,
)

__all__ = [
    "TokenProvider",
    "config_provider",
    "env_provider",
    "token_providers",
    "ResolvedToken",
    "token_for_host",
]
