"""Type definitions for the persisted host configuration.

Provides Pydantic models for validating the parsed YAML and exposing it as a
read-only snapshot to the resolver.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import OAUTH_TOKEN_KEY


def _scalar_to_str(value: Any) -> Any:
    """Render YAML scalars that safe_load typed (ints, floats, bools) as strings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class HostConfig(BaseModel):
    """Settings stored for one authenticated host."""
    model_config = ConfigDict(extra="allow", frozen=True)

    user: Optional[str] = None
    oauth_token: Optional[str] = None
    git_protocol: Optional[str] = None

    @field_validator("user", "oauth_token", "git_protocol", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        # oauth_token: 1234567890 arrives as an int
        return _scalar_to_str(value)


class ConfigSnapshot(BaseModel):
    """Immutable view of the hosts block of the persisted config.

    Host keys keep the order in which they appear in the file.
    """
    model_config = ConfigDict(frozen=True)

    hosts: Dict[str, HostConfig] = Field(default_factory=dict)

    @field_validator("hosts", mode="before")
    @classmethod
    def _empty_host_blocks(cls, value: Any) -> Any:
        # "hosts:" with no entries parses to None, as does "github.com:" with no fields
        if value is None:
            return {}
        if isinstance(value, dict):
            return {
                _scalar_to_str(host): ({} if block is None else block)
                for host, block in value.items()
            }
        return value

    def host_names(self) -> List[str]:
        """Return the configured host keys in file order."""
        return list(self.hosts.keys())

    def get_host(self, host: str) -> Optional[HostConfig]:
        """Return the settings for ``host`` (exact key match) or None."""
        return self.hosts.get(host)

    def token_for(self, host: str) -> str:
        """Return the stored token for ``host``, or an empty string if there is none."""
        entry = self.get_host(host)
        if entry is None:
            return ""
        return getattr(entry, OAUTH_TOKEN_KEY) or ""
