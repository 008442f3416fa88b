"""Configuration store for the persisted host configuration.

Reads ``config.yml`` and ``hosts.yml`` from the config directory, merges the
host blocks and validates them into a read-only ``ConfigSnapshot``. Missing
files are not an error; malformed ones raise ``ConfigLoadError``.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from pydantic import ValidationError

from ..constants import (
    APP_DATA,
    CONFIG_FILE_NAME,
    GOCTL_CONFIG_DIR,
    HOSTS_FILE_NAME,
    HOSTS_KEY,
    XDG_CONFIG_HOME,
)
from .types import ConfigSnapshot

logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """Raised when a persisted config file cannot be read, parsed or validated."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigNotLoadedError(Exception):
    """Raised when trying to access the snapshot before ``load()``."""
    pass


@dataclass
class LoadResult:
    """Result of loading configuration files."""
    config_dir: Optional[str] = None
    files_loaded: List[str] = field(default_factory=list)
    host_count: int = 0


def config_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the directory holding the persisted config.

    Precedence: ``GOCTL_CONFIG_DIR``, ``$XDG_CONFIG_HOME/goctl``,
    ``%AppData%/GoCtl`` on Windows, then ``~/.config/goctl``.

    Args:
        env: Environment mapping (default: os.environ)

    Returns:
        Path to the config directory (not guaranteed to exist)
    """
    env = os.environ if env is None else env

    explicit = env.get(GOCTL_CONFIG_DIR)
    if explicit:
        logger.debug(f"config_dir: Using {GOCTL_CONFIG_DIR}='{explicit}'")
        return Path(explicit)

    xdg = env.get(XDG_CONFIG_HOME)
    if xdg:
        logger.debug(f"config_dir: Using {XDG_CONFIG_HOME}='{xdg}'")
        return Path(xdg) / "goctl"

    app_data = env.get(APP_DATA)
    if sys.platform == "win32" and app_data:
        logger.debug(f"config_dir: Using {APP_DATA}='{app_data}'")
        return Path(app_data) / "GoCtl"

    return Path.home() / ".config" / "goctl"


def _parse_yaml_text(content: str, source: str) -> Dict[str, Any]:
    """Parse a YAML document that must be a mapping (or empty)."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"YAML parsing error in {source}: {e}", path=source) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Expected a mapping at the top of {source}, got {type(data).__name__}",
            path=source,
        )
    return data


def _validate_snapshot(data: Dict[str, Any], source: str) -> ConfigSnapshot:
    """Validate merged config data into a ConfigSnapshot."""
    try:
        return ConfigSnapshot.model_validate({HOSTS_KEY: data.get(HOSTS_KEY)})
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid host configuration in {source}: {e}", path=source) from e


def _merge_host_blocks(base: Any, overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Lay hosts.yml blocks over the ``hosts`` block of config.yml, field by field."""
    merged = dict(base) if isinstance(base, dict) else {}
    for host, block in overrides.items():
        existing = merged.get(host)
        if block is None and host in merged:
            continue
        if isinstance(existing, dict) and isinstance(block, dict):
            block = {**existing, **{k: v for k, v in block.items() if v is not None}}
        merged[host] = block
    return merged


def read_config_from_string(data: str) -> ConfigSnapshot:
    """
    Build a snapshot from an in-memory YAML document.

    The document has the layout of ``config.yml``: host blocks live under a
    top-level ``hosts`` key.

    Raises:
        ConfigLoadError: If the document is malformed
    """
    return _validate_snapshot(_parse_yaml_text(data, "<string>"), "<string>")


class ConfigStore:
    """
    Store for configuration loaded from the config directory.

    Each instance holds at most one loaded snapshot; there is no shared state
    between instances.
    """

    def __init__(self) -> None:
        self._snapshot: Optional[ConfigSnapshot] = None
        self._load_result: Optional[LoadResult] = None

    def _parse_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Parse a YAML file and return its contents."""
        logger.debug(f"ConfigStore._parse_yaml: Parsing YAML file: {file_path}")
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigLoadError(f"Failed to read {file_path}: {e}", path=str(file_path)) from e
        return _parse_yaml_text(content, str(file_path))

    def load(
        self,
        config_path: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> LoadResult:
        """
        Load configuration from the config directory.

        Args:
            config_path: Path to the configuration directory (default: resolved
                         from the environment, see ``config_dir``)
            env: Environment mapping used to resolve the directory

        Returns:
            LoadResult with information about the loaded files

        Raises:
            ConfigLoadError: If a config file exists but is malformed
        """
        path = Path(config_path) if config_path else config_dir(env)
        result = LoadResult(config_dir=str(path))
        logger.debug(f"ConfigStore.load: Loading config from '{path}'")

        data: Dict[str, Any] = {}

        general_file = path / CONFIG_FILE_NAME
        if general_file.is_file():
            data = self._parse_yaml(general_file)
            result.files_loaded.append(str(general_file))

        hosts_file = path / HOSTS_FILE_NAME
        if hosts_file.is_file():
            hosts_data = self._parse_yaml(hosts_file)
            data = {**data, HOSTS_KEY: _merge_host_blocks(data.get(HOSTS_KEY), hosts_data)}
            result.files_loaded.append(str(hosts_file))

        if not result.files_loaded:
            logger.debug(f"ConfigStore.load: No config files found in '{path}'")

        snapshot = _validate_snapshot(data, str(path))

        self._snapshot = snapshot
        result.host_count = len(snapshot.hosts)
        self._load_result = result

        logger.info(
            f"ConfigStore.load: Loaded {len(result.files_loaded)} file(s) "
            f"with {result.host_count} host(s) from '{path}'"
        )
        return result

    def get_snapshot(self) -> ConfigSnapshot:
        """
        Get the validated snapshot.

        Raises:
            ConfigNotLoadedError: If load() has not been called
        """
        if self._snapshot is None:
            raise ConfigNotLoadedError("ConfigStore.load() must be called before get_snapshot()")
        return self._snapshot

    def is_initialized(self) -> bool:
        """Check whether load() has completed successfully."""
        return self._snapshot is not None

    def get_load_result(self) -> Optional[LoadResult]:
        """Get the result from the last successful load, if any."""
        return self._load_result

    def reset(self) -> None:
        """Clear the store and reset to uninitialized state."""
        self._snapshot = None
        self._load_result = None


def read_config(
    config_path: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ConfigSnapshot:
    """
    Load and return a snapshot from the config directory.

    Raises:
        ConfigLoadError: If a config file exists but is malformed
    """
    store = ConfigStore()
    store.load(config_path=config_path, env=env)
    return store.get_snapshot()
