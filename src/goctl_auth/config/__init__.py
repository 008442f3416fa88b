from .types import (
    HostConfig,
    ConfigSnapshot,
)
from .config_store import (
    ConfigStore,
    LoadResult,
    ConfigLoadError,
    ConfigNotLoadedError,
    config_dir,
    read_config,
    read_config_from_string,
)
