"""Configuration module for nanorelay."""

from nanorelay.config.loader import (
    load_config,
    save_config,
    get_config_path,
    get_nanorelay_home,
)
from nanorelay.config.schema import RelayConfig

__all__ = [
    "RelayConfig",
    "load_config",
    "save_config",
    "get_config_path",
    "get_nanorelay_home",
]
