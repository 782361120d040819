"""Configuration loading."""

from stackmix.config.loader import (
    home_config_exists,
    load_config,
    local_config_exists,
    save_config,
)
from stackmix.config.schema import DEFAULT_CONFIG, ProjectConfig, StackmixConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ProjectConfig",
    "StackmixConfig",
    "home_config_exists",
    "load_config",
    "local_config_exists",
    "save_config",
]
