"""Configuration file loading and merging."""

from pathlib import Path

import yaml

from stackmix.config.schema import DEFAULT_CONFIG, StackmixConfig

CONFIG_FILENAME = "config.yaml"


def get_home_config_path() -> Path:
    """Get path to global config: ~/.stackmix/config.yaml."""
    return Path.home() / ".stackmix" / CONFIG_FILENAME


def get_local_config_path() -> Path:
    """Get path to local config: ./.stackmix/config.yaml."""
    return Path.cwd() / ".stackmix" / CONFIG_FILENAME


def home_config_exists() -> bool:
    """Check if the global home config exists."""
    return get_home_config_path().exists()


def local_config_exists() -> bool:
    """Check if the local project config exists."""
    return get_local_config_path().exists()


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Load a YAML config file, return None if not found or empty."""
    if not path.exists():
        return None
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
            if data is None:
                return None
            if not isinstance(data, dict):
                return None
            # yaml.safe_load returns Any, but we've verified it's a dict
            result: dict[str, object] = data
            return result
    except yaml.YAMLError:
        return None


def load_config() -> StackmixConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.stackmix/config.yaml)
    3. Local config (./.stackmix/config.yaml)

    Returns merged StackmixConfig.
    """
    config = DEFAULT_CONFIG

    home_data = load_yaml_config(get_home_config_path())
    if home_data:
        config = config.merge(StackmixConfig.from_dict(home_data))

    local_data = load_yaml_config(get_local_config_path())
    if local_data:
        config = config.merge(StackmixConfig.from_dict(local_data))

    return config


def save_config(config: StackmixConfig, path: Path) -> None:
    """Save config to a YAML file.

    Creates parent directories if needed.
    Only saves non-None values.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.to_dict()
    with path.open("w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
