"""Configuration loading and management."""

from pathlib import Path
from typing import Optional

import yaml

from .config_models import KBChatConfig

# Default config dict
DEFAULT_CONFIG = KBChatConfig().to_dict()

CONFIG_NAME = "kbchat.yaml"


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / CONFIG_NAME,
        Path.home() / ".kbchat" / "config.yaml",
        Path.home() / "kbchat" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from file or defaults.

    Returns dict. Use load_config_model() for typed access.
    """
    model = load_config_model(config_path)
    return model.to_dict()


def load_config_model(config_path: Optional[Path] = None) -> KBChatConfig:
    """Load configuration as Pydantic model with validation."""
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    if not isinstance(base_config, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(base_config).__name__}")

    try:
        return KBChatConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")


def write_default_config(path: Path) -> Path:
    """Dump the default config as YAML (paths as strings)."""
    data = KBChatConfig().to_dict()
    data["paths"] = {k: (str(v) if v is not None else None) for k, v in data["paths"].items()}
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
    return path
