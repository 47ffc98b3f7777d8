"""
Config loader utility for SimpleTopics.

Loads the YAML format configuration from the config/ directory.
"""

import os
from pathlib import Path

import yaml

from simpletopics.schemas import FormatConfig


# Default config file (relative to project root)
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "format.yaml"

CONFIG_ENV_VAR = "SIMPLETOPICS_CONFIG"


def get_config_path() -> Path:
    """Config path from SIMPLETOPICS_CONFIG, or the bundled default."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> FormatConfig:
    """
    Load the format configuration.

    Args:
        path: Optional config file; defaults to get_config_path()

    Returns:
        Validated FormatConfig. An empty file gives the defaults.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If a value has the wrong type
    """
    file_path = path or get_config_path()

    if not file_path.exists():
        raise FileNotFoundError(f"Format config not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FormatConfig.model_validate(data)
