from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from .config_schema import ConfigModel

DEFAULT_CONFIG_PATH = "configs/config.yaml"


def load_config(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> dict:
    """Read ``config_path`` and validate it against :class:`ConfigModel`.

    Returns:
        dict: ``pgn`` and ``logging`` sections with defaults filled in.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        ValueError: If the YAML does not match the schema.
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    raw_config = yaml.safe_load(path.read_text()) or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Invalid configuration: expected a mapping in {path}")

    try:
        return ConfigModel(**raw_config).model_dump()
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}: {e}") from e


def default_config() -> dict:
    """Configuration with every field at its default."""
    return ConfigModel(pgn={}, logging={}).model_dump()
