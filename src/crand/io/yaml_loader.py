"""YAML loader for sampling config files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from crand.config.schema import SamplingConfig
from crand.io.serialize import load_config
from crand.utils.exceptions import ConfigError


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path) as f:
        return yaml.safe_load(f)


def load_config_file(path: Path) -> SamplingConfig:
    """Load a sampling config from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        ConfigError: If the file cannot be parsed or fails validation.
    """
    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            raw = load_yaml(path)
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
        return load_config(raw or {})
    return load_config(path.read_text())
