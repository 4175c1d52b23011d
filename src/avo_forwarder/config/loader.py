"""ConfigLoader — YAML file per environment, env vars override."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from avo_forwarder.config.settings import ENV_PREFIX, Settings

_CONFIG_ROOT = Path(__file__).resolve().parent


class ConfigLoader:
    """Load settings from YAML files with environment variable overrides."""

    @staticmethod
    def _load_yaml(env: str) -> dict[str, Any]:
        """Load the settings.yaml for the given environment."""
        path = _CONFIG_ROOT / env / "settings.yaml"
        if not path.exists():
            return {}
        with path.open() as config_file:
            data = yaml.safe_load(config_file)
        return data if isinstance(data, dict) else {}

    @staticmethod
    def load_settings(**overrides: Any) -> Settings:
        """Build Settings with proper priority: overrides > env vars > YAML > defaults.

        The YAML file is picked by ``AVO_FORWARDER_ENV`` (default ``dev``).
        That deployment selector is unrelated to the ``environment`` field,
        which is sent to Avo as the ``env`` header.
        YAML keys shadowed by an environment variable are dropped, since
        pydantic-settings gives __init__ kwargs the highest priority.
        """
        env = os.environ.get(f"{ENV_PREFIX}ENV", "dev")
        yaml_values = ConfigLoader._load_yaml(env)
        filtered: dict[str, Any] = {}
        for key, value in yaml_values.items():
            env_key = f"{ENV_PREFIX}{key.upper()}"
            if env_key not in os.environ:
                filtered[key] = value
        merged = {**filtered, **overrides}
        return Settings(**merged)
