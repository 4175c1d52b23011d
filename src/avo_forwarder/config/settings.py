"""Settings model — pydantic-settings with env var support."""

from __future__ import annotations

import json
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

ENV_PREFIX = "AVO_FORWARDER_"

NameList = Annotated[list[str], NoDecode]


class Settings(BaseSettings):
    """Forwarder settings.

    Use ``ConfigLoader.load_settings()`` to build with YAML + env var layering.
    Direct construction (e.g. in tests) skips YAML loading.
    """

    app_name: str = ""
    avo_api_key: str = ""
    environment: str = "dev"
    endpoint_url: str = "https://api.avo.app/inspector/posthog/v1/track"
    include_events: NameList = []
    exclude_events: NameList = []
    include_properties: NameList = []
    exclude_properties: NameList = []
    app_version: str = "1.0.0"
    lib_version: str = "1.0.0"
    lib_platform: str = "node"
    sampling_rate: int | float = 1

    model_config = {"env_prefix": ENV_PREFIX}

    @field_validator(
        "include_events",
        "exclude_events",
        "include_properties",
        "exclude_properties",
        mode="before",
    )
    @classmethod
    def _split_names(cls, value: Any) -> list[str]:
        """Accept a comma-separated string, a JSON array string or a list of names."""
        if value is None:
            return []
        if isinstance(value, str):
            text = value.strip()
            value = json.loads(text) if text.startswith("[") else text.split(",")
        return [str(name).strip() for name in value if str(name).strip()]

    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request to the Avo endpoint."""
        return {
            "env": self.environment,
            "api-key": self.avo_api_key,
            "content-type": "application/json",
            "accept": "application/json",
        }
