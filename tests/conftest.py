"""Shared fixtures for avo_forwarder tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from avo_forwarder.app import PluginFactory
from avo_forwarder.config import Settings
from avo_forwarder.models.event import FilterConfig
from avo_forwarder.plugins.avo_inspector import AvoInspectorPlugin
from avo_forwarder.services.payload_service import PayloadService

HTTPX_CLIENT = "avo_forwarder.clients.avo_inspector_client.httpx.AsyncClient"


@pytest.fixture()
def settings() -> Settings:
    """Test settings with no filters configured."""
    return Settings(
        app_name="test-app",
        avo_api_key="test-api-key",
        environment="prod",
    )


@pytest.fixture()
def payload_service(settings: Settings) -> PayloadService:
    """A PayloadService with empty filters."""
    return PayloadService(settings, FilterConfig.from_settings(settings))


@pytest.fixture()
def plugin(settings: Settings) -> AvoInspectorPlugin:
    """A fully wired plugin built from test settings."""
    return PluginFactory.setup_plugin(settings)


def make_response(
    status_code: int = 200,
    json_body: Any = None,
    text: str = "",
) -> MagicMock:
    """A fake httpx.Response. ``json_body=None`` makes .json() fail to parse."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_body is None:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = json_body
    return response


def make_http_client(*responses: MagicMock) -> AsyncMock:
    """A fake httpx.AsyncClient answering successive POSTs with ``responses``."""
    mock_client = AsyncMock()
    mock_client.post.side_effect = list(responses)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client
