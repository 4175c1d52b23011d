"""Tests for plugin setup."""

from __future__ import annotations

from unittest.mock import patch

import avo_forwarder
from avo_forwarder.app import PluginFactory, setup_plugin
from avo_forwarder.config import Settings
from avo_forwarder.plugins.avo_inspector import AvoInspectorPlugin
from avo_forwarder.plugins.event import EventPlugin


def test_setup_plugin_with_settings() -> None:
    """setup_plugin wires the plugin from explicit settings."""
    plugin = setup_plugin(Settings(avo_api_key="k", endpoint_url="http://avo.test/track"))
    assert isinstance(plugin, AvoInspectorPlugin)
    assert isinstance(plugin, EventPlugin)
    request = plugin.compose_webhook({"event": "signup", "uuid": "u"})
    assert request is not None
    assert request.url == "http://avo.test/track"
    assert request.headers["api-key"] == "k"


def test_setup_plugin_loads_settings_when_missing() -> None:
    """Without settings, setup_plugin goes through ConfigLoader."""
    env = {"AVO_FORWARDER_ENV": "dev", "AVO_FORWARDER_AVO_API_KEY": "env-key"}
    with patch.dict("os.environ", env, clear=False):
        plugin = PluginFactory.setup_plugin()
    request = plugin.compose_webhook({"event": "signup", "uuid": "u"})
    assert request is not None
    assert request.headers["api-key"] == "env-key"


def test_package_exports() -> None:
    """The top-level package re-exports the setup entry point."""
    assert avo_forwarder.setup_plugin is setup_plugin
