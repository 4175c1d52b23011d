"""Forward PostHog-style analytics events to Avo Inspector."""

from avo_forwarder.app import PluginFactory, setup_plugin
from avo_forwarder.plugins.avo_inspector import AvoInspectorPlugin

__all__ = ["AvoInspectorPlugin", "PluginFactory", "setup_plugin"]
