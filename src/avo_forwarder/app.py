"""Plugin factory — the host's setup entry point."""

from __future__ import annotations

from avo_forwarder.clients.avo_inspector_client import AvoInspectorClient
from avo_forwarder.config import ConfigLoader, Settings
from avo_forwarder.models.event import FilterConfig
from avo_forwarder.plugins.avo_inspector import AvoInspectorPlugin
from avo_forwarder.services.payload_service import PayloadService


class PluginFactory:
    """Builds the Avo Inspector plugin. All methods are static."""

    @staticmethod
    def _build(settings: Settings) -> AvoInspectorPlugin:
        """Construct the full object graph once.

        settings → FilterConfig → PayloadService ─┐
                                                   ├→ AvoInspectorPlugin
        settings → headers → AvoInspectorClient ───┘
        """
        payload_service = PayloadService(
            settings, FilterConfig.from_settings(settings),
        )
        client = AvoInspectorClient(
            endpoint_url=settings.endpoint_url,
            headers=settings.default_headers(),
        )
        return AvoInspectorPlugin(payload_service, client)

    @staticmethod
    def setup_plugin(settings: Settings | None = None) -> AvoInspectorPlugin:
        """Load settings (unless given) and build a ready-to-use plugin."""
        if settings is None:
            settings = ConfigLoader.load_settings()
        return PluginFactory._build(settings)


# Public alias so hosts can call setup_plugin() without knowing PluginFactory.
setup_plugin = PluginFactory.setup_plugin
